from pydantic import BaseModel, EmailStr, Field


class BootstrapRequest(BaseModel):
    """Principal to seed a company for"""

    user_id: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    display_name: str | None = None


class BootstrapResult(BaseModel):
    """
    Outcome of tenant bootstrap.

    success=True with created=False means the user already had a profile
    and nothing was written.
    """

    success: bool
    created: bool = False
    company_id: str | None = None
    error: str | None = None


class MigrationRequest(BaseModel):
    """Admin backfill request"""

    user_email: EmailStr
    company_id: str = Field(..., min_length=1, max_length=64)


class MigrationResult(BaseModel):
    success: bool
    message: str
    documents_updated: int = 0


class ProfileResponse(BaseModel):
    """Caller's identity and company link"""

    user_id: str
    email: str | None
    display_name: str | None
    company_id: str | None
    company_name: str | None
