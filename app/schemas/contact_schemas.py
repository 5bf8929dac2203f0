from datetime import datetime
from pydantic import BaseModel, EmailStr, Field


class ContactCreate(BaseModel):
    """Schema for adding a contact to an account"""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    phone: str = Field(..., min_length=1, max_length=50)
    location: str = Field(..., min_length=1, max_length=255)
    is_main_contact: bool = False
    avatar_url: str = Field(default="", max_length=1000)


class ContactUpdate(BaseModel):
    """Schema for updating a contact"""

    name: str | None = Field(None, min_length=1, max_length=255)
    email: EmailStr | None = None
    phone: str | None = Field(None, min_length=1, max_length=50)
    location: str | None = Field(None, min_length=1, max_length=255)
    is_main_contact: bool | None = None
    avatar_url: str | None = Field(None, max_length=1000)


class ContactResponse(BaseModel):
    id: str
    company_id: str
    account_number: str | None
    name: str
    email: str
    phone: str
    location: str
    is_main_contact: bool
    avatar_url: str
    created_at: datetime

    model_config = {"from_attributes": True}
