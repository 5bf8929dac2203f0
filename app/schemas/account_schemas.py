from datetime import datetime
from pydantic import BaseModel, Field
from app.models.account import AccountStatus


class AccountCreate(BaseModel):
    """Schema for creating a new account"""

    name: str = Field(..., min_length=1, max_length=255)
    account_number: str = Field(..., min_length=1, max_length=100)
    industry: str = Field(..., min_length=1, max_length=255)
    status: AccountStatus = AccountStatus.LEAD
    address: str | None = Field(None, max_length=500)
    details: str = Field(default="", max_length=5000)


class AccountUpdate(BaseModel):
    """Schema for updating an account"""

    name: str | None = Field(None, min_length=1, max_length=255)
    account_number: str | None = Field(None, min_length=1, max_length=100)
    industry: str | None = Field(None, min_length=1, max_length=255)
    status: AccountStatus | None = None
    address: str | None = Field(None, max_length=500)
    details: str | None = Field(None, max_length=5000)


class AccountResponse(BaseModel):
    """Schema for account response"""

    id: str
    company_id: str
    account_number: str | None
    name: str
    industry: str | None
    status: AccountStatus
    details: str
    address: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class AccountListResponse(BaseModel):
    """Schema for list of accounts"""

    accounts: list[AccountResponse]
    total: int
