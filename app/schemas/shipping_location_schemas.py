from datetime import datetime
from pydantic import BaseModel, Field


class ShippingLocationCreate(BaseModel):
    """Link another account of the company as a shipping location"""

    related_account_id: str = Field(..., min_length=1)


class ShippingLocationResponse(BaseModel):
    id: str
    company_id: str
    original_account_id: str
    related_account_id: str
    related_account_name: str | None = None
    related_account_address: str | None = None
    created_at: datetime

    model_config = {"from_attributes": True}
