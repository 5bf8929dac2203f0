from datetime import datetime
from pydantic import BaseModel, Field


class CallNoteCreate(BaseModel):
    """Schema for logging a call note; call_date defaults to now"""

    note: str = Field(..., min_length=1, max_length=10000)
    type: str = Field(default="call", min_length=1, max_length=50)
    call_date: datetime | None = None


class CallNoteUpdate(BaseModel):
    note: str | None = Field(None, min_length=1, max_length=10000)
    type: str | None = Field(None, min_length=1, max_length=50)
    call_date: datetime | None = None


class CallNoteResponse(BaseModel):
    id: str
    company_id: str
    account_id: str
    call_date: datetime
    note: str
    type: str
    created_at: datetime

    model_config = {"from_attributes": True}
