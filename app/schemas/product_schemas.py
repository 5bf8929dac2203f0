from datetime import datetime
from pydantic import BaseModel, Field
from app.models.product import ProductVolume


class ProductCreate(BaseModel):
    """Schema for creating a catalogue product"""

    name: str = Field(..., min_length=1, max_length=255)
    product_number: str = Field(..., min_length=1, max_length=100)
    attributes: list[ProductVolume] = Field(..., min_length=1, description="Volumes the product ships in")


class ProductUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    product_number: str | None = Field(None, min_length=1, max_length=100)
    attributes: list[ProductVolume] | None = Field(None, min_length=1)


class ProductResponse(BaseModel):
    id: str
    company_id: str
    name: str
    product_number: str
    attributes: list[str]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
