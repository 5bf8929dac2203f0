from datetime import datetime
from pydantic import BaseModel, Field, model_validator
from app.models.account_product import PriceType, BidFrequency, PriceDetailType


class _PricingFields(BaseModel):
    notes: str | None = Field(None, max_length=5000)
    price_type: PriceType | None = None
    bid_frequency: BidFrequency | None = None
    last_bid_price: float | None = Field(None, ge=0)
    winning_bid_price: float | None = Field(None, ge=0)
    type: PriceDetailType | None = None
    price: float | None = Field(None, ge=0)

    @model_validator(mode="after")
    def bid_requires_frequency(self):
        if self.price_type == PriceType.BID and self.bid_frequency is None:
            raise ValueError("Bid frequency is required when price type is Bid.")
        return self


class AccountProductCreate(_PricingFields):
    """Schema for adding a product to an account"""

    product_id: str = Field(..., min_length=1, description="Catalogue product to link")


class AccountProductUpdate(_PricingFields):
    """Schema for editing an account-product link (product cannot change)"""

    pass


class AccountProductResponse(BaseModel):
    id: str
    company_id: str
    account_id: str
    product_id: str
    product_name: str | None = None  # None when the product is not in the catalogue
    notes: str
    price_type: PriceType | None
    bid_frequency: BidFrequency | None
    last_bid_price: float | None
    winning_bid_price: float | None
    type: PriceDetailType | None
    price: float | None
    created_at: datetime

    model_config = {"from_attributes": True}
