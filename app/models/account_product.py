from enum import Enum as PyEnum
from sqlalchemy import String, Text, Numeric, ForeignKey, Enum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING
from app.models.base import Base, TimestampMixin, generate_id

if TYPE_CHECKING:
    from app.models.account import Account


class PriceType(str, PyEnum):
    SPOT = "spot"
    BID = "bid"


class BidFrequency(str, PyEnum):
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


class PriceDetailType(str, PyEnum):
    QUOTE = "quote"
    LAST_PAID = "last_paid"


def _enum_column(enum_cls):
    return Enum(enum_cls, native_enum=False, values_callable=lambda x: [e.value for e in x])


class AccountProduct(Base, TimestampMixin):
    """
    Join record: a product an account buys, with pricing notes.

    product_id is a plain string: it is not remapped when a company is
    seeded, so it carries no foreign key.
    """

    __tablename__ = "account_products"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=generate_id)
    company_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    account_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    product_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")
    price_type: Mapped[PriceType | None] = mapped_column(_enum_column(PriceType), nullable=True)
    bid_frequency: Mapped[BidFrequency | None] = mapped_column(_enum_column(BidFrequency), nullable=True)
    last_bid_price: Mapped[float | None] = mapped_column(Numeric(precision=15, scale=2), nullable=True)
    winning_bid_price: Mapped[float | None] = mapped_column(Numeric(precision=15, scale=2), nullable=True)
    type: Mapped[PriceDetailType | None] = mapped_column(_enum_column(PriceDetailType), nullable=True)
    price: Mapped[float | None] = mapped_column(Numeric(precision=15, scale=2), nullable=True)

    # Relationships
    account: Mapped["Account"] = relationship("Account", back_populates="account_products")
