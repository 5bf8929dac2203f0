from sqlalchemy import String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING
from app.models.base import Base, TimestampMixin, generate_id

if TYPE_CHECKING:
    from app.models.account import Account


class ShippingLocation(Base, TimestampMixin):
    """Links an account to another account of the same company that it ships to."""

    __tablename__ = "shipping_locations"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=generate_id)
    company_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    original_account_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    related_account_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    original_account: Mapped["Account"] = relationship(
        "Account", foreign_keys=[original_account_id], back_populates="shipping_locations"
    )
    related_account: Mapped["Account"] = relationship("Account", foreign_keys=[related_account_id])
