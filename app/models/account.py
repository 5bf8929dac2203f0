from enum import Enum as PyEnum
from sqlalchemy import String, Text, Enum, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING
from app.models.base import Base, TimestampMixin, generate_id

if TYPE_CHECKING:
    from app.models.account_product import AccountProduct
    from app.models.call_note import CallNote
    from app.models.shipping_location import ShippingLocation


class AccountStatus(str, PyEnum):
    """Account status enumeration"""

    LEAD = "lead"
    CUSTOMER = "customer"
    KEY_ACCOUNT = "key-account"
    SUPPLIER = "supplier"


class Account(Base, TimestampMixin):
    """
    Customer, lead or supplier accounts owned by a company.

    company_id is NULL only for legacy rows that predate tenant scoping;
    the admin backfill stamps them.
    """

    __tablename__ = "accounts"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=generate_id)
    company_id: Mapped[str | None] = mapped_column(
        String(64),
        nullable=True,
        index=True,  # Critical for multi-tenant queries
    )
    account_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    industry: Mapped[str | None] = mapped_column(String(255), nullable=True)
    status: Mapped[AccountStatus] = mapped_column(
        Enum(AccountStatus, native_enum=False, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=AccountStatus.LEAD,
    )
    details: Mapped[str] = mapped_column(Text, nullable=False, default="")
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)

    # Relationships
    account_products: Mapped[list["AccountProduct"]] = relationship(
        "AccountProduct",
        back_populates="account",
        cascade="all, delete-orphan",
    )
    call_notes: Mapped[list["CallNote"]] = relationship(
        "CallNote",
        back_populates="account",
        cascade="all, delete-orphan",
    )
    shipping_locations: Mapped[list["ShippingLocation"]] = relationship(
        "ShippingLocation",
        foreign_keys="ShippingLocation.original_account_id",
        back_populates="original_account",
        cascade="all, delete-orphan",
    )

    __table_args__ = (Index("ix_accounts_company_number", "company_id", "account_number"),)
