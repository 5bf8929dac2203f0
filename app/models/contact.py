from sqlalchemy import String, Boolean, Index
from sqlalchemy.orm import Mapped, mapped_column
from app.models.base import Base, TimestampMixin, generate_id


class Contact(Base, TimestampMixin):
    """
    People at an account.

    Contacts point at their account by business identifier
    (account_number), not by account id.
    """

    __tablename__ = "contacts"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=generate_id)
    company_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    account_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    email: Mapped[str] = mapped_column(String(320), nullable=False, default="")
    location: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    is_main_contact: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    avatar_url: Mapped[str] = mapped_column(String(1000), nullable=False, default="")

    __table_args__ = (Index("ix_contacts_company_account_number", "company_id", "account_number"),)
