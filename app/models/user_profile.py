"""User profile model linking a principal to its company."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, TimestampMixin


class UserProfile(Base, TimestampMixin):
    """
    One-to-one with a principal; links it to exactly one company.

    The primary key is the principal's user id, so a second insert for
    the same user fails at commit. Tenant bootstrap relies on this to
    let at most one of two concurrent signups for a user win.

    company_id is set once by tenant bootstrap and may only be
    overwritten by the administrative backfill.
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    email: Mapped[str | None] = mapped_column(String(320), nullable=True)
    display_name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    company_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)

    def __repr__(self) -> str:
        return f"<UserProfile(id={self.id}, company_id={self.company_id})>"
