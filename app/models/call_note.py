from datetime import datetime
from sqlalchemy import String, Text, ForeignKey, DateTime, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING
from app.models.base import Base, TimestampMixin, generate_id

if TYPE_CHECKING:
    from app.models.account import Account


class CallNote(Base, TimestampMixin):
    """Notes taken during a call or visit with an account."""

    __tablename__ = "call_notes"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=generate_id)
    company_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    account_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    call_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    note: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(String(50), nullable=False, default="call")

    # Relationships
    account: Mapped["Account"] = relationship("Account", back_populates="call_notes")

    __table_args__ = (Index("ix_call_notes_account_date", "account_id", "call_date"),)
