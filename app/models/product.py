from enum import Enum as PyEnum
from sqlalchemy import String, JSON
from sqlalchemy.orm import Mapped, mapped_column
from app.models.base import Base, TimestampMixin, generate_id


class ProductVolume(str, PyEnum):
    """Package volumes a product ships in"""

    PAILS = "pails"
    DRUMS = "drums"
    TOTES = "totes"
    BULK = "bulk"


class Product(Base, TimestampMixin):
    """
    Company-wide product catalogue entry.

    Attributes stored as JSON array of volume names.
    """

    __tablename__ = "products"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=generate_id)
    company_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    product_number: Mapped[str] = mapped_column(String(100), nullable=False)
    attributes: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
