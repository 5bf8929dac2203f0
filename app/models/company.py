"""Company model for multi-tenant isolation."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, TimestampMixin, generate_id


class Company(Base, TimestampMixin):
    """
    Multi-tenant isolation boundary.

    A company is created exactly once per signed-up user (by tenant
    bootstrap) and owns every account, contact, product, account-product,
    shipping location and call note through their company_id column.

    Examples:
    - "Alice Johnson's Company" - seeded for a user with a display name
    - "Company for bob@example.com" - seeded for a user without one

    Companies are never deleted in-band.
    """

    __tablename__ = "companies"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=generate_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    owner_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Company(id={self.id}, name='{self.name}', owner_id={self.owner_id})>"
