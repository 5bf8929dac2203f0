from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column
from app.models.base import Base, TimestampMixin


class Principal(Base, TimestampMixin):
    """
    Directory of identities known to the identity provider.

    Only stores what the JWT carries (sub, email, name) - no credentials.
    Auto-created or refreshed on every API request with a valid JWT.
    """

    __tablename__ = "principals"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    # id is the 'sub' claim from the JWT
    email: Mapped[str | None] = mapped_column(String(320), unique=True, nullable=True, index=True)
    display_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
