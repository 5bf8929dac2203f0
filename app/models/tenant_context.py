"""Tenant context for request authorization."""

from dataclasses import dataclass
from app.models.principal import Principal
from app.models.user_profile import UserProfile


@dataclass
class TenantContext:
    """
    Complete tenant context for request authorization.

    Contains the principal extracted from the JWT and the profile that
    links it to a company. Every tenant-scoped query filters on
    company_id taken from here.

    Attributes:
        principal: The authenticated Principal
        profile: The principal's UserProfile (always has a company_id)
    """

    principal: Principal
    profile: UserProfile

    @property
    def company_id(self) -> str:
        return self.profile.company_id

    def __repr__(self) -> str:
        return f"<TenantContext(user_id={self.principal.id}, company_id={self.company_id})>"
