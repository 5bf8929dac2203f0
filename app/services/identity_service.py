"""
Identity provider lookups.

Tenant bootstrap and the admin backfill only need "get principal by id"
and "get principal by email" with a distinguishable not-found error.
DatabaseIdentityProvider answers from the principals directory that
authentication keeps in sync with verified JWT claims.
"""

from typing import Protocol

from sqlalchemy.orm import Session

from app.core.exceptions import PrincipalNotFoundException
from app.repositories.principal_repository import PrincipalRepository


class PrincipalRecord(Protocol):
    id: str
    email: str | None
    display_name: str | None


class IdentityProvider(Protocol):
    def get_user(self, user_id: str) -> PrincipalRecord: ...

    def get_user_by_email(self, email: str) -> PrincipalRecord: ...


class DatabaseIdentityProvider:
    """Identity lookups backed by the principals table"""

    def __init__(self, db: Session):
        self.repo = PrincipalRepository(db)

    def get_user(self, user_id: str) -> PrincipalRecord:
        """
        Raises:
            PrincipalNotFoundException: If no principal has this id
        """
        principal = self.repo.get_by_id(user_id)
        if principal is None:
            raise PrincipalNotFoundException(f"User {user_id} not found.")
        return principal

    def get_user_by_email(self, email: str) -> PrincipalRecord:
        """
        Raises:
            PrincipalNotFoundException: If no principal has this email
        """
        principal = self.repo.get_by_email(email)
        if principal is None:
            raise PrincipalNotFoundException(f"User with email {email} not found.")
        return principal
