from sqlalchemy import func
from sqlalchemy.orm import Session
from app.models.principal import Principal


class PrincipalRepository:
    """Repository for Principal model operations"""

    def __init__(self, db: Session):
        self.db = db

    def sync_from_claims(
        self, user_id: str, email: str | None = None, display_name: str | None = None
    ) -> Principal:
        """
        Get principal by id or create if it doesn't exist.

        Called on every authenticated request. Email and display name are
        refreshed from the token when present.

        Args:
            user_id: 'sub' claim of the JWT
            email: 'email' claim, if any
            display_name: 'name' claim, if any

        Returns:
            Principal object (either existing or newly created)
        """
        principal = self.get_by_id(user_id)

        if not principal:
            principal = Principal(id=user_id, email=email, display_name=display_name)
            self.db.add(principal)
        elif (email and principal.email != email) or (
            display_name and principal.display_name != display_name
        ):
            principal.email = email or principal.email
            principal.display_name = display_name or principal.display_name
        else:
            return principal

        self.db.commit()
        self.db.refresh(principal)
        return principal

    def get_by_id(self, user_id: str) -> Principal | None:
        """Get principal by user id"""
        return self.db.query(Principal).filter(Principal.id == user_id).first()

    def get_by_email(self, email: str) -> Principal | None:
        """Get principal by email (case-insensitive)"""
        return (
            self.db.query(Principal)
            .filter(func.lower(Principal.email) == email.strip().lower())
            .first()
        )
