"""Repository for UserProfile model operations."""

from sqlalchemy.orm import Session
from app.models.user_profile import UserProfile


class UserProfileRepository:
    """Repository for UserProfile model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, user_id: str) -> UserProfile | None:
        """
        Get the profile of a user.

        Args:
            user_id: Principal id (profile primary key)

        Returns:
            UserProfile object or None if the user was never bootstrapped
        """
        return self.db.query(UserProfile).filter(UserProfile.id == user_id).first()

    def set_company(
        self, user_id: str, company_id: str, email: str | None = None, display_name: str | None = None
    ) -> UserProfile:
        """
        Merge company_id into a user's profile, creating it if missing.

        Unconditional overwrite: any previous company_id is replaced.

        Args:
            user_id: Principal id
            company_id: Company to link
            email: Used only when the profile has to be created
            display_name: Used only when the profile has to be created

        Returns:
            Updated UserProfile object
        """
        profile = self.get_by_id(user_id)
        if profile is None:
            profile = UserProfile(id=user_id, email=email, display_name=display_name or "")
            self.db.add(profile)
        profile.company_id = company_id
        self.db.commit()
        self.db.refresh(profile)
        return profile
