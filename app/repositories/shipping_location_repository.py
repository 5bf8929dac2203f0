from sqlalchemy import or_
from sqlalchemy.orm import Session
from app.models.shipping_location import ShippingLocation


class ShippingLocationRepository:
    """Repository for ShippingLocation model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_account(self, account_id: str, company_id: str) -> list[ShippingLocation]:
        """Get locations an account ships to"""
        return (
            self.db.query(ShippingLocation)
            .filter(
                ShippingLocation.original_account_id == account_id,
                ShippingLocation.company_id == company_id,
            )
            .all()
        )

    def get_link(self, original_account_id: str, related_account_id: str, company_id: str) -> ShippingLocation | None:
        return (
            self.db.query(ShippingLocation)
            .filter(
                ShippingLocation.original_account_id == original_account_id,
                ShippingLocation.related_account_id == related_account_id,
                ShippingLocation.company_id == company_id,
            )
            .first()
        )

    def get_by_id_and_company(self, location_id: str, company_id: str) -> ShippingLocation | None:
        return (
            self.db.query(ShippingLocation)
            .filter(ShippingLocation.id == location_id, ShippingLocation.company_id == company_id)
            .first()
        )

    def delete_referencing(self, account_id: str) -> None:
        """Delete locations pointing at an account from either end, without committing"""
        self.db.query(ShippingLocation).filter(
            or_(
                ShippingLocation.original_account_id == account_id,
                ShippingLocation.related_account_id == account_id,
            )
        ).delete(synchronize_session="fetch")

    def create(self, location: ShippingLocation) -> ShippingLocation:
        self.db.add(location)
        self.db.commit()
        self.db.refresh(location)
        return location

    def delete(self, location: ShippingLocation) -> None:
        self.db.delete(location)
        self.db.commit()
