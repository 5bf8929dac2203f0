from sqlalchemy.orm import Session
from app.models.shipping_location import ShippingLocation
from app.models.tenant_context import TenantContext
from app.repositories.shipping_location_repository import ShippingLocationRepository
from app.schemas.shipping_location_schemas import ShippingLocationCreate
from app.services.account_service import AccountService
from app.core.exceptions import NotFoundException, ValidationException


class ShippingLocationService:
    """Service for accounts shipping to other accounts of the same company"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ShippingLocationRepository(db)
        self.account_service = AccountService(db)

    def get_account_locations(self, account_id: str, context: TenantContext) -> list[dict]:
        account = self.account_service.get_account(account_id, context)
        return [self._to_dict(location) for location in self.repo.get_by_account(account.id, context.company_id)]

    def add_location(self, account_id: str, data: ShippingLocationCreate, context: TenantContext) -> dict:
        """
        Raises:
            NotFoundException: If either account is not in the caller's company
            ValidationException: If the account points at itself or the link exists
        """
        account = self.account_service.get_account(account_id, context)
        related = self.account_service.get_account(data.related_account_id, context)

        if account.id == related.id:
            raise ValidationException("An account cannot be its own shipping location")
        if self.repo.get_link(account.id, related.id, context.company_id):
            raise ValidationException("Shipping location already exists for this account")

        location = ShippingLocation(
            company_id=context.company_id,
            original_account_id=account.id,
            related_account_id=related.id,
        )
        return self._to_dict(self.repo.create(location))

    def delete_location(self, location_id: str, context: TenantContext) -> None:
        location = self.repo.get_by_id_and_company(location_id, context.company_id)
        if not location:
            raise NotFoundException("Shipping location not found")
        self.repo.delete(location)

    @staticmethod
    def _to_dict(location: ShippingLocation) -> dict:
        related = location.related_account
        return {
            "id": location.id,
            "company_id": location.company_id,
            "original_account_id": location.original_account_id,
            "related_account_id": location.related_account_id,
            "related_account_name": related.name if related else None,
            "related_account_address": related.address if related else None,
            "created_at": location.created_at,
        }
