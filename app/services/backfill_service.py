"""
Administrative backfill of company_id onto legacy records.

Collections are processed strictly one after another and each write
batch commits on its own: a failure part way leaves earlier batches
applied. Re-running is safe because only records whose company_id is
still unset are selected.
"""

from sqlalchemy.orm import Session

from app.config import settings
from app.core.exceptions import PrincipalNotFoundException
from app.core.logging import get_logger
from app.models.account import Account
from app.models.account_product import AccountProduct
from app.models.call_note import CallNote
from app.models.contact import Contact
from app.models.product import Product
from app.models.shipping_location import ShippingLocation
from app.repositories.backfill_repository import BackfillRepository
from app.repositories.user_profile_repository import UserProfileRepository
from app.schemas.tenant_schemas import MigrationRequest, MigrationResult
from app.services.identity_service import DatabaseIdentityProvider, IdentityProvider

logger = get_logger(__name__)

COLLECTIONS_TO_MIGRATE = (
    Account,
    Contact,
    Product,
    AccountProduct,
    ShippingLocation,
    CallNote,
)


def chunked(record_ids: list[str], size: int) -> list[list[str]]:
    """Split ids into consecutive batches of at most `size`"""
    return [record_ids[i : i + size] for i in range(0, len(record_ids), size)]


class TenantBackfillService:
    """Service layer for the one-time company backfill"""

    def __init__(
        self,
        db: Session,
        identity_provider: IdentityProvider | None = None,
        batch_size: int | None = None,
    ):
        self.db = db
        self.identity = identity_provider or DatabaseIdentityProvider(db)
        self.batch_size = batch_size or settings.MIGRATION_BATCH_SIZE
        self.profile_repo = UserProfileRepository(db)
        self.backfill_repo = BackfillRepository(db)

    def migrate(self, request: MigrationRequest) -> MigrationResult:
        """
        Link a user to a company and stamp that company onto every
        record that has none.

        Args:
            request: email of the user to link, company id to assign

        Returns:
            MigrationResult; never raises.
        """
        user_email, company_id = request.user_email, request.company_id
        try:
            try:
                principal = self.identity.get_user_by_email(user_email)
            except PrincipalNotFoundException:
                return MigrationResult(success=False, message=f"User with email {user_email} not found.")

            self.profile_repo.set_company(
                principal.id, company_id, email=principal.email, display_name=principal.display_name
            )

            total_updated = 0
            for model in COLLECTIONS_TO_MIGRATE:
                total_updated += self._migrate_collection(model, company_id)

        except Exception as e:
            self.db.rollback()
            logger.exception("Data migration failed", company_id=company_id)
            return MigrationResult(success=False, message=str(e) or "An unknown server error occurred.")

        logger.info("Data migration finished", company_id=company_id, documents_updated=total_updated)
        return MigrationResult(
            success=True,
            message=(
                f"Successfully migrated {total_updated} documents to company '{company_id}' "
                "and updated user profile."
            ),
            documents_updated=total_updated,
        )

    def _migrate_collection(self, model, company_id: str) -> int:
        record_ids = self.backfill_repo.get_unassigned_ids(model)
        if not record_ids:
            return 0

        updated = 0
        for batch in chunked(record_ids, self.batch_size):
            updated += self.backfill_repo.assign_company(model, batch, company_id)
        logger.info("Collection migrated", collection=model.__tablename__, documents=updated)
        return updated
