"""
Tenant bootstrap: seed a new company for a freshly signed-up user.

Everything (company, profile, cloned template records) is written in one
database transaction, so either the whole seeded company is visible or
none of it is. A user who already has a profile is left untouched, which
makes the operation safe to repeat.
"""

from datetime import date, datetime, UTC

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import PrincipalNotFoundException
from app.core.logging import get_logger
from app.models.account import Account
from app.models.account_product import AccountProduct
from app.models.base import generate_id
from app.models.call_note import CallNote
from app.models.company import Company
from app.models.contact import Contact
from app.models.product import Product
from app.models.shipping_location import ShippingLocation
from app.models.user_profile import UserProfile
from app.repositories.user_profile_repository import UserProfileRepository
from app.schemas.tenant_schemas import BootstrapRequest, BootstrapResult
from app.seed.template_data import DEFAULT_TEMPLATE, TemplateDataset
from app.services.identity_service import DatabaseIdentityProvider, IdentityProvider

logger = get_logger(__name__)

GENERIC_FAILURE = "Could not create company, please retry."

# Template account id -> id generated for the company being seeded
RemapTable = dict[str, str]


def resolve_best_effort(remap: RemapTable, *template_ids: str) -> tuple[str, ...] | None:
    """
    Best-effort reference resolution.

    Returns the new ids for every template id, or None if any of them is
    missing from the remap table. Callers skip the dependent record on
    None; they never write it with a missing or template-space reference.
    """
    resolved = tuple(remap.get(template_id) for template_id in template_ids)
    if any(new_id is None for new_id in resolved):
        return None
    return resolved


def normalize_call_date(value: datetime | date | str | None, now: datetime) -> datetime:
    """
    Convert a template call date to a timezone-aware datetime.

    Datetimes, dates and ISO-8601 strings are kept; anything else
    (missing or unparseable) becomes `now`.
    """
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return now
    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=UTC)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=UTC)
    return now


def company_name_for(display_name: str | None, email: str) -> str:
    if display_name:
        return f"{display_name}'s Company"
    return f"Company for {email}"


class TenantBootstrapService:
    """Service layer for seeding a company on signup"""

    def __init__(
        self,
        db: Session,
        identity_provider: IdentityProvider | None = None,
        template: TemplateDataset = DEFAULT_TEMPLATE,
    ):
        self.db = db
        self.identity = identity_provider or DatabaseIdentityProvider(db)
        self.template = template
        self.profile_repo = UserProfileRepository(db)

    def bootstrap(self, request: BootstrapRequest) -> BootstrapResult:
        """
        Ensure the user has a company seeded with the template dataset.

        Args:
            request: user id, email and optional display name

        Returns:
            BootstrapResult; never raises. On failure nothing was written.
        """
        try:
            principal = self.identity.get_user(request.user_id)
            return self._seed_company(request, principal.email, principal.display_name)
        except PrincipalNotFoundException as e:
            logger.warning("Bootstrap aborted, unknown user", user_id=request.user_id)
            return BootstrapResult(success=False, error=str(e))
        except SQLAlchemyError as e:
            # Includes the users.id conflict of a concurrent signup that lost
            self.db.rollback()
            logger.error("Tenant bootstrap database error", user_id=request.user_id, error=str(e))
            return BootstrapResult(success=False, error=GENERIC_FAILURE)
        except Exception as e:
            self.db.rollback()
            logger.exception("Tenant bootstrap failed", user_id=request.user_id)
            return BootstrapResult(success=False, error=str(e) or "An unknown error occurred.")

    def _seed_company(
        self, request: BootstrapRequest, email: str | None, display_name: str | None
    ) -> BootstrapResult:
        user_id = request.user_id
        existing = self.profile_repo.get_by_id(user_id)
        if existing is not None:
            logger.info("User profile already exists, skipping creation", user_id=user_id)
            self.db.rollback()
            return BootstrapResult(success=True, created=False, company_id=existing.company_id)

        email = email or request.email
        display_name = display_name or request.display_name

        company = Company(
            id=generate_id(),
            name=company_name_for(display_name, email),
            owner_id=user_id,
        )
        profile = UserProfile(
            id=user_id,
            email=email,
            display_name=display_name or "",
            company_id=company.id,
        )
        self.db.add_all([company, profile])
        self.db.flush()

        account_ids = self._clone_accounts(company.id)
        self._clone_contacts(company.id)
        self._clone_products(company.id)
        self._clone_account_products(company.id, account_ids)
        self._clone_shipping_locations(company.id, account_ids)
        self._clone_call_notes(company.id, account_ids)

        self.db.commit()
        logger.info("Company seeded", user_id=user_id, company_id=company.id, accounts=len(account_ids))
        return BootstrapResult(success=True, created=True, company_id=company.id)

    def _clone_accounts(self, company_id: str) -> RemapTable:
        remap: RemapTable = {}
        for template in self.template.accounts:
            account = Account(
                id=generate_id(),
                company_id=company_id,
                account_number=template.account_number,
                name=template.name,
                industry=template.industry,
                status=template.status,
                details=template.details,
                address=template.address,
            )
            remap[template.id] = account.id
            self.db.add(account)
        self.db.flush()
        return remap

    def _clone_contacts(self, company_id: str) -> None:
        # Contacts follow their account through account_number, which is not remapped
        for template in self.template.contacts:
            self.db.add(
                Contact(
                    id=generate_id(),
                    company_id=company_id,
                    account_number=template.account_number,
                    name=template.name,
                    phone=template.phone,
                    email=template.email,
                    location=template.location,
                    is_main_contact=template.is_main_contact,
                    avatar_url=template.avatar_url,
                )
            )
        self.db.flush()

    def _clone_products(self, company_id: str) -> None:
        for template in self.template.products:
            self.db.add(
                Product(
                    id=generate_id(),
                    company_id=company_id,
                    name=template.name,
                    product_number=template.product_number,
                    attributes=list(template.attributes),
                )
            )
        self.db.flush()

    def _clone_account_products(self, company_id: str, account_ids: RemapTable) -> None:
        for template in self.template.account_products:
            resolved = resolve_best_effort(account_ids, template.account_id)
            if resolved is None:
                logger.debug("Skipping account product with unresolved account", template_id=template.id)
                continue
            self.db.add(
                AccountProduct(
                    id=generate_id(),
                    company_id=company_id,
                    account_id=resolved[0],
                    product_id=template.product_id,
                    notes=template.notes,
                    type=template.type,
                    price=template.price,
                )
            )
        self.db.flush()

    def _clone_shipping_locations(self, company_id: str, account_ids: RemapTable) -> None:
        for template in self.template.shipping_locations:
            resolved = resolve_best_effort(
                account_ids, template.original_account_id, template.related_account_id
            )
            if resolved is None:
                logger.debug("Skipping shipping location with unresolved account", template_id=template.id)
                continue
            original_id, related_id = resolved
            self.db.add(
                ShippingLocation(
                    id=generate_id(),
                    company_id=company_id,
                    original_account_id=original_id,
                    related_account_id=related_id,
                )
            )
        self.db.flush()

    def _clone_call_notes(self, company_id: str, account_ids: RemapTable) -> None:
        now = datetime.now(UTC)
        for template in self.template.call_notes:
            resolved = resolve_best_effort(account_ids, template.account_id)
            if resolved is None:
                logger.debug("Skipping call note with unresolved account", template_id=template.id)
                continue
            self.db.add(
                CallNote(
                    id=generate_id(),
                    company_id=company_id,
                    account_id=resolved[0],
                    call_date=normalize_call_date(template.call_date, now),
                    note=template.note,
                    type=template.type,
                )
            )
        self.db.flush()
