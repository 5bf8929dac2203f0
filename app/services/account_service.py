from sqlalchemy.orm import Session
from app.models.account import Account, AccountStatus
from app.models.tenant_context import TenantContext
from app.repositories.account_repository import AccountRepository
from app.repositories.contact_repository import ContactRepository
from app.repositories.shipping_location_repository import ShippingLocationRepository
from app.schemas.account_schemas import AccountCreate, AccountUpdate
from app.core.exceptions import NotFoundException, ValidationException


class AccountService:
    """Service for account business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = AccountRepository(db)
        self.contact_repo = ContactRepository(db)
        self.location_repo = ShippingLocationRepository(db)

    def create_account(self, data: AccountCreate, context: TenantContext) -> Account:
        """
        Create new account in the caller's company.

        Raises:
            ValidationException: If the account number is already used
        """
        self._ensure_number_free(data.account_number, context.company_id)
        account = Account(
            company_id=context.company_id,
            account_number=data.account_number,
            name=data.name,
            industry=data.industry,
            status=data.status,
            details=data.details,
            address=data.address,
        )
        return self.repo.create(account)

    def get_company_accounts(self, context: TenantContext, status: AccountStatus | None = None) -> list[Account]:
        """Get all accounts of the caller's company"""
        return self.repo.get_by_company(context.company_id, status)

    def get_account(self, account_id: str, context: TenantContext) -> Account:
        """
        Get specific account ensuring company ownership.

        Raises:
            NotFoundException: If account not found or belongs to another company
        """
        account = self.repo.get_by_id_and_company(account_id, context.company_id)
        if not account:
            raise NotFoundException("Account not found")
        return account

    def update_account(self, account_id: str, data: AccountUpdate, context: TenantContext) -> Account:
        """
        Update account details.

        Renaming the account number moves its contacts along in the same commit.
        """
        account = self.get_account(account_id, context)

        if data.account_number is not None and data.account_number != account.account_number:
            self._ensure_number_free(data.account_number, context.company_id)
            if account.account_number:
                self.contact_repo.reassign_account_number(
                    account.account_number, data.account_number, context.company_id
                )
            account.account_number = data.account_number

        for field in ("name", "industry", "status", "address", "details"):
            value = getattr(data, field)
            if value is not None:
                setattr(account, field, value)

        return self.repo.update(account)

    def delete_account(self, account_id: str, context: TenantContext) -> None:
        """Delete account with its contacts, products, call notes and shipping links"""
        account = self.get_account(account_id, context)
        if account.account_number:
            self.contact_repo.delete_by_account_number(account.account_number, context.company_id)
        self.location_repo.delete_referencing(account.id)
        self.repo.delete(account)

    def _ensure_number_free(self, account_number: str, company_id: str) -> None:
        if self.repo.get_by_number_and_company(account_number, company_id):
            raise ValidationException(f"Account number {account_number} is already in use")
