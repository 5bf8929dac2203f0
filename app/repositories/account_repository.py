from sqlalchemy.orm import Session
from app.models.account import Account, AccountStatus


class AccountRepository:
    """Repository for Account model operations with multi-tenant support"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_company(self, company_id: str, status: AccountStatus | None = None) -> list[Account]:
        """Get all accounts for a company, optionally filtered by status"""
        query = self.db.query(Account).filter(Account.company_id == company_id)
        if status is not None:
            query = query.filter(Account.status == status)
        return query.order_by(Account.name).all()

    def get_by_id_and_company(self, account_id: str, company_id: str) -> Account | None:
        """
        Get account ensuring it belongs to company (multi-tenant safety).

        Returns None if account doesn't exist or belongs to another company.
        """
        return (
            self.db.query(Account)
            .filter(Account.id == account_id, Account.company_id == company_id)
            .first()
        )

    def get_by_number_and_company(self, account_number: str, company_id: str) -> Account | None:
        """Get account by its business identifier within a company"""
        return (
            self.db.query(Account)
            .filter(Account.account_number == account_number, Account.company_id == company_id)
            .first()
        )

    def create(self, account: Account) -> Account:
        """Create new account"""
        self.db.add(account)
        self.db.commit()
        self.db.refresh(account)
        return account

    def update(self, account: Account) -> Account:
        """Update existing account"""
        self.db.commit()
        self.db.refresh(account)
        return account

    def delete(self, account: Account) -> None:
        """Delete account (cascades to account products, call notes, shipping locations)"""
        self.db.delete(account)
        self.db.commit()
