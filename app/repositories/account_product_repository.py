from sqlalchemy.orm import Session
from app.models.account_product import AccountProduct


class AccountProductRepository:
    """Repository for AccountProduct model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_account(self, account_id: str, company_id: str) -> list[AccountProduct]:
        return (
            self.db.query(AccountProduct)
            .filter(AccountProduct.account_id == account_id, AccountProduct.company_id == company_id)
            .order_by(AccountProduct.created_at)
            .all()
        )

    def get_by_account_and_product(
        self, account_id: str, product_id: str, company_id: str
    ) -> AccountProduct | None:
        return (
            self.db.query(AccountProduct)
            .filter(
                AccountProduct.account_id == account_id,
                AccountProduct.product_id == product_id,
                AccountProduct.company_id == company_id,
            )
            .first()
        )

    def get_by_id_and_company(self, account_product_id: str, company_id: str) -> AccountProduct | None:
        return (
            self.db.query(AccountProduct)
            .filter(AccountProduct.id == account_product_id, AccountProduct.company_id == company_id)
            .first()
        )

    def delete_by_product(self, product_id: str, company_id: str) -> None:
        """Delete every link to a product without committing"""
        self.db.query(AccountProduct).filter(
            AccountProduct.product_id == product_id, AccountProduct.company_id == company_id
        ).delete(synchronize_session="fetch")

    def create(self, account_product: AccountProduct) -> AccountProduct:
        self.db.add(account_product)
        self.db.commit()
        self.db.refresh(account_product)
        return account_product

    def update(self, account_product: AccountProduct) -> AccountProduct:
        self.db.commit()
        self.db.refresh(account_product)
        return account_product

    def delete(self, account_product: AccountProduct) -> None:
        self.db.delete(account_product)
        self.db.commit()
