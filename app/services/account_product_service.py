from sqlalchemy.orm import Session
from app.models.account_product import AccountProduct
from app.models.tenant_context import TenantContext
from app.repositories.account_product_repository import AccountProductRepository
from app.repositories.product_repository import ProductRepository
from app.schemas.account_product_schemas import AccountProductCreate, AccountProductUpdate
from app.services.account_service import AccountService
from app.core.exceptions import NotFoundException, ValidationException

_PRICING_FIELDS = (
    "price_type",
    "bid_frequency",
    "last_bid_price",
    "winning_bid_price",
    "type",
    "price",
)


class AccountProductService:
    """Service for products bought by an account"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = AccountProductRepository(db)
        self.product_repo = ProductRepository(db)
        self.account_service = AccountService(db)

    def get_account_products(self, account_id: str, context: TenantContext) -> list[dict]:
        """
        List an account's products with catalogue names.

        product_name is None for links whose product is not in the
        company catalogue.
        """
        account = self.account_service.get_account(account_id, context)
        links = self.repo.get_by_account(account.id, context.company_id)
        products = self.product_repo.get_by_ids([link.product_id for link in links], context.company_id)
        return [self._to_dict(link, products.get(link.product_id)) for link in links]

    def add_product(self, account_id: str, data: AccountProductCreate, context: TenantContext) -> dict:
        """
        Raises:
            NotFoundException: If account or product not found
            ValidationException: If the product is already linked to the account
        """
        account = self.account_service.get_account(account_id, context)
        product = self.product_repo.get_by_id_and_company(data.product_id, context.company_id)
        if not product:
            raise NotFoundException("Product not found")

        if self.repo.get_by_account_and_product(account.id, product.id, context.company_id):
            raise ValidationException(
                "Product already exists for this account. You can edit the notes from the product list."
            )

        link = AccountProduct(
            company_id=context.company_id,
            account_id=account.id,
            product_id=product.id,
            notes=data.notes or "",
            **{field: getattr(data, field) for field in _PRICING_FIELDS},
        )
        link = self.repo.create(link)
        return self._to_dict(link, product)

    def update_account_product(
        self, account_product_id: str, data: AccountProductUpdate, context: TenantContext
    ) -> dict:
        """Replace notes and pricing details of a link"""
        link = self._get_link(account_product_id, context)

        if data.notes is not None:
            link.notes = data.notes
        for field in _PRICING_FIELDS:
            setattr(link, field, getattr(data, field))

        link = self.repo.update(link)
        return self._to_dict(link, self.product_repo.get_by_id_and_company(link.product_id, context.company_id))

    def delete_account_product(self, account_product_id: str, context: TenantContext) -> None:
        link = self._get_link(account_product_id, context)
        self.repo.delete(link)

    def _get_link(self, account_product_id: str, context: TenantContext) -> AccountProduct:
        link = self.repo.get_by_id_and_company(account_product_id, context.company_id)
        if not link:
            raise NotFoundException("Account product not found")
        return link

    @staticmethod
    def _to_dict(link: AccountProduct, product) -> dict:
        return {
            "id": link.id,
            "company_id": link.company_id,
            "account_id": link.account_id,
            "product_id": link.product_id,
            "product_name": product.name if product else None,
            "notes": link.notes,
            **{field: getattr(link, field) for field in _PRICING_FIELDS},
            "created_at": link.created_at,
        }
