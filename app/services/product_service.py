from sqlalchemy.orm import Session
from app.models.product import Product
from app.models.tenant_context import TenantContext
from app.repositories.product_repository import ProductRepository
from app.repositories.account_product_repository import AccountProductRepository
from app.schemas.product_schemas import ProductCreate, ProductUpdate
from app.core.exceptions import NotFoundException


class ProductService:
    """Service for the company product catalogue"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ProductRepository(db)
        self.account_product_repo = AccountProductRepository(db)

    def create_product(self, data: ProductCreate, context: TenantContext) -> Product:
        product = Product(
            company_id=context.company_id,
            name=data.name,
            product_number=data.product_number,
            attributes=[volume.value for volume in data.attributes],
        )
        return self.repo.create(product)

    def get_company_products(self, context: TenantContext) -> list[Product]:
        return self.repo.get_by_company(context.company_id)

    def get_product(self, product_id: str, context: TenantContext) -> Product:
        """
        Raises:
            NotFoundException: If product not found or belongs to another company
        """
        product = self.repo.get_by_id_and_company(product_id, context.company_id)
        if not product:
            raise NotFoundException("Product not found")
        return product

    def update_product(self, product_id: str, data: ProductUpdate, context: TenantContext) -> Product:
        product = self.get_product(product_id, context)

        if data.name is not None:
            product.name = data.name
        if data.product_number is not None:
            product.product_number = data.product_number
        if data.attributes is not None:
            product.attributes = [volume.value for volume in data.attributes]

        return self.repo.update(product)

    def delete_product(self, product_id: str, context: TenantContext) -> None:
        """Delete product and every account link to it"""
        product = self.get_product(product_id, context)
        self.account_product_repo.delete_by_product(product.id, context.company_id)
        self.repo.delete(product)
