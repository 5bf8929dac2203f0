from sqlalchemy.orm import Session
from app.models.product import Product


class ProductRepository:
    """Repository for Product model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_company(self, company_id: str) -> list[Product]:
        """Get the product catalogue of a company"""
        return (
            self.db.query(Product)
            .filter(Product.company_id == company_id)
            .order_by(Product.name)
            .all()
        )

    def get_by_id_and_company(self, product_id: str, company_id: str) -> Product | None:
        return (
            self.db.query(Product)
            .filter(Product.id == product_id, Product.company_id == company_id)
            .first()
        )

    def get_by_ids(self, product_ids: list[str], company_id: str) -> dict[str, Product]:
        """Get products by id, keyed by id (missing ids are simply absent)"""
        if not product_ids:
            return {}
        products = (
            self.db.query(Product)
            .filter(Product.id.in_(product_ids), Product.company_id == company_id)
            .all()
        )
        return {product.id: product for product in products}

    def create(self, product: Product) -> Product:
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def update(self, product: Product) -> Product:
        self.db.commit()
        self.db.refresh(product)
        return product

    def delete(self, product: Product) -> None:
        self.db.delete(product)
        self.db.commit()
