from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_tenant_context
from app.models.tenant_context import TenantContext
from app.services.product_service import ProductService
from app.schemas.product_schemas import ProductCreate, ProductUpdate, ProductResponse

router = APIRouter()


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    data: ProductCreate, context: TenantContext = Depends(get_tenant_context), db: Session = Depends(get_db)
):
    """Add a product to the company catalogue"""
    return ProductService(db).create_product(data, context)


@router.get("", response_model=list[ProductResponse])
async def list_products(context: TenantContext = Depends(get_tenant_context), db: Session = Depends(get_db)):
    return ProductService(db).get_company_products(context)


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: str, context: TenantContext = Depends(get_tenant_context), db: Session = Depends(get_db)
):
    return ProductService(db).get_product(product_id, context)


@router.patch("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str,
    data: ProductUpdate,
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    return ProductService(db).update_product(product_id, data, context)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: str, context: TenantContext = Depends(get_tenant_context), db: Session = Depends(get_db)
):
    """Delete product and remove it from every account"""
    ProductService(db).delete_product(product_id, context)
    return None
