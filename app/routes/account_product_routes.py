from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_tenant_context
from app.models.tenant_context import TenantContext
from app.services.account_product_service import AccountProductService
from app.schemas.account_product_schemas import (
    AccountProductCreate,
    AccountProductUpdate,
    AccountProductResponse,
)

# Mounted under /api/accounts
account_router = APIRouter()
# Mounted under /api/account-products
router = APIRouter()


@account_router.get("/{account_id}/products", response_model=list[AccountProductResponse])
async def list_account_products(
    account_id: str, context: TenantContext = Depends(get_tenant_context), db: Session = Depends(get_db)
):
    return AccountProductService(db).get_account_products(account_id, context)


@account_router.post(
    "/{account_id}/products", response_model=AccountProductResponse, status_code=status.HTTP_201_CREATED
)
async def add_account_product(
    account_id: str,
    data: AccountProductCreate,
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """
    Link a catalogue product to an account.

    - A product can be linked to an account only once
    - `bid_frequency` is required when `price_type` is `bid`
    """
    return AccountProductService(db).add_product(account_id, data, context)


@router.patch("/{account_product_id}", response_model=AccountProductResponse)
async def update_account_product(
    account_product_id: str,
    data: AccountProductUpdate,
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    return AccountProductService(db).update_account_product(account_product_id, data, context)


@router.delete("/{account_product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_account_product(
    account_product_id: str,
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    AccountProductService(db).delete_account_product(account_product_id, context)
    return None
