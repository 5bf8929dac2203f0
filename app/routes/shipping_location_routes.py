from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_tenant_context
from app.models.tenant_context import TenantContext
from app.services.shipping_location_service import ShippingLocationService
from app.schemas.shipping_location_schemas import ShippingLocationCreate, ShippingLocationResponse

# Mounted under /api/accounts
account_router = APIRouter()
# Mounted under /api/shipping-locations
router = APIRouter()


@account_router.get("/{account_id}/shipping-locations", response_model=list[ShippingLocationResponse])
async def list_shipping_locations(
    account_id: str, context: TenantContext = Depends(get_tenant_context), db: Session = Depends(get_db)
):
    return ShippingLocationService(db).get_account_locations(account_id, context)


@account_router.post(
    "/{account_id}/shipping-locations",
    response_model=ShippingLocationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_shipping_location(
    account_id: str,
    data: ShippingLocationCreate,
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """Link another account of the company as a place this account ships to"""
    return ShippingLocationService(db).add_location(account_id, data, context)


@router.delete("/{location_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_shipping_location(
    location_id: str, context: TenantContext = Depends(get_tenant_context), db: Session = Depends(get_db)
):
    ShippingLocationService(db).delete_location(location_id, context)
    return None
