from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_tenant_context
from app.models.tenant_context import TenantContext
from app.services.contact_service import ContactService
from app.schemas.contact_schemas import ContactCreate, ContactUpdate, ContactResponse

# Mounted under /api/accounts
account_router = APIRouter()
# Mounted under /api/contacts
router = APIRouter()


@account_router.get("/{account_id}/contacts", response_model=list[ContactResponse])
async def list_contacts(
    account_id: str, context: TenantContext = Depends(get_tenant_context), db: Session = Depends(get_db)
):
    """Get an account's contacts, main contact first"""
    return ContactService(db).get_account_contacts(account_id, context)


@account_router.post(
    "/{account_id}/contacts", response_model=ContactResponse, status_code=status.HTTP_201_CREATED
)
async def add_contact(
    account_id: str,
    data: ContactCreate,
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """Add a contact; marking it main demotes the previous main contact"""
    return ContactService(db).add_contact(account_id, data, context)


@router.patch("/{contact_id}", response_model=ContactResponse)
async def update_contact(
    contact_id: str,
    data: ContactUpdate,
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    return ContactService(db).update_contact(contact_id, data, context)


@router.delete("/{contact_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_contact(
    contact_id: str, context: TenantContext = Depends(get_tenant_context), db: Session = Depends(get_db)
):
    ContactService(db).delete_contact(contact_id, context)
    return None
