from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_tenant_context
from app.models.account import AccountStatus
from app.models.tenant_context import TenantContext
from app.services.account_service import AccountService
from app.schemas.account_schemas import (
    AccountCreate,
    AccountUpdate,
    AccountResponse,
    AccountListResponse,
)

router = APIRouter()


@router.post("", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
async def create_account(
    data: AccountCreate, context: TenantContext = Depends(get_tenant_context), db: Session = Depends(get_db)
):
    """Create a new account in the caller's company"""
    service = AccountService(db)
    return service.create_account(data, context)


@router.get("", response_model=AccountListResponse)
async def list_accounts(
    status_filter: AccountStatus | None = Query(None, alias="status"),
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """Get all accounts of the caller's company"""
    service = AccountService(db)
    accounts = service.get_company_accounts(context, status_filter)
    return AccountListResponse(accounts=accounts, total=len(accounts))


@router.get("/{account_id}", response_model=AccountResponse)
async def get_account(
    account_id: str, context: TenantContext = Depends(get_tenant_context), db: Session = Depends(get_db)
):
    """Get specific account details"""
    service = AccountService(db)
    return service.get_account(account_id, context)


@router.patch("/{account_id}", response_model=AccountResponse)
async def update_account(
    account_id: str,
    data: AccountUpdate,
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """Update account details"""
    service = AccountService(db)
    return service.update_account(account_id, data, context)


@router.delete("/{account_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_account(
    account_id: str, context: TenantContext = Depends(get_tenant_context), db: Session = Depends(get_db)
):
    """Delete account and everything linked to it"""
    service = AccountService(db)
    service.delete_account(account_id, context)
    return None
