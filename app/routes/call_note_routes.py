from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_tenant_context
from app.models.tenant_context import TenantContext
from app.services.call_note_service import CallNoteService
from app.schemas.call_note_schemas import CallNoteCreate, CallNoteUpdate, CallNoteResponse

# Mounted under /api/accounts
account_router = APIRouter()
# Mounted under /api/call-notes
router = APIRouter()


@account_router.get("/{account_id}/call-notes", response_model=list[CallNoteResponse])
async def list_call_notes(
    account_id: str,
    limit: int = Query(100, ge=1, le=500, description="Max results"),
    offset: int = Query(0, ge=0, description="Pagination offset"),
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """Get an account's call notes, newest first"""
    return CallNoteService(db).get_account_call_notes(account_id, context, limit=limit, offset=offset)


@account_router.post(
    "/{account_id}/call-notes", response_model=CallNoteResponse, status_code=status.HTTP_201_CREATED
)
async def create_call_note(
    account_id: str,
    data: CallNoteCreate,
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    """Log a call note; `call_date` defaults to now"""
    return CallNoteService(db).create_call_note(account_id, data, context)


@router.patch("/{call_note_id}", response_model=CallNoteResponse)
async def update_call_note(
    call_note_id: str,
    data: CallNoteUpdate,
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
):
    return CallNoteService(db).update_call_note(call_note_id, data, context)


@router.delete("/{call_note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_call_note(
    call_note_id: str, context: TenantContext = Depends(get_tenant_context), db: Session = Depends(get_db)
):
    CallNoteService(db).delete_call_note(call_note_id, context)
    return None
