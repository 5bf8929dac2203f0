from datetime import datetime, UTC
from sqlalchemy.orm import Session
from app.models.call_note import CallNote
from app.models.tenant_context import TenantContext
from app.repositories.call_note_repository import CallNoteRepository
from app.schemas.call_note_schemas import CallNoteCreate, CallNoteUpdate
from app.services.account_service import AccountService
from app.core.exceptions import NotFoundException


class CallNoteService:
    """Service layer for call note business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = CallNoteRepository(db)
        self.account_service = AccountService(db)

    def create_call_note(self, account_id: str, data: CallNoteCreate, context: TenantContext) -> CallNote:
        """
        Log a call note against an account.

        Raises:
            NotFoundException: If account doesn't exist in the caller's company
        """
        account = self.account_service.get_account(account_id, context)
        call_note = CallNote(
            company_id=context.company_id,
            account_id=account.id,
            call_date=data.call_date or datetime.now(UTC),
            note=data.note,
            type=data.type,
        )
        return self.repo.create(call_note)

    def get_account_call_notes(
        self, account_id: str, context: TenantContext, limit: int = 100, offset: int = 0
    ) -> list[CallNote]:
        """Get an account's call notes, newest first"""
        account = self.account_service.get_account(account_id, context)
        return self.repo.get_by_account(account.id, context.company_id, limit=limit, offset=offset)

    def get_call_note(self, call_note_id: str, context: TenantContext) -> CallNote:
        call_note = self.repo.get_by_id_and_company(call_note_id, context.company_id)
        if not call_note:
            raise NotFoundException(f"Call note {call_note_id} not found")
        return call_note

    def update_call_note(self, call_note_id: str, data: CallNoteUpdate, context: TenantContext) -> CallNote:
        call_note = self.get_call_note(call_note_id, context)
        for field, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(call_note, field, value)
        return self.repo.update(call_note)

    def delete_call_note(self, call_note_id: str, context: TenantContext) -> None:
        call_note = self.get_call_note(call_note_id, context)
        self.repo.delete(call_note)
