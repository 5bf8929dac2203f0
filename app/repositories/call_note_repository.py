from sqlalchemy.orm import Session
from app.models.call_note import CallNote


class CallNoteRepository:
    """Repository for CallNote data access"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_account(self, account_id: str, company_id: str, limit: int = 100, offset: int = 0) -> list[CallNote]:
        """Get call notes for an account, newest first, with pagination"""
        return (
            self.db.query(CallNote)
            .filter(CallNote.account_id == account_id, CallNote.company_id == company_id)
            .order_by(CallNote.call_date.desc(), CallNote.id.desc())
            .limit(limit)
            .offset(offset)
            .all()
        )

    def get_by_id_and_company(self, call_note_id: str, company_id: str) -> CallNote | None:
        return (
            self.db.query(CallNote)
            .filter(CallNote.id == call_note_id, CallNote.company_id == company_id)
            .first()
        )

    def create(self, call_note: CallNote) -> CallNote:
        self.db.add(call_note)
        self.db.commit()
        self.db.refresh(call_note)
        return call_note

    def update(self, call_note: CallNote) -> CallNote:
        self.db.commit()
        self.db.refresh(call_note)
        return call_note

    def delete(self, call_note: CallNote) -> None:
        self.db.delete(call_note)
        self.db.commit()
