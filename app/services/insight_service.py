from sqlalchemy.orm import Session

from app.models.tenant_context import TenantContext
from app.schemas.ai_schemas import GeneratePotentialActionsOutput, SummarizeAccountNotesOutput
from app.services.account_product_service import AccountProductService
from app.services.account_service import AccountService
from app.services.ai_service import AIService
from app.services.call_note_service import CallNoteService
from app.core.exceptions import ValidationException


class InsightService:
    """Builds AI prompts from an account's stored notes"""

    def __init__(self, db: Session, ai: AIService):
        self.ai = ai
        self.account_service = AccountService(db)
        self.call_note_service = CallNoteService(db)
        self.account_product_service = AccountProductService(db)

    async def summarize_account(self, account_id: str, context: TenantContext) -> SummarizeAccountNotesOutput:
        """
        Raises:
            NotFoundException: If account not found
            ValidationException: If the account has no call notes
        """
        account = self.account_service.get_account(account_id, context)
        call_notes = self.call_note_service.get_account_call_notes(account.id, context)
        if not call_notes:
            raise ValidationException("Account has no call notes to summarize")

        notes = "\n".join(
            f"- {note.call_date:%Y-%m-%d} ({note.type}): {note.note}" for note in call_notes
        )
        return await self.ai.summarize_account_notes(account.name, notes)

    async def suggest_actions(self, account_id: str, context: TenantContext) -> GeneratePotentialActionsOutput:
        account = self.account_service.get_account(account_id, context)
        products = self.account_product_service.get_account_products(account.id, context)

        product_notes = "\n".join(
            f"- {item['product_name'] or item['product_id']}: {item['notes']}"
            for item in products
            if item["notes"]
        )
        return await self.ai.generate_potential_actions(
            account.name, account.details or "", product_notes or "No product notes."
        )
