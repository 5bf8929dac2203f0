from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_tenant_context
from app.models.tenant_context import TenantContext
from app.services.ai_service import AIService, get_ai_service
from app.services.insight_service import InsightService
from app.schemas.ai_schemas import (
    AccountInsightRequest,
    DictateNoteRequest,
    DictateNoteOutput,
    GeneratePotentialActionsOutput,
    SummarizeAccountNotesOutput,
)

router = APIRouter()


@router.post("/summarize-notes", response_model=SummarizeAccountNotesOutput)
async def summarize_notes(
    request: AccountInsightRequest,
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
    ai: AIService = Depends(get_ai_service),
):
    """Summarize key discussion points and action items from an account's call notes"""
    return await InsightService(db, ai).summarize_account(request.account_id, context)


@router.post("/potential-actions", response_model=GeneratePotentialActionsOutput)
async def potential_actions(
    request: AccountInsightRequest,
    context: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
    ai: AIService = Depends(get_ai_service),
):
    """Suggest 3-5 next actions from account details and product notes"""
    return await InsightService(db, ai).suggest_actions(request.account_id, context)


@router.post("/dictate", response_model=DictateNoteOutput)
async def dictate(
    request: DictateNoteRequest,
    context: TenantContext = Depends(get_tenant_context),
    ai: AIService = Depends(get_ai_service),
):
    """Transcribe a dictated note (base64 audio)"""
    return await ai.dictate_note(request.audio, request.mime_type)
