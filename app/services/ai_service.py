"""
LLM-backed text generation for sales insights.

Three single request/response flows: summarize call notes, suggest next
actions, transcribe dictated audio. Replies are requested as JSON and
validated with the pydantic output schemas. No retries.

Without OPENAI_API_KEY the service runs in mock mode and returns
placeholder output, so the API works in development and tests.
"""

import base64
import binascii
import json
import time

import openai
from pydantic import BaseModel, ValidationError

from app.config import settings
from app.core.exceptions import AIServiceException, ValidationException
from app.core.logging import get_logger
from app.schemas.ai_schemas import (
    DictateNoteOutput,
    GeneratePotentialActionsOutput,
    SummarizeAccountNotesOutput,
)

logger = get_logger(__name__)

SUMMARIZE_NOTES_PROMPT = """You are a sales expert summarizing notes for sales managers.

Summarize the key discussion points and action items from the following notes for account "{account_name}":

Notes: {notes}

Respond with a JSON object of the form {{"summary": "<summary>"}}."""

POTENTIAL_ACTIONS_PROMPT = """You are a sales strategy AI assistant. Based on the account data and product notes, \
suggest potential actions for the sales representative to take.

Account Name: {account_name}
Account Details: {account_details}
Product Notes: {product_notes}

Suggest 3-5 potential actions that the sales representative can take to better manage the account and \
identify opportunities for sales growth.

Respond with a JSON object of the form {{"potential_actions": ["<action>", ...]}}."""

DICTATION_PROMPT = "A person dictating a note for a customer relationship management app."

_EXTENSIONS = {
    "audio/webm": "webm",
    "audio/ogg": "ogg",
    "audio/mpeg": "mp3",
    "audio/mp4": "mp4",
    "audio/wav": "wav",
    "audio/x-wav": "wav",
}


class AIService:
    """Service for LLM-backed sales insights and dictation"""

    def __init__(self, client: "openai.AsyncOpenAI | None" = None) -> None:
        if client is not None:
            self._use_mock = False
            self._client = client
        else:
            self._use_mock = not bool(settings.OPENAI_API_KEY)
            if not self._use_mock:
                self._client = openai.AsyncOpenAI(api_key=settings.OPENAI_API_KEY)
            else:
                logger.info("AIService in MOCK mode, set OPENAI_API_KEY for real LLM")

    async def summarize_account_notes(self, account_name: str, notes: str) -> SummarizeAccountNotesOutput:
        if self._use_mock:
            note_count = len([line for line in notes.splitlines() if line.strip()])
            return SummarizeAccountNotesOutput(
                summary=f"[MOCK SUMMARY] {account_name}: {note_count} note(s) reviewed."
            )
        prompt = SUMMARIZE_NOTES_PROMPT.format(account_name=account_name, notes=notes)
        return await self._generate_json(prompt, SummarizeAccountNotesOutput)

    async def generate_potential_actions(
        self, account_name: str, account_details: str, product_notes: str
    ) -> GeneratePotentialActionsOutput:
        if self._use_mock:
            return GeneratePotentialActionsOutput(
                potential_actions=[
                    f"Schedule a follow-up call with {account_name} to discuss recent product updates.",
                    "Identify new opportunities to introduce additional products to the account.",
                    "Review account needs and tailor product recommendations to meet their goals.",
                ]
            )
        prompt = POTENTIAL_ACTIONS_PROMPT.format(
            account_name=account_name,
            account_details=account_details,
            product_notes=product_notes,
        )
        return await self._generate_json(prompt, GeneratePotentialActionsOutput)

    async def dictate_note(self, audio: str, mime_type: str) -> DictateNoteOutput:
        """
        Transcribe base64-encoded audio.

        Raises:
            ValidationException: If audio is not valid base64
            AIServiceException: If the transcription call fails
        """
        try:
            audio_bytes = base64.b64decode(audio, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ValidationException("Audio must be base64-encoded") from exc

        if self._use_mock:
            return DictateNoteOutput(text=f"[MOCK TRANSCRIPT] {len(audio_bytes)} bytes of {mime_type} audio.")

        filename = f"dictation.{_EXTENSIONS.get(mime_type.split(';')[0].strip(), 'webm')}"
        start = time.monotonic()
        try:
            transcription = await self._client.audio.transcriptions.create(
                model=settings.TRANSCRIPTION_MODEL,
                file=(filename, audio_bytes, mime_type),
                prompt=DICTATION_PROMPT,
            )
        except openai.OpenAIError as exc:
            logger.error("OpenAI transcription error", error=str(exc))
            raise AIServiceException(f"Transcription failed: {exc}") from exc

        logger.info("Audio transcribed", latency_ms=round((time.monotonic() - start) * 1000, 1))
        return DictateNoteOutput(text=transcription.text or "")

    async def _generate_json(self, prompt: str, output_model: type[BaseModel]):
        start = time.monotonic()
        try:
            completion = await self._client.chat.completions.create(
                model=settings.LLM_MODEL,
                messages=[
                    {"role": "system", "content": "You are a helpful sales assistant. Always reply with JSON."},
                    {"role": "user", "content": prompt},
                ],
                temperature=settings.LLM_TEMPERATURE,
                response_format={"type": "json_object"},
            )
        except openai.OpenAIError as exc:
            logger.error("OpenAI API error", error=str(exc))
            raise AIServiceException(f"LLM generation failed: {exc}") from exc

        content = completion.choices[0].message.content or ""
        logger.info("LLM response generated", latency_ms=round((time.monotonic() - start) * 1000, 1))
        try:
            return output_model.model_validate(json.loads(content))
        except (json.JSONDecodeError, ValidationError) as exc:
            logger.error("LLM response did not match schema", schema=output_model.__name__)
            raise AIServiceException("LLM returned an unexpected response") from exc


# Singleton, shared across all requests
ai_service = AIService()


def get_ai_service() -> AIService:
    """FastAPI dependency returning the shared AIService"""
    return ai_service
