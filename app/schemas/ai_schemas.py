from pydantic import BaseModel, Field


class AccountInsightRequest(BaseModel):
    account_id: str = Field(..., min_length=1)


class DictateNoteRequest(BaseModel):
    audio: str = Field(..., min_length=1, description="Base64-encoded audio chunk")
    mime_type: str = Field(..., min_length=1, description="MIME type of the audio, e.g. 'audio/webm'")


class SummarizeAccountNotesOutput(BaseModel):
    summary: str = Field(..., description="Summary of the account notes")


class GeneratePotentialActionsOutput(BaseModel):
    potential_actions: list[str] = Field(..., description="Suggested actions for the sales representative")


class DictateNoteOutput(BaseModel):
    text: str = Field(..., description="Transcribed text")
