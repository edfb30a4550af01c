"""Response models for the transcription API."""

from pydantic import BaseModel


class TranscriptionResponse(BaseModel):
    """Response returned after a successful transcription."""

    text: str = ""


class ErrorResponse(BaseModel):
    """Body of every non-2xx response."""

    error: str
    details: str | None = None
