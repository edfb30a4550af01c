"""Audio transcription endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from starlette.datastructures import UploadFile

from transcription_relay.dependencies import enforce_upload_limit, get_handler
from transcription_relay.handlers import TranscriptionHandler
from transcription_relay.logging import setup_logging
from transcription_relay.response_models import ErrorResponse, TranscriptionResponse

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["transcription"])

HandlerDep = Annotated[TranscriptionHandler, Depends(get_handler)]

AUDIO_FIELD = "audio"


@router.post(
    "/transcribe",
    response_model=TranscriptionResponse,
    dependencies=[Depends(enforce_upload_limit)],
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def transcribe(request: Request, handler: HandlerDep) -> TranscriptionResponse:
    """
    Transcribes the audio file sent in the ``audio`` multipart field.

    The form is read directly so that a missing or non-file ``audio`` field is
    reported as "No file uploaded" rather than a validation error.
    """
    async with request.form() as form:
        audio = form.get(AUDIO_FIELD)
        upload = audio if isinstance(audio, UploadFile) else None

        logger.info(
            "Received transcription request",
            extra={"file_name": upload.filename if upload else None},
        )

        result = await handler.handle(upload)

    return TranscriptionResponse(text=result.text)
