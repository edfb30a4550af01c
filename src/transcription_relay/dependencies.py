"""FastAPI dependency injection configuration."""

from fastapi import Request

from transcription_relay.config import AppConfig
from transcription_relay.exceptions import FileTooLargeError
from transcription_relay.handlers import TranscriptionHandler
from transcription_relay.infrastructure import (
    DiskUploadIntake,
    OpenAITranscriber,
    build_openai_client,
    ensure_scratch_dir,
)
from transcription_relay.interfaces import TranscriptionService, UploadIntake
from transcription_relay.logging import setup_logging

logger = setup_logging()

# multipart boundaries and part headers on top of the file bytes
MULTIPART_OVERHEAD_BYTES = 64 * 1024


def build_transcription_service(config: AppConfig) -> TranscriptionService:
    """Creates the OpenAI-backed transcription service."""
    return OpenAITranscriber(build_openai_client(config.openai), config.openai.model)


def build_intake(config: AppConfig) -> UploadIntake:
    """Creates the disk intake, making sure the scratch directory exists."""
    directory = ensure_scratch_dir(config.upload.directory)
    return DiskUploadIntake(directory, config.upload.max_bytes)


def get_handler(request: Request) -> TranscriptionHandler:
    """Returns the handler attached to the application at startup."""
    return request.app.state.transcription_handler


def enforce_upload_limit(request: Request) -> None:
    """
    Rejects a request whose declared body cannot fit under the upload limit.

    Runs before the multipart body is read, so an oversized upload is never
    spooled. Bodies without a usable Content-Length are still bounded by the
    intake while streaming.
    """
    declared = request.headers.get("content-length")
    if declared is None or not declared.isdigit():
        return

    max_bytes = request.app.state.config.upload.max_bytes
    if int(declared) > max_bytes + MULTIPART_OVERHEAD_BYTES:
        logger.warning(
            "Upload rejected, content length over limit",
            extra={"content_length": int(declared), "max_bytes": max_bytes},
        )
        raise FileTooLargeError(max_bytes)
