"""Handler for transcription requests."""

from typing import BinaryIO

from starlette.datastructures import UploadFile

from transcription_relay.domain import (
    TranscriptionResult,
    UploadedFile,
    normalize_failure,
    translate_failure,
)
from transcription_relay.exceptions import MissingFileError, UploadStorageError
from transcription_relay.interfaces import TranscriptionService, UploadIntake
from transcription_relay.logging import setup_logging

logger = setup_logging()


class TranscriptionHandler:
    """Orchestrates upload intake, transcription and temp file cleanup."""

    def __init__(
        self,
        intake: UploadIntake,
        transcription_service: TranscriptionService,
    ):
        self._intake = intake
        self._transcription_service = transcription_service

    async def handle(self, upload: UploadFile | None) -> TranscriptionResult:
        """
        Transcribes one uploaded audio file.

        The stored file is discarded on every exit path, including cancellation
        when the client disconnects.

        Args:
            upload: The ``audio`` file part, or None when the request had none.

        Returns:
            TranscriptionResult with the provider text, empty if there is none.

        Raises:
            MissingFileError: If no file was attached.
            FileTooLargeError: If the upload exceeds the size limit.
            UploadStorageError: If the upload cannot be stored or read back.
            UpstreamRequestError: If the provider call fails.
        """
        if upload is None:
            logger.info("Transcription request without file")
            raise MissingFileError()

        stored = await self._intake.save(upload)
        try:
            with self._open(stored) as stream:
                result = await self._transcribe(stream, stored)
        finally:
            stored.discard()

        logger.info(
            "Transcription completed",
            extra={"file_name": stored.path.name, "size": stored.size_bytes},
        )
        return result

    @staticmethod
    def _open(stored: UploadedFile) -> BinaryIO:
        try:
            return stored.path.open("rb")
        except OSError as e:
            logger.exception(
                "Failed to open temp file",
                extra={"file_name": stored.path.name},
            )
            raise UploadStorageError(
                stored.path.name, e, message="Failed to read uploaded file"
            ) from e

    async def _transcribe(self, stream: BinaryIO, stored: UploadedFile) -> TranscriptionResult:
        """Calls the provider and translates any failure into an UpstreamRequestError."""
        try:
            return await self._transcription_service.transcribe(stream, stored.path.name)
        except Exception as e:
            failure = normalize_failure(e)
            logger.error(
                "Transcribe error",
                extra={
                    "file_name": stored.path.name,
                    "code": failure.code,
                    "error": failure.message,
                },
            )
            raise translate_failure(failure) from e
