"""Domain models for the transcription relay."""

from pathlib import Path

from pydantic import BaseModel, PrivateAttr

from transcription_relay.logging import setup_logging

logger = setup_logging()


class TranscriptionResult(BaseModel, frozen=True):
    """Text returned by the transcription provider."""

    text: str = ""


class UploadedFile(BaseModel):
    """
    An audio file written to the scratch directory for one request.

    The request handler owns the file until it calls ``discard``, which runs on
    every exit path.
    """

    path: Path
    original_name: str
    size_bytes: int

    _discarded: bool = PrivateAttr(default=False)

    @property
    def discarded(self) -> bool:
        return self._discarded

    def discard(self) -> None:
        """
        Deletes the file from disk.

        Only the first call attempts the deletion. Failures are logged and
        never raised.
        """
        if self._discarded:
            return
        self._discarded = True

        try:
            self.path.unlink()
        except FileNotFoundError:
            logger.warning(
                "Temp file already removed",
                extra={"file_name": self.path.name},
            )
        except OSError:
            logger.exception(
                "Failed to delete temp file",
                extra={"file_name": self.path.name},
            )
        else:
            logger.info("Temp file deleted", extra={"file_name": self.path.name})
