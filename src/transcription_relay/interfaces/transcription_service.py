"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod
from typing import BinaryIO

from transcription_relay.domain import TranscriptionResult


class TranscriptionService(ABC):
    """Abstract base class for audio transcription backends."""

    @abstractmethod
    async def transcribe(self, stream: BinaryIO, file_name: str) -> TranscriptionResult:
        """
        Transcribes an audio stream.

        Args:
            stream: Readable binary stream positioned at the start of the audio.
            file_name: Name sent to the provider; its extension identifies the format.

        Returns:
            TranscriptionResult with the recognized text, empty if there is none.

        Raises:
            TranscriptionError: If transcription fails.
        """

    async def aclose(self) -> None:
        """Releases network resources held by the backend."""
