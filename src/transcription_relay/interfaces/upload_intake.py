"""Abstract interface for persisting incoming uploads."""

from abc import ABC, abstractmethod

from starlette.datastructures import UploadFile

from transcription_relay.domain import UploadedFile


class UploadIntake(ABC):
    """Abstract base class for upload intake facilities."""

    @abstractmethod
    async def save(self, upload: UploadFile) -> UploadedFile:
        """
        Writes an uploaded file to transient storage.

        Args:
            upload: The multipart file part received by the endpoint.

        Returns:
            The stored file, owned by the caller until it is discarded.

        Raises:
            FileTooLargeError: If the upload exceeds the size limit.
            UploadStorageError: If the file cannot be written.
        """
