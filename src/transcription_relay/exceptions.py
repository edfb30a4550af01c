"""Custom exceptions for the transcription relay."""


class RelayError(Exception):
    """Base class for failures that are reported to the client."""

    status_code = 500

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(message)


class MissingFileError(RelayError):
    """Raised when a transcription request carries no audio file."""

    status_code = 400

    def __init__(self):
        super().__init__("No file uploaded")


class FileTooLargeError(RelayError):
    """Raised when an upload exceeds the configured size limit."""

    status_code = 413

    def __init__(self, max_bytes: int):
        self.max_bytes = max_bytes
        if max_bytes % (1024 * 1024) == 0:
            limit = f"{max_bytes // (1024 * 1024)} MB"
        else:
            limit = f"{max_bytes} bytes"
        super().__init__("File too large", details=f"Maximum upload size is {limit}")


class UploadStorageError(RelayError):
    """Raised when an uploaded file cannot be written to or read back from the scratch directory."""

    status_code = 500

    def __init__(
        self,
        file_name: str,
        cause: Exception | None = None,
        message: str = "Failed to store uploaded file",
    ):
        self.file_name = file_name
        self.cause = cause
        super().__init__(message)


class UpstreamRequestError(RelayError):
    """Raised when the transcription provider call fails; carries the mapped status."""

    def __init__(self, status_code: int, message: str, details: str | None = None):
        self.status_code = status_code
        super().__init__(message, details=details)


class TranscriptionError(Exception):
    """Raised when audio transcription fails."""

    def __init__(
        self,
        file_name: str,
        cause: Exception | None = None,
        status_code: int | None = None,
    ):
        self.file_name = file_name
        self.cause = cause
        self.status_code = status_code
        super().__init__(f"Failed to transcribe audio file '{file_name}'")
