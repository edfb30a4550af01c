"""Domain layer exports."""

from .failures import UpstreamFailure, normalize_failure, translate_failure
from .filenames import DEFAULT_FILENAME, sanitize_filename, stored_filename
from .models import TranscriptionResult, UploadedFile

__all__ = [
    "DEFAULT_FILENAME",
    "TranscriptionResult",
    "UploadedFile",
    "UpstreamFailure",
    "normalize_failure",
    "sanitize_filename",
    "stored_filename",
    "translate_failure",
]
