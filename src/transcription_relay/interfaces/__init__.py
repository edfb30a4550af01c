"""Abstract interfaces for infrastructure dependencies."""

from .transcription_service import TranscriptionService
from .upload_intake import UploadIntake

__all__ = ["TranscriptionService", "UploadIntake"]
