"""Concrete implementations of infrastructure interfaces."""

from .disk_intake import DiskUploadIntake
from .openai_transcriber import OpenAITranscriber, build_openai_client
from .scratch import ensure_scratch_dir

__all__ = [
    "DiskUploadIntake",
    "OpenAITranscriber",
    "build_openai_client",
    "ensure_scratch_dir",
]
