"""Application configuration loaded from environment variables."""

import os
from pathlib import Path

from pydantic import BaseModel

DEFAULT_MAX_UPLOAD_MB = 50


class ServerConfig(BaseModel, frozen=True):
    """HTTP server configuration."""

    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: tuple[str, ...] = ("*",)
    tracing_enabled: bool = False


class UploadConfig(BaseModel, frozen=True):
    """Scratch storage for incoming audio files."""

    directory: Path = Path("uploads")
    max_bytes: int = DEFAULT_MAX_UPLOAD_MB * 1024 * 1024


class OpenAIConfig(BaseModel, frozen=True):
    """OpenAI transcription API configuration."""

    api_key: str = ""
    model: str = "whisper-1"
    timeout_seconds: float = 120.0
    base_url: str | None = None


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    server: ServerConfig = ServerConfig()
    upload: UploadConfig = UploadConfig()
    openai: OpenAIConfig = OpenAIConfig()


def _split_origins(value: str) -> tuple[str, ...]:
    origins = tuple(origin.strip() for origin in value.split(",") if origin.strip())
    return origins or ("*",)


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    max_upload_mb = int(os.getenv("MAX_UPLOAD_MB", str(DEFAULT_MAX_UPLOAD_MB)))
    return AppConfig(
        server=ServerConfig(
            host=os.getenv("HOST", "0.0.0.0"),
            port=os.getenv("PORT", "5000"),
            cors_origins=_split_origins(os.getenv("CORS_ORIGIN", "*")),
            tracing_enabled=os.getenv("TRACING_ENABLED", "false"),
        ),
        upload=UploadConfig(
            directory=Path(os.getenv("UPLOAD_DIR", "uploads")),
            max_bytes=max_upload_mb * 1024 * 1024,
        ),
        openai=OpenAIConfig(
            api_key=os.getenv("OPENAI_API_KEY", ""),
            model=os.getenv("OPENAI_MODEL", "whisper-1"),
            timeout_seconds=os.getenv("OPENAI_TIMEOUT_SECONDS", "120"),
            base_url=os.getenv("OPENAI_BASE_URL") or None,
        ),
    )
