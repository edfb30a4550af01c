"""Shared pytest fixtures for the transcription relay tests.

The provider is replaced with an in-process fake so no test touches the
network, and every test gets its own scratch directory.
"""

from pathlib import Path
from types import SimpleNamespace

import httpx
import pytest
from fastapi.testclient import TestClient

from transcription_relay.app import create_app
from transcription_relay.config import AppConfig, OpenAIConfig, UploadConfig
from transcription_relay.domain import TranscriptionResult
from transcription_relay.interfaces import TranscriptionService


class FakeTranscriptionService(TranscriptionService):
    """Records calls and returns a canned result or raises a canned error."""

    def __init__(self):
        self.result = TranscriptionResult(text="hello world")
        self.error: BaseException | None = None
        self.calls: list[dict] = []
        self.closed = False

    async def transcribe(self, stream, file_name):
        self.calls.append(
            {
                "file_name": file_name,
                "content": stream.read(),
                "path_existed": Path(stream.name).exists(),
                "path": Path(stream.name),
            }
        )
        if self.error is not None:
            raise self.error
        return self.result

    async def aclose(self):
        self.closed = True


class UpstreamStatusError(Exception):
    """Provider failure exposing an HTTP status the way SDK errors do."""

    def __init__(self, message: str, status_code: int | None = None, status: int | None = None):
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code
        if status is not None:
            self.status = status


OPENAI_REQUEST = httpx.Request("POST", "https://api.openai.com/v1/audio/transcriptions")


class FakeTranscriptions:
    """Stands in for ``client.audio.transcriptions`` of the OpenAI SDK."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


class FakeOpenAIClient:
    def __init__(self, transcriptions, api_key="sk-test"):
        self.api_key = api_key
        self.audio = SimpleNamespace(transcriptions=transcriptions)
        self.closed = False

    async def close(self):
        self.closed = True


def make_status_error(cls, status_code: int, message: str):
    """Builds an OpenAI SDK status error the way the client raises it."""
    response = httpx.Response(status_code, request=OPENAI_REQUEST)
    return cls(message, response=response, body=None)


@pytest.fixture
def scratch_dir(tmp_path):
    """Scratch directory path; created by the application factory."""
    return tmp_path / "uploads"


@pytest.fixture
def app_config(scratch_dir):
    return AppConfig(
        upload=UploadConfig(directory=scratch_dir),
        openai=OpenAIConfig(api_key="test-key"),
    )


@pytest.fixture
def fake_service():
    return FakeTranscriptionService()


@pytest.fixture
def client(app_config, fake_service):
    """Create a FastAPI test client wired to the fake transcription service.

    Yields:
        TestClient: client for an app built from ``app_config``.
    """
    app = create_app(app_config, transcription_service=fake_service)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_audio():
    return b"RIFF fake webm audio payload " * 64
