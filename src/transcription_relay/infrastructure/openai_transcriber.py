"""OpenAI implementation of the TranscriptionService interface."""

from typing import BinaryIO

import openai
from openai import AsyncOpenAI

from transcription_relay.config import OpenAIConfig
from transcription_relay.domain import TranscriptionResult
from transcription_relay.exceptions import TranscriptionError
from transcription_relay.interfaces import TranscriptionService
from transcription_relay.logging import setup_logging

logger = setup_logging()


def build_openai_client(config: OpenAIConfig) -> AsyncOpenAI:
    """Creates the async OpenAI client; retries are disabled and a timeout is always set."""
    return AsyncOpenAI(
        api_key=config.api_key,
        base_url=config.base_url,
        timeout=config.timeout_seconds,
        max_retries=0,
    )


class OpenAITranscriber(TranscriptionService):
    """Handles audio transcription using the OpenAI audio API."""

    def __init__(self, client: AsyncOpenAI, model: str):
        self._client = client
        self._model = model

    async def transcribe(self, stream: BinaryIO, file_name: str) -> TranscriptionResult:
        """
        Sends the audio stream to OpenAI and returns the recognized text.

        A missing API key fails as a 401 without a network call. Provider
        status codes are kept on the raised TranscriptionError.
        """
        if not self._client.api_key:
            logger.error("OPENAI_API_KEY is not configured")
            raise TranscriptionError(
                file_name,
                Exception("OPENAI_API_KEY is not configured"),
                status_code=401,
            )

        try:
            transcription = await self._client.audio.transcriptions.create(
                file=(file_name, stream),
                model=self._model,
            )
        except openai.APIStatusError as e:
            logger.exception(
                "OpenAI transcription rejected",
                extra={"file_name": file_name, "status_code": e.status_code},
            )
            raise TranscriptionError(file_name, e, status_code=e.status_code) from e
        except Exception as e:
            logger.exception(
                "OpenAI transcription failed",
                extra={"file_name": file_name},
            )
            raise TranscriptionError(file_name, e) from e

        text = getattr(transcription, "text", None) or ""
        logger.info(
            "Audio transcription successful",
            extra={"file_name": file_name, "text_length": len(text)},
        )
        return TranscriptionResult(text=text)

    async def aclose(self) -> None:
        await self._client.close()
