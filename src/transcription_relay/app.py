"""FastAPI application factory."""

from contextlib import asynccontextmanager

from ddtrace import patch
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from transcription_relay.config import AppConfig, load_config
from transcription_relay.dependencies import build_intake, build_transcription_service
from transcription_relay.exceptions import RelayError
from transcription_relay.handlers import TranscriptionHandler
from transcription_relay.interfaces import TranscriptionService
from transcription_relay.logging import setup_logging
from transcription_relay.response_models import ErrorResponse
from transcription_relay.routes import health_router, transcribe_router

logger = setup_logging()


def _error_response(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def _relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
    return _error_response(exc.status_code, exc.message, exc.details)


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(exc.status_code, str(exc.detail))


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error_response(400, "Invalid request", details=str(exc.errors()))


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", extra={"path": request.url.path})
    return _error_response(500, "Internal server error")


def create_app(
    config: AppConfig | None = None,
    transcription_service: TranscriptionService | None = None,
) -> FastAPI:
    """
    Builds the relay application.

    The scratch directory is created here, once per application. Passing a
    ``transcription_service`` replaces the OpenAI client, which is how the
    tests substitute a fake provider.
    """
    config = config or load_config()

    if config.server.tracing_enabled:
        patch(fastapi=True, openai=True)

    if not config.openai.api_key:
        logger.warning("OPENAI_API_KEY is not set; transcription requests will fail with 401")

    service = transcription_service or build_transcription_service(config)
    handler = TranscriptionHandler(build_intake(config), service)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "Transcription relay started",
            extra={"port": config.server.port, "upload_dir": str(config.upload.directory)},
        )
        yield
        await service.aclose()
        logger.info("Transcription relay stopped")

    app = FastAPI(title="Transcription Relay", lifespan=lifespan)
    app.state.config = config
    app.state.transcription_handler = handler

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.server.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RelayError, _relay_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)

    app.include_router(health_router)
    app.include_router(transcribe_router)
    return app
