"""FastAPI application entry point."""

from transcription_relay.app import create_app

app = create_app()
