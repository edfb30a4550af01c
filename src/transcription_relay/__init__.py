"""Transcription relay: forwards uploaded audio to a speech-to-text provider."""

from transcription_relay.config import AppConfig, load_config
from transcription_relay.logging import setup_logging

__all__ = ["AppConfig", "load_config", "setup_logging"]
