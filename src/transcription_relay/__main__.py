"""Runs the relay with uvicorn."""

import uvicorn

from transcription_relay.app import create_app
from transcription_relay.config import load_config


def main():
    """Starts the HTTP server on the configured host and port."""
    config = load_config()
    uvicorn.run(
        create_app(config),
        host=config.server.host,
        port=config.server.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
