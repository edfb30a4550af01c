"""Scratch directory initialization."""

from pathlib import Path

from transcription_relay.logging import setup_logging

logger = setup_logging()


def ensure_scratch_dir(directory: Path) -> Path:
    """
    Creates the scratch directory, including parents, if it does not exist.

    Safe to call repeatedly. Relative paths are resolved against the current
    working directory.

    Returns:
        The absolute path of the directory.
    """
    path = Path(directory).resolve()
    if not path.is_dir():
        path.mkdir(parents=True, exist_ok=True)
        logger.info("Created uploads directory", extra={"path": str(path)})
    return path
