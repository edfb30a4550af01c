"""Stored filename derivation for uploaded audio."""

import re

DEFAULT_FILENAME = "audio.webm"

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_.\-]")


def sanitize_filename(original: str | None) -> str:
    """Replaces every character outside ``[A-Za-z0-9_.-]`` with an underscore."""
    return _UNSAFE_CHARS.sub("_", original or DEFAULT_FILENAME)


def stored_filename(
    original: str | None, received_at_ms: int, suffix: str | None = None
) -> str:
    """
    Builds the on-disk name for an upload.

    The name is the receipt timestamp in milliseconds, an underscore and the
    sanitized original name, so the extension survives for format detection.
    ``suffix`` is inserted after the timestamp to break same-millisecond
    collisions.

    Args:
        original: Client supplied filename, untrusted.
        received_at_ms: Receipt time in milliseconds since the epoch.
        suffix: Optional disambiguator, must itself be filename safe.

    Returns:
        A filename made only of ``[A-Za-z0-9_.-]`` characters.
    """
    safe = sanitize_filename(original)
    if suffix:
        return f"{received_at_ms}_{sanitize_filename(suffix)}_{safe}"
    return f"{received_at_ms}_{safe}"
