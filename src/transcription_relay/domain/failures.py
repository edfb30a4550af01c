"""Normalization and translation of transcription provider failures."""

from pydantic import BaseModel

from transcription_relay.exceptions import UpstreamRequestError

UNKNOWN_FAILURE_CODE = 500

ACCEPTED_FORMATS = "mp3, m4a, wav, webm, ogg, or flac"

UPSTREAM_ERROR_MESSAGE = "Upstream error calling OpenAI."
UPSTREAM_ERROR_STATUS = 502

# upstream code -> (client status, client message)
FAILURE_RESPONSES: dict[int, tuple[int, str]] = {
    429: (
        429,
        "OpenAI quota exceeded or billing not enabled. Check your account limits.",
    ),
    401: (401, "Invalid or missing OPENAI_API_KEY."),
    400: (
        400,
        f"Unrecognized/unsupported audio format. Try {ACCEPTED_FORMATS}.",
    ),
}


class UpstreamFailure(BaseModel, frozen=True):
    """A provider failure reduced to a status code and a message."""

    code: int
    message: str


def _status_of(error: BaseException) -> int | None:
    for attr in ("status_code", "status"):
        value = getattr(error, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    return None


def _causes(error: BaseException):
    seen: set[int] = set()
    current: BaseException | None = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = getattr(current, "cause", None) or current.__cause__


def normalize_failure(error: BaseException) -> UpstreamFailure:
    """
    Maps any caught exception to an UpstreamFailure.

    The exception and its chain of causes are probed for ``status_code`` and
    then ``status``; the first integer found wins, 500 without one. The
    message always comes from the innermost cause, which is the provider's own
    error text rather than a wrapper naming the stored file.
    """
    code = None
    innermost = error
    for current in _causes(error):
        if code is None:
            code = _status_of(current)
        innermost = current
    return UpstreamFailure(
        code=UNKNOWN_FAILURE_CODE if code is None else code,
        message=str(innermost) or type(innermost).__name__,
    )


def translate_failure(failure: UpstreamFailure) -> UpstreamRequestError:
    """Looks the failure up in FAILURE_RESPONSES; anything else becomes a 502."""
    mapped = FAILURE_RESPONSES.get(failure.code)
    if mapped is not None:
        status_code, message = mapped
        return UpstreamRequestError(status_code, message)
    return UpstreamRequestError(
        UPSTREAM_ERROR_STATUS, UPSTREAM_ERROR_MESSAGE, details=failure.message
    )
