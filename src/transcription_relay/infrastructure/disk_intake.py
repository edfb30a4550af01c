"""Local disk implementation of the UploadIntake interface."""

import secrets
import time
from collections.abc import Callable
from pathlib import Path
from typing import BinaryIO

from fastapi.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from transcription_relay.domain import UploadedFile, stored_filename
from transcription_relay.exceptions import FileTooLargeError, UploadStorageError
from transcription_relay.interfaces import UploadIntake
from transcription_relay.logging import setup_logging

logger = setup_logging()

CHUNK_SIZE = 1024 * 1024


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class DiskUploadIntake(UploadIntake):
    """Streams uploads into the scratch directory under timestamped names."""

    def __init__(
        self,
        directory: Path,
        max_bytes: int,
        clock: Callable[[], int] = _now_ms,
    ):
        self._directory = directory
        self._max_bytes = max_bytes
        self._clock = clock

    async def save(self, upload: UploadFile) -> UploadedFile:
        if upload.size is not None and upload.size > self._max_bytes:
            logger.warning(
                "Upload rejected, declared size over limit",
                extra={"file_name": upload.filename, "size": upload.size},
            )
            raise FileTooLargeError(self._max_bytes)

        received_at_ms = self._clock()
        try:
            path, handle = await run_in_threadpool(
                self._create, upload.filename, received_at_ms
            )
        except OSError as e:
            logger.exception(
                "Failed to create temp file",
                extra={"file_name": upload.filename},
            )
            raise UploadStorageError(upload.filename or "", e) from e

        try:
            size = await self._copy(upload, handle)
        except BaseException:
            self._abandon(path, handle)
            raise
        handle.close()

        stored = UploadedFile(
            path=path,
            original_name=upload.filename or "",
            size_bytes=size,
        )
        logger.info(
            "Upload stored",
            extra={
                "file_name": path.name,
                "original_name": stored.original_name,
                "size": size,
            },
        )
        return stored

    def _create(self, original_name: str | None, received_at_ms: int) -> tuple[Path, BinaryIO]:
        """Opens the stored file with exclusive creation, adding a suffix on collision."""
        path = self._directory / stored_filename(original_name, received_at_ms)
        try:
            return path, path.open("xb")
        except FileExistsError:
            path = self._directory / stored_filename(
                original_name, received_at_ms, suffix=secrets.token_hex(4)
            )
            logger.info("Stored filename collision", extra={"file_name": path.name})
            return path, path.open("xb")

    async def _copy(self, upload: UploadFile, handle: BinaryIO) -> int:
        size = 0
        while chunk := await upload.read(CHUNK_SIZE):
            size += len(chunk)
            if size > self._max_bytes:
                logger.warning(
                    "Upload rejected, size over limit",
                    extra={"file_name": upload.filename, "max_bytes": self._max_bytes},
                )
                raise FileTooLargeError(self._max_bytes)
            try:
                await run_in_threadpool(handle.write, chunk)
            except OSError as e:
                logger.exception(
                    "Failed to write temp file",
                    extra={"file_name": upload.filename},
                )
                raise UploadStorageError(upload.filename or "", e) from e
        return size

    @staticmethod
    def _abandon(path: Path, handle: BinaryIO) -> None:
        """Closes and removes a partially written file."""
        handle.close()
        try:
            path.unlink()
        except OSError:
            logger.exception("Failed to delete temp file", extra={"file_name": path.name})
