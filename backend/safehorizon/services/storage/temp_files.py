"""
Temporary File Manager

Owns uploaded files for the duration of one job:
- persist: stream an UploadFile to a uniquely named file
- claim: scope that releases the file on every exit path
- release: best-effort delete that never raises
"""

import logging
import os
import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import aiofiles
from fastapi import UploadFile

from safehorizon.config.constants import DEFAULT_UPLOAD_SUFFIX, UPLOAD_CHUNK_SIZE
from safehorizon.config.settings import settings
from safehorizon.services.exceptions import FileSystemError

logger = logging.getLogger(__name__)


class TempFileManager:
    """Lifecycle of uploaded files in the uploads directory."""

    def __init__(self, upload_dir: Optional[str | Path] = None):
        self.upload_dir = Path(upload_dir or settings.UPLOADS_DIR)

    def _new_path(self, purpose: str, filename: Optional[str]) -> Path:
        suffix = Path(filename).suffix if filename else ""
        return self.upload_dir / f"{purpose}_{uuid.uuid4().hex}{suffix or DEFAULT_UPLOAD_SUFFIX}"

    async def persist(self, upload: UploadFile, purpose: str = "upload") -> Path:
        """
        Save an uploaded file to local storage.

        Args:
            upload: Incoming multipart file
            purpose: Name prefix (e.g., "audio", "video")

        Returns:
            Path of the written file. The caller owns it from here on.

        Raises:
            FileSystemError: the file could not be written
        """
        path = self._new_path(purpose, upload.filename)
        try:
            os.makedirs(self.upload_dir, exist_ok=True)
            async with aiofiles.open(path, "wb") as f:
                while content := await upload.read(UPLOAD_CHUNK_SIZE):
                    await f.write(content)
        except OSError as e:
            self.release(path)
            raise FileSystemError(f"Failed to save uploaded file: {e}") from e

        logger.info(f"Saved upload {upload.filename!r} to {path.name}")
        return path

    def read_bytes(self, path: Path) -> bytes:
        try:
            return path.read_bytes()
        except OSError as e:
            raise FileSystemError(f"Failed to read uploaded file: {e}") from e

    def release(self, path: Path) -> None:
        """Delete a temp file. Failures are logged, never raised."""
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.error(f"Cleanup error for {path}: {e}")

    @contextmanager
    def claim(self, path: Path) -> Iterator[Path]:
        """Hold a temp file for the duration of a job and release it on exit."""
        try:
            yield path
        finally:
            self.release(path)
