"""
Artifact Store

Writes generated audio to the public directory for client retrieval.
Artifacts are written once and never modified or deleted here.
"""

import logging
import os
import re
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from safehorizon.config.constants import ARTIFACT_EXTENSION
from safehorizon.config.settings import settings
from safehorizon.services.exceptions import FileSystemError

logger = logging.getLogger(__name__)


@dataclass
class GeneratedArtifact:
    """A retrievable generated file."""
    filename: str
    path: Path
    url: str


class ArtifactStore:
    """Append-only store for generated audio."""

    def __init__(self, public_dir: Optional[str | Path] = None, base_url: Optional[str] = None):
        self.public_dir = Path(public_dir or settings.PUBLIC_DIR)
        self.base_url = (base_url or settings.PUBLIC_BASE_URL).rstrip("/")

    def _write_new(self, data: bytes, purpose: str, language: str) -> Path:
        language = re.sub(r"[^A-Za-z0-9-]", "", language or "") or "xx"
        stamp = time.time_ns()
        while True:
            path = self.public_dir / f"{purpose}_{language}_{stamp}{ARTIFACT_EXTENSION}"
            try:
                # "xb" claims the name atomically; a taken name bumps the stamp
                with open(path, "xb") as f:
                    f.write(data)
                return path
            except FileExistsError:
                stamp += 1

    def save(self, data: bytes, purpose: str, language: str) -> GeneratedArtifact:
        """
        Write audio bytes as a new artifact.

        Raises:
            FileSystemError: the artifact could not be written
        """
        try:
            os.makedirs(self.public_dir, exist_ok=True)
            path = self._write_new(data, purpose, language)
        except OSError as e:
            raise FileSystemError(f"Failed to write generated audio: {e}") from e

        filename = path.name
        url = f"{self.base_url}/public/{filename}"
        logger.info(f"💾 Saved artifact {filename} ({len(data)} bytes)")
        return GeneratedArtifact(filename=filename, path=path, url=url)
