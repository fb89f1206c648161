"""
Storage Package

Temporary upload files and generated artifacts on local disk.
"""

from safehorizon.services.storage.artifacts import ArtifactStore, GeneratedArtifact
from safehorizon.services.storage.temp_files import TempFileManager

__all__ = [
    "ArtifactStore",
    "GeneratedArtifact",
    "TempFileManager",
]
