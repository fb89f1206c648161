import os
import sys
import tempfile
from pathlib import Path

import pytest

# Add project root (1 level up from tests/) to sys.path so tests can import 'safehorizon'
root = Path(__file__).resolve().parents[1]
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

# Point storage at throwaway directories before settings are imported
_scratch = Path(tempfile.mkdtemp(prefix="safehorizon-tests-"))
os.environ.setdefault("UPLOADS_DIR", str(_scratch / "uploads"))
os.environ.setdefault("PUBLIC_DIR", str(_scratch / "public"))
os.environ.setdefault("PUBLIC_BASE_URL", "http://testserver")


from safehorizon.services.storage import ArtifactStore, TempFileManager


@pytest.fixture
def temp_files(tmp_path):
    return TempFileManager(tmp_path / "uploads")


@pytest.fixture
def artifacts(tmp_path):
    return ArtifactStore(tmp_path / "public", base_url="http://testserver")


@pytest.fixture
def upload_file(temp_files):
    """An audio/video file already persisted in the uploads dir."""
    temp_files.upload_dir.mkdir(parents=True, exist_ok=True)
    path = temp_files.upload_dir / "audio_test.wav"
    path.write_bytes(b"RIFF....WAVEfmt ")
    return path
