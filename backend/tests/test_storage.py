"""
Tests for temporary upload files and generated artifacts
"""
import io
from unittest.mock import patch

import pytest
from starlette.datastructures import UploadFile

from safehorizon.services.exceptions import FileSystemError
from safehorizon.services.storage import ArtifactStore


@pytest.mark.asyncio
async def test_persist_writes_uniquely_named_file(temp_files):
    first = await temp_files.persist(UploadFile(file=io.BytesIO(b"abc"), filename="speech.wav"), purpose="audio")
    second = await temp_files.persist(UploadFile(file=io.BytesIO(b"def"), filename="speech.wav"), purpose="audio")

    assert first != second
    assert first.read_bytes() == b"abc"
    assert first.suffix == ".wav"
    assert first.name.startswith("audio_")
    assert first.parent == temp_files.upload_dir


@pytest.mark.asyncio
async def test_persist_without_filename_uses_default_suffix(temp_files):
    path = await temp_files.persist(UploadFile(file=io.BytesIO(b"x"), filename=None))

    assert path.suffix == ".bin"


def test_release_is_best_effort(temp_files, upload_file):
    temp_files.release(upload_file)
    assert not upload_file.exists()

    # Second release of a missing file must not raise
    temp_files.release(upload_file)


def test_claim_releases_on_exception(temp_files, upload_file):
    with pytest.raises(RuntimeError):
        with temp_files.claim(upload_file):
            raise RuntimeError("stage failed")

    assert not upload_file.exists()


def test_read_bytes_of_missing_file_raises(temp_files, tmp_path):
    with pytest.raises(FileSystemError):
        temp_files.read_bytes(tmp_path / "missing.wav")


def test_artifacts_never_collide(artifacts):
    names = {artifacts.save(b"mp3", "localized", "hi").filename for _ in range(20)}

    assert len(names) == 20
    for name in names:
        assert name.startswith("localized_hi_")
        assert name.endswith(".mp3")


def test_artifact_url_and_content(artifacts):
    artifact = artifacts.save(b"ID3data", "tts_output", "fr")

    assert artifact.url == f"http://testserver/public/{artifact.filename}"
    assert artifact.path.read_bytes() == b"ID3data"


def test_artifact_language_is_sanitized(artifacts):
    artifact = artifacts.save(b"x", "localized", "../../etc")

    assert "/" not in artifact.filename
    assert artifact.path.parent == artifacts.public_dir


def test_artifact_write_failure_raises(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("file")
    store = ArtifactStore(blocker, base_url="http://testserver")

    with pytest.raises(FileSystemError):
        store.save(b"x", "localized", "hi")


def test_taken_artifact_name_bumps_stamp(artifacts):
    artifacts.public_dir.mkdir(parents=True)
    taken = artifacts.public_dir / "localized_hi_1000.mp3"
    taken.write_bytes(b"earlier")

    with patch("safehorizon.services.storage.artifacts.time.time_ns", return_value=1000):
        artifact = artifacts.save(b"later", "localized", "hi")

    assert artifact.filename == "localized_hi_1001.mp3"
    assert taken.read_bytes() == b"earlier"
    assert artifact.path.read_bytes() == b"later"
