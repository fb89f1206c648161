"""
Tests for the video localization pipeline
"""
import pytest

from safehorizon.services.exceptions import MultimodalProcessingError
from safehorizon.services.pipeline import JobState, VideoLocalizationJob, VideoLocalizationPipeline
from tests.helpers import StubMediaService


def test_successful_video_job(temp_files, upload_file):
    media = StubMediaService(response="Hello world\n\nनमस्ते दुनिया")
    pipeline = VideoLocalizationPipeline(media_service=media, files=temp_files)
    job = VideoLocalizationJob(input_file=upload_file, target_language="hi", source_language="en")

    result = pipeline.run(job)

    assert result.transcribed_text == "Hello world\n\nनमस्ते दुनिया"
    assert result.translated_subtitles == "नमस्ते दुनिया"
    assert result.audio_url is None
    assert result.download_link is None
    assert job.history == [JobState.UPLOADED, JobState.PROCESSING, JobState.DONE]
    assert media.calls == [(upload_file, "en", "hi")]
    assert media.remote_files == set()
    assert not upload_file.exists()


def test_single_block_response_is_duplicated(temp_files, upload_file):
    media = StubMediaService(response="Bonjour tout le monde")
    pipeline = VideoLocalizationPipeline(media_service=media, files=temp_files)

    result = pipeline.run(VideoLocalizationJob(input_file=upload_file, target_language="fr"))

    assert result.translated_subtitles == "Bonjour tout le monde"
    assert result.transcribed_text == result.translated_subtitles


def test_failed_video_job_releases_local_and_remote_copies(temp_files, upload_file):
    media = StubMediaService(error=MultimodalProcessingError("Media transcription failed: 500"))
    pipeline = VideoLocalizationPipeline(media_service=media, files=temp_files)
    job = VideoLocalizationJob(input_file=upload_file, target_language="fr")

    with pytest.raises(MultimodalProcessingError):
        pipeline.run(job)

    assert job.state == JobState.FAILED
    assert media.deleted == ["files/1"]
    assert media.remote_files == set()
    assert not upload_file.exists()
