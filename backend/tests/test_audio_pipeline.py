"""
Tests for the audio localization pipeline (STT -> translation -> TTS)
"""
import pytest

from safehorizon.services.exceptions import (
    SynthesisError,
    TranscriptionError,
    UpstreamQuotaError,
    UpstreamUnavailableError,
)
from safehorizon.services.pipeline import AudioLocalizationJob, AudioLocalizationPipeline, JobState
from tests.helpers import StubSpeechService, StubTranslationService, StubTTSService


def build_pipeline(temp_files, artifacts, stt=None, translator=None, tts=None):
    return AudioLocalizationPipeline(
        speech_service=stt or StubSpeechService(),
        translation_service=translator or StubTranslationService(),
        tts_service=tts or StubTTSService(),
        files=temp_files,
        artifacts=artifacts,
    )


def artifact_files(artifacts):
    if not artifacts.public_dir.exists():
        return []
    return list(artifacts.public_dir.iterdir())


def test_successful_job_runs_all_stages_in_order(temp_files, artifacts, upload_file):
    stt = StubSpeechService(text="Hello")
    translator = StubTranslationService(text="नमस्ते")
    tts = StubTTSService(audio=b"ID3hindi")
    pipeline = build_pipeline(temp_files, artifacts, stt, translator, tts)
    job = AudioLocalizationJob(
        input_file=upload_file,
        target_language="hi",
        source_language="en-US",
        audio_format="mp3",
    )

    result = pipeline.run(job)

    assert result.transcribed_text == "Hello"
    assert result.translated_text == "नमस्ते"
    assert result.audio_url.startswith("http://testserver/public/localized_hi_")
    assert stt.calls == [(b"RIFF....WAVEfmt ", "en-US", "mp3")]
    assert translator.calls == [("Hello", "hi", "auto")]
    assert tts.calls == [("नमस्ते", "hi")]
    assert job.history == [
        JobState.UPLOADED,
        JobState.TRANSCRIBING,
        JobState.TRANSLATING,
        JobState.SYNTHESIZING,
        JobState.DONE,
    ]
    assert not upload_file.exists()
    [artifact] = artifact_files(artifacts)
    assert artifact.read_bytes() == b"ID3hindi"


def test_translation_failure_fails_job_without_artifact(temp_files, artifacts, upload_file):
    translator = StubTranslationService(error=UpstreamUnavailableError("Google Translation Service failed (Status: 503)."))
    tts = StubTTSService()
    pipeline = build_pipeline(temp_files, artifacts, translator=translator, tts=tts)
    job = AudioLocalizationJob(input_file=upload_file, target_language="hi")

    with pytest.raises(UpstreamUnavailableError):
        pipeline.run(job)

    assert job.state == JobState.FAILED
    assert job.history[-2] == JobState.TRANSLATING
    assert "503" in job.error
    assert tts.calls == []
    assert artifact_files(artifacts) == []
    assert not upload_file.exists()


@pytest.mark.parametrize("stage, error", [
    ("stt", TranscriptionError("bad audio")),
    ("stt", UpstreamQuotaError("quota")),
    ("tts", SynthesisError("tts down")),
    ("translator", RuntimeError("unexpected")),
])
def test_any_stage_failure_cleans_up(temp_files, artifacts, upload_file, stage, error):
    stubs = {
        "stt": StubSpeechService(),
        "translator": StubTranslationService(),
        "tts": StubTTSService(),
    }
    setattr(stubs[stage], "error", error)
    pipeline = build_pipeline(temp_files, artifacts, **stubs)
    job = AudioLocalizationJob(input_file=upload_file, target_language="fr")

    with pytest.raises(type(error)):
        pipeline.run(job)

    assert job.state == JobState.FAILED
    assert not upload_file.exists()
    assert artifact_files(artifacts) == []


def test_transcription_failure_skips_later_stages(temp_files, artifacts, upload_file):
    translator = StubTranslationService()
    tts = StubTTSService()
    pipeline = build_pipeline(
        temp_files, artifacts,
        stt=StubSpeechService(error=UpstreamQuotaError("quota")),
        translator=translator,
        tts=tts,
    )

    with pytest.raises(UpstreamQuotaError):
        pipeline.run(AudioLocalizationJob(input_file=upload_file, target_language="fr"))

    assert translator.calls == []
    assert tts.calls == []


def test_finished_job_cannot_transition(upload_file):
    job = AudioLocalizationJob(input_file=upload_file, target_language="fr")
    job.transition(JobState.DONE)

    with pytest.raises(RuntimeError):
        job.transition(JobState.TRANSCRIBING)
