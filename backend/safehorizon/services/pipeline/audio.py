"""
Audio Localization Pipeline

Coordinates Speech-to-Text, Translation, and Text-to-Speech for one
uploaded audio file.

States: UPLOADED -> TRANSCRIBING -> TRANSLATING -> SYNTHESIZING -> DONE,
with FAILED reachable from any of them. Stages never run out of order
and are never retried.
"""

import logging

from safehorizon.config.constants import ARTIFACT_LOCALIZED, AUTO_LANGUAGE
from safehorizon.services.protocols import (
    SpeechToTextProtocol,
    TextToSpeechProtocol,
    TranslationProtocol,
)
from safehorizon.services.pipeline.jobs import (
    AudioLocalizationJob,
    AudioLocalizationResult,
    JobState,
)
from safehorizon.services.storage import ArtifactStore, TempFileManager

logger = logging.getLogger(__name__)


class AudioLocalizationPipeline:
    """Thin composition of injected STT, translation and TTS adapters."""

    def __init__(
        self,
        speech_service: SpeechToTextProtocol,
        translation_service: TranslationProtocol,
        tts_service: TextToSpeechProtocol,
        files: TempFileManager,
        artifacts: ArtifactStore,
    ):
        self.speech_service = speech_service
        self.translation_service = translation_service
        self.tts_service = tts_service
        self.files = files
        self.artifacts = artifacts

    def run(self, job: AudioLocalizationJob) -> AudioLocalizationResult:
        """
        Run transcription -> translation -> speech synthesis for a job.

        The input file is released on every exit path. The output artifact
        is written only after synthesis succeeded, so a failed job leaves
        nothing behind.

        Raises:
            Whatever the failing stage raised, after the job moved to FAILED.
        """
        with self.files.claim(job.input_file):
            try:
                audio = self.files.read_bytes(job.input_file)

                # 1. Transcribe
                job.transition(JobState.TRANSCRIBING)
                logger.info(f"[Job {job.job_id}] Starting transcription...")
                job.transcribed_text = self.speech_service.transcribe(
                    audio,
                    job.source_language,
                    job.audio_format,
                )

                # 2. Translate
                job.transition(JobState.TRANSLATING)
                logger.info(f"[Job {job.job_id}] Translating text to {job.target_language}...")
                translation = self.translation_service.translate(
                    job.transcribed_text,
                    job.target_language,
                    AUTO_LANGUAGE,
                )
                job.translated_text = translation.translated_text

                # 3. Synthesize
                job.transition(JobState.SYNTHESIZING)
                logger.info(f"[Job {job.job_id}] Starting TTS synthesis...")
                synthesized = self.tts_service.synthesize(job.translated_text, job.target_language)
                artifact = self.artifacts.save(synthesized, ARTIFACT_LOCALIZED, job.target_language)
                job.output_audio_url = artifact.url
            except Exception as e:
                logger.error(f"[Job {job.job_id}] Audio localization failed in {job.state.value}: {e}")
                job.fail(e)
                raise

        job.transition(JobState.DONE)
        return AudioLocalizationResult(
            transcribed_text=job.transcribed_text,
            translated_text=job.translated_text,
            audio_url=job.output_audio_url,
        )
