"""
Video Localization Pipeline

States: UPLOADED -> PROCESSING -> DONE, or FAILED.
"""

import logging

from safehorizon.services.protocols import MediaTranslationProtocol
from safehorizon.services.pipeline.jobs import (
    JobState,
    VideoLocalizationJob,
    VideoLocalizationResult,
)
from safehorizon.services.storage import TempFileManager

logger = logging.getLogger(__name__)


class VideoLocalizationPipeline:
    """Hands an uploaded video to the multimodal adapter."""

    def __init__(self, media_service: MediaTranslationProtocol, files: TempFileManager):
        self.media_service = media_service
        self.files = files

    def run(self, job: VideoLocalizationJob) -> VideoLocalizationResult:
        # The media service deletes its provider-side copy itself
        with self.files.claim(job.input_file):
            try:
                job.transition(JobState.PROCESSING)
                transcript = self.media_service.transcribe_and_translate(
                    job.input_file,
                    job.source_language,
                    job.target_language,
                )
            except Exception as e:
                logger.error(f"[Job {job.job_id}] Video localization failed: {e}")
                job.fail(e)
                raise

        job.transcribed_text = transcript.transcribed_text
        job.translated_subtitles = transcript.translated_subtitles
        job.transition(JobState.DONE)
        return VideoLocalizationResult(
            transcribed_text=job.transcribed_text,
            translated_subtitles=job.translated_subtitles,
        )
