"""
Localization Pipelines Package

Audio: speech-to-text -> translation -> text-to-speech
Video: multimodal transcribe-and-translate
"""

from safehorizon.services.pipeline.audio import AudioLocalizationPipeline
from safehorizon.services.pipeline.jobs import (
    AudioLocalizationJob,
    AudioLocalizationResult,
    JobState,
    VideoLocalizationJob,
    VideoLocalizationResult,
)
from safehorizon.services.pipeline.video import VideoLocalizationPipeline

__all__ = [
    "AudioLocalizationPipeline",
    "VideoLocalizationPipeline",
    "AudioLocalizationJob",
    "AudioLocalizationResult",
    "VideoLocalizationJob",
    "VideoLocalizationResult",
    "JobState",
]
