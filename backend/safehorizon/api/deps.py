"""
Dependency providers for the API routers.

Adapters are constructed lazily, once per process, from settings. Tests
replace them through app.dependency_overrides.
"""
import asyncio
import functools
from typing import Any, Callable, TypeVar

from fastapi import Depends

from safehorizon.services.gcp import (
    GCPSpeechService,
    GCPTextToSpeechService,
    GoogleWebTranslationService,
)
from safehorizon.services.gemini import GeminiMediaService
from safehorizon.services.pipeline import AudioLocalizationPipeline, VideoLocalizationPipeline
from safehorizon.services.protocols import (
    MediaTranslationProtocol,
    SpeechToTextProtocol,
    TextToSpeechProtocol,
    TranslationProtocol,
)
from safehorizon.services.storage import ArtifactStore, TempFileManager

T = TypeVar("T")


async def run_blocking(func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """Run a blocking adapter/pipeline call without blocking the event loop."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, functools.partial(func, *args, **kwargs))


@functools.lru_cache(maxsize=1)
def get_translation_service() -> GoogleWebTranslationService:
    return GoogleWebTranslationService()


def close_translation_service() -> None:
    """Close the cached translation HTTP client, if one was ever built."""
    if get_translation_service.cache_info().currsize:
        get_translation_service().close()
        get_translation_service.cache_clear()


@functools.lru_cache(maxsize=1)
def get_speech_service() -> GCPSpeechService:
    return GCPSpeechService()


@functools.lru_cache(maxsize=1)
def get_tts_service() -> GCPTextToSpeechService:
    return GCPTextToSpeechService()


@functools.lru_cache(maxsize=1)
def get_media_service() -> GeminiMediaService:
    return GeminiMediaService()


def get_temp_files() -> TempFileManager:
    return TempFileManager()


def get_artifact_store() -> ArtifactStore:
    return ArtifactStore()


def get_audio_pipeline(
    speech_service: SpeechToTextProtocol = Depends(get_speech_service),
    translation_service: TranslationProtocol = Depends(get_translation_service),
    tts_service: TextToSpeechProtocol = Depends(get_tts_service),
    files: TempFileManager = Depends(get_temp_files),
    artifacts: ArtifactStore = Depends(get_artifact_store),
) -> AudioLocalizationPipeline:
    return AudioLocalizationPipeline(
        speech_service=speech_service,
        translation_service=translation_service,
        tts_service=tts_service,
        files=files,
        artifacts=artifacts,
    )


def get_video_pipeline(
    media_service: MediaTranslationProtocol = Depends(get_media_service),
    files: TempFileManager = Depends(get_temp_files),
) -> VideoLocalizationPipeline:
    return VideoLocalizationPipeline(media_service=media_service, files=files)
