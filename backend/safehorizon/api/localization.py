"""
Localization API - audio and video localization jobs

Implements:
- Audio localization (speech-to-text -> translation -> text-to-speech)
- Video localization (multimodal transcription + translated subtitles)
"""
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from safehorizon.api.deps import (
    get_audio_pipeline,
    get_temp_files,
    get_video_pipeline,
    run_blocking,
)
from safehorizon.config.constants import AUTO_LANGUAGE, SUPPORTED_AUDIO_FORMATS
from safehorizon.schemas.base import ERROR_RESPONSES
from safehorizon.schemas.localization import AudioLocalizationResponse, VideoLocalizationResponse
from safehorizon.services.exceptions import ValidationError
from safehorizon.services.gcp.speech import audio_format_from_upload, is_supported_audio_format
from safehorizon.services.pipeline import (
    AudioLocalizationJob,
    AudioLocalizationPipeline,
    VideoLocalizationJob,
    VideoLocalizationPipeline,
)
from safehorizon.services.storage import TempFileManager

router = APIRouter()


@router.post("/localize/audio", response_model=AudioLocalizationResponse, responses=ERROR_RESPONSES)
async def localize_audio(
    audio: Optional[UploadFile] = File(None),
    target_language: Optional[str] = Form(None, alias="targetLanguage"),
    source_language: Optional[str] = Form(None, alias="sourceLanguage"),
    files: TempFileManager = Depends(get_temp_files),
    pipeline: AudioLocalizationPipeline = Depends(get_audio_pipeline),
):
    """
    Localize an uploaded audio file.

    The upload is deleted when the job ends, whatever the outcome.
    """
    if audio is None:
        raise ValidationError("No audio file uploaded.")
    if not target_language:
        raise ValidationError("Missing target language.")

    audio_format = audio_format_from_upload(audio.filename, audio.content_type)
    if not is_supported_audio_format(audio_format):
        raise ValidationError(
            f"Unsupported audio format '{audio_format or 'unknown'}'. "
            f"Supported: {', '.join(SUPPORTED_AUDIO_FORMATS)}."
        )

    input_file = await files.persist(audio, purpose="audio")
    job = AudioLocalizationJob(
        input_file=input_file,
        target_language=target_language,
        source_language=source_language or AUTO_LANGUAGE,
        audio_format=audio_format,
    )
    result = await run_blocking(pipeline.run, job)

    return AudioLocalizationResponse(
        transcribed_text=result.transcribed_text,
        translated_text=result.translated_text,
        audio_url=result.audio_url,
    )


@router.post("/localize/video", response_model=VideoLocalizationResponse, responses=ERROR_RESPONSES)
async def localize_video(
    video: Optional[UploadFile] = File(None),
    target_language: Optional[str] = Form(None, alias="targetLanguage"),
    source_language: Optional[str] = Form(None, alias="sourceLanguage"),
    files: TempFileManager = Depends(get_temp_files),
    pipeline: VideoLocalizationPipeline = Depends(get_video_pipeline),
):
    """Transcribe an uploaded video and translate it into a subtitle block."""
    if video is None:
        raise ValidationError("No video file uploaded.")
    if not target_language:
        raise ValidationError("Missing target language.")

    input_file = await files.persist(video, purpose="video")
    job = VideoLocalizationJob(
        input_file=input_file,
        target_language=target_language,
        source_language=source_language or AUTO_LANGUAGE,
    )
    result = await run_blocking(pipeline.run, job)

    return VideoLocalizationResponse(
        transcribed_text=result.transcribed_text,
        translated_subtitles=result.translated_subtitles,
        audio_url=result.audio_url,
        download_link=result.download_link,
    )
