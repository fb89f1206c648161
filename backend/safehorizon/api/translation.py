"""
Translation API - text translation, speech generation and refinement
"""
import logging

from fastapi import APIRouter, Depends

from safehorizon.api.deps import (
    get_artifact_store,
    get_media_service,
    get_translation_service,
    get_tts_service,
    run_blocking,
)
from safehorizon.config.constants import ARTIFACT_TTS_OUTPUT, AUTO_LANGUAGE
from safehorizon.schemas.base import ERROR_RESPONSES
from safehorizon.schemas.translation import (
    GenerateSpeechRequest,
    GenerateSpeechResponse,
    RefineTextRequest,
    RefineTextResponse,
    TranslateDocumentRequest,
    TranslateDocumentResponse,
)
from safehorizon.services.exceptions import ValidationError
from safehorizon.services.protocols import (
    TextRefinementProtocol,
    TextToSpeechProtocol,
    TranslationProtocol,
)
from safehorizon.services.storage import ArtifactStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/translate/document", response_model=TranslateDocumentResponse, responses=ERROR_RESPONSES)
async def translate_document(
    req: TranslateDocumentRequest,
    translation_service: TranslationProtocol = Depends(get_translation_service),
):
    """Translate a block of text."""
    if not req.source_text or not req.target_language:
        raise ValidationError("Missing source text or target language.")

    try:
        result = await run_blocking(
            translation_service.translate,
            req.source_text,
            req.target_language,
            req.source_language or AUTO_LANGUAGE,
        )
    except Exception as e:
        logger.error(f"Text translation error: {e}")
        raise

    return TranslateDocumentResponse(
        original_content=req.source_text,
        transcribed_text=req.source_text,
        translated_content=result.translated_text,
        source_language=result.detected_source_language,
        target_language=req.target_language,
    )


@router.post("/generate/speech", response_model=GenerateSpeechResponse, responses=ERROR_RESPONSES)
async def generate_speech(
    req: GenerateSpeechRequest,
    tts_service: TextToSpeechProtocol = Depends(get_tts_service),
    artifacts: ArtifactStore = Depends(get_artifact_store),
):
    """Synthesize translated text into a retrievable MP3."""
    if not req.text:
        raise ValidationError("Missing text for speech generation.")

    audio = await run_blocking(tts_service.synthesize, req.text, req.target_language)
    artifact = await run_blocking(artifacts.save, audio, ARTIFACT_TTS_OUTPUT, req.target_language or "")

    return GenerateSpeechResponse(message="Speech generated successfully", audio_url=artifact.url)


@router.post("/refine/text", response_model=RefineTextResponse, responses=ERROR_RESPONSES)
async def refine_text(
    req: RefineTextRequest,
    media_service: TextRefinementProtocol = Depends(get_media_service),
):
    """Polish a translation with the language model."""
    if not req.text or not req.target_language:
        raise ValidationError("Missing text or target language.")

    refined = await run_blocking(media_service.refine, req.text, req.target_language)
    return RefineTextResponse(refined_text=refined)
