from typing import Optional

from safehorizon.config.constants import AUTO_LANGUAGE
from safehorizon.schemas.base import CamelModel


class TranslateDocumentRequest(CamelModel):
    # Optional here so a missing field is reported as our own 400
    source_text: Optional[str] = None
    target_language: Optional[str] = None
    source_language: Optional[str] = AUTO_LANGUAGE


class TranslateDocumentResponse(CamelModel):
    original_content: str
    transcribed_text: str
    translated_content: str
    source_language: str
    target_language: str


class GenerateSpeechRequest(CamelModel):
    text: Optional[str] = None
    target_language: Optional[str] = None


class GenerateSpeechResponse(CamelModel):
    message: str
    audio_url: str


class RefineTextRequest(CamelModel):
    text: Optional[str] = None
    target_language: Optional[str] = None


class RefineTextResponse(CamelModel):
    refined_text: str
