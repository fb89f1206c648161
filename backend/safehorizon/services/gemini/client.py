"""
Gemini Media Service

Uploads media to the Gemini Files API and asks the model for a
transcription followed by a translated subtitle block. Also polishes
existing translations.
"""

import logging
import re
import time
from pathlib import Path
from typing import Optional

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from safehorizon.config.constants import (
    AUTO_LANGUAGE,
    MEDIA_TRANSCRIBE_TRANSLATE_PROMPT,
    REFINE_TRANSLATION_PROMPT,
)
from safehorizon.config.settings import settings
from safehorizon.services.exceptions import MultimodalProcessingError
from safehorizon.services.protocols import MediaTranscript

logger = logging.getLogger(__name__)

_BLANK_LINE = re.compile(r"\n\s*\n")


def split_transcript_response(text: str) -> MediaTranscript:
    """
    Split a model response into transcription and subtitles.

    The whole response is always the transcription. When the response has
    more than one blank-line separated block, the last block is the
    subtitles; otherwise the subtitles are the whole response as well.
    """
    segments = [segment.strip() for segment in _BLANK_LINE.split(text) if segment.strip()]
    subtitles = segments[-1] if len(segments) > 1 else text
    return MediaTranscript(transcribed_text=text, translated_subtitles=subtitles)


class GeminiMediaService:
    """Multimodal transcription/translation on top of google-genai."""

    def __init__(
        self,
        client: Optional[genai.Client] = None,
        model: Optional[str] = None,
        poll_seconds: Optional[float] = None,
        poll_attempts: Optional[int] = None,
    ):
        if client is None:
            if not settings.GEMINI_API_KEY:
                raise RuntimeError(
                    "GEMINI_API_KEY is not set. Please update backend/.env accordingly."
                )
            client = genai.Client(api_key=settings.GEMINI_API_KEY)
        self._client = client
        self.model = model or settings.GEMINI_MODEL
        self.poll_seconds = settings.GEMINI_FILE_POLL_SECONDS if poll_seconds is None else poll_seconds
        self.poll_attempts = poll_attempts or settings.GEMINI_FILE_POLL_ATTEMPTS

    def transcribe_and_translate(
        self,
        media_path: Path,
        source_language: str,
        target_language: str,
    ) -> MediaTranscript:
        """
        Upload the media file, run one generation request and parse it.

        The provider-side copy is deleted on every path once the upload
        succeeded.

        Raises:
            MultimodalProcessingError: upload, processing or generation failed
        """
        try:
            uploaded = self._client.files.upload(file=str(media_path))
        except Exception as e:
            raise MultimodalProcessingError(f"Media upload failed: {e}") from e

        logger.info(f"📤 Uploaded {media_path.name} as {uploaded.name}")
        try:
            uploaded = self._wait_until_active(uploaded)
            prompt = MEDIA_TRANSCRIBE_TRANSLATE_PROMPT.format(
                source_language=source_language or AUTO_LANGUAGE,
                target_language=target_language,
            )
            response = self._client.models.generate_content(
                model=self.model,
                contents=[uploaded, prompt],
            )
            text = response.text
            if not text:
                raise MultimodalProcessingError("Model returned an empty response.")
            return split_transcript_response(text)
        except MultimodalProcessingError:
            raise
        except Exception as e:
            raise MultimodalProcessingError(f"Media transcription failed: {e}") from e
        finally:
            self.delete_remote_file(uploaded.name)

    def _wait_until_active(self, uploaded: types.File) -> types.File:
        attempts = 0
        while uploaded.state == types.FileState.PROCESSING:
            if attempts >= self.poll_attempts:
                raise MultimodalProcessingError(
                    f"Uploaded file {uploaded.name} is still processing."
                )
            attempts += 1
            time.sleep(self.poll_seconds)
            uploaded = self._client.files.get(name=uploaded.name)

        if uploaded.state == types.FileState.FAILED:
            raise MultimodalProcessingError(f"Provider failed to process {uploaded.name}.")
        return uploaded

    def delete_remote_file(self, name: str) -> None:
        """Best-effort delete of the provider-side copy."""
        try:
            self._client.files.delete(name=name)
            logger.info(f"🗑️ Deleted remote file {name}")
        except Exception as e:
            logger.error(f"Failed to delete remote file {name}: {e}")

    def refine(self, text: str, target_language: str) -> str:
        """Polish an existing translation."""
        prompt = REFINE_TRANSLATION_PROMPT.format(target_language=target_language, text=text)
        try:
            response = self._client.models.generate_content(model=self.model, contents=prompt)
        except genai_errors.APIError as e:
            raise MultimodalProcessingError(f"Text refinement failed: {e}") from e

        return (response.text or "").strip()
