"""
GCP Speech Service

Handles Google Cloud Speech-to-Text operations.

Uses the v1p1beta1 API, which decodes MP3 and accepts alternative
language codes for recognition without a source-language hint.
"""

import logging
from pathlib import PurePath
from typing import Optional

from google.api_core import exceptions as google_exceptions
from google.cloud import speech_v1p1beta1 as speech

from safehorizon.config.constants import AUDIO_CONTENT_TYPES, AUTO_LANGUAGE, SUPPORTED_AUDIO_FORMATS
from safehorizon.config.settings import settings
from safehorizon.services.exceptions import TranscriptionError, UpstreamQuotaError, ValidationError
from safehorizon.services.gcp.credentials import ensure_credentials

logger = logging.getLogger(__name__)

AudioEncoding = speech.RecognitionConfig.AudioEncoding

# Header-carrying containers (wav, flac) need no sample rate
_ENCODINGS = {
    "wav": AudioEncoding.ENCODING_UNSPECIFIED,
    "flac": AudioEncoding.FLAC,
    "mp3": AudioEncoding.MP3,
    "ogg": AudioEncoding.OGG_OPUS,
    "opus": AudioEncoding.OGG_OPUS,
    "webm": AudioEncoding.WEBM_OPUS,
}


def audio_format_from_upload(filename: Optional[str], content_type: Optional[str] = None) -> Optional[str]:
    """
    Derive a lowercase audio format ("mp3", "wav"...) from an upload.

    The filename suffix wins; the content type is used when there is no
    suffix. Returns None when neither says anything.
    """
    suffix = PurePath(filename).suffix.lstrip(".").lower() if filename else ""
    if suffix:
        return suffix
    if content_type:
        return AUDIO_CONTENT_TYPES.get(content_type.split(";")[0].strip().lower())
    return None


def is_supported_audio_format(audio_format: Optional[str]) -> bool:
    return audio_format in SUPPORTED_AUDIO_FORMATS


class GCPSpeechService:
    """Handles Speech-to-Text operations."""

    def __init__(self, client: Optional[speech.SpeechClient] = None):
        if client is None:
            ensure_credentials()
            client = speech.SpeechClient()
        self._client = client

    @staticmethod
    def resolve_language(source_language_hint: Optional[str]) -> str:
        if not source_language_hint or source_language_hint == AUTO_LANGUAGE:
            return settings.STT_DEFAULT_LANGUAGE
        return source_language_hint

    @staticmethod
    def build_config(
        audio_format: Optional[str],
        source_language_hint: Optional[str],
    ) -> speech.RecognitionConfig:
        """
        Recognition config for one file.

        Raises:
            ValidationError: the provider cannot decode this format
        """
        if audio_format is None:
            encoding = AudioEncoding.ENCODING_UNSPECIFIED
        elif audio_format in _ENCODINGS:
            encoding = _ENCODINGS[audio_format]
        else:
            raise ValidationError(
                f"Unsupported audio format '{audio_format}'. "
                f"Supported: {', '.join(SUPPORTED_AUDIO_FORMATS)}."
            )

        config = speech.RecognitionConfig(
            encoding=encoding,
            language_code=GCPSpeechService.resolve_language(source_language_hint),
            enable_automatic_punctuation=True,
        )
        if encoding == AudioEncoding.MP3:
            config.sample_rate_hertz = settings.STT_MP3_SAMPLE_RATE
        elif encoding in (AudioEncoding.OGG_OPUS, AudioEncoding.WEBM_OPUS):
            config.sample_rate_hertz = settings.STT_OPUS_SAMPLE_RATE

        # No hint: let the service pick among the configured alternatives
        if not source_language_hint or source_language_hint == AUTO_LANGUAGE:
            config.alternative_language_codes = list(settings.STT_ALTERNATIVE_LANGUAGES)
        return config

    def transcribe(
        self,
        audio_data: bytes,
        source_language_hint: Optional[str] = None,
        audio_format: Optional[str] = None,
    ) -> str:
        """Transcribe a complete audio file.

        Without an audio_format the encoding is left unspecified, which
        only works for wav and flac headers. Quota exhaustion is raised as
        UpstreamQuotaError so callers can tell it apart from other failures.
        """
        config = self.build_config(audio_format, source_language_hint)
        audio = speech.RecognitionAudio(content=audio_data)

        try:
            response = self._client.recognize(config=config, audio=audio)
        except google_exceptions.ResourceExhausted as e:
            raise UpstreamQuotaError(f"Speech-to-text quota exceeded: {e.message}") from e
        except (google_exceptions.GoogleAPICallError, google_exceptions.RetryError) as e:
            raise TranscriptionError(f"Speech-to-text failed: {e}") from e

        if not response.results:
            return ""

        return " ".join(
            result.alternatives[0].transcript.strip()
            for result in response.results
            if result.alternatives
        ).strip()
