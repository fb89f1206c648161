"""
GCP Text-to-Speech Service

Handles Google Cloud Text-to-Speech operations.
"""

import logging
from typing import Optional

from google.api_core import exceptions as google_exceptions
from google.cloud import texttospeech

from safehorizon.config.settings import settings
from safehorizon.services.exceptions import SynthesisError, UpstreamQuotaError
from safehorizon.services.gcp.credentials import ensure_credentials

logger = logging.getLogger(__name__)


class GCPTextToSpeechService:
    """Handles Text-to-Speech operations.

    Every request uses the same configured voice. The voice hint is
    accepted for interface compatibility but does not pick a voice.
    """

    def __init__(
        self,
        client: Optional[texttospeech.TextToSpeechClient] = None,
        language_code: Optional[str] = None,
        voice_name: Optional[str] = None,
    ):
        if client is None:
            ensure_credentials()
            client = texttospeech.TextToSpeechClient()
        self._client = client
        self.language_code = language_code or settings.TTS_LANGUAGE_CODE
        self.voice_name = voice_name or settings.TTS_VOICE_NAME

    def synthesize(self, text: str, voice_hint: Optional[str] = None) -> bytes:
        """Synthesize text to MP3 audio."""
        if voice_hint:
            logger.debug(f"Voice hint '{voice_hint}' ignored, using {self.voice_name}")

        voice_params = texttospeech.VoiceSelectionParams(
            language_code=self.language_code,
            name=self.voice_name,
        )

        audio_config = texttospeech.AudioConfig(
            audio_encoding=texttospeech.AudioEncoding.MP3,
            speaking_rate=1.0,
            pitch=0.0,
        )

        synthesis_input = texttospeech.SynthesisInput(text=text)

        try:
            response = self._client.synthesize_speech(
                input=synthesis_input,
                voice=voice_params,
                audio_config=audio_config,
            )
        except google_exceptions.ResourceExhausted as e:
            raise UpstreamQuotaError(f"Text-to-speech quota exceeded: {e.message}") from e
        except (google_exceptions.GoogleAPICallError, google_exceptions.RetryError) as e:
            raise SynthesisError(f"Text-to-speech failed: {e}") from e

        return response.audio_content
