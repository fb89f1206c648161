"""
Google Web Translation Service

Calls the keyless translate.googleapis.com "gtx" endpoint used by the
browser translate widget. The endpoint is undocumented, so the response
shape is checked before use.
"""

import logging
from typing import Any, Optional

import httpx

from safehorizon.config.constants import AUTO_LANGUAGE
from safehorizon.config.settings import settings
from safehorizon.services.exceptions import (
    UpstreamFormatError,
    UpstreamQuotaError,
    UpstreamUnavailableError,
)
from safehorizon.services.protocols import TranslationResult

logger = logging.getLogger(__name__)


class GoogleWebTranslationService:
    """Handles text translation through the gtx endpoint."""

    def __init__(self, client: Optional[httpx.Client] = None, url: Optional[str] = None):
        self.url = url or settings.GOOGLE_TRANSLATE_URL
        self._client = client or httpx.Client(timeout=settings.TRANSLATE_TIMEOUT_SECONDS)

    def translate(
        self,
        text: str,
        target_language: str,
        source_language: str = AUTO_LANGUAGE,
    ) -> TranslationResult:
        """Translate text in a single request. No retries."""
        source_language = source_language or AUTO_LANGUAGE
        params = {
            "client": "gtx",
            "sl": source_language,
            "tl": target_language,
            "dt": "t",
            "q": text,
        }

        try:
            response = self._client.get(self.url, params=params)
        except httpx.HTTPError as e:
            raise UpstreamUnavailableError(f"Google Translation Service unreachable: {e}") from e

        if response.status_code == 429:
            raise UpstreamQuotaError(
                "Google Translation Service rate limit reached (Status: 429)."
            )
        if not response.is_success:
            raise UpstreamUnavailableError(
                f"Google Translation Service failed (Status: {response.status_code})."
            )

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamFormatError("Received invalid response from translation service.") from e

        return self._parse(data, source_language)

    @staticmethod
    def _parse(data: Any, source_language: str) -> TranslationResult:
        if not isinstance(data, list) or not data or not isinstance(data[0], list):
            raise UpstreamFormatError(
                "Unexpected translation response format. Service may be blocking requests."
            )

        # Segments without a string head (e.g. transliteration rows) carry no text
        translated = "".join(
            segment[0] for segment in data[0]
            if isinstance(segment, list) and segment and isinstance(segment[0], str)
        )

        detected = data[2] if len(data) > 2 and isinstance(data[2], str) and data[2] else source_language
        logger.debug(f"Translated {len(translated)} chars (source={detected})")
        return TranslationResult(translated_text=translated, detected_source_language=detected)

    def close(self):
        self._client.close()
