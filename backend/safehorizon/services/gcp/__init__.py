"""
Google Services Package

Exports the translation, speech-to-text and text-to-speech adapters.
"""

from safehorizon.services.gcp.speech import GCPSpeechService
from safehorizon.services.gcp.translate import GoogleWebTranslationService
from safehorizon.services.gcp.tts import GCPTextToSpeechService

__all__ = [
    "GCPSpeechService",
    "GoogleWebTranslationService",
    "GCPTextToSpeechService",
]
