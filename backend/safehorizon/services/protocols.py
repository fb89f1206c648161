"""
Protocol definitions for localization adapters.

This module defines interfaces (Python Protocols) that allow:
- Swapping provider implementations
- Testing pipelines with stub adapters instead of real credentials
- Clear contracts between the pipelines and their adapters

Usage:
    from safehorizon.services.protocols import SpeechToTextProtocol

    def localize(stt: SpeechToTextProtocol, audio: bytes):
        transcript = stt.transcribe(audio, "en-US")
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol


@dataclass
class TranslationResult:
    """Output of a single translation call."""
    translated_text: str
    detected_source_language: str


@dataclass
class MediaTranscript:
    """Output of the multimodal transcribe-and-translate call."""
    transcribed_text: str
    translated_subtitles: str


class TranslationProtocol(Protocol):
    """Interface for text translation services."""

    def translate(
        self,
        text: str,
        target_language: str,
        source_language: str = "auto",
    ) -> TranslationResult:
        """
        Translate text into the target language.

        Args:
            text: Text to translate
            target_language: Target language code (e.g., "hi", "fr")
            source_language: Source language code or "auto"

        Returns:
            TranslationResult with the translated text and the detected
            source language (falls back to source_language)
        """
        ...


class SpeechToTextProtocol(Protocol):
    """Interface for speech-to-text services."""

    def transcribe(
        self,
        audio_data: bytes,
        source_language_hint: Optional[str] = None,
        audio_format: Optional[str] = None,
    ) -> str:
        """
        Transcribe an audio file's bytes to text.

        Args:
            audio_data: Encoded audio bytes (wav, flac, mp3, ogg...)
            source_language_hint: Optional language code; "auto" or None
                                  means the service default
            audio_format: Container of audio_data (e.g., "mp3"); None
                          lets the service read the file header

        Returns:
            Transcribed text
        """
        ...


class TextToSpeechProtocol(Protocol):
    """Interface for text-to-speech services."""

    def synthesize(self, text: str, voice_hint: Optional[str] = None) -> bytes:
        """
        Synthesize speech from text.

        Args:
            text: Text to synthesize
            voice_hint: Optional target language/voice hint

        Returns:
            Encoded audio bytes (MP3)
        """
        ...


class MediaTranslationProtocol(Protocol):
    """Interface for multimodal transcribe-and-translate services."""

    def transcribe_and_translate(
        self,
        media_path: Path,
        source_language: str,
        target_language: str,
    ) -> MediaTranscript:
        """Transcribe a media file and translate it into a subtitle block."""
        ...


class TextRefinementProtocol(Protocol):
    """Interface for translation polishing services."""

    def refine(self, text: str, target_language: str) -> str:
        """Return a more fluent version of an existing translation."""
        ...
