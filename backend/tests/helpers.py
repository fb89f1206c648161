from pathlib import Path
from typing import List, Optional

from safehorizon.services.protocols import MediaTranscript, TranslationResult


class StubSpeechService:
    def __init__(self, text: str = "Hello", error: Optional[Exception] = None):
        self.text = text
        self.error = error
        self.calls: List[tuple] = []

    def transcribe(
        self,
        audio_data: bytes,
        source_language_hint: Optional[str] = None,
        audio_format: Optional[str] = None,
    ) -> str:
        self.calls.append((audio_data, source_language_hint, audio_format))
        if self.error:
            raise self.error
        return self.text


class StubTranslationService:
    def __init__(self, text: str = "नमस्ते", detected: Optional[str] = "en", error: Optional[Exception] = None):
        self.text = text
        self.detected = detected
        self.error = error
        self.calls: List[tuple] = []

    def translate(self, text: str, target_language: str, source_language: str = "auto") -> TranslationResult:
        self.calls.append((text, target_language, source_language))
        if self.error:
            raise self.error
        return TranslationResult(
            translated_text=self.text,
            detected_source_language=self.detected or source_language,
        )


class StubTTSService:
    def __init__(self, audio: bytes = b"ID3fake-mp3", error: Optional[Exception] = None):
        self.audio = audio
        self.error = error
        self.calls: List[tuple] = []

    def synthesize(self, text: str, voice_hint: Optional[str] = None) -> bytes:
        self.calls.append((text, voice_hint))
        if self.error:
            raise self.error
        return self.audio


class StubMediaService:
    """Mimics the multimodal adapter, including its remote-file bookkeeping."""

    def __init__(self, response: str = "Hello world\n\nनमस्ते दुनिया", error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.calls: List[tuple] = []
        self.remote_files: set = set()
        self.deleted: List[str] = []
        self.refined: List[tuple] = []

    def transcribe_and_translate(self, media_path: Path, source_language: str, target_language: str) -> MediaTranscript:
        from safehorizon.services.gemini import split_transcript_response

        self.calls.append((media_path, source_language, target_language))
        assert media_path.exists()
        name = f"files/{len(self.calls)}"
        self.remote_files.add(name)
        try:
            if self.error:
                raise self.error
            return split_transcript_response(self.response)
        finally:
            self.remote_files.discard(name)
            self.deleted.append(name)

    def refine(self, text: str, target_language: str) -> str:
        self.refined.append((text, target_language))
        return f"{text}!"
