"""
Application Constants

Fixed values shared by the adapters and pipelines.
"""

# Source-language sentinel understood by the translation endpoint
AUTO_LANGUAGE = "auto"

# Artifact purpose tags (prefix of generated file names)
ARTIFACT_LOCALIZED = "localized"
ARTIFACT_TTS_OUTPUT = "tts_output"

# Generated audio format
ARTIFACT_EXTENSION = ".mp3"

# Audio containers the speech-to-text provider decodes (aac, wma, m4a are not)
SUPPORTED_AUDIO_FORMATS = ("wav", "flac", "mp3", "ogg", "opus", "webm")

AUDIO_CONTENT_TYPES = {
    "audio/wav": "wav",
    "audio/x-wav": "wav",
    "audio/wave": "wav",
    "audio/flac": "flac",
    "audio/x-flac": "flac",
    "audio/mpeg": "mp3",
    "audio/mp3": "mp3",
    "audio/ogg": "ogg",
    "audio/opus": "opus",
    "audio/webm": "webm",
}

# Upload chunk size for streaming writes
UPLOAD_CHUNK_SIZE = 1024 * 1024  # 1MB

# Default suffix when the uploaded filename has none
DEFAULT_UPLOAD_SUFFIX = ".bin"

# Gemini prompts
MEDIA_TRANSCRIBE_TRANSLATE_PROMPT = (
    "You are a professional transcriber and subtitle translator.\n"
    "1. Transcribe all spoken audio in this media file. The spoken language is {source_language}.\n"
    "2. Translate the transcription into {target_language} as a subtitle block without timecodes.\n"
    "Return the transcription first, then one blank line, then the translated subtitle block. "
    "Do not add headings or commentary."
)

REFINE_TRANSLATION_PROMPT = (
    "You are a professional localization editor. Refine the following {target_language} "
    "translation to be culturally appropriate, fluent, and professional. "
    "Only return the refined text. Translation to refine: \"{text}\""
)
