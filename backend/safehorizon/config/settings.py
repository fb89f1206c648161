from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    # App
    API_HOST: str = Field("0.0.0.0")
    API_PORT: int = Field(5000)
    DEBUG: bool = Field(True)
    PUBLIC_BASE_URL: str = Field("http://localhost:5000")
    CORS_ORIGIN_REGEX: str = Field(r"http://(localhost|127\.0\.0\.1)(:\d+)?")

    # File Storage Paths
    UPLOADS_DIR: str = Field("uploads")
    PUBLIC_DIR: str = Field("public")

    # Google Cloud (Speech-to-Text, Text-to-Speech)
    GOOGLE_APPLICATION_CREDENTIALS: str | None = Field(None)
    STT_DEFAULT_LANGUAGE: str = Field("en-US")
    STT_ALTERNATIVE_LANGUAGES: list[str] = Field(["hi-IN", "es-ES", "fr-FR"])
    STT_MP3_SAMPLE_RATE: int = Field(44100)
    STT_OPUS_SAMPLE_RATE: int = Field(48000)
    TTS_LANGUAGE_CODE: str = Field("en-US")
    TTS_VOICE_NAME: str = Field("en-US-Standard-C")

    # Web translation endpoint
    GOOGLE_TRANSLATE_URL: str = Field("https://translate.googleapis.com/translate_a/single")
    TRANSLATE_TIMEOUT_SECONDS: float = Field(30.0)

    # Gemini
    GEMINI_API_KEY: str | None = Field(None)
    GEMINI_MODEL: str = Field("gemini-2.5-flash")
    GEMINI_FILE_POLL_SECONDS: float = Field(2.0)
    GEMINI_FILE_POLL_ATTEMPTS: int = Field(60)

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        env_file_encoding="utf-8"
    )


settings = Settings()
