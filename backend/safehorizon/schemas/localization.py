from typing import Optional

from safehorizon.schemas.base import CamelModel


class AudioLocalizationResponse(CamelModel):
    transcribed_text: str
    translated_text: str
    audio_url: str


class VideoLocalizationResponse(CamelModel):
    transcribed_text: str
    translated_subtitles: str
    audio_url: Optional[str] = None
    download_link: Optional[str] = None
