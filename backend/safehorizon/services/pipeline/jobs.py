"""
Localization Jobs

One job is one pipeline execution for a single request. Jobs are
transient and live only as long as the request.
"""

import logging
import uuid
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from safehorizon.config.constants import AUTO_LANGUAGE

logger = logging.getLogger(__name__)


class JobState(str, Enum):
    UPLOADED = "uploaded"
    TRANSCRIBING = "transcribing"
    TRANSLATING = "translating"
    SYNTHESIZING = "synthesizing"
    PROCESSING = "processing"
    DONE = "done"
    FAILED = "failed"


TERMINAL_STATES = frozenset({JobState.DONE, JobState.FAILED})


@dataclass
class LocalizationJob:
    """Common job bookkeeping: identity, languages and state history."""
    input_file: Path
    target_language: str
    source_language: str = AUTO_LANGUAGE
    job_id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])
    state: JobState = JobState.UPLOADED
    history: List[JobState] = field(default_factory=lambda: [JobState.UPLOADED])
    error: Optional[str] = None

    @property
    def is_finished(self) -> bool:
        return self.state in TERMINAL_STATES

    def transition(self, state: JobState) -> None:
        if self.is_finished:
            raise RuntimeError(f"Job {self.job_id} already {self.state.value}")
        self.state = state
        self.history.append(state)
        logger.info(f"[Job {self.job_id}] -> {state.value}")

    def fail(self, error: BaseException) -> None:
        self.error = str(error)
        self.transition(JobState.FAILED)


@dataclass
class AudioLocalizationJob(LocalizationJob):
    audio_format: Optional[str] = None
    transcribed_text: Optional[str] = None
    translated_text: Optional[str] = None
    output_audio_url: Optional[str] = None


@dataclass
class VideoLocalizationJob(LocalizationJob):
    transcribed_text: Optional[str] = None
    translated_subtitles: Optional[str] = None


@dataclass
class AudioLocalizationResult:
    """Container for the output of the audio pipeline."""
    transcribed_text: str
    translated_text: str
    audio_url: str


@dataclass
class VideoLocalizationResult:
    """Container for the output of the video pipeline."""
    transcribed_text: str
    translated_subtitles: str
    audio_url: Optional[str] = None
    download_link: Optional[str] = None
