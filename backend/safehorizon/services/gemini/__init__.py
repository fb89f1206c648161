"""
Gemini Services Package
"""

from safehorizon.services.gemini.client import GeminiMediaService, split_transcript_response

__all__ = [
    "GeminiMediaService",
    "split_transcript_response",
]
