"""
Google Cloud credential resolution shared by the Speech and TTS clients.
"""

import os

from safehorizon.config.settings import settings


def ensure_credentials() -> None:
    """Ensure Google credentials are set in environment."""
    if not settings.GOOGLE_APPLICATION_CREDENTIALS or "GOOGLE_APPLICATION_CREDENTIALS" in os.environ:
        return

    creds_path = settings.GOOGLE_APPLICATION_CREDENTIALS
    if not os.path.exists(creds_path):
        possible_paths = [
            os.path.join("config", os.path.basename(creds_path)),
            os.path.join(os.getcwd(), os.path.basename(creds_path)),
        ]

        for path in possible_paths:
            if os.path.exists(path):
                creds_path = path
                break

    os.environ["GOOGLE_APPLICATION_CREDENTIALS"] = creds_path
