"""Business Logic Services.

This package contains the adapters and pipelines behind the
SafeHorizon localization API.

Service Categories:
- gcp: Web translation endpoint, Google Cloud Speech-to-Text and Text-to-Speech
- gemini: Multimodal transcription/translation and translation refinement
- storage: Temporary uploads and generated artifacts
- pipeline: Audio and video localization jobs
"""
