"""
Localization Service Exceptions

Typed failures raised by adapters, storage and pipelines. The HTTP
boundary renders every SafeHorizonError as {"error": message} using
its status_code.
"""


class SafeHorizonError(Exception):
    """Base exception for localization service errors"""
    status_code = 500


class ValidationError(SafeHorizonError):
    """Raised when a required field is missing, before any external call"""
    status_code = 400


class FileSystemError(SafeHorizonError):
    """Raised when a local temp file or artifact cannot be read or written"""
    pass


class UpstreamError(SafeHorizonError):
    """Base exception for external provider failures"""
    pass


class UpstreamFormatError(UpstreamError):
    """Raised when a provider responds in an unexpected shape"""
    pass


class UpstreamUnavailableError(UpstreamError):
    """Raised when a provider responds with a failure status or is unreachable"""
    pass


class UpstreamQuotaError(UpstreamError):
    """Raised when a provider signals rate or quota exhaustion"""
    pass


class TranscriptionError(UpstreamError):
    """Raised for any other speech-to-text failure"""
    pass


class SynthesisError(UpstreamError):
    """Raised for any other speech synthesis failure"""
    pass


class MultimodalProcessingError(UpstreamError):
    """Raised when the multimodal model upload or generation fails"""
    pass
