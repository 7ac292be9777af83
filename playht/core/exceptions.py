"""Custom exception hierarchy for the play.ht client."""
from typing import Any, Optional


class PlayHTError(Exception):
    """Base error."""
    def __init__(self, message: str, code: str = "PLAYHT_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ConfigurationError(PlayHTError):
    """Missing or invalid credentials / client configuration."""
    def __init__(self, message: str = "Invalid client configuration"):
        super().__init__(message, code="CONFIGURATION_ERROR")


class TransportError(PlayHTError):
    """Connection, TLS, timeout or protocol failure: the request never got a usable answer."""
    def __init__(self, message: str = "Transport failure"):
        super().__init__(message, code="TRANSPORT_ERROR")


class ApiError(PlayHTError):
    """Non-2xx HTTP response from the API."""
    def __init__(
        self,
        status_code: int,
        message: str = "API request failed",
        error_id: Optional[str] = None,
        body: Any = None,
    ):
        self.status_code = status_code
        self.error_id = error_id
        self.body = body
        super().__init__(message, code="API_ERROR")

    def __str__(self) -> str:
        return f"HTTP {self.status_code}: {self.message}"


class DecodeError(PlayHTError):
    """Malformed JSON body or SSE frame."""
    def __init__(self, message: str = "Failed to decode response", raw: Optional[str] = None):
        self.raw = raw
        super().__init__(message, code="DECODE_ERROR")


class SinkError(PlayHTError):
    """Writing to a caller-supplied destination failed."""
    def __init__(self, message: str = "Sink write failed", chunks_written: int = 0, bytes_written: int = 0):
        self.chunks_written = chunks_written
        self.bytes_written = bytes_written
        super().__init__(message, code="SINK_ERROR")


class StreamConsumedError(PlayHTError, RuntimeError):
    """An audio stream was driven a second time."""
    def __init__(self, message: str = "Audio stream already consumed"):
        super().__init__(message, code="STREAM_CONSUMED")
