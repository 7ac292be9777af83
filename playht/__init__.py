"""playht, an async client for the play.ht text-to-speech API.

Core exports::

    from playht import Client, TTSStreamRequest

    async with Client() as client:
        with open("out.mp3", "wb") as f:
            await client.stream_audio(TTSStreamRequest(text="hi", voice=voice_id), f)
"""

try:
    from importlib.metadata import version as _version
    __version__ = _version("playht-client")
except Exception:
    __version__ = "0.0.0+dev"

from playht.api.client import Client
from playht.core.exceptions import (
    ApiError,
    ConfigurationError,
    DecodeError,
    PlayHTError,
    SinkError,
    StreamConsumedError,
    TransportError,
)
from playht.schemas import (
    ClonedVoice,
    CloneVoiceFileRequest,
    CloneVoiceURLRequest,
    DeleteClonedVoiceRequest,
    DeleteClonedVoiceResponse,
    Emotion,
    JobStatus,
    OutputFormat,
    ProgressEvent,
    Quality,
    TTSJob,
    TTSJobRequest,
    TTSStreamRequest,
    TTSStreamURL,
    Voice,
    VoiceEngine,
)
from playht.streaming import AudioChunk, AudioStream, write_chunks

__all__ = [
    # Primary API
    "Client",
    "AudioStream",
    "write_chunks",
    # Data types
    "AudioChunk",
    "ClonedVoice",
    "CloneVoiceFileRequest",
    "CloneVoiceURLRequest",
    "DeleteClonedVoiceRequest",
    "DeleteClonedVoiceResponse",
    "Emotion",
    "JobStatus",
    "OutputFormat",
    "ProgressEvent",
    "Quality",
    "TTSJob",
    "TTSJobRequest",
    "TTSStreamRequest",
    "TTSStreamURL",
    "Voice",
    "VoiceEngine",
    # Errors
    "ApiError",
    "ConfigurationError",
    "DecodeError",
    "PlayHTError",
    "SinkError",
    "StreamConsumedError",
    "TransportError",
]
