from playht.schemas.job import JobStatus, Link, Output, TTSJob, TTSJobRequest
from playht.schemas.progress import ProgressEvent
from playht.schemas.stream import TTSStreamRequest, TTSStreamURL
from playht.schemas.tts import Emotion, OutputFormat, Quality, VoiceEngine
from playht.schemas.voice import (
    ClonedVoice,
    CloneVoiceFileRequest,
    CloneVoiceURLRequest,
    DeleteClonedVoiceRequest,
    DeleteClonedVoiceResponse,
    Voice,
)

__all__ = [
    "ClonedVoice",
    "CloneVoiceFileRequest",
    "CloneVoiceURLRequest",
    "DeleteClonedVoiceRequest",
    "DeleteClonedVoiceResponse",
    "Emotion",
    "JobStatus",
    "Link",
    "Output",
    "OutputFormat",
    "ProgressEvent",
    "Quality",
    "TTSJob",
    "TTSJobRequest",
    "TTSStreamRequest",
    "TTSStreamURL",
    "Voice",
    "VoiceEngine",
]
