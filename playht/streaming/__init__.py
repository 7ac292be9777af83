from playht.streaming.pipeline import AudioChunk, AudioStream, write_chunks
from playht.streaming.sse import PROGRESS_EVENTS, SSEFrameParser, SSEState, iter_progress_events

__all__ = [
    "AudioChunk",
    "AudioStream",
    "PROGRESS_EVENTS",
    "SSEFrameParser",
    "SSEState",
    "iter_progress_events",
    "write_chunks",
]
