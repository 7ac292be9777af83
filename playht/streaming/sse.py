"""Minimal server-sent-events reader for TTS job progress.

Only the subset the progress endpoint uses: `event:` and `data:` fields,
`:` comments, blank-line frame terminators. Not a general SSE client
(no reconnection, no Last-Event-ID).

    AWAITING_EVENT_LINE --event:--> AWAITING_DATA_LINE --data:--> EMIT
             ^                                                     |
             +------------------- blank line (emit) ---------------+

A corrupt data payload yields a DecodeError value for that frame and the
reader carries on; a transport failure ends the stream.
"""
import json
import logging
from enum import Enum
from typing import AsyncIterator, FrozenSet, List, Optional, Union

from pydantic import ValidationError

from playht.core.exceptions import DecodeError
from playht.schemas.progress import ProgressEvent

logger = logging.getLogger(__name__)

DEFAULT_EVENT = "message"
PROGRESS_EVENTS: FrozenSet[str] = frozenset({"generating", "completed", "error", DEFAULT_EVENT})

FrameResult = Union[ProgressEvent, DecodeError]


class SSEState(Enum):
    AWAITING_EVENT_LINE = "awaiting_event_line"
    AWAITING_DATA_LINE = "awaiting_data_line"
    EMIT = "emit"


class SSEFrameParser:
    """Line-at-a-time SSE frame state machine."""

    def __init__(self, allowed_events: FrozenSet[str] = PROGRESS_EVENTS):
        self.allowed_events = allowed_events
        self.state = SSEState.AWAITING_EVENT_LINE
        self._event: Optional[str] = None
        self._data: List[str] = []
        self.frames_seen = 0
        self.decode_errors = 0

    def reset(self) -> None:
        self.state = SSEState.AWAITING_EVENT_LINE
        self._event = None
        self._data = []

    def feed(self, line: str) -> Optional[FrameResult]:
        """Consume one line (without its terminator); return a result when a frame completes."""
        line = line.rstrip("\r\n")
        if not line:
            return self._end_frame()
        if line.startswith(":"):
            return None

        field, sep, value = line.partition(":")
        if sep and value.startswith(" "):
            value = value[1:]

        if field == "event":
            self._event = value or None
            if self.state is SSEState.AWAITING_EVENT_LINE:
                self.state = SSEState.AWAITING_DATA_LINE
        elif field == "data":
            self._data.append(value)
            self.state = SSEState.EMIT
        else:
            # id:, retry: and unknown fields carry nothing we use
            logger.debug("[PlayHT:SSE] Ignoring field %r", field)
        return None

    def _end_frame(self) -> Optional[FrameResult]:
        if self.state is not SSEState.EMIT:
            self.reset()
            return None
        event = self._event or DEFAULT_EVENT
        data = "\n".join(self._data)
        self.reset()
        self.frames_seen += 1

        if event not in self.allowed_events:
            logger.debug("[PlayHT:SSE] Dropping frame event=%s", event)
            return None
        return self._decode(event, data)

    def _decode(self, event: str, data: str) -> FrameResult:
        try:
            payload = json.loads(data)
        except json.JSONDecodeError as e:
            self.decode_errors += 1
            logger.warning("[PlayHT:SSE] Corrupt frame event=%s: %s", event, e)
            return DecodeError(f"invalid JSON in {event} frame: {e}", raw=data)
        if not isinstance(payload, dict):
            self.decode_errors += 1
            logger.warning("[PlayHT:SSE] Non-object frame event=%s", event)
            return DecodeError(f"{event} frame is not a JSON object", raw=data)
        try:
            return ProgressEvent.from_frame(event, payload)
        except ValidationError as e:
            self.decode_errors += 1
            logger.warning("[PlayHT:SSE] Invalid progress frame event=%s: %d error(s)", event, e.error_count())
            return DecodeError(f"invalid {event} frame: {e.error_count()} field error(s)", raw=data)


async def iter_progress_events(
    lines: AsyncIterator[str],
    allowed_events: FrozenSet[str] = PROGRESS_EVENTS,
) -> AsyncIterator[FrameResult]:
    """Parse an async stream of text lines into ProgressEvent / DecodeError values.

    An unterminated trailing frame is discarded at end of body.
    """
    parser = SSEFrameParser(allowed_events)
    async for line in lines:
        result = parser.feed(line)
        if result is not None:
            yield result
    if parser.state is SSEState.EMIT:
        logger.debug("[PlayHT:SSE] Discarding unterminated trailing frame")
    logger.debug(
        "[PlayHT:SSE] Stream ended frames=%d decode_errors=%d", parser.frames_seen, parser.decode_errors,
    )
