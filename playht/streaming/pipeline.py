"""Audio streaming pipeline.

Turns one chunked HTTP response into either:
  - AudioStream: a lazy, single-pass async iterator of byte chunks, exactly as
    read off the wire (no re-chunking, no merging), or
  - write_chunks(): a drain into a caller-supplied sink with full backpressure:
    chunk k+1 is not requested until chunk k has been written (and drained).

Audio can be arbitrarily long, so nothing here buffers the whole payload.
A sink failure is NOT rolled back: bytes already written stay written.
"""
import inspect
import logging
from typing import Any, AsyncIterator, Awaitable, Callable, Optional

import httpx

from playht.core.exceptions import SinkError, StreamConsumedError, TransportError

logger = logging.getLogger(__name__)

AudioChunk = bytes


async def write_chunks(chunks: AsyncIterator[bytes], sink: Any) -> int:
    """Write every chunk to sink in receipt order; return bytes written.

    sink needs a write(bytes) method, sync (file, BytesIO) or async. If it
    also has drain() (asyncio.StreamWriter) that is awaited after each write.
    """
    drain = getattr(sink, "drain", None)
    chunks_written = 0
    bytes_written = 0
    try:
        async for chunk in chunks:
            try:
                result = sink.write(chunk)
                if inspect.isawaitable(result):
                    await result
                if drain is not None:
                    drained = drain()
                    if inspect.isawaitable(drained):
                        await drained
            except Exception as e:
                logger.error(
                    "[PlayHT:Pipeline] Sink write failed at chunk=%d after %d bytes: %s",
                    chunks_written + 1, bytes_written, e,
                )
                raise SinkError(
                    f"sink write failed at chunk {chunks_written + 1}: {e}",
                    chunks_written=chunks_written,
                    bytes_written=bytes_written,
                ) from e
            chunks_written += 1
            bytes_written += len(chunk)
    finally:
        aclose = getattr(chunks, "aclose", None)
        if aclose is not None:
            await aclose()

    logger.debug("[PlayHT:Pipeline] Drained %d chunks, %d bytes", chunks_written, bytes_written)
    return bytes_written


class AudioStream:
    """Lazy single-pass stream of audio chunks from one HTTP response.

    Nothing is sent until the first pull (or __aenter__). The response is owned
    exclusively by this object and released on exhaustion, error or aclose().
    Iterating it a second time raises StreamConsumedError.

        async with client.stream.open_audio_stream(req) as audio:
            async for chunk in audio:
                ...
    """

    def __init__(self, opener: Callable[[], Awaitable[httpx.Response]], description: str = "audio stream"):
        self._opener = opener
        self._description = description
        self._response: Optional[httpx.Response] = None
        self._chunks: Optional[AsyncIterator[bytes]] = None
        self._iterated = False
        self._closed = False
        self.chunks_read = 0
        self.bytes_read = 0

    def __repr__(self) -> str:
        state = "closed" if self._closed else ("open" if self._response is not None else "pending")
        return f"<AudioStream {self._description} {state} chunks={self.chunks_read}>"

    # ── response metadata (available once opened) ────────────────

    @property
    def response(self) -> Optional[httpx.Response]:
        return self._response

    @property
    def status_code(self) -> Optional[int]:
        return self._response.status_code if self._response is not None else None

    @property
    def headers(self) -> Optional[httpx.Headers]:
        return self._response.headers if self._response is not None else None

    @property
    def content_type(self) -> Optional[str]:
        if self._response is None:
            return None
        return self._response.headers.get("content-type")

    @property
    def closed(self) -> bool:
        return self._closed

    # ── lifecycle ────────────────────────────────────────────────

    async def open(self) -> "AudioStream":
        if self._closed:
            raise StreamConsumedError(f"{self._description} is closed")
        if self._response is None:
            try:
                self._response = await self._opener()
            except BaseException:
                # ApiError / TransportError on open is the final event
                self._closed = True
                raise
            self._chunks = self._response.aiter_bytes()
            logger.debug(
                "[PlayHT:Pipeline] Opened %s content_type=%s", self._description, self.content_type,
            )
        return self

    async def aclose(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._chunks is not None:
            await self._chunks.aclose()
        if self._response is not None:
            await self._response.aclose()
        logger.debug(
            "[PlayHT:Pipeline] Closed %s after %d chunks, %d bytes",
            self._description, self.chunks_read, self.bytes_read,
        )

    async def __aenter__(self) -> "AudioStream":
        return await self.open()

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # ── iteration ────────────────────────────────────────────────

    def __aiter__(self) -> "AudioStream":
        if self._iterated or self._closed:
            raise StreamConsumedError(f"{self._description} can only be iterated once")
        self._iterated = True
        return self

    async def __anext__(self) -> AudioChunk:
        if self._closed:
            raise StopAsyncIteration
        if self._response is None:
            await self.open()
        while True:
            try:
                chunk = await self._chunks.__anext__()
            except StopAsyncIteration:
                await self.aclose()
                raise
            except httpx.TransportError as e:
                await self.aclose()
                logger.error(
                    "[PlayHT:Pipeline] %s broke after %d chunks: %s",
                    self._description, self.chunks_read, type(e).__name__,
                )
                raise TransportError(f"{self._description} interrupted: {str(e) or type(e).__name__}") from e
            except BaseException:
                await self.aclose()
                raise
            if chunk:
                self.chunks_read += 1
                self.bytes_read += len(chunk)
                return chunk

    async def write_to(self, sink: Any) -> int:
        """Drain the whole stream into sink; return bytes written."""
        return await write_chunks(self, sink)
