"""Real-time TTS streaming endpoints.

POST /tts/stream answers with the audio body directly (chunked, MIME type
per requested output format) or, with Accept: application/json, with the URL
the stream can be fetched from.
"""
import logging
from typing import Any

from playht.api.transport import APPLICATION_JSON, Transport
from playht.schemas.stream import TTSStreamRequest, TTSStreamURL
from playht.streaming.pipeline import AudioStream

logger = logging.getLogger(__name__)

TTS_STREAM_PATH = "/tts/stream"


class StreamAPI:
    def __init__(self, transport: Transport):
        self._transport = transport

    def open_audio_stream(self, req: TTSStreamRequest) -> AudioStream:
        """Lazy single-pass audio stream; the request is sent on first pull."""
        request = self._transport.build_request(
            "POST", TTS_STREAM_PATH, json=req.to_payload(), accept=req.accept,
        )
        return AudioStream(lambda: self._transport.send(request, stream=True), description="tts stream")

    async def stream_audio(self, req: TTSStreamRequest, sink: Any) -> int:
        """Write synthesized audio into sink chunk by chunk; return bytes written."""
        async with self.open_audio_stream(req) as audio:
            written = await audio.write_to(sink)
        logger.info("[PlayHT:Stream] Streamed audio bytes=%d chunks=%d", written, audio.chunks_read)
        return written

    async def get_audio_stream_url(self, req: TTSStreamRequest) -> TTSStreamURL:
        return await self._transport.request_json(
            "POST", TTS_STREAM_PATH, TTSStreamURL, json=req.to_payload(), accept=APPLICATION_JSON,
        )


# ── one-off shortcuts ────────────────────────────────────────────

async def stream_audio(sink: Any, req: TTSStreamRequest) -> int:
    from playht.api.client import Client
    async with Client() as client:
        return await client.stream.stream_audio(req, sink)


async def get_audio_stream_url(req: TTSStreamRequest) -> TTSStreamURL:
    from playht.api.client import Client
    async with Client() as client:
        return await client.stream.get_audio_stream_url(req)
