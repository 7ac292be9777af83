"""Async TTS job endpoints: create, fetch, follow progress, stream audio.

Progress is served as server-sent events on the job URL (Accept:
text/event-stream); the rendered audio is served on the same URL with
Accept: audio/mpeg.
"""
import logging
from typing import Any, AsyncIterator, Optional

import httpx

from playht.api.transport import AUDIO_MPEG, TEXT_EVENT_STREAM, Transport
from playht.core.exceptions import TransportError
from playht.schemas.job import TTSJob, TTSJobRequest
from playht.streaming.pipeline import AudioStream
from playht.streaming.sse import FrameResult, iter_progress_events

logger = logging.getLogger(__name__)

TTS_JOB_PATH = "/tts"


async def _response_lines(response: httpx.Response, description: str) -> AsyncIterator[str]:
    try:
        async for line in response.aiter_lines():
            yield line
    except httpx.TransportError as e:
        logger.error("[PlayHT:Jobs] %s broke: %s", description, type(e).__name__)
        raise TransportError(f"{description} interrupted: {str(e) or type(e).__name__}") from e


class JobsAPI:
    def __init__(self, transport: Transport):
        self._transport = transport

    def _job_path(self, job_id: str) -> str:
        return f"{TTS_JOB_PATH}/{job_id}"

    async def create_tts_job(self, req: TTSJobRequest) -> TTSJob:
        """Create an async TTS job; the server answers with it queued."""
        job = await self._transport.request_json("POST", TTS_JOB_PATH, TTSJob, json=req.to_payload())
        logger.info("[PlayHT:Jobs] Created job=%s status=%s", job.id, job.status and job.status.value)
        return job

    async def get_tts_job(self, job_id: str) -> TTSJob:
        job = await self._transport.request_json("GET", self._job_path(job_id), TTSJob)
        logger.debug("[PlayHT:Jobs] Fetched job=%s status=%s", job.id, job.status and job.status.value)
        return job

    async def create_tts_job_with_progress_stream(self, req: TTSJobRequest, sink: Any) -> Optional[str]:
        """Create a job and forward its raw SSE progress bytes into sink.

        Returns the progress stream URL (Content-Location) when the server sends one.
        """
        request = self._transport.build_request(
            "POST", TTS_JOB_PATH, json=req.to_payload(), accept=TEXT_EVENT_STREAM,
        )
        stream = AudioStream(lambda: self._transport.send(request, stream=True), description="job progress")
        async with stream:
            location = stream.headers.get("content-location")
            logger.info("[PlayHT:Jobs] Created job with progress stream location=%s", location)
            await stream.write_to(sink)
        return location

    async def stream_tts_job_progress(self, job_id: str, sink: Any) -> int:
        """Forward the raw SSE progress stream of an existing job into sink."""
        request = self._transport.build_request("GET", self._job_path(job_id), accept=TEXT_EVENT_STREAM)
        stream = AudioStream(
            lambda: self._transport.send(request, stream=True), description=f"progress job={job_id}",
        )
        async with stream:
            return await stream.write_to(sink)

    async def iter_tts_job_progress(self, job_id: str) -> AsyncIterator[FrameResult]:
        """Parsed progress: yields ProgressEvent, or DecodeError for a corrupt frame."""
        description = f"progress job={job_id}"
        request = self._transport.build_request("GET", self._job_path(job_id), accept=TEXT_EVENT_STREAM)
        response = await self._transport.send(request, stream=True)
        try:
            async for result in iter_progress_events(_response_lines(response, description)):
                yield result
        finally:
            await response.aclose()

    def open_tts_job_audio(self, job_id: str) -> AudioStream:
        """Lazy audio stream of a job; nothing is sent until first pulled."""
        request = self._transport.build_request("GET", self._job_path(job_id), accept=AUDIO_MPEG)
        return AudioStream(lambda: self._transport.send(request, stream=True), description=f"audio job={job_id}")

    async def stream_tts_job_audio(self, job_id: str, sink: Any) -> int:
        """Write a job's audio into sink as it arrives; return bytes written."""
        async with self.open_tts_job_audio(job_id) as audio:
            written = await audio.write_to(sink)
        logger.info("[PlayHT:Jobs] Streamed job=%s audio bytes=%d", job_id, written)
        return written


# ── one-off shortcuts ────────────────────────────────────────────

async def create_tts_job(req: TTSJobRequest) -> TTSJob:
    from playht.api.client import Client
    async with Client() as client:
        return await client.jobs.create_tts_job(req)


async def create_tts_job_with_progress_stream(sink: Any, req: TTSJobRequest) -> Optional[str]:
    from playht.api.client import Client
    async with Client() as client:
        return await client.jobs.create_tts_job_with_progress_stream(req, sink)


async def get_tts_job(job_id: str) -> TTSJob:
    from playht.api.client import Client
    async with Client() as client:
        return await client.jobs.get_tts_job(job_id)


async def stream_tts_job_progress(sink: Any, job_id: str) -> int:
    from playht.api.client import Client
    async with Client() as client:
        return await client.jobs.stream_tts_job_progress(job_id, sink)


async def stream_tts_job_audio(sink: Any, job_id: str) -> int:
    from playht.api.client import Client
    async with Client() as client:
        return await client.jobs.stream_tts_job_audio(job_id, sink)
