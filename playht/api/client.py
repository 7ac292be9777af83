"""play.ht API client facade.

One Client = one Transport (auth + connection pool) shared by the voices,
jobs and stream resources. Flat methods mirror the resource methods for
callers that prefer client.get_stock_voices() over client.voices.get_stock_voices().
"""
import logging
from typing import Any, AsyncIterator, List, Optional

import httpx

from playht.api.jobs import JobsAPI
from playht.api.stream import StreamAPI
from playht.api.transport import _UNSET, Transport
from playht.api.voices import VoicesAPI
from playht.config.settings import Settings
from playht.schemas.job import TTSJob, TTSJobRequest
from playht.schemas.stream import TTSStreamRequest, TTSStreamURL
from playht.schemas.voice import (
    ClonedVoice,
    CloneVoiceFileRequest,
    CloneVoiceURLRequest,
    DeleteClonedVoiceRequest,
    DeleteClonedVoiceResponse,
    Voice,
)
from playht.streaming.pipeline import AudioStream
from playht.streaming.sse import FrameResult

logger = logging.getLogger(__name__)


class Client:
    """Async play.ht client.

    Credentials default to PLAYHT_SECRET_KEY / PLAYHT_USER_ID from the
    environment; explicit arguments win. Missing credentials raise
    ConfigurationError here, not on the first request.
    """

    def __init__(
        self,
        secret_key: Optional[str] = None,
        user_id: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = _UNSET,
        http_client: Optional[httpx.AsyncClient] = None,
        settings: Optional[Settings] = None,
    ):
        self.transport = Transport(
            secret_key=secret_key,
            user_id=user_id,
            base_url=base_url,
            timeout=timeout,
            http_client=http_client,
            settings=settings,
        )
        self.voices = VoicesAPI(self.transport)
        self.jobs = JobsAPI(self.transport)
        self.stream = StreamAPI(self.transport)

    async def aclose(self) -> None:
        await self.transport.aclose()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    def remote_address(self) -> str:
        return self.transport.remote_address()

    # ── voices ───────────────────────────────────────────────────

    async def get_stock_voices(self) -> List[Voice]:
        return await self.voices.get_stock_voices()

    async def get_cloned_voices(self) -> List[ClonedVoice]:
        return await self.voices.get_cloned_voices()

    async def clone_voice_from_file(self, req: CloneVoiceFileRequest) -> ClonedVoice:
        return await self.voices.clone_voice_from_file(req)

    async def clone_voice_from_url(self, req: CloneVoiceURLRequest) -> ClonedVoice:
        return await self.voices.clone_voice_from_url(req)

    async def delete_cloned_voice(self, req: DeleteClonedVoiceRequest) -> DeleteClonedVoiceResponse:
        return await self.voices.delete_cloned_voice(req)

    # ── jobs ─────────────────────────────────────────────────────

    async def create_tts_job(self, req: TTSJobRequest) -> TTSJob:
        return await self.jobs.create_tts_job(req)

    async def get_tts_job(self, job_id: str) -> TTSJob:
        return await self.jobs.get_tts_job(job_id)

    async def create_tts_job_with_progress_stream(self, req: TTSJobRequest, sink: Any) -> Optional[str]:
        return await self.jobs.create_tts_job_with_progress_stream(req, sink)

    async def stream_tts_job_progress(self, job_id: str, sink: Any) -> int:
        return await self.jobs.stream_tts_job_progress(job_id, sink)

    def iter_tts_job_progress(self, job_id: str) -> AsyncIterator[FrameResult]:
        return self.jobs.iter_tts_job_progress(job_id)

    async def stream_tts_job_audio(self, job_id: str, sink: Any) -> int:
        return await self.jobs.stream_tts_job_audio(job_id, sink)

    # ── real-time stream ─────────────────────────────────────────

    def open_audio_stream(self, req: TTSStreamRequest) -> AudioStream:
        return self.stream.open_audio_stream(req)

    async def stream_audio(self, req: TTSStreamRequest, sink: Any) -> int:
        return await self.stream.stream_audio(req, sink)

    async def get_audio_stream_url(self, req: TTSStreamRequest) -> TTSStreamURL:
        return await self.stream.get_audio_stream_url(req)
