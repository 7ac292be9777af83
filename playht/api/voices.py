"""Voice endpoints: stock voices, cloned voices, cloning and deletion.

Each method: build path + payload, call the transport, decode the typed
response. Module-level functions are one-off shortcuts that create and close
a default Client around a single call.
"""
import asyncio
import logging
from pathlib import Path
from typing import List

from playht.api.transport import Transport
from playht.schemas.voice import (
    ClonedVoice,
    CloneVoiceFileRequest,
    CloneVoiceURLRequest,
    DeleteClonedVoiceRequest,
    DeleteClonedVoiceResponse,
    Voice,
)

logger = logging.getLogger(__name__)

VOICES_PATH = "/voices"
CLONED_VOICES_PATH = "/cloned-voices"
CLONED_VOICES_INSTANT_PATH = "/cloned-voices/instant"


class VoicesAPI:
    def __init__(self, transport: Transport):
        self._transport = transport

    async def get_stock_voices(self) -> List[Voice]:
        """All available stock voices."""
        voices = await self._transport.request_json("GET", VOICES_PATH, List[Voice])
        logger.info("[PlayHT:Voices] Stock voices=%d", len(voices))
        return voices

    async def get_cloned_voices(self) -> List[ClonedVoice]:
        """All voices cloned under this account."""
        voices = await self._transport.request_json("GET", CLONED_VOICES_PATH, List[ClonedVoice])
        logger.info("[PlayHT:Voices] Cloned voices=%d", len(voices))
        return voices

    async def clone_voice_from_file(self, req: CloneVoiceFileRequest) -> ClonedVoice:
        """Instant-clone a voice from a local sample file (multipart upload)."""
        path = Path(req.sample_file)
        loop = asyncio.get_running_loop()
        sample = await loop.run_in_executor(None, path.read_bytes)
        logger.info(
            "[PlayHT:Voices] Cloning voice=%s from %s (%d bytes, %s)",
            req.voice_name, path.name, len(sample), req.mime_type,
        )
        return await self._transport.request_json(
            "POST",
            CLONED_VOICES_INSTANT_PATH,
            ClonedVoice,
            data={"voice_name": req.voice_name},
            files={"sample_file": (path.name, sample, req.mime_type)},
        )

    async def clone_voice_from_url(self, req: CloneVoiceURLRequest) -> ClonedVoice:
        """Clone a voice from a sample hosted at a URL."""
        logger.info("[PlayHT:Voices] Cloning voice=%s from URL", req.voice_name)
        return await self._transport.request_json(
            "POST", CLONED_VOICES_PATH, ClonedVoice, json=req.to_payload(),
        )

    async def delete_cloned_voice(self, req: DeleteClonedVoiceRequest) -> DeleteClonedVoiceResponse:
        """Single DELETE; the server decides what repeated deletes mean."""
        resp = await self._transport.request_json(
            "DELETE", CLONED_VOICES_PATH, DeleteClonedVoiceResponse, json=req.to_payload(),
        )
        logger.info("[PlayHT:Voices] Deleted cloned voice=%s", resp.deleted.id)
        return resp


# ── one-off shortcuts ────────────────────────────────────────────

async def get_stock_voices() -> List[Voice]:
    from playht.api.client import Client
    async with Client() as client:
        return await client.voices.get_stock_voices()


async def get_cloned_voices() -> List[ClonedVoice]:
    from playht.api.client import Client
    async with Client() as client:
        return await client.voices.get_cloned_voices()


async def clone_voice_from_file(req: CloneVoiceFileRequest) -> ClonedVoice:
    from playht.api.client import Client
    async with Client() as client:
        return await client.voices.clone_voice_from_file(req)


async def clone_voice_from_url(req: CloneVoiceURLRequest) -> ClonedVoice:
    from playht.api.client import Client
    async with Client() as client:
        return await client.voices.clone_voice_from_url(req)


async def delete_cloned_voice(req: DeleteClonedVoiceRequest) -> DeleteClonedVoiceResponse:
    from playht.api.client import Client
    async with Client() as client:
        return await client.voices.delete_cloned_voice(req)
