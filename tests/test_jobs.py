"""Async TTS jobs: creation, retrieval, progress and audio."""
import io
import json

import pytest

from playht.core.exceptions import ApiError, DecodeError
from playht.schemas.job import JobStatus, TTSJob, TTSJobRequest
from playht.schemas.progress import ProgressEvent
from playht.schemas.tts import Emotion, OutputFormat, Quality, VoiceEngine
from playht.testing.fake_api import sse_frame

from conftest import RecordingSink


def test_job_request_omits_unset_fields():
    payload = TTSJobRequest(text="hello", voice="v1", speed=1.0).to_payload()

    assert payload == {
        "text": "hello",
        "voice": "v1",
        "speed": 1.0,
        "quality": "draft",
        "output_format": "mp3",
        "voice_engine": "PlayHT2.0",
        "emotion": "female_happy",
    }
    assert "temperature" not in payload
    assert None not in payload.values()


def test_job_request_defaults_can_be_unset():
    req = TTSJobRequest(text="hi", quality=None, emotion=None, voice_engine=VoiceEngine.PLAYHT_V2_TURBO)
    payload = req.to_payload()

    assert "quality" not in payload
    assert "emotion" not in payload
    assert payload["voice_engine"] == "PlayHT2.0-turbo"


@pytest.mark.parametrize("wire,expected", [
    ("queued", JobStatus.QUEUED),
    ("pending", JobStatus.QUEUED),
    ("in_progress", JobStatus.RUNNING),
    ("COMPLETE", JobStatus.SUCCEEDED),
    ("failed", JobStatus.FAILED),
    ("error", JobStatus.FAILED),
    (None, None),
    ("teleported", None),
])
def test_job_status_normalization(wire, expected):
    job = TTSJob.model_validate({"id": "j1", "status": wire})
    assert job.status is expected


def test_job_links_and_output():
    job = TTSJob.model_validate({
        "id": "j1",
        "created": "2024-01-01T00:00:00Z",
        "status": "complete",
        "output": {"duration": 2.5, "size": 4096, "url": "https://cdn/j1.mp3"},
        "_links": [{"contentType": "audio/mpeg", "href": "https://cdn/j1.mp3", "method": "GET", "rel": "audio"}],
    })

    assert job.is_finished and not job.is_failed
    assert job.output_url == "https://cdn/j1.mp3"
    assert job.link("audio").content_type == "audio/mpeg"
    assert job.link("missing") is None


@pytest.mark.asyncio
async def test_create_job_returns_queued_job_with_id(fake):
    async with fake.client() as client:
        job = await client.create_tts_job(TTSJobRequest(text="hello", voice="v1"))

    assert job.id
    assert job.status is JobStatus.QUEUED
    assert job.input.text == "hello"
    sent = json.loads(fake.requests[-1].content)
    assert sent["text"] == "hello" and sent["voice"] == "v1"
    assert "speed" not in sent


@pytest.mark.asyncio
async def test_get_job_round_trip(fake):
    async with fake.client() as client:
        created = await client.create_tts_job(TTSJobRequest(text="hello", voice="v1"))
        fetched = await client.get_tts_job(created.id)

    assert fetched.id == created.id
    assert fake.requests[-1].url.path == f"/api/v2/tts/{created.id}"


@pytest.mark.asyncio
async def test_get_unknown_job_is_404(fake):
    async with fake.client() as client:
        with pytest.raises(ApiError) as exc:
            await client.get_tts_job("nope")
    assert exc.value.status_code == 404


@pytest.mark.asyncio
async def test_create_job_missing_text_is_400(fake):
    async with fake.client() as client:
        with pytest.raises(ApiError) as exc:
            await client.create_tts_job(TTSJobRequest(voice="v1"))
    assert exc.value.status_code == 400


@pytest.mark.asyncio
async def test_iter_progress_yields_events_in_order(fake):
    job = fake.add_job()

    async with fake.client() as client:
        results = [r async for r in client.iter_tts_job_progress(job["id"])]

    assert [r.progress for r in results] == [0.0, 0.5, 1.0]
    assert all(isinstance(r, ProgressEvent) and r.job_id == job["id"] for r in results)
    assert results[-1].event == "completed" and results[-1].is_terminal
    assert fake.requests[-1].headers["accept"] == "text/event-stream"


@pytest.mark.asyncio
async def test_iter_progress_reports_corrupt_frame_and_continues(fake):
    job = fake.add_job()
    fake.set_progress(job["id"], [
        sse_frame("generating", {"id": job["id"], "progress": 0.1, "stage": "active"}),
        "event: generating\ndata: {not json\n\n",
        sse_frame("completed", {"id": job["id"], "progress": 1.0, "stage": "complete"}),
    ])

    async with fake.client() as client:
        results = [r async for r in client.jobs.iter_tts_job_progress(job["id"])]

    assert isinstance(results[0], ProgressEvent)
    assert isinstance(results[1], DecodeError)
    assert results[1].raw == "{not json"
    assert isinstance(results[2], ProgressEvent) and results[2].stage == "complete"


@pytest.mark.asyncio
async def test_stream_job_progress_forwards_raw_bytes(fake):
    job = fake.add_job()
    sink = RecordingSink()

    async with fake.client() as client:
        written = await client.stream_tts_job_progress(job["id"], sink)

    expected = "".join(fake.default_progress(job["id"])).encode()
    assert sink.data == expected
    assert written == len(expected)


@pytest.mark.asyncio
async def test_create_job_with_progress_stream_returns_location(fake):
    sink = io.BytesIO()

    async with fake.client() as client:
        location = await client.create_tts_job_with_progress_stream(TTSJobRequest(text="hi", voice="v1"), sink)

    (job_id,) = fake.jobs
    assert location == f"{fake.base_url}/tts/{job_id}"
    assert b"event: completed" in sink.getvalue()


@pytest.mark.asyncio
async def test_stream_job_audio_writes_all_chunks(fake):
    job = fake.add_job()
    audio = [b"ID3\x04", b"\xff\xfb" * 100, b"\xff\xfb\x00"]
    fake.complete_job(job["id"], audio)
    sink = io.BytesIO()

    async with fake.client() as client:
        written = await client.stream_tts_job_audio(job["id"], sink)
        done = await client.get_tts_job(job["id"])

    assert sink.getvalue() == b"".join(audio)
    assert written == sum(len(c) for c in audio)
    assert done.status is JobStatus.SUCCEEDED
    assert fake.requests[-2].headers["accept"] == "audio/mpeg"


@pytest.mark.asyncio
async def test_job_audio_not_ready_is_api_error(fake):
    job = fake.add_job()

    async with fake.client() as client:
        with pytest.raises(ApiError) as exc:
            await client.stream_tts_job_audio(job["id"], io.BytesIO())
    assert exc.value.status_code == 409


def test_enum_wire_values():
    assert OutputFormat.MULAW.mime_type == "audio/basic"
    assert OutputFormat.default().mime_type == "audio/mpeg"
    assert Quality("premium") is Quality.PREMIUM
    assert Emotion.default().value == "female_happy"
