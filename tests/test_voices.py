"""Voice endpoints against the fake API."""
import json

import httpx
import pytest
from pydantic import ValidationError

from playht.api.client import Client
from playht.core.exceptions import ApiError
from playht.schemas.voice import (
    CloneVoiceFileRequest,
    CloneVoiceURLRequest,
    DeleteClonedVoiceRequest,
    Voice,
)

from conftest import make_http_client


@pytest.mark.asyncio
@pytest.mark.parametrize("count", [0, 1, 25])
async def test_voice_count_matches_json_array(count):
    raw = [{"id": f"voice-{i}", "name": f"Voice {i}", "lang_code": "en-US"} for i in range(count)]
    client = Client(
        secret_key="sk", user_id="uid",
        http_client=make_http_client(lambda r: httpx.Response(200, json=raw)),
    )

    voices = await client.get_stock_voices()

    assert len(voices) == count
    assert all(isinstance(v, Voice) for v in voices)
    if count:
        assert voices[0].language_code == "en-US"


@pytest.mark.asyncio
async def test_stock_voices_decode_metadata(fake):
    async with fake.client() as client:
        voices = await client.voices.get_stock_voices()

    angelo = voices[0]
    assert angelo.name == "Angelo"
    assert angelo.gender == "male"
    assert angelo.voice_engine == "PlayHT2.0"
    with pytest.raises(ValidationError):
        angelo.name = "changed"


@pytest.mark.asyncio
async def test_clone_then_list_includes_new_voice(fake, tmp_path):
    sample = tmp_path / "voice.m4a"
    sample.write_bytes(b"\x00\x00\x00\x20ftypM4A " + b"\x01" * 64)

    async with fake.client() as client:
        voice = await client.clone_voice_from_file(
            CloneVoiceFileRequest(sample_file=sample, voice_name="foo-bar", mime_type="audio/x-m4a")
        )
        cloned = await client.get_cloned_voices()

    assert voice.name == "foo-bar"
    assert voice.id in [v.id for v in cloned]


@pytest.mark.asyncio
async def test_clone_from_file_sends_multipart_with_declared_mime(fake, tmp_path):
    sample = tmp_path / "sample.bin"
    sample.write_bytes(b"RIFF....WAVEfmt ")

    async with fake.client() as client:
        await client.voices.clone_voice_from_file(
            # deliberately not what the bytes look like: the client must not sniff
            CloneVoiceFileRequest(sample_file=str(sample), voice_name="mine", mime_type="audio/ogg")
        )

    request = fake.requests[-1]
    assert request.url.path == "/api/v2/cloned-voices/instant"
    assert request.headers["content-type"].startswith("multipart/form-data; boundary=")
    assert fake.uploads == [{
        "voice_name": "mine",
        "filename": "sample.bin",
        "mime_type": "audio/ogg",
        "size": len(b"RIFF....WAVEfmt "),
    }]


@pytest.mark.asyncio
async def test_clone_from_missing_file_raises_before_request(fake, tmp_path):
    async with fake.client() as client:
        with pytest.raises(FileNotFoundError):
            await client.clone_voice_from_file(
                CloneVoiceFileRequest(sample_file=tmp_path / "nope.wav", voice_name="x", mime_type="audio/wav")
            )
    assert fake.requests == []


@pytest.mark.asyncio
async def test_clone_from_url(fake):
    async with fake.client() as client:
        voice = await client.clone_voice_from_url(
            CloneVoiceURLRequest(sample_file_url="https://example.com/sample.wav", voice_name="remote")
        )

    assert voice.name == "remote"
    assert json.loads(fake.requests[-1].content) == {
        "sample_file_url": "https://example.com/sample.wav",
        "voice_name": "remote",
    }


@pytest.mark.asyncio
async def test_delete_cloned_voice_single_request(fake):
    async with fake.client() as client:
        voice = await client.clone_voice_from_url(
            CloneVoiceURLRequest(sample_file_url="https://example.com/a.wav", voice_name="temp")
        )
        resp = await client.delete_cloned_voice(DeleteClonedVoiceRequest(voice_id=voice.id))
        remaining = await client.get_cloned_voices()

    assert resp.deleted.id == voice.id
    assert resp.message
    assert remaining == []
    deletes = [r for r in fake.requests if r.method == "DELETE"]
    assert len(deletes) == 1
    assert json.loads(deletes[0].content) == {"voice_id": voice.id}


@pytest.mark.asyncio
async def test_delete_unknown_voice_surfaces_server_status(fake):
    async with fake.client() as client:
        with pytest.raises(ApiError) as exc:
            await client.delete_cloned_voice(DeleteClonedVoiceRequest(voice_id="missing"))

    assert exc.value.status_code == 404
    assert exc.value.message == "Cloned voice not found"


@pytest.mark.asyncio
async def test_wrong_credentials_are_api_error_401(fake):
    async with fake.client(secret_key="wrong") as client:
        with pytest.raises(ApiError) as exc:
            await client.get_stock_voices()

    assert exc.value.status_code == 401
    assert exc.value.message == "Invalid API key or user id"


@pytest.mark.asyncio
async def test_one_off_get_stock_voices(fake, monkeypatch):
    from playht.api import voices as voices_module

    monkeypatch.setattr("playht.api.client.Client", lambda: fake.client())

    voices = await voices_module.get_stock_voices()

    assert [v.name for v in voices] == ["Angelo", "Adolfo"]
