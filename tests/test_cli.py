"""CLI against the fake API."""
import json

import pytest

from playht.cli import build_parser, main


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_voices_prints_json(fake, capsys):
    assert main(["voices"], client=fake.client()) == 0

    voices = json.loads(capsys.readouterr().out)
    assert [v["name"] for v in voices] == ["Angelo", "Adolfo"]


def test_create_and_get_job(fake, capsys):
    assert main(["create-job", "hello", "--voice", "v1", "--quality", "low"], client=fake.client()) == 0
    job = json.loads(capsys.readouterr().out)
    assert job["status"] == "queued"
    assert job["input"]["quality"] == "low"

    assert main(["get-job", job["id"]], client=fake.client()) == 0
    assert json.loads(capsys.readouterr().out)["id"] == job["id"]


def test_stream_writes_file(fake, tmp_path, capsys):
    out = tmp_path / "out.mp3"

    assert main(["stream", "hi", "--voice", "v1", str(out)], client=fake.client()) == 0

    assert out.read_bytes() == b"".join(fake.stream_chunks)
    assert "Wrote" in capsys.readouterr().out


def test_job_progress_prints_events(fake, capsys):
    job = fake.add_job()

    assert main(["job-progress", job["id"]], client=fake.client()) == 0

    out = capsys.readouterr().out
    assert out.count('"event"') == 3


def test_api_error_exits_nonzero(fake, capsys):
    assert main(["get-job", "missing"], client=fake.client()) == 1
    assert "HTTP 404" in capsys.readouterr().err


def test_missing_credentials_exit_nonzero(capsys, monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)  # no stray .env
    from playht.config.settings import get_settings
    get_settings.cache_clear()
    try:
        assert main(["voices"]) == 1
    finally:
        get_settings.cache_clear()
    assert "PLAYHT_SECRET_KEY" in capsys.readouterr().err
