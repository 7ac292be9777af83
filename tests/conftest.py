"""Shared fixtures: every test talks to the in-memory fake play.ht API."""
import logging

import httpx
import pytest

from playht.testing.fake_api import FAKE_SECRET_KEY, FAKE_USER_ID, FakePlayHTAPI

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)-8s %(name)s %(message)s",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep a developer's real credentials out of the test run."""
    for var in ("PLAYHT_SECRET_KEY", "PLAYHT_USER_ID", "PLAYHT_BASE_URL", "PLAYHT_TIMEOUT_S", "ENV"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def fake() -> FakePlayHTAPI:
    return FakePlayHTAPI()


@pytest.fixture
def creds() -> dict:
    return {"secret_key": FAKE_SECRET_KEY, "user_id": FAKE_USER_ID}


def make_http_client(handler) -> httpx.AsyncClient:
    """AsyncClient whose every request goes to handler."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class RecordingSink:
    """Sync sink that can be told to fail on the Nth write."""

    def __init__(self, fail_on: int = 0):
        self.fail_on = fail_on
        self.writes = []

    def write(self, data: bytes) -> int:
        if self.fail_on and len(self.writes) + 1 == self.fail_on:
            raise OSError("disk full")
        self.writes.append(bytes(data))
        return len(data)

    @property
    def data(self) -> bytes:
        return b"".join(self.writes)


class AsyncSink(RecordingSink):
    async def write(self, data: bytes) -> int:
        return RecordingSink.write(self, data)


class DrainingSink(RecordingSink):
    """Looks like asyncio.StreamWriter: sync write + awaitable drain."""

    def __init__(self):
        super().__init__()
        self.drains = 0

    async def drain(self) -> None:
        self.drains += 1
