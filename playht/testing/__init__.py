from playht.testing.fake_api import FAKE_SECRET_KEY, FAKE_USER_ID, FakePlayHTAPI, sse_frame

__all__ = ["FAKE_SECRET_KEY", "FAKE_USER_ID", "FakePlayHTAPI", "sse_frame"]
