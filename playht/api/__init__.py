from playht.api.client import Client
from playht.api.jobs import JobsAPI
from playht.api.stream import StreamAPI
from playht.api.transport import Transport
from playht.api.voices import VoicesAPI

__all__ = ["Client", "JobsAPI", "StreamAPI", "Transport", "VoicesAPI"]
