"""Job progress event decoded from one SSE frame."""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProgressEvent(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    event: str = "message"
    job_id: Optional[str] = Field(default=None, alias="id")
    stage: Optional[str] = None
    progress: Optional[float] = None
    url: Optional[str] = None
    duration: Optional[float] = None
    size: Optional[int] = None
    raw: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_frame(cls, event: str, payload: Dict[str, Any]) -> "ProgressEvent":
        return cls.model_validate({**payload, "event": event, "raw": payload})

    @property
    def is_terminal(self) -> bool:
        return self.event in ("completed", "error")
