"""Async TTS job schemas.

Request fields are all optional; unset fields are omitted from the wire
payload rather than sent as null (see to_payload).
"""
import logging
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from playht.schemas.tts import Emotion, OutputFormat, Quality, VoiceEngine

logger = logging.getLogger(__name__)


class JobStatus(str, Enum):
    QUEUED = "queued"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


# Wire spellings seen from the API → canonical status
_STATUS_SYNONYMS = {
    "queued": JobStatus.QUEUED,
    "pending": JobStatus.QUEUED,
    "created": JobStatus.QUEUED,
    "running": JobStatus.RUNNING,
    "in_progress": JobStatus.RUNNING,
    "generating": JobStatus.RUNNING,
    "succeeded": JobStatus.SUCCEEDED,
    "complete": JobStatus.SUCCEEDED,
    "completed": JobStatus.SUCCEEDED,
    "failed": JobStatus.FAILED,
    "error": JobStatus.FAILED,
}


class TTSJobRequest(BaseModel):
    """TTS job creation request."""
    model_config = ConfigDict(extra="ignore")

    text: Optional[str] = None
    voice: Optional[str] = None
    quality: Optional[Quality] = Field(default_factory=Quality.default)
    output_format: Optional[OutputFormat] = Field(default_factory=OutputFormat.default)
    voice_engine: Optional[VoiceEngine] = Field(default_factory=VoiceEngine.default)
    emotion: Optional[Emotion] = Field(default_factory=Emotion.default)
    speed: Optional[float] = None
    temperature: Optional[float] = None
    sample_rate: Optional[int] = None
    seed: Optional[int] = Field(default=None, ge=0, le=255)
    voice_guidance: Optional[float] = None
    style_guidance: Optional[float] = None

    def to_payload(self) -> dict:
        """JSON body with unset fields dropped."""
        return self.model_dump(mode="json", exclude_none=True)


class Output(BaseModel):
    """Rendered audio of a finished job."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    duration: float
    size: int
    url: str


class Link(BaseModel):
    """HATEOAS link attached to a job (progress stream, audio, ...)."""
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    content_type: Optional[str] = Field(default=None, alias="contentType")
    description: Optional[str] = None
    href: Optional[str] = None
    method: Optional[str] = None
    rel: Optional[str] = None


class TTSJob(BaseModel):
    """TTS job state as reported by the server. Never mutated client-side."""
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: str
    created: Optional[str] = None
    input: Optional[TTSJobRequest] = None
    output: Optional[Output] = None
    status: Optional[JobStatus] = None
    links: List[Link] = Field(default_factory=list, alias="_links")

    @field_validator("status", mode="before")
    @classmethod
    def _normalize_status(cls, value):
        if value is None or isinstance(value, JobStatus):
            return value
        status = _STATUS_SYNONYMS.get(str(value).strip().lower())
        if status is None:
            logger.warning("[PlayHT:Job] Unknown job status %r, left unset", value)
        return status

    @field_validator("links", mode="before")
    @classmethod
    def _none_links(cls, value):
        return value or []

    @property
    def output_url(self) -> Optional[str]:
        return self.output.url if self.output else None

    @property
    def is_finished(self) -> bool:
        return self.status in (JobStatus.SUCCEEDED, JobStatus.FAILED)

    @property
    def is_failed(self) -> bool:
        return self.status is JobStatus.FAILED

    def link(self, rel: str) -> Optional[Link]:
        return next((ln for ln in self.links if ln.rel == rel), None)
