"""Real-time TTS stream schemas."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from playht.schemas.tts import Emotion, OutputFormat, Quality, VoiceEngine


class TTSStreamRequest(BaseModel):
    """Audio stream request. Same shape as a job request plus text_guidance."""
    model_config = ConfigDict(extra="ignore")

    text: Optional[str] = None
    voice: Optional[str] = None
    quality: Optional[Quality] = Field(default_factory=Quality.default)
    output_format: Optional[OutputFormat] = Field(default_factory=OutputFormat.default)
    voice_engine: Optional[VoiceEngine] = Field(default_factory=VoiceEngine.default)
    emotion: Optional[Emotion] = Field(default_factory=Emotion.default)
    sample_rate: Optional[int] = None
    seed: Optional[int] = None
    voice_guidance: Optional[float] = None
    style_guidance: Optional[float] = None
    text_guidance: Optional[float] = None
    temperature: Optional[float] = None
    speed: Optional[float] = None

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)

    @property
    def accept(self) -> str:
        """MIME type of the audio the server will stream back."""
        return (self.output_format or OutputFormat.default()).mime_type


class TTSStreamURL(BaseModel):
    """Where to fetch a stream instead of receiving the bytes inline."""
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    href: str
    method: str
    content_type: str = Field(alias="contentType")
    rel: str
    description: str
