"""Voice schemas: stock voices, cloned voices, cloning requests."""
from pathlib import Path
from typing import Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Voice(BaseModel):
    """Stock voice metadata. Immutable once retrieved."""
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: str
    name: str
    sample: Optional[str] = None
    accent: Optional[str] = None
    age: Optional[str] = None
    gender: Optional[str] = None
    language: Optional[str] = None
    language_code: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("language_code", "lang_code", "languageCode"),
    )
    loudness: Optional[str] = None
    style: Optional[str] = None
    tempo: Optional[str] = None
    texture: Optional[str] = None
    is_cloned: Optional[bool] = None
    voice_engine: Optional[str] = None


class ClonedVoice(BaseModel):
    """Cloned voice metadata. The server is the source of truth; never cached."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    name: str
    type: Optional[str] = None


class CloneVoiceFileRequest(BaseModel):
    """Clone a voice from a local sample file.

    mime_type is sent as-is on the file part; the client does not sniff content.
    """
    sample_file: Union[str, Path]
    voice_name: str
    mime_type: str


class CloneVoiceURLRequest(BaseModel):
    sample_file_url: str
    voice_name: str

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)


class DeleteClonedVoiceRequest(BaseModel):
    voice_id: str

    def to_payload(self) -> dict:
        return self.model_dump(mode="json")


class DeleteClonedVoiceResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: str
    deleted: ClonedVoice
