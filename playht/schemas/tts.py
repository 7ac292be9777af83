"""TTS option enums shared by async jobs and real-time streams.

Wire values are the exact strings the play.ht v2 API accepts.
"""
from enum import Enum


class VoiceEngine(str, Enum):
    """play.ht voice engine. PLAYHT_V2 is recommended."""
    PLAYHT_V1 = "PlayHT1.0"
    PLAYHT_V2 = "PlayHT2.0"
    PLAYHT_V2_TURBO = "PlayHT2.0-turbo"

    @classmethod
    def default(cls) -> "VoiceEngine":
        return cls.PLAYHT_V2


class OutputFormat(str, Enum):
    """Audio output encodings."""
    MP3 = "mp3"
    WAV = "wav"
    OGG = "ogg"
    FLAC = "flac"
    MULAW = "mulaw"

    @classmethod
    def default(cls) -> "OutputFormat":
        return cls.MP3

    @property
    def mime_type(self) -> str:
        return _MIME_TYPES[self]


_MIME_TYPES = {
    OutputFormat.MP3: "audio/mpeg",
    OutputFormat.WAV: "audio/wav",
    OutputFormat.OGG: "audio/ogg",
    OutputFormat.FLAC: "audio/flac",
    OutputFormat.MULAW: "audio/basic",
}


class Quality(str, Enum):
    """Quality of the generated audio."""
    DRAFT = "draft"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    PREMIUM = "premium"

    @classmethod
    def default(cls) -> "Quality":
        return cls.DRAFT


class Emotion(str, Enum):
    """Emotion applied to the generated voice."""
    FEMALE_HAPPY = "female_happy"
    FEMALE_SAD = "female_sad"
    FEMALE_ANGRY = "female_angry"
    FEMALE_FEARFUL = "female_fearful"
    FEMALE_DISGUST = "female_disgust"
    FEMALE_SURPRISED = "female_surprised"
    MALE_HAPPY = "male_happy"
    MALE_SAD = "male_sad"
    MALE_ANGRY = "male_angry"
    MALE_FEARFUL = "male_fearful"
    MALE_DISGUST = "male_disgust"
    MALE_SURPRISED = "male_surprised"

    @classmethod
    def default(cls) -> "Emotion":
        return cls.FEMALE_HAPPY
