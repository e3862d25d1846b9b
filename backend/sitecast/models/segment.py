"""Podcast script segments and synthesized audio."""

from typing import Literal

from sitecast.models.base import CamelModel

SPEAKER_1 = "speaker1"
SPEAKER_2 = "speaker2"


class ScriptSegment(CamelModel):
    """One speaker-attributed block of dialogue."""

    speaker: str | None = None
    text: str


class ExportSegment(CamelModel):
    """Segment shape used for JSON export and import."""

    speaker_index: Literal[0, 1]
    text: str


class SavedAudioFile(CamelModel):
    """Synthesized audio for one segment."""

    index: int
    speaker: str | None = None
    audio_data: str  # base64-encoded audio
    paragraph: str  # preview of the synthesized text
