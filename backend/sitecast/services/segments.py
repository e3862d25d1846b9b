"""Split podcast scripts into speaker segments and convert segment formats."""

import json
import logging
import re
from collections.abc import Sequence

from pydantic import ValidationError

from sitecast.models import SPEAKER_1, SPEAKER_2, ExportSegment, ScriptSegment

logger = logging.getLogger(__name__)

PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
NUMBERED_ITEM = re.compile(r"^\d+\.", re.MULTILINE)
BULLET_ITEM = re.compile(r"^[-*]\s+", re.MULTILINE)

# Leading speaker labels honored when importing plain text
SPEAKER_LABEL = re.compile(r"^(?:Speaker\s*1|Speaker\s*2|S1|S2|Host\s*1|Host\s*2|Host):\s*", re.IGNORECASE)
FIRST_SPEAKER_LABEL = re.compile(r"1|s1|host\s*1", re.IGNORECASE)


def alternate_speaker(index: int) -> str:
    """Speaker for the paragraph at `index` when speakers alternate."""
    return SPEAKER_1 if index % 2 == 0 else SPEAKER_2


def is_first_speaker(label: str) -> bool:
    """Whether a free-form speaker label refers to the first speaker."""
    return "1" in label


def _clean(paragraph: str) -> str:
    return paragraph.replace("\n", " ").strip()


def split_script(script: str) -> list[ScriptSegment]:
    """Split a script on blank lines and tag paragraphs alternately."""
    paragraphs = [_clean(p) for p in PARAGRAPH_BREAK.split(script.replace("\r", ""))]
    return [
        ScriptSegment(speaker=alternate_speaker(i), text=text)
        for i, text in enumerate(p for p in paragraphs if p)
    ]


def join_script(segments: Sequence[ScriptSegment]) -> str:
    """Combine segment texts into a script with blank lines between turns."""
    return "\n\n".join(s.text.strip() for s in segments if s.text.strip())


def distribute_speakers(segments: Sequence[ScriptSegment]) -> list[ScriptSegment]:
    """Re-tag segments so speakers alternate, starting with the first speaker."""
    return [
        ScriptSegment(speaker=alternate_speaker(i), text=s.text)
        for i, s in enumerate(segments)
    ]


def export_segments(segments: Sequence[ScriptSegment]) -> list[ExportSegment]:
    """Convert segments to the JSON export shape.

    Unlabeled segments take their speaker from their position.
    """
    exported = []
    for i, segment in enumerate(segments):
        if segment.speaker:
            speaker_index = 0 if is_first_speaker(segment.speaker) else 1
        else:
            speaker_index = i % 2
        exported.append(ExportSegment(speaker_index=speaker_index, text=segment.text))
    return exported


def _split_paragraphs(text: str) -> list[str]:
    """Split plain text on the first separator style it uses."""
    if PARAGRAPH_BREAK.search(text):
        parts = PARAGRAPH_BREAK.split(text)
    elif NUMBERED_ITEM.search(text):
        parts = [NUMBERED_ITEM.sub("", p, count=1) for p in re.split(r"\n(?=\d+\.)", text)]
    elif BULLET_ITEM.search(text):
        parts = [BULLET_ITEM.sub("", p, count=1) for p in re.split(r"\n(?=[-*]\s+)", text)]
    else:
        parts = text.split("\n")
    return [p for p in (_clean(part) for part in parts) if p]


def _import_json(data: list) -> list[ScriptSegment]:
    try:
        exported = [ExportSegment.model_validate(item) for item in data]
    except ValidationError as e:
        raise ValueError(f"Invalid segment JSON: {e.error_count()} errors") from e
    return [
        ScriptSegment(speaker=SPEAKER_1 if s.speaker_index == 0 else SPEAKER_2, text=s.text)
        for s in exported
    ]


def import_segments(text: str) -> list[ScriptSegment]:
    """Import segments from exported JSON or from plain script text.

    JSON must be a list of `{"speakerIndex", "text"}` objects. Plain text
    is split into paragraphs; speakers alternate unless a paragraph starts
    with a label such as "Speaker 2:" or "Host 1:".

    Raises:
        ValueError: If the text is a JSON array or object that is not a
            list of valid segments
    """
    text = text.replace("\r", "")
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        data = None

    if isinstance(data, dict):
        raise ValueError("Segment JSON must be a list of segments")
    if isinstance(data, list):
        segments = _import_json(data)
        logger.info(f"Imported {len(segments)} segments from JSON")
        return segments

    segments = []
    for i, paragraph in enumerate(_split_paragraphs(text)):
        speaker = alternate_speaker(i)
        match = SPEAKER_LABEL.match(paragraph)
        if match:
            speaker = SPEAKER_1 if FIRST_SPEAKER_LABEL.search(match.group(0)) else SPEAKER_2
            paragraph = paragraph[match.end():].strip()
        segments.append(ScriptSegment(speaker=speaker, text=paragraph))

    logger.info(f"Imported {len(segments)} segments from text")
    return segments
