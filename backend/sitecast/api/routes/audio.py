"""Text-to-speech routes: segment audio and one-shot podcasts."""

from typing import Literal

from fastapi import APIRouter, HTTPException, status

from sitecast.api.deps import AppSettings, Generator, Synthesizer
from sitecast.api.errors import generation_errors
from sitecast.api.routes.content import ContactRequest
from sitecast.models import CamelModel, SavedAudioFile, ScriptSegment
from sitecast.services.podcast import create_podcast
from sitecast.services.speech import VOICE_MODE_RANDOM

router = APIRouter()


class AudioRequest(CamelModel):
    """Segments to synthesize and how to pick their voices.

    Voice mode 0 shuffles the voice pool per request; 1 uses the given
    speaker voices.
    """

    segments: list[ScriptSegment]
    voice_mode: Literal[0, 1] = VOICE_MODE_RANDOM
    speaker1_voice: str | None = None
    speaker2_voice: str | None = None


class AudioResponse(CamelModel):
    script: str
    saved_files: list[SavedAudioFile]
    audio_files: int


class PodcastResponse(AudioResponse):
    script_array: list[ScriptSegment]
    message: str


@router.post("/audio", response_model=AudioResponse)
async def synthesize_audio(
    request: AudioRequest,
    synthesizer: Synthesizer,
    settings: AppSettings,
) -> AudioResponse:
    """Synthesize each segment. Segments that fail are left out of the response."""
    max_bytes = settings.tts_max_segment_bytes
    too_long = [i for i, s in enumerate(request.segments) if len(s.text.encode("utf-8")) > max_bytes]
    if too_long:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Segments {too_long} exceed {max_bytes} bytes",
        )

    result = await synthesizer.synthesize(
        request.segments,
        voice_mode=request.voice_mode,
        speaker1_voice=request.speaker1_voice,
        speaker2_voice=request.speaker2_voice,
    )
    return AudioResponse(
        script=result.script,
        saved_files=result.saved_files,
        audio_files=len(result.saved_files),
    )


@router.post("/podcasts", response_model=PodcastResponse)
async def generate_podcast(
    request: ContactRequest,
    generator: Generator,
    synthesizer: Synthesizer,
) -> PodcastResponse:
    """Generate a podcast script for the organization and synthesize it."""
    with generation_errors("generate podcast"):
        podcast = await create_podcast(generator, synthesizer, request.organization(), request.page_bodies)

    return PodcastResponse(
        script=podcast.script,
        script_array=podcast.segments,
        saved_files=podcast.saved_files,
        audio_files=podcast.audio_files,
        message=f"Generated {podcast.audio_files} audio segments for {request.organization_name}",
    )
