"""Text-to-speech synthesis of podcast segments."""

import asyncio
import logging
import random
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

import httpx
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from sitecast.config import Settings
from sitecast.models import SavedAudioFile, ScriptSegment
from sitecast.services.segments import is_first_speaker

logger = logging.getLogger(__name__)

VOICE_MODE_RANDOM = 0
VOICE_MODE_FIXED = 1

PREVIEW_LENGTH = 100


class SpeechSynthesisError(Exception):
    """A text-to-speech request failed."""

    def __init__(self, message: str, retryable: bool = False):
        super().__init__(message)
        self.retryable = retryable


def _is_retryable(exception: BaseException) -> bool:
    """Transport errors, 429 and 5xx responses are worth another attempt."""
    return isinstance(exception, SpeechSynthesisError) and exception.retryable


class GoogleSpeechClient:
    """Client for the Google Cloud Text-to-Speech REST API.

    API Documentation: https://cloud.google.com/text-to-speech/docs/reference/rest/v1beta1/text/synthesize
    """

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        if not settings.google_api_key:
            raise ValueError("GOOGLE_API_KEY is required for text-to-speech")

        self.endpoint = settings.tts_endpoint
        self.api_key = settings.google_api_key
        self.language_code = settings.tts_language_code
        self.audio_encoding = settings.tts_audio_encoding
        self.timeout = settings.tts_timeout_seconds
        self.transport = transport

    async def synthesize(self, text: str, voice: str) -> str:
        """Synthesize text with a voice.

        Returns:
            Base64-encoded audio content

        Raises:
            SpeechSynthesisError: On transport errors, error responses, or empty audio.
                Transport errors, 429 and 5xx responses are marked retryable.
        """
        payload = {
            "input": {"text": text},
            "voice": {"languageCode": self.language_code, "name": voice},
            "audioConfig": {"audioEncoding": self.audio_encoding},
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    self.endpoint,
                    params={"key": self.api_key},
                    json=payload,
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            raise SpeechSynthesisError(
                f"TTS API error: {status_code} - {e.response.text[:200]}",
                retryable=status_code == 429 or status_code >= 500,
            ) from e
        except httpx.RequestError as e:
            raise SpeechSynthesisError(f"TTS request failed: {e}", retryable=True) from e

        audio_content = response.json().get("audioContent")
        if not audio_content:
            raise SpeechSynthesisError("TTS API returned no audio content")
        return audio_content


@dataclass(frozen=True)
class VoiceAssignment:
    """Voice for every segment, fixed before synthesis starts."""
    voices: tuple[str, ...]
    speakers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def voice_for(self, index: int) -> str:
        return self.voices[index]


def assign_voices(
    segments: Sequence[ScriptSegment],
    voice_mode: int,
    voices: Sequence[str],
    speaker1_voice: str | None = None,
    speaker2_voice: str | None = None,
    rng: random.Random | None = None,
) -> VoiceAssignment:
    """Compute the voice table for a list of segments.

    Random mode shuffles the voice pool once and gives each distinct speaker
    label the next voice on first encounter, wrapping when there are more
    speakers than voices. Fixed mode gives labels containing "1" the first
    speaker's voice and every other label the second. Unlabeled segments
    alternate by position in both modes.
    """
    if not voices:
        raise ValueError("At least one voice is required")

    if voice_mode == VOICE_MODE_FIXED:
        pair = (speaker1_voice or voices[0], speaker2_voice or voices[1 % len(voices)])
        speakers = {
            s.speaker: pair[0] if is_first_speaker(s.speaker) else pair[1]
            for s in segments
            if s.speaker
        }
    else:
        pool = list(voices)
        (rng or random).shuffle(pool)
        pair = (pool[0], pool[1 % len(pool)])
        speakers = {}
        for s in segments:
            if s.speaker and s.speaker not in speakers:
                speakers[s.speaker] = pool[len(speakers) % len(pool)]

    assigned = tuple(
        speakers[s.speaker] if s.speaker else pair[i % 2]
        for i, s in enumerate(segments)
    )
    return VoiceAssignment(voices=assigned, speakers=MappingProxyType(speakers))


@dataclass
class SynthesisResult:
    """Combined script and the audio of every segment that synthesized."""
    script: str
    saved_files: list[SavedAudioFile]


def preview(text: str, length: int = PREVIEW_LENGTH) -> str:
    """Short preview of a segment's text."""
    return text[:length] + ("..." if len(text) > length else "")


class SpeechSynthesizer:
    """Synthesizes segments in fixed-size concurrent batches with retries."""

    def __init__(
        self,
        client: GoogleSpeechClient,
        settings: Settings,
        rng: random.Random | None = None,
    ):
        self.client = client
        self.voices = settings.tts_voices
        self.batch_size = max(1, settings.tts_batch_size)
        self.max_attempts = max(1, settings.tts_max_attempts)
        self.base_delay = settings.tts_retry_base_delay_seconds
        self.rng = rng or random.Random()

    async def _synthesize_with_retry(self, index: int, text: str, voice: str) -> str | None:
        """Synthesize one segment, backing off exponentially with jitter.

        Returns None once attempts are exhausted or the error is not retryable.
        """
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.max_attempts),
                wait=wait_exponential_jitter(initial=self.base_delay, jitter=self.base_delay),
                retry=retry_if_exception(_is_retryable),
                before_sleep=before_sleep_log(logger, logging.WARNING),
                reraise=True,
            ):
                with attempt:
                    return await self.client.synthesize(text, voice)
        except SpeechSynthesisError as e:
            logger.error(f"Error synthesizing segment {index} (attempt {attempt.retry_state.attempt_number}): {e}")
        return None

    async def synthesize(
        self,
        segments: Sequence[ScriptSegment],
        voice_mode: int = VOICE_MODE_RANDOM,
        speaker1_voice: str | None = None,
        speaker2_voice: str | None = None,
    ) -> SynthesisResult:
        """Synthesize every non-empty segment.

        Segments that fail are logged and left out of the result; `index`
        on each saved file is the segment's position in `segments`.
        """
        assignment = assign_voices(
            segments,
            voice_mode,
            self.voices,
            speaker1_voice=speaker1_voice,
            speaker2_voice=speaker2_voice,
            rng=self.rng,
        )

        jobs: list[tuple[int, str | None, str]] = []
        for i, segment in enumerate(segments):
            text = segment.text.replace("\r", "").replace("\n", " ").strip()
            if text:
                jobs.append((i, segment.speaker, text))

        script = "\n\n".join(text for _, _, text in jobs)
        saved_files: list[SavedAudioFile] = []
        total_batches = (len(jobs) + self.batch_size - 1) // self.batch_size

        logger.info(f"Synthesizing {len(jobs)} segments in {total_batches} batches (batch_size={self.batch_size})")

        for batch_num in range(total_batches):
            batch = jobs[batch_num * self.batch_size:(batch_num + 1) * self.batch_size]
            results = await asyncio.gather(
                *(
                    self._synthesize_with_retry(index, text, assignment.voice_for(index))
                    for index, _, text in batch
                ),
                return_exceptions=True,
            )

            for (index, speaker, text), result in zip(batch, results):
                if isinstance(result, Exception):
                    logger.error(f"Error synthesizing segment {index}: {result}")
                    continue
                if isinstance(result, BaseException):
                    raise result
                if result is None:
                    continue
                saved_files.append(SavedAudioFile(
                    index=index,
                    speaker=speaker,
                    audio_data=result,
                    paragraph=preview(text),
                ))

        logger.info(f"Synthesized {len(saved_files)}/{len(jobs)} segments")
        return SynthesisResult(script=script, saved_files=saved_files)
