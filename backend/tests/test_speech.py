import logging
import random

import httpx
import pytest
from conftest import FakeSpeechClient

from sitecast.models import SPEAKER_1, SPEAKER_2, ScriptSegment
from sitecast.services.speech import (
    VOICE_MODE_FIXED,
    VOICE_MODE_RANDOM,
    GoogleSpeechClient,
    SpeechSynthesisError,
    SpeechSynthesizer,
    assign_voices,
    preview,
)

VOICES = ["voice-a", "voice-b"]


def segments(*texts, speakers=None):
    speakers = speakers or [SPEAKER_1 if i % 2 == 0 else SPEAKER_2 for i in range(len(texts))]
    return [ScriptSegment(speaker=s, text=t) for s, t in zip(speakers, texts)]


async def test_failed_segment_is_skipped(settings):
    client = FakeSpeechClient(failing={"two"})
    synthesizer = SpeechSynthesizer(client, settings, rng=random.Random(0))

    result = await synthesizer.synthesize(segments("one", "two", "three"))

    assert len(result.saved_files) == 2
    assert [f.index for f in result.saved_files] == [0, 2]
    assert result.script == "one\n\ntwo\n\nthree"


async def test_retryable_errors_are_retried(settings):
    client = FakeSpeechClient(failing={"two"}, retryable=True)
    synthesizer = SpeechSynthesizer(client, settings, rng=random.Random(0))

    result = await synthesizer.synthesize(segments("one", "two"))

    assert len(result.saved_files) == 1
    assert [text for text, _ in client.calls].count("two") == settings.tts_max_attempts


async def test_non_retryable_errors_are_not_retried(settings):
    client = FakeSpeechClient(failing={"two"})
    synthesizer = SpeechSynthesizer(client, settings, rng=random.Random(0))

    await synthesizer.synthesize(segments("one", "two"))

    assert [text for text, _ in client.calls].count("two") == 1


class FlakySpeechClient:
    """Fails with a retryable error for the first `failures` calls."""

    def __init__(self, failures):
        self.failures = failures
        self.calls = 0

    async def synthesize(self, text, voice):
        self.calls += 1
        if self.calls <= self.failures:
            raise SpeechSynthesisError("TTS request failed: timeout", retryable=True)
        return f"{voice}:{text}"


async def test_segment_recovers_on_a_later_attempt(settings, caplog):
    client = FlakySpeechClient(failures=settings.tts_max_attempts - 1)
    synthesizer = SpeechSynthesizer(client, settings, rng=random.Random(0))

    with caplog.at_level(logging.WARNING, logger="sitecast.services.speech"):
        result = await synthesizer.synthesize(segments("one"))

    assert [f.index for f in result.saved_files] == [0]
    assert client.calls == settings.tts_max_attempts
    assert sum("Retrying" in r.getMessage() for r in caplog.records) == settings.tts_max_attempts - 1


async def test_empty_segments_are_skipped_and_text_cleaned(settings):
    client = FakeSpeechClient()
    synthesizer = SpeechSynthesizer(client, settings, rng=random.Random(0))

    result = await synthesizer.synthesize(segments("  ", "line one\nline two"))

    assert [f.index for f in result.saved_files] == [1]
    assert client.calls[0][0] == "line one line two"


async def test_saved_file_fields(settings):
    client = FakeSpeechClient()
    synthesizer = SpeechSynthesizer(client, settings, rng=random.Random(0))
    text = "x" * 150

    result = await synthesizer.synthesize(segments(text), voice_mode=VOICE_MODE_FIXED)

    saved = result.saved_files[0]
    assert saved.speaker == SPEAKER_1
    assert saved.paragraph == "x" * 100 + "..."
    assert saved.audio_data == f"{settings.tts_voices[0]}:{text}"


def test_preview_keeps_short_text():
    assert preview("short") == "short"


def test_fixed_mode_uses_label_rule():
    segs = segments("a", "b", "c", speakers=["Host 1", "Guest", "Host 1"])

    assignment = assign_voices(segs, VOICE_MODE_FIXED, VOICES, "v1", "v2")

    assert assignment.voices == ("v1", "v2", "v1")
    assert dict(assignment.speakers) == {"Host 1": "v1", "Guest": "v2"}


def test_random_mode_keeps_one_voice_per_speaker():
    segs = segments("a", "b", "c", "d")

    assignment = assign_voices(segs, VOICE_MODE_RANDOM, VOICES, rng=random.Random(3))

    assert assignment.voices[0] == assignment.voices[2]
    assert assignment.voices[1] == assignment.voices[3]
    assert set(assignment.voices) == set(VOICES)


def test_unlabeled_segments_alternate():
    segs = segments("a", "b", "c", speakers=[None, None, None])

    assignment = assign_voices(segs, VOICE_MODE_FIXED, VOICES)

    assert assignment.voices == ("voice-a", "voice-b", "voice-a")


def test_assignment_is_immutable():
    assignment = assign_voices(segments("a"), VOICE_MODE_FIXED, VOICES)

    with pytest.raises(TypeError):
        assignment.speakers[SPEAKER_1] = "other"


async def test_google_client_posts_request(settings):
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"audioContent": "QUJD"})

    client = GoogleSpeechClient(settings, transport=httpx.MockTransport(handler))

    audio = await client.synthesize("Hello", "voice-a")

    assert audio == "QUJD"
    assert requests[0].url.params["key"] == "test-key"
    body = requests[0].read()
    assert b'"name":"voice-a"' in body.replace(b" ", b"")


@pytest.mark.parametrize("status_code,retryable", [(429, True), (503, True), (400, False)])
async def test_google_client_error_statuses(settings, status_code, retryable):
    transport = httpx.MockTransport(lambda request: httpx.Response(status_code, text="error"))
    client = GoogleSpeechClient(settings, transport=transport)

    with pytest.raises(SpeechSynthesisError) as exc_info:
        await client.synthesize("Hello", "voice-a")

    assert exc_info.value.retryable is retryable


def test_google_client_requires_api_key(settings):
    with pytest.raises(ValueError):
        GoogleSpeechClient(settings.model_copy(update={"google_api_key": None}))
