import random

import pytest
from fastapi.testclient import TestClient

from sitecast.api.deps import get_scraper, get_speech_client
from sitecast.config import Settings, get_settings
from sitecast.main import app
from sitecast.services.content_generator import ContentGenerator
from sitecast.services.llm_client import get_llm_client
from sitecast.services.scraper import ScrapedPage, ScrapeError
from sitecast.services.speech import SpeechSynthesisError, SpeechSynthesizer

SCRIPT = "Welcome to the show.\n\nThanks for having me.\n\nLet's talk about the library."


class FakeLLM:
    """In-memory LLM: counts tokens as characters and returns canned text."""

    def __init__(self, text=SCRIPT, count=None, generate_error=None):
        self.text = text
        self.count = count or (lambda prompt: len(prompt))
        self.generate_error = generate_error
        self.priority_links: list | dict | Exception = []
        self.basic_information: dict | Exception = {}
        self.count_calls: list[str] = []
        self.prompts: list[str] = []
        self.json_prompts: list[str] = []

    async def count_tokens(self, prompt, model=None):
        self.count_calls.append(prompt)
        result = self.count(prompt)
        if isinstance(result, Exception):
            raise result
        return result

    async def generate(self, prompt, model=None, json_output=False):
        self.prompts.append(prompt)
        if self.generate_error:
            raise self.generate_error
        return self.text

    async def generate_json(self, prompt, model=None):
        self.json_prompts.append(prompt)
        result = self.priority_links if "JSON array" in prompt else self.basic_information
        if isinstance(result, Exception):
            raise result
        return result


class FakeSpeechClient:
    """Returns the voice and text as 'audio'; fails for texts listed in `failing`."""

    def __init__(self, failing=(), retryable=False):
        self.failing = set(failing)
        self.retryable = retryable
        self.calls: list[tuple[str, str]] = []

    async def synthesize(self, text, voice):
        self.calls.append((text, voice))
        if text in self.failing:
            raise SpeechSynthesisError("TTS API error: 500", retryable=self.retryable)
        return f"{voice}:{text}"


class FakeScraper:
    """Serves pages from a dict keyed by URL; missing URLs raise ScrapeError."""

    def __init__(self, pages):
        self.pages = pages
        self.fetched: list[str] = []

    async def fetch_page(self, url):
        self.fetched.append(url)
        if url not in self.pages:
            raise ScrapeError(f"Failed to fetch or parse the URL: {url}")
        return self.pages[url]


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        google_api_key="test-key",
        token_ceiling=100_000,
        tts_retry_base_delay_seconds=0,
        log_json=False,
    )


@pytest.fixture
def llm():
    return FakeLLM()


@pytest.fixture
def generator(llm, settings):
    return ContentGenerator(llm, settings)


@pytest.fixture
def speech_client():
    return FakeSpeechClient()


@pytest.fixture
def synthesizer(speech_client, settings):
    return SpeechSynthesizer(speech_client, settings, rng=random.Random(0))


@pytest.fixture
def scraper():
    return FakeScraper({
        "https://example.org": ScrapedPage(
            url="https://example.org",
            body_text="Example Org helps people with low vision.",
            links=["https://example.org/about", "https://example.org/events"],
        ),
        "https://example.org/about": ScrapedPage(
            url="https://example.org/about",
            body_text="About us: founded in 1990.",
        ),
    })


@pytest.fixture
def client(settings, llm, speech_client, scraper):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_llm_client] = lambda: llm
    app.dependency_overrides[get_speech_client] = lambda: speech_client
    app.dependency_overrides[get_scraper] = lambda: scraper
    yield TestClient(app)
    app.dependency_overrides.clear()

