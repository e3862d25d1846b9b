import json
import logging
from types import SimpleNamespace

import pytest

from sitecast.logging_config import JsonFormatter
from sitecast.services.llm_client import GenerationError, LLMClient, TokenCountError, parse_json
from sitecast.services.scraper import HttpScraper
from sitecast.services.scraper_factory import get_scraper_service


class FakeGeminiModels:
    def __init__(self, text="Generated", total_tokens=42, error=None):
        self.text = text
        self.total_tokens = total_tokens
        self.error = error

    async def count_tokens(self, model, contents):
        if self.error:
            raise self.error
        return SimpleNamespace(total_tokens=self.total_tokens)

    async def generate_content(self, model, contents, config=None):
        if self.error:
            raise self.error
        return SimpleNamespace(text=self.text)


def gemini_client(settings, **kwargs):
    client = LLMClient(settings)
    client._gemini_client = SimpleNamespace(aio=SimpleNamespace(models=FakeGeminiModels(**kwargs)))
    return client


def test_parse_json_strips_code_fences():
    assert parse_json('```json\n["/about", "/events"]\n```') == ["/about", "/events"]
    assert parse_json('{"ein": ""}') == {"ein": ""}


async def test_count_tokens(settings):
    assert await gemini_client(settings).count_tokens("prompt") == 42


async def test_count_tokens_wraps_provider_errors(settings):
    client = gemini_client(settings, error=RuntimeError("quota"))

    with pytest.raises(TokenCountError):
        await client.count_tokens("prompt")


async def test_generate(settings):
    assert await gemini_client(settings).generate("prompt") == "Generated"


async def test_empty_generation_is_an_error(settings):
    with pytest.raises(GenerationError):
        await gemini_client(settings, text="").generate("prompt")


async def test_generate_json_rejects_invalid_json(settings):
    with pytest.raises(GenerationError):
        await gemini_client(settings, text="not json").generate_json("prompt")


def test_default_scraper_backend(settings):
    assert isinstance(get_scraper_service(settings), HttpScraper)


def test_firecrawl_backend_requires_key(settings):
    with pytest.raises(ValueError):
        get_scraper_service(settings.model_copy(update={"scraper_backend": "firecrawl"}))


def test_json_formatter():
    record = logging.LogRecord("sitecast.test", logging.WARNING, __file__, 1, "Reduced to %d bodies", (2,), None)

    data = json.loads(JsonFormatter().format(record))

    assert data["level"] == "WARNING"
    assert data["logger"] == "sitecast.test"
    assert data["message"] == "Reduced to 2 bodies"
