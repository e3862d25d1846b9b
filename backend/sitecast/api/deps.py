"""Dependency injection for FastAPI routes."""

from typing import Annotated

from fastapi import Depends, HTTPException, status

from sitecast.config import Settings, get_settings
from sitecast.services import (
    BatchProcessor,
    ContentGenerator,
    GoogleSpeechClient,
    LLMClient,
    SpeechSynthesizer,
    get_llm_client,
    get_scraper_service,
)
from sitecast.services.website import Scraper

AppSettings = Annotated[Settings, Depends(get_settings)]
LLM = Annotated[LLMClient, Depends(get_llm_client)]


def get_content_generator(llm: LLM, settings: AppSettings) -> ContentGenerator:
    return ContentGenerator(llm, settings)


def get_speech_client(settings: AppSettings) -> GoogleSpeechClient:
    try:
        return GoogleSpeechClient(settings)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        ) from e


SpeechClient = Annotated[GoogleSpeechClient, Depends(get_speech_client)]


def get_speech_synthesizer(client: SpeechClient, settings: AppSettings) -> SpeechSynthesizer:
    return SpeechSynthesizer(client, settings)


def get_scraper(settings: AppSettings) -> Scraper:
    try:
        return get_scraper_service(settings)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        ) from e


# Type aliases for dependency injection
Generator = Annotated[ContentGenerator, Depends(get_content_generator)]
Synthesizer = Annotated[SpeechSynthesizer, Depends(get_speech_synthesizer)]
WebsiteScraper = Annotated[Scraper, Depends(get_scraper)]


def get_batch_processor(
    scraper: WebsiteScraper,
    generator: Generator,
    synthesizer: Synthesizer,
) -> BatchProcessor:
    return BatchProcessor(scraper, generator, synthesizer)


Batch = Annotated[BatchProcessor, Depends(get_batch_processor)]
