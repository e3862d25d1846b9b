"""Business logic services."""

from sitecast.services.batch import BatchProcessor
from sitecast.services.content_generator import ContentGenerator
from sitecast.services.llm_client import LLMClient, get_llm_client
from sitecast.services.scraper_factory import get_scraper_service
from sitecast.services.speech import GoogleSpeechClient, SpeechSynthesizer

__all__ = [
    "BatchProcessor",
    "ContentGenerator",
    "GoogleSpeechClient",
    "LLMClient",
    "SpeechSynthesizer",
    "get_llm_client",
    "get_scraper_service",
]
