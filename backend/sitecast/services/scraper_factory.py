"""Factory for creating scraper instances based on configuration."""

import logging

from sitecast.config import Settings

logger = logging.getLogger(__name__)


def get_scraper_service(settings: Settings):
    """Create and return the scraper selected by settings.scraper_backend.

    Returns:
        A scraper instance (HttpScraper or FirecrawlScraper)

    Raises:
        ValueError: If required API key is missing for the selected backend
    """
    if settings.scraper_backend == "firecrawl":
        logger.info("Using Firecrawl scraper backend")
        from sitecast.services.firecrawl_scraper import FirecrawlScraper
        return FirecrawlScraper(settings)
    else:
        logger.info("Using httpx scraper backend")
        from sitecast.services.scraper import HttpScraper
        return HttpScraper(settings)
