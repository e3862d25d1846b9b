"""Process a list of websites end to end: scrape, describe, excerpt, podcast."""

import logging
import time
from collections.abc import Sequence

from sitecast.models import BatchSiteResult, OrganizationDetails
from sitecast.services.content_fitter import ContentTooLargeError
from sitecast.services.content_generator import ContentGenerator
from sitecast.services.llm_client import LLMError
from sitecast.services.podcast import create_podcast
from sitecast.services.scraper import ScrapeError, normalize_website_url
from sitecast.services.speech import SpeechSynthesizer
from sitecast.services.website import Scraper, scrape_website

logger = logging.getLogger(__name__)

DEFAULT_ORGANIZATION_NAME = "Organization"

# Errors that leave a single generated field blank without failing the site
STEP_ERRORS = (LLMError, ContentTooLargeError)


def parse_website_list(websites: Sequence[str]) -> list[str]:
    """Trim entries, drop blank ones and default each to https://."""
    return [normalize_website_url(url) for url in websites if url.strip()]


class BatchProcessor:
    """Runs the full generation pipeline over websites, one at a time."""

    def __init__(
        self,
        scraper: Scraper,
        generator: ContentGenerator,
        synthesizer: SpeechSynthesizer,
    ):
        self.scraper = scraper
        self.generator = generator
        self.synthesizer = synthesizer

    async def process(self, websites: Sequence[str]) -> list[BatchSiteResult]:
        """Process every website sequentially.

        A site whose scrape fails is marked `error`; the rest continue.
        """
        urls = parse_website_list(websites)
        logger.info(f"Starting batch processing of {len(urls)} websites...")

        results = []
        for i, url in enumerate(urls, 1):
            logger.info(f"Processing {i}/{len(urls)}: {url}")
            result = await self.process_website(url)
            if result.status == "completed":
                logger.info(f"Completed: {url}")
            else:
                logger.warning(f"Failed: {url} - {result.error}")
            results.append(result)

        completed = sum(1 for r in results if r.status == "completed")
        logger.info(f"Batch processing completed: {completed}/{len(results)} sites")
        return results

    async def process_website(self, url: str) -> BatchSiteResult:
        result = BatchSiteResult(url=url, status="processing")
        start = time.time()

        try:
            scrape = await scrape_website(url, self.scraper, self.generator)
        except ScrapeError as e:
            result.status = "error"
            result.error = f"Scraping failed: {e}"
            return result
        except Exception as e:
            logger.exception(f"Unexpected error scraping {url}")
            result.status = "error"
            result.error = str(e) or "Unknown error occurred"
            return result

        page_bodies = scrape.prompt_page_bodies()
        result.organization_name = scrape.basic_information.organization_name or DEFAULT_ORGANIZATION_NAME
        organization = OrganizationDetails(
            organization_name=result.organization_name,
            website_url=url,
        )

        try:
            result.yoast_description = await self.generator.generate_description(organization, page_bodies)
        except STEP_ERRORS as e:
            logger.error(f"Description generation failed for {url}: {e}")

        try:
            result.wp_excerpt = await self.generator.generate_excerpt(organization, page_bodies)
        except STEP_ERRORS as e:
            logger.error(f"Excerpt generation failed for {url}: {e}")

        try:
            podcast = await create_podcast(self.generator, self.synthesizer, organization, page_bodies)
        except STEP_ERRORS as e:
            logger.error(f"Podcast generation failed for {url}: {e}")
        else:
            result.podcast_script = podcast.script
            result.podcast_files = podcast.saved_files
            result.audio_files = podcast.audio_files

        result.status = "completed"
        logger.info(f"Processed {url} in {time.time() - start:.1f}s")
        return result
