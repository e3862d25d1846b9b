"""Website scraper using the Firecrawl API."""

import asyncio
import logging

from firecrawl import Firecrawl

from sitecast.config import Settings
from sitecast.services.scraper import ScrapedPage, ScrapeError, filter_links, normalize_website_url

logger = logging.getLogger(__name__)


class FirecrawlScraper:
    """Scrape pages through Firecrawl, which renders JavaScript-heavy sites."""

    def __init__(self, settings: Settings):
        """Initialize scraper with settings.

        Args:
            settings: Application settings containing Firecrawl API key
        """
        if not settings.firecrawl_api_key:
            raise ValueError("FIRECRAWL_API_KEY is required")

        self.client = Firecrawl(api_key=settings.firecrawl_api_key)
        self.wait_for_ms = settings.firecrawl_wait_for_ms

    async def fetch_page(self, url: str) -> ScrapedPage:
        """Scrape a single page as markdown plus its links.

        Raises:
            ScrapeError: If Firecrawl fails to scrape the page
        """
        if url.startswith(("mailto:", "tel:")):
            return ScrapedPage(url=url, body_text="")

        url = normalize_website_url(url)
        logger.info(f"Scraping page with Firecrawl: {url}")

        try:
            # The SDK is synchronous; keep the event loop free
            doc = await asyncio.to_thread(
                self.client.scrape,
                url=url,
                formats=["markdown", "links"],
                only_main_content=True,
                wait_for=self.wait_for_ms,
            )
        except Exception as e:
            logger.error(f"Error scraping {url}: {e}")
            raise ScrapeError(f"Failed to fetch or parse the URL: {url}") from e

        raw_links = getattr(doc, "links", None) or []
        hrefs = [link if isinstance(link, str) else getattr(link, "url", str(link)) for link in raw_links]

        return ScrapedPage(
            url=url,
            body_text=(doc.markdown or "").strip(),
            links=filter_links(hrefs, url),
        )
