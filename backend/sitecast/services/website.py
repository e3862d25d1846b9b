"""Scrape an organization's website into page bodies and basic information."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Protocol

from sitecast.models import BasicInformation, PageBody
from sitecast.services.content_generator import ContentGenerator
from sitecast.services.scraper import ScrapedPage, ScrapeError, normalize_website_url

logger = logging.getLogger(__name__)


class Scraper(Protocol):
    async def fetch_page(self, url: str) -> ScrapedPage: ...


@dataclass
class WebsiteScrape:
    """Home page text, priority page bodies and extracted details of a site."""
    website_url: str
    body_text: str
    page_bodies: list[PageBody] = field(default_factory=list)
    basic_information: BasicInformation = field(default_factory=BasicInformation)

    def prompt_page_bodies(self) -> list[PageBody]:
        """Page bodies for generation: priority pages first, home page last."""
        return [*self.page_bodies, PageBody(href=self.website_url, body_text=self.body_text)]


async def _fetch_body(scraper: Scraper, url: str) -> PageBody:
    try:
        page = await scraper.fetch_page(url)
    except ScrapeError as e:
        logger.warning(f"Skipping priority page {url}: {e}")
        return PageBody(href=url, body_text="")
    return PageBody(href=url, body_text=page.body_text)


async def scrape_website(
    website_url: str,
    scraper: Scraper,
    generator: ContentGenerator,
) -> WebsiteScrape:
    """Scrape the home page, the LLM-chosen priority pages and basic information.

    Priority pages are fetched concurrently; one that fails contributes an
    empty body.

    Raises:
        ScrapeError: If the home page cannot be fetched
    """
    url = normalize_website_url(website_url)
    logger.info(f"Scraping website: {url}")

    home = await scraper.fetch_page(url)
    priority_links = await generator.prioritize_links(url, home.links)

    page_bodies = list(await asyncio.gather(*(_fetch_body(scraper, link) for link in priority_links)))

    scrape = WebsiteScrape(website_url=website_url, body_text=home.body_text, page_bodies=page_bodies)
    scrape.basic_information = await generator.extract_basic_information(scrape.prompt_page_bodies())

    logger.info(
        f"Scraped {url}: {len(home.body_text)} chars on home page, "
        f"{len(page_bodies)} priority pages"
    )
    return scrape
