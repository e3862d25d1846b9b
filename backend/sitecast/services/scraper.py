"""Website scraper using httpx and BeautifulSoup."""

import logging
import re
from dataclasses import dataclass, field
from urllib.parse import urljoin, urlparse

import httpx
from bs4 import BeautifulSoup

from sitecast.config import Settings

logger = logging.getLogger(__name__)

WHITESPACE = re.compile(r"\s+")

# Link targets that never lead to an HTML page worth reading
SKIP_PATTERNS = [
    # Non-HTML file extensions
    '.pdf', '.jpg', '.jpeg', '.png', '.gif', '.svg', '.webp', '.ico',
    '.css', '.js', '.xml', '.json', '.zip', '.tar', '.gz', '.rar',
    '.mp3', '.mp4', '.avi', '.mov', '.wmv', '.flv', '.wav',
    '.doc', '.docx', '.xls', '.xlsx', '.ppt', '.pptx',
    '.woff', '.woff2', '.ttf', '.eot', '.otf',

    # Authentication and user-specific pages
    '/login', '/signin', '/sign-in', '/logout', '/signout', '/sign-out',
    '/register', '/signup', '/sign-up',
    '/auth/', '/oauth/', '/sso/',
    '/account', '/my-account', '/cart', '/checkout', '/basket',

    # Technical/system paths
    '/feed', '/rss', '/atom',
    '/wp-content/', '/wp-admin/', '/wp-includes/',
    '/cdn-cgi/', '/_next/', '/_nuxt/',
    '/static/', '/assets/', '/.well-known/',
]


class ScrapeError(Exception):
    """A page could not be fetched."""


@dataclass
class ScrapedPage:
    """Text content and outgoing links of one page."""
    url: str
    body_text: str
    links: list[str] = field(default_factory=list)


def normalize_website_url(url: str) -> str:
    """Trim and default to https:// when no scheme is given."""
    url = url.strip()
    if not url.startswith(("http://", "https://")):
        url = "https://" + url
    return url


def should_skip_url(url: str) -> bool:
    """Check if URL points at an asset or a technical/user-specific page."""
    path = urlparse(url).path.lower()
    return any(pattern in path for pattern in SKIP_PATTERNS)


def filter_links(hrefs: list[str], page_url: str) -> list[str]:
    """Resolve hrefs and keep internal links to other pages.

    Drops mailto/tel/javascript/fragment links, links back to the page
    itself (ignoring the fragment) and asset or system paths. Order is
    preserved and duplicates removed.
    """
    parsed_page = urlparse(page_url)
    page_key = f"{parsed_page.netloc}{parsed_page.path.rstrip('/')}"
    links: list[str] = []

    for href in hrefs:
        href = href.strip()
        if not href or href.startswith(("mailto:", "tel:", "javascript:", "#")):
            continue

        abs_url = urljoin(page_url, href)
        parsed = urlparse(abs_url)
        if parsed.scheme not in ("http", "https") or parsed.netloc != parsed_page.netloc:
            continue
        if f"{parsed.netloc}{parsed.path.rstrip('/')}" == page_key:
            continue

        # Remove fragment
        clean_url = f"{parsed.scheme}://{parsed.netloc}{parsed.path}"
        if parsed.query:
            clean_url += f"?{parsed.query}"
        if should_skip_url(clean_url) or clean_url in links:
            continue
        links.append(clean_url)

    return links


def extract_body_text(soup: BeautifulSoup) -> str:
    """Visible body text without scripts and styles, whitespace collapsed."""
    for element in soup(["script", "style", "noscript"]):
        element.decompose()
    body = soup.find("body")
    if not body:
        return ""
    return WHITESPACE.sub(" ", body.get_text(" ")).strip()


class HttpScraper:
    """Fetch pages over HTTP and extract their text and links."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self.timeout = settings.scraper_timeout_seconds
        self.verify = settings.scraper_verify_tls
        self.user_agent = settings.user_agent
        self.transport = transport

    async def fetch_page(self, url: str) -> ScrapedPage:
        """Fetch a page and extract body text and internal links.

        Non-HTML responses yield an empty page.

        Raises:
            ScrapeError: If the request fails or returns an error status
        """
        if url.startswith(("mailto:", "tel:")):
            return ScrapedPage(url=url, body_text="")

        url = normalize_website_url(url)
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                verify=self.verify,
                headers={"User-Agent": self.user_agent},
                transport=self.transport,
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Error fetching {url}: {e}")
            raise ScrapeError(f"Failed to fetch or parse the URL: {url}") from e

        content_type = response.headers.get("content-type", "")
        if "html" not in content_type.lower():
            logger.info(f"Skipping non-HTML content at {url} ({content_type})")
            return ScrapedPage(url=url, body_text="")

        soup = BeautifulSoup(response.text, "lxml")
        final_url = str(response.url)
        hrefs = [a["href"] for a in soup.find_all("a", href=True)]
        links = filter_links(hrefs, final_url)
        body_text = extract_body_text(soup)

        logger.info(f"Fetched {url}: {len(body_text)} chars, {len(links)} links")
        return ScrapedPage(url=final_url, body_text=body_text, links=links)
