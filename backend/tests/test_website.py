from conftest import FakeScraper

from sitecast.services.scraper import ScrapedPage
from sitecast.services.website import scrape_website


async def test_scrape_collects_priority_pages(scraper, generator, llm):
    llm.priority_links = ["/about", "/events"]
    llm.basic_information = {"organizationName": "Example Org"}

    result = await scrape_website("example.org", scraper, generator)

    assert result.website_url == "example.org"
    assert result.body_text == "Example Org helps people with low vision."
    # /events is missing from the fake site and yields an empty body
    assert [(b.href, b.body_text) for b in result.page_bodies] == [
        ("https://example.org/about", "About us: founded in 1990."),
        ("https://example.org/events", ""),
    ]
    assert result.basic_information.organization_name == "Example Org"


async def test_home_page_is_last_in_prompt_bodies(scraper, generator, llm):
    llm.priority_links = ["/about"]

    result = await scrape_website("https://example.org", scraper, generator)

    bodies = result.prompt_page_bodies()
    assert bodies[-1].href == "https://example.org"
    assert bodies[-1].body_text == "Example Org helps people with low vision."
    assert "https://example.org\nExample Org helps" in llm.json_prompts[-1]


async def test_no_links_means_no_priority_pages(generator):
    scraper = FakeScraper({"https://solo.org": ScrapedPage(url="https://solo.org", body_text="Solo")})

    result = await scrape_website("solo.org", scraper, generator)

    assert result.page_bodies == []
    assert scraper.fetched == ["https://solo.org"]
