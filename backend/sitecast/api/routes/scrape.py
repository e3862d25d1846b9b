"""Website scraping route."""

from fastapi import APIRouter, HTTPException, status
from pydantic import Field

from sitecast.api.deps import Generator, WebsiteScraper
from sitecast.models import BasicInformation, CamelModel, PageBody
from sitecast.services.scraper import ScrapeError
from sitecast.services.website import scrape_website

router = APIRouter()


class ScrapeRequest(CamelModel):
    website_url: str = Field(alias="websiteURL", min_length=1)


class ScrapeResponse(CamelModel):
    website_url: str = Field(alias="websiteURL")
    body_text: str
    page_bodies: list[PageBody]
    basic_information: BasicInformation


@router.post("/scrape", response_model=ScrapeResponse)
async def scrape(
    request: ScrapeRequest,
    scraper: WebsiteScraper,
    generator: Generator,
) -> ScrapeResponse:
    """Scrape the home page and the most informative linked pages."""
    if not request.website_url.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing required fields",
        )

    try:
        result = await scrape_website(request.website_url, scraper, generator)
    except ScrapeError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        ) from e

    return ScrapeResponse(
        website_url=result.website_url,
        body_text=result.body_text,
        page_bodies=result.page_bodies,
        basic_information=result.basic_information,
    )
