"""Scraped page content and organization details."""

from pydantic import Field

from sitecast.models.base import CamelModel

UNKNOWN_URL = "Unknown URL"
NO_CONTENT = "No content available"


class PageBody(CamelModel):
    """Plain-text content of one crawled page, paired with its URL."""

    href: str | None = None
    body_text: str | None = None

    def render(self) -> str:
        """Render as a prompt block: URL line followed by the body text."""
        return f"{self.href or UNKNOWN_URL}\n{self.body_text or NO_CONTENT}"


class BasicInformation(CamelModel):
    """Organization details extracted from page bodies. Blank when unknown."""

    organization_name: str = ""
    address: str = ""
    phone_number: str = ""
    email: str = ""
    ein: str = ""


class OrganizationDetails(CamelModel):
    """Organization metadata interpolated into prompts."""

    organization_name: str = ""
    website_url: str = Field(default="", alias="websiteURL")
    email: str = ""
    phone_number: str = ""
    address: str = ""

    def prompt_values(self) -> dict[str, str]:
        """Values for the named placeholders of a prompt template."""
        return {
            "organization_name": self.organization_name,
            "website_url": self.website_url,
            "email": self.email,
            "phone_number": self.phone_number,
            "address": self.address,
        }
