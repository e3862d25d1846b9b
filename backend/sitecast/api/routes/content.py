"""SEO description, WordPress excerpt and podcast script routes."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from pydantic import Field

from sitecast.api.deps import Generator
from sitecast.api.errors import generation_errors
from sitecast.models import CamelModel, OrganizationDetails, PageBody, ScriptSegment
from sitecast.services.exports import content_disposition, sanitize_file_name

router = APIRouter()


class ContentRequest(CamelModel):
    """Page bodies plus organization details.

    Page bodies are ordered most important first: bodies are dropped from
    the end when the prompt is too large.
    """

    page_bodies: list[PageBody] = []
    organization_name: str = ""
    website_url: str = Field(default="", alias="websiteURL")

    def organization(self) -> OrganizationDetails:
        return OrganizationDetails(
            organization_name=self.organization_name,
            website_url=self.website_url,
        )


class ContactRequest(ContentRequest):
    """Content request that also carries contact details."""

    email: str = ""
    phone_number: str = ""
    address: str = ""

    def organization(self) -> OrganizationDetails:
        return OrganizationDetails(
            organization_name=self.organization_name,
            website_url=self.website_url,
            email=self.email,
            phone_number=self.phone_number,
            address=self.address,
        )


class ScriptRequest(ContactRequest):
    prompt_type: int = 1
    custom_prompt: str | None = None


class ContentResponse(CamelModel):
    content: str


class ScriptResponse(CamelModel):
    script: str
    script_array: list[ScriptSegment]


class ScriptDownloadRequest(CamelModel):
    script: str
    file_name: str = "podcast-script"


@router.post("/descriptions", response_model=ContentResponse)
async def generate_description(request: ContentRequest, generator: Generator) -> ContentResponse:
    """Generate an SEO description (raw HTML) for the organization."""
    with generation_errors("generate description"):
        content = await generator.generate_description(request.organization(), request.page_bodies)
    return ContentResponse(content=content)


@router.post("/excerpts", response_model=ContentResponse)
async def generate_excerpt(request: ContentRequest, generator: Generator) -> ContentResponse:
    """Generate a plain-text WordPress excerpt for the organization."""
    with generation_errors("generate excerpt"):
        content = await generator.generate_excerpt(request.organization(), request.page_bodies)
    return ContentResponse(content=content)


@router.post("/scripts", response_model=ScriptResponse)
async def generate_script(request: ScriptRequest, generator: Generator) -> ScriptResponse:
    """Generate a two-host podcast script.

    `promptType` selects the built-in prompt (0 legacy, 1 conversational,
    2 accessible); a non-blank `customPrompt` replaces it.
    """
    with generation_errors("generate script"):
        generated = await generator.generate_script(
            request.organization(),
            request.page_bodies,
            prompt_type=request.prompt_type,
            custom_prompt=request.custom_prompt,
        )
    return ScriptResponse(script=generated.script, script_array=generated.segments)


@router.post("/scripts/download", response_class=PlainTextResponse)
async def download_script(request: ScriptDownloadRequest) -> PlainTextResponse:
    """Download a script as a text file."""
    file_name = sanitize_file_name(request.file_name.strip()) or "podcast-script"
    return PlainTextResponse(
        content=request.script,
        media_type="text/plain; charset=utf-8",
        headers={"Content-Disposition": content_disposition(f"{file_name}.txt")},
    )
