"""SEO copy, podcast scripts and site extraction with the LLM."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from functools import partial
from urllib.parse import urljoin, urlparse

from pydantic import ValidationError

from sitecast.config import Settings
from sitecast.models import BasicInformation, OrganizationDetails, PageBody, ScriptSegment
from sitecast.prompts import (
    BASIC_INFORMATION_PROMPT,
    CONVERSATIONAL_SCRIPT_PROMPT,
    PODCAST_PROMPT,
    PRIORITY_LINKS_PROMPT,
    SCRIPT_PROMPTS,
    SEO_DESCRIPTION_PROMPT,
    WP_EXCERPT_PROMPT,
)
from sitecast.services.content_fitter import ContentTooLargeError, FitResult, fit_prompt
from sitecast.services.llm_client import LLMClient, LLMError
from sitecast.services.segments import split_script
from sitecast.services.templates import PromptTemplate

logger = logging.getLogger(__name__)

DESCRIPTION_TEMPLATE = PromptTemplate(SEO_DESCRIPTION_PROMPT)
EXCERPT_TEMPLATE = PromptTemplate(WP_EXCERPT_PROMPT)
PODCAST_TEMPLATE = PromptTemplate(PODCAST_PROMPT)
BASIC_INFORMATION_TEMPLATE = PromptTemplate(BASIC_INFORMATION_PROMPT)
SCRIPT_TEMPLATES = {prompt_type: PromptTemplate(text) for prompt_type, text in SCRIPT_PROMPTS.items()}
DEFAULT_SCRIPT_TEMPLATE = PromptTemplate(CONVERSATIONAL_SCRIPT_PROMPT)


@dataclass
class GeneratedScript:
    """A podcast script and its speaker-tagged paragraphs."""
    script: str
    segments: list[ScriptSegment]
    pages_included: int


def script_template(prompt_type: int | None, custom_prompt: str | None = None) -> PromptTemplate:
    """Pick the script prompt.

    A non-blank custom prompt wins; otherwise 0 is the legacy prompt, 2 the
    accessible-audio prompt, and anything else the conversational prompt.
    """
    if custom_prompt and custom_prompt.strip():
        return PromptTemplate.from_custom(custom_prompt)
    return SCRIPT_TEMPLATES.get(prompt_type, DEFAULT_SCRIPT_TEMPLATE)


class ContentGenerator:
    """Generates content for an organization from its page bodies."""

    def __init__(self, llm: LLMClient, settings: Settings):
        self.llm = llm
        self.settings = settings

    async def _fit(
        self,
        template: PromptTemplate,
        values: dict[str, str],
        page_bodies: Sequence[PageBody],
        label: str,
        model: str | None = None,
    ) -> FitResult:
        result = await fit_prompt(
            template,
            values,
            page_bodies,
            count_tokens=partial(self.llm.count_tokens, model=model),
            ceiling=self.settings.token_ceiling,
            label=label,
        )
        if result.degraded:
            logger.warning(f"Generating for {label} without page content")
        return result

    async def _generate_text(
        self,
        template: PromptTemplate,
        organization: OrganizationDetails,
        page_bodies: Sequence[PageBody],
    ) -> tuple[str, int]:
        label = organization.organization_name or organization.website_url
        fitted = await self._fit(template, organization.prompt_values(), page_bodies, label)
        text = await self.llm.generate(fitted.prompt)
        return text.strip(), fitted.included

    async def generate_description(
        self,
        organization: OrganizationDetails,
        page_bodies: Sequence[PageBody],
    ) -> str:
        """Generate the SEO description as raw HTML.

        Raises:
            ContentTooLargeError: If the page bodies cannot be fitted
            GenerationError: If the LLM call fails
        """
        content, _ = await self._generate_text(DESCRIPTION_TEMPLATE, organization, page_bodies)
        return content

    async def generate_excerpt(
        self,
        organization: OrganizationDetails,
        page_bodies: Sequence[PageBody],
    ) -> str:
        """Generate the plain-text WordPress excerpt."""
        content, _ = await self._generate_text(EXCERPT_TEMPLATE, organization, page_bodies)
        return content

    async def generate_script(
        self,
        organization: OrganizationDetails,
        page_bodies: Sequence[PageBody],
        prompt_type: int | None = 1,
        custom_prompt: str | None = None,
    ) -> GeneratedScript:
        """Generate a two-host podcast script.

        Raises:
            ContentTooLargeError: If the page bodies cannot be fitted
            GenerationError: If the LLM call fails
        """
        template = script_template(prompt_type, custom_prompt)
        return await self._script_from_template(template, organization, page_bodies)

    async def generate_podcast_script(
        self,
        organization: OrganizationDetails,
        page_bodies: Sequence[PageBody],
    ) -> GeneratedScript:
        """Generate a script with the prompt used for one-shot podcasts."""
        return await self._script_from_template(PODCAST_TEMPLATE, organization, page_bodies)

    async def _script_from_template(
        self,
        template: PromptTemplate,
        organization: OrganizationDetails,
        page_bodies: Sequence[PageBody],
    ) -> GeneratedScript:
        script, included = await self._generate_text(template, organization, page_bodies)
        segments = split_script(script)
        logger.info(f"Generated script for {organization.organization_name}: {len(segments)} paragraphs")
        return GeneratedScript(script=script, segments=segments, pages_included=included)

    async def extract_basic_information(self, page_bodies: Sequence[PageBody]) -> BasicInformation:
        """Extract name, address, phone, email and EIN from page bodies.

        Never fails: any error yields a blank record.
        """
        if not page_bodies:
            return BasicInformation()

        logger.info("Extracting basic information...")
        model = self.settings.llm_extraction_model
        try:
            fitted = await self._fit(BASIC_INFORMATION_TEMPLATE, {}, page_bodies, "basic information", model)
            data = await self.llm.generate_json(fitted.prompt, model=model)
            if not isinstance(data, dict):
                logger.error(f"Unexpected basic information format: {type(data).__name__}")
                return BasicInformation()
            return BasicInformation.model_validate(
                {key: value for key, value in data.items() if isinstance(value, str)}
            )
        except (LLMError, ContentTooLargeError, ValidationError) as e:
            logger.error(f"Error fetching basic information: {e}")
            return BasicInformation()

    async def prioritize_links(self, base_url: str, links: Sequence[str]) -> list[str]:
        """Ask the LLM which links likely describe the organization.

        Returns:
            Absolute URLs, most important first; empty on any failure
        """
        if not base_url or not links:
            return []

        max_links = self.settings.scraper_max_priority_links
        prompt = PromptTemplate(PRIORITY_LINKS_PROMPT).render(
            {"max_links": str(max_links), "links": "\n".join(links)}
        )

        logger.info(f"Prioritizing {len(links)} links for {base_url}")
        try:
            data = await self.llm.generate_json(prompt, model=self.settings.llm_extraction_model)
        except LLMError as e:
            logger.error(f"Error prioritizing links: {e}")
            return []

        # JSON-object modes wrap the array, e.g. {"links": [...]}
        if isinstance(data, dict):
            data = next((value for value in data.values() if isinstance(value, list)), None)
        if not isinstance(data, list):
            logger.error("Unexpected priority links format")
            return []

        prioritized: list[str] = []
        for link in data:
            if not isinstance(link, str):
                continue
            # The model may return relative paths
            url = urljoin(base_url, link.strip())
            if urlparse(url).scheme in ("http", "https") and url not in prioritized:
                prioritized.append(url)

        logger.info(f"Prioritized links: {prioritized[:max_links]}")
        return prioritized[:max_links]
