"""LLM prompts for various tasks."""

from sitecast.prompts.basic_information import BASIC_INFORMATION_PROMPT
from sitecast.prompts.podcast_script import (
    ACCESSIBLE_SCRIPT_PROMPT,
    CONVERSATIONAL_SCRIPT_PROMPT,
    LEGACY_SCRIPT_PROMPT,
    PODCAST_PROMPT,
    SCRIPT_PROMPTS,
)
from sitecast.prompts.priority_links import PRIORITY_LINKS_PROMPT
from sitecast.prompts.seo_description import SEO_DESCRIPTION_PROMPT
from sitecast.prompts.wp_excerpt import WP_EXCERPT_PROMPT

__all__ = [
    "ACCESSIBLE_SCRIPT_PROMPT",
    "BASIC_INFORMATION_PROMPT",
    "CONVERSATIONAL_SCRIPT_PROMPT",
    "LEGACY_SCRIPT_PROMPT",
    "PODCAST_PROMPT",
    "PRIORITY_LINKS_PROMPT",
    "SCRIPT_PROMPTS",
    "SEO_DESCRIPTION_PROMPT",
    "WP_EXCERPT_PROMPT",
]
