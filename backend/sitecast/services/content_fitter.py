"""Fit prompts under a token ceiling by dropping trailing page bodies.

Every generation call builds its prompt here. Page bodies are included as a
prefix of the caller's list: when the prompt is too large the last body is
dropped and the prompt rebuilt, so callers must order page bodies from most
to least important.
"""

import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass

from sitecast.models.page import NO_CONTENT, PageBody
from sitecast.services.llm_client import TokenCountError
from sitecast.services.templates import PromptTemplate, TemplateError

logger = logging.getLogger(__name__)

# Notice used in place of page bodies when fitting breaks down unexpectedly
CONTENT_UNAVAILABLE = "Content unavailable: unable to process page content due to technical limitations."

TokenCounter = Callable[[str], Awaitable[int | None]]


class ContentTooLargeError(Exception):
    """No prefix of the page bodies fits under the token ceiling."""

    def __init__(self, page_count: int, ceiling: int):
        self.page_count = page_count
        self.ceiling = ceiling
        super().__init__(
            f"Token limit exceeded: no subset of {page_count} page bodies fits under {ceiling} tokens"
        )


@dataclass
class FitResult:
    """A prompt that fits the ceiling and how many page bodies it carries."""
    prompt: str
    included: int
    degraded: bool = False  # Minimal fallback prompt was used


def join_page_bodies(page_bodies: Sequence[PageBody]) -> str:
    """Render page bodies as URL + text blocks separated by blank lines."""
    return "\n\n".join(body.render() for body in page_bodies)


async def fit_prompt(
    template: PromptTemplate,
    values: Mapping[str, str],
    page_bodies: Sequence[PageBody],
    count_tokens: TokenCounter,
    ceiling: int,
    label: str = "",
) -> FitResult:
    """Build the largest prompt whose token count is within `ceiling`.

    Starts from all page bodies and drops one from the end per attempt. A
    failed or unusable count also costs one body, so the loop ends after at
    most `len(page_bodies)` count calls.

    Args:
        template: Prompt template with a content marker
        values: Values for the template's other placeholders
        page_bodies: Page bodies ordered by descending importance
        count_tokens: Async token counter; raises TokenCountError on failure
        ceiling: Maximum accepted token count
        label: Name used in log messages (usually the organization)

    Returns:
        FitResult with the prompt and the number of bodies included.
        If counting raises anything other than TokenCountError, the
        minimal metadata-only prompt is returned with degraded=True.

    Raises:
        MissingPlaceholderError: If `values` lacks a template placeholder
        ContentTooLargeError: If no page bodies remain before a prompt fits
    """
    template.validate(values)

    remaining = len(page_bodies)
    if remaining == 0:
        logger.info(f"No page bodies for {label or 'request'}, using metadata-only prompt")
        return FitResult(prompt=template.render(values, content=NO_CONTENT), included=0)

    try:
        prompt = template.render(values, content=join_page_bodies(page_bodies))
        while True:
            try:
                total_tokens = await count_tokens(prompt)
            except TokenCountError as e:
                logger.warning(f"Error counting tokens for {label}: {e}, reducing content")
            else:
                if total_tokens is None or total_tokens <= 0:
                    logger.warning(f"Failed to get token count for {label}, reducing content")
                elif total_tokens <= ceiling:
                    logger.info(
                        f"Prompt for {label} fits: {total_tokens} tokens with "
                        f"{remaining}/{len(page_bodies)} page bodies"
                    )
                    return FitResult(prompt=prompt, included=remaining)
                else:
                    logger.info(f"Prompt for {label} has {total_tokens} tokens (ceiling {ceiling}), reducing content")

            remaining -= 1
            if remaining <= 0:
                logger.warning(f"Token limit exceeded even with minimal content for {label}")
                raise ContentTooLargeError(len(page_bodies), ceiling)

            prompt = template.render(values, content=join_page_bodies(page_bodies[:remaining]))
            logger.info(f"Reduced to {remaining} page bodies, prompt length: {len(prompt)} characters")

    except (ContentTooLargeError, TemplateError):
        raise
    except Exception:
        logger.exception(f"Unexpected error counting tokens for {label}, using minimal prompt")
        return FitResult(
            prompt=template.render(values, content=CONTENT_UNAVAILABLE),
            included=0,
            degraded=True,
        )
