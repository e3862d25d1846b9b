"""Map domain errors raised during generation to HTTP errors."""

import logging
from contextlib import contextmanager

from fastapi import HTTPException, status

from sitecast.services.content_fitter import ContentTooLargeError
from sitecast.services.llm_client import GenerationError
from sitecast.services.templates import TemplateError

logger = logging.getLogger(__name__)


@contextmanager
def generation_errors(action: str):
    """Translate fitting and generation failures for `action` into HTTPException.

    Content that cannot be fitted and malformed prompts are client errors;
    generation failures are server errors.
    """
    try:
        yield
    except ContentTooLargeError as e:
        logger.warning(f"{action}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Token limit exceeded, unable to {action}",
        ) from e
    except TemplateError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    except GenerationError as e:
        logger.error(f"Failed to {action}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to {action}",
        ) from e
