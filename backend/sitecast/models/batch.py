"""Batch processing results."""

from typing import Literal

from sitecast.models.base import CamelModel
from sitecast.models.segment import SavedAudioFile

BatchStatus = Literal["pending", "processing", "completed", "error"]


class BatchSiteResult(CamelModel):
    """Outcome of processing one website in a batch."""

    url: str
    status: BatchStatus = "pending"
    organization_name: str = ""
    yoast_description: str = ""
    wp_excerpt: str = ""
    podcast_script: str = ""
    podcast_files: list[SavedAudioFile] = []
    audio_files: int = 0
    error: str | None = None
