"""Request and response data models."""

from sitecast.models.base import CamelModel
from sitecast.models.batch import BatchSiteResult, BatchStatus
from sitecast.models.page import BasicInformation, OrganizationDetails, PageBody
from sitecast.models.segment import (
    SPEAKER_1,
    SPEAKER_2,
    ExportSegment,
    SavedAudioFile,
    ScriptSegment,
)

__all__ = [
    "CamelModel",
    "BasicInformation",
    "BatchSiteResult",
    "BatchStatus",
    "OrganizationDetails",
    "PageBody",
    "SPEAKER_1",
    "SPEAKER_2",
    "ExportSegment",
    "SavedAudioFile",
    "ScriptSegment",
]
