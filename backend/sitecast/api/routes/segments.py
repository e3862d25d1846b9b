"""Podcast editor routes: import, export and re-tag script segments."""

import json

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import Response

from sitecast.models import CamelModel, ScriptSegment
from sitecast.services.segments import distribute_speakers, export_segments, import_segments, join_script

router = APIRouter()


class ImportRequest(CamelModel):
    text: str


class SegmentsRequest(CamelModel):
    segments: list[ScriptSegment]


class SegmentsResponse(CamelModel):
    segments: list[ScriptSegment]
    script: str


@router.post("/segments/import", response_model=SegmentsResponse)
async def import_script(request: ImportRequest) -> SegmentsResponse:
    """Import segments from exported JSON or plain script text."""
    try:
        segments = import_segments(request.text)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    return SegmentsResponse(segments=segments, script=join_script(segments))


@router.post("/segments/export")
async def export_script(request: SegmentsRequest) -> Response:
    """Download segments as a JSON array of `{speakerIndex, text}`."""
    exported = [s.model_dump(by_alias=True) for s in export_segments(request.segments)]
    return Response(
        content=json.dumps(exported, indent=2),
        media_type="application/json",
        headers={"Content-Disposition": 'attachment; filename="podcast-segments.json"'},
    )


@router.post("/segments/distribute", response_model=SegmentsResponse)
async def distribute(request: SegmentsRequest) -> SegmentsResponse:
    """Re-tag segments so the two speakers alternate."""
    segments = distribute_speakers(request.segments)
    return SegmentsResponse(segments=segments, script=join_script(segments))
