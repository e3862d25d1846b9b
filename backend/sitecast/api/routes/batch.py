"""Batch processing and CSV export routes."""

from datetime import date

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import PlainTextResponse

from sitecast.api.deps import Batch
from sitecast.models import BatchSiteResult, CamelModel
from sitecast.services.batch import parse_website_list
from sitecast.services.exports import content_disposition, results_to_csv

router = APIRouter()


class BatchRequest(CamelModel):
    websites: list[str]


class BatchResponse(CamelModel):
    results: list[BatchSiteResult]
    completed: int
    failed: int


class BatchExportRequest(CamelModel):
    results: list[BatchSiteResult]


@router.post("/batch", response_model=BatchResponse)
async def process_batch(request: BatchRequest, processor: Batch) -> BatchResponse:
    """Scrape and generate content for each website, one after another."""
    if not parse_website_list(request.websites):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Please enter at least one website URL",
        )

    results = await processor.process(request.websites)
    completed = sum(1 for r in results if r.status == "completed")
    return BatchResponse(results=results, completed=completed, failed=len(results) - completed)


@router.post("/batch/export", response_class=PlainTextResponse)
async def export_batch(request: BatchExportRequest) -> PlainTextResponse:
    """Download completed batch results as CSV."""
    filename = f"batch-processing-results-{date.today().isoformat()}.csv"
    return PlainTextResponse(
        content=results_to_csv(request.results),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": content_disposition(filename)},
    )
