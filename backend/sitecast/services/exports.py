"""File exports: batch results as CSV and safe download names."""

import csv
import io
import re
import unicodedata
from collections.abc import Sequence
from urllib.parse import quote

from sitecast.models import BatchSiteResult

CSV_HEADER = [
    "Website URL",
    "Organization Name",
    "Yoast Description",
    "WP Excerpt",
    "Podcast Script Available",
    "Audio Files Count",
]

UNSAFE_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|]')


def results_to_csv(results: Sequence[BatchSiteResult]) -> str:
    """Render completed sites as CSV with every field quoted."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for site in results:
        if site.status != "completed":
            continue
        writer.writerow([
            site.url,
            site.organization_name,
            site.yoast_description,
            site.wp_excerpt,
            "Yes" if site.podcast_script else "No",
            site.audio_files or len(site.podcast_files),
        ])
    return buffer.getvalue()


def sanitize_file_name(name: str) -> str:
    """Replace characters not allowed in file names and drop one trailing space or period."""
    if name.endswith((" ", ".")):
        name = name[:-1]
    return UNSAFE_FILENAME_CHARS.sub("_", name)


def content_disposition(file_name: str) -> str:
    """Attachment header value for a download name.

    Header values are Latin-1 on the wire, so names outside printable ASCII
    get an ASCII `filename` fallback plus the UTF-8 `filename*` form (RFC 6266).
    """
    ascii_name = unicodedata.normalize("NFKD", file_name).encode("ascii", "ignore").decode("ascii")
    fallback = "".join(c for c in ascii_name if c.isprintable() and c not in '"\\') or "download"
    if fallback == file_name:
        return f'attachment; filename="{file_name}"'
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(file_name, safe='')}"
