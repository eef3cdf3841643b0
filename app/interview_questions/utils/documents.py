"""Job description ingest from uploaded files (PDF or plain text)."""

from __future__ import annotations
import io
import logging
from pathlib import PurePath

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from ..errors import InvalidInput

logger = logging.getLogger(__name__)

TEXT_SUFFIXES = {".txt", ".md"}


def extract_pdf_text(file_like) -> str:
    """Selectable text of every non-empty page, pages separated by a blank line."""
    try:
        reader = PdfReader(file_like)
    except PdfReadError as e:
        raise InvalidInput(f"Could not read PDF: {e}") from e

    parts = []
    for page in reader.pages:
        txt = page.extract_text() or ""
        if txt.strip():
            parts.append(txt)
    return "\n\n".join(parts).strip()


def read_job_description(name: str, data: bytes) -> str:
    suffix = PurePath(name or "").suffix.lower()
    if suffix == ".pdf":
        text = extract_pdf_text(io.BytesIO(data))
    elif suffix in TEXT_SUFFIXES:
        text = data.decode("utf-8", errors="replace").strip()
    else:
        raise InvalidInput(f"Unsupported job description file type: {name!r}")

    logger.debug("Read %d characters of job description from %s", len(text), name)
    return text
