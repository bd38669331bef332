import io
import logging

import pdfplumber

logger = logging.getLogger(__name__)


class ExtractionError(Exception):
    """The PDF could not be opened or its text could not be read."""


def extract_text(pdf_bytes: bytes) -> str:
    """
    Extract the plain text of every page of a PDF.

    Each page's text is followed by a newline, so a transaction line never
    runs into the first line of the next page.

    Raises:
        ExtractionError: If the document cannot be read (corrupt, encrypted, ...)
    """
    parts = []
    try:
        with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
            for page in pdf.pages:
                parts.append(page.extract_text() or "")
                parts.append("\n")
    except Exception as e:
        raise ExtractionError(f"Failed to extract text from PDF: {e}") from e

    logger.debug("Extracted %d page(s) of text", len(parts) // 2)
    return "".join(parts)
