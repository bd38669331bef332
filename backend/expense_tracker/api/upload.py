import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from ..config import settings
from ..db import get_db
from ..ingest.extract import ExtractionError
from ..ingest.service import ingest_statement

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/upload", tags=["upload"])


@router.post("", response_class=PlainTextResponse)
async def upload_statement(
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
) -> str:
    """
    Upload a PDF statement; its transactions are parsed and stored.
    """
    filename = file.filename or ""
    content_type = file.content_type or ""

    if not (filename.lower().endswith(".pdf") or content_type == "application/pdf"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Could not read uploaded file",
        )

    content = await file.read()
    logger.info("Uploaded file: %s, size: %d", filename, len(content))

    try:
        result = ingest_statement(db, content, settings.DEFAULT_BANK_CODE)
    except ExtractionError as e:
        logger.error("Error extracting text from PDF: %s", e)
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to parse PDF file",
        )

    return f"Uploaded and processed {result['imported_count']} transactions."
