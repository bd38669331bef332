import logging
from typing import Dict, Iterable, List

from sqlalchemy.orm import Session

from ..models import Expense
from .extract import extract_text
from .parsers.base import TransactionRecord
from .registry import get_parser

logger = logging.getLogger(__name__)


def store_records(db: Session, records: Iterable[TransactionRecord]) -> List[Expense]:
    """Add parsed records as Expense rows. The caller commits."""
    expenses = []
    for record in records:
        expense = Expense(
            date=record.date,
            category=record.category,
            amount=record.amount,
            description=record.description,
        )
        db.add(expense)
        expenses.append(expense)
    return expenses


def ingest_statement(db: Session, pdf_bytes: bytes, bank_code: str = "revolut") -> Dict:
    """
    Extract, parse and store the transactions of one PDF statement.

    Raises:
        ExtractionError: If the PDF text cannot be read; nothing is stored
        ValueError: If bank_code has no parser
    """
    parser = get_parser(bank_code)
    text = extract_text(pdf_bytes)
    result = parser.parse_text(text)

    store_records(db, result.transactions)
    db.commit()

    logger.info(
        "Successfully parsed and added %d expenses to the database.",
        len(result.transactions),
    )
    return {
        "imported_count": len(result.transactions),
        "warnings": result.warnings,
    }
