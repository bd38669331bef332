import logging
import re
from typing import List, Optional, Sequence, Tuple

from .base import EXPENSE, INCOME, BankParser, ParseResult, TransactionRecord

logger = logging.getLogger(__name__)

# (date, raw description, raw amount)
Capture = Tuple[str, str, str]

CURRENCY = "HUF"

# Horizontal whitespace only: a transaction never continues on the next line
_SP = r"[^\S\r\n]"

_DATE = (
    r"(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)"
    rf"{_SP}(?:3[01]|[12]\d|0?[1-9]),{_SP}\d{{4}}"
)
# Leading digit, then optional comma grouping
_AMOUNT = r"\d[\d,]*\.\d{2}"
_INBOUND_DESCRIPTION = r"Apple Pay Top-Up.*?|Transfer from.*?|Goodwill"


def _line_pattern(description: str) -> "re.Pattern[str]":
    return re.compile(
        rf"^({_DATE}){_SP}+({description}){_SP}+({_AMOUNT}){_SP}{CURRENCY}",
        re.MULTILINE,
    )


# Money out: any description starting with a non-space character, shortest
# one that still leaves "<amount> HUF"
OUTBOUND_PATTERN = _line_pattern(r"\S.*?")
# Money in: top-ups, incoming transfers and goodwill credits only
INBOUND_PATTERN = _line_pattern(_INBOUND_DESCRIPTION)

INBOUND_DESCRIPTION_PATTERN = re.compile(
    _INBOUND_DESCRIPTION.replace(".*?", ".*")
)


def match_outbound(text: str) -> List[Capture]:
    """Capture triples for "money out" lines, in text order.

    Lines whose description belongs to the inbound grammar are left to
    :func:`match_inbound`, so every line is classified once.
    """
    return [
        m.groups()
        for m in OUTBOUND_PATTERN.finditer(text)
        if not INBOUND_DESCRIPTION_PATTERN.fullmatch(m.group(2))
    ]


def match_inbound(text: str) -> List[Capture]:
    """Capture triples for "money in" lines, in text order."""
    return [m.groups() for m in INBOUND_PATTERN.finditer(text)]


def normalize_match(
    capture: Sequence[str], outbound: bool
) -> Optional[TransactionRecord]:
    """Turn a capture triple into a record.

    Returns None when the capture does not carry all three groups. The
    date is passed through as-is; calendar validity is not checked.
    """
    if len(capture) < 3 or any(group is None for group in capture[:3]):
        return None

    date, description, amount = capture[:3]
    amount = amount.replace(",", "")

    if outbound:
        return TransactionRecord(
            date=date,
            description=description.strip(),
            amount="-" + amount,
            category=EXPENSE,
        )
    return TransactionRecord(
        date=date,
        description=description.strip(),
        amount=amount,
        category=INCOME,
    )


class RevolutParser(BankParser):
    """Parser for Revolut monthly account statements (HUF accounts)."""

    bank_code = "revolut"

    def parse_text(self, text: str) -> ParseResult:
        """Run both passes; expenses come first, then income."""
        transactions: List[TransactionRecord] = []

        if not text:
            return ParseResult(transactions=transactions)

        for outbound, captures in (
            (True, match_outbound(text)),
            (False, match_inbound(text)),
        ):
            for capture in captures:
                record = self._normalize(capture, outbound)
                if record:
                    transactions.append(record)

        return ParseResult(transactions=transactions)

    def _normalize(
        self, capture: Sequence[str], outbound: bool
    ) -> Optional[TransactionRecord]:
        record = normalize_match(capture, outbound)
        if record:
            logger.debug(
                "Parsed %s: Date=%s, Desc=%s, Amount=%s",
                record.category,
                record.date,
                record.description,
                record.amount,
            )
        return record


def parse_statement(text: str) -> List[TransactionRecord]:
    """Parse statement text into transaction records."""
    return RevolutParser().parse_text(text).transactions
