from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List

EXPENSE = "Expense"
INCOME = "Income"


@dataclass(frozen=True)
class TransactionRecord:
    """A single transaction read from a statement.

    All fields are kept as text: ``date`` exactly as printed (e.g.
    "Jan 5, 2024") and ``amount`` as a signed decimal string without
    thousands separators (e.g. "-15500.00").
    """
    date: str
    description: str
    amount: str
    category: str


@dataclass
class ParseResult:
    """Result of parsing a bank statement."""
    transactions: List[TransactionRecord] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


class BankParser(ABC):
    """Abstract base class for bank statement parsers."""

    bank_code: str

    @abstractmethod
    def parse_text(self, text: str) -> ParseResult:
        """
        Extract transactions from the plain text of a statement.

        Args:
            text: Statement text, pages joined by newlines

        Returns:
            ParseResult containing transactions and any warnings
        """
        pass
