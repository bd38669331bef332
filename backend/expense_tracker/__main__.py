import argparse
import json
import sys
from pathlib import Path

from .config import settings
from .ingest.extract import ExtractionError, extract_text
from .ingest.registry import get_parser, supported_bank_codes
from .logging_setup import configure_logging
from .schemas import ParsedRecordOut


def _read_statement_text(path: Path, is_text: bool) -> str:
    if is_text:
        return path.read_text(encoding="utf-8")
    return extract_text(path.read_bytes())


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="expense_tracker", description="Expense tracker utilities"
    )
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Logging level")
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Print the transactions of a statement as JSON")
    parse_cmd.add_argument("file", type=Path, help="PDF statement (or text dump with --text)")
    parse_cmd.add_argument("--text", action="store_true", help="Input is already extracted plain text")
    parse_cmd.add_argument(
        "--bank",
        default=settings.DEFAULT_BANK_CODE,
        choices=supported_bank_codes(),
        help="Statement layout",
    )

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    bank_parser = get_parser(args.bank)
    try:
        text = _read_statement_text(args.file, args.text)
    except (ExtractionError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    result = bank_parser.parse_text(text)
    records = [ParsedRecordOut.model_validate(r).model_dump() for r in result.transactions]
    json.dump(records, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
