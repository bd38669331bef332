from typing import Dict, List, Type

from .parsers.base import BankParser
from .parsers.revolut import RevolutParser


# Statement layout code -> parser class. Each layout (and each currency
# suffix it prints) needs its own parser; there is no generic fallback.
_PARSER_REGISTRY: Dict[str, Type[BankParser]] = {
    RevolutParser.bank_code: RevolutParser,
}


def supported_bank_codes() -> List[str]:
    return sorted(_PARSER_REGISTRY)


def get_parser(bank_code: str) -> BankParser:
    """
    Get a parser instance for a statement layout.

    Raises:
        ValueError: If no parser is registered for bank_code
    """
    try:
        return _PARSER_REGISTRY[bank_code]()
    except KeyError:
        raise ValueError(
            f"Unsupported bank code: '{bank_code}'. "
            f"Supported: {', '.join(supported_bank_codes())}"
        ) from None
