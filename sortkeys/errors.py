from __future__ import annotations

from typing import Any, Optional


class SortKeyError(ValueError):
    """Base class for every precondition violation reported by sortkeys."""

    code = "sort_key_error"

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidAlphabet(SortKeyError):
    code = "invalid_alphabet"


class UnknownSymbol(SortKeyError):
    code = "unknown_symbol"

    def __init__(self, symbol: str) -> None:
        super().__init__(f"symbol {symbol!r} is not in the alphabet", {"symbol": symbol})
        self.symbol = symbol


class InvalidOrder(SortKeyError):
    code = "invalid_order"


class InvalidInput(SortKeyError):
    code = "invalid_input"
