from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, Iterable, Sequence, Tuple

from .errors import InvalidAlphabet, UnknownSymbol

# ASCII ordered so that plain string comparison agrees with digit order.
DEFAULT_SYMBOLS = "!0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ_abcdefghijklmnopqrstuvwxyz~"


@dataclass(frozen=True, init=False)
class Alphabet:
    """Ordered symbol table; a symbol's index is its digit value.

    Index 0 is the low symbol and the last index is the high symbol. The
    instance is immutable and safe to share between threads.
    """

    symbols: Tuple[str, ...]
    _lookup: Dict[str, int] = field(init=False, repr=False, compare=False)

    def __init__(self, symbols: Iterable[str]) -> None:
        chars = tuple(symbols)
        if len(chars) < 2:
            raise InvalidAlphabet(
                "alphabet needs at least two symbols", {"size": len(chars)}
            )
        lookup: Dict[str, int] = {}
        for index, ch in enumerate(chars):
            if not isinstance(ch, str) or len(ch) != 1:
                raise InvalidAlphabet(f"alphabet entry {ch!r} is not a single character")
            if ch in lookup:
                raise InvalidAlphabet(f"duplicate symbol {ch!r}", {"symbol": ch})
            lookup[ch] = index
        object.__setattr__(self, "symbols", chars)
        object.__setattr__(self, "_lookup", lookup)

    @classmethod
    def normalized(cls, symbols: Iterable[str]) -> "Alphabet":
        """Sort ``symbols`` by code point and drop duplicates before building."""
        return cls(sorted(set(symbols)))

    @property
    def size(self) -> int:
        return len(self.symbols)

    @property
    def low(self) -> str:
        return self.symbols[0]

    @property
    def high(self) -> str:
        return self.symbols[-1]

    def digit_of(self, symbol: str) -> int:
        try:
            return self._lookup[symbol]
        except KeyError:
            raise UnknownSymbol(symbol) from None

    def symbol_of(self, index: int) -> str:
        if not 0 <= index < len(self.symbols):
            raise IndexError(f"digit {index} outside alphabet of size {self.size}")
        return self.symbols[index]

    def to_digits(self, string: str) -> Tuple[int, ...]:
        return tuple(self.digit_of(ch) for ch in string)

    def from_digits(self, digits: Sequence[int]) -> str:
        return "".join(self.symbol_of(d) for d in digits)

    def valid(self, string: str) -> bool:
        """True for a non-empty string made only of alphabet symbols."""
        if not string:
            return False
        return all(ch in self._lookup for ch in string)

    def __str__(self) -> str:
        return "".join(self.symbols)


@lru_cache(maxsize=None)
def default_alphabet() -> Alphabet:
    return Alphabet(DEFAULT_SYMBOLS)
