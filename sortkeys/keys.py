from __future__ import annotations

from typing import List, Optional

from . import lexorank
from .alphabet import Alphabet, default_alphabet


class SortKeys:
    """Key generator bound to one alphabet."""

    def __init__(self, alphabet: Optional[Alphabet] = None) -> None:
        self.alphabet = alphabet if alphabet is not None else default_alphabet()

    @classmethod
    def from_symbols(cls, symbols: str) -> "SortKeys":
        return cls(Alphabet(symbols))

    @property
    def low(self) -> str:
        return self.alphabet.low

    @property
    def high(self) -> str:
        return self.alphabet.high

    @property
    def symbols(self) -> str:
        return str(self.alphabet)

    def valid(self, key: str) -> bool:
        return self.alphabet.valid(key)

    def between(self, a: str, b: str) -> str:
        return lexorank.between(self.alphabet, a, b)

    def after(self, a: str) -> str:
        return lexorank.after(self.alphabet, a)

    def before(self, a: str) -> str:
        return lexorank.before(self.alphabet, a)

    def key_between(self, left: Optional[str] = None, right: Optional[str] = None) -> str:
        return lexorank.key_between(self.alphabet, left, right)

    def keys_between(
        self, left: Optional[str] = None, right: Optional[str] = None, count: int = 1
    ) -> List[str]:
        return lexorank.keys_between(self.alphabet, left, right, count)
