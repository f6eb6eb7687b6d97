"""Sort keys that fit strictly between two existing keys."""

from .alphabet import DEFAULT_SYMBOLS, Alphabet, default_alphabet
from .compare import Ordering, compare, is_less
from .errors import InvalidAlphabet, InvalidInput, InvalidOrder, SortKeyError, UnknownSymbol
from .keys import SortKeys
from .lexorank import after, before, between, key_between, keys_between, midpoint

__all__ = [
    "DEFAULT_SYMBOLS",
    "Alphabet",
    "default_alphabet",
    "Ordering",
    "compare",
    "is_less",
    "SortKeyError",
    "InvalidAlphabet",
    "InvalidInput",
    "InvalidOrder",
    "UnknownSymbol",
    "SortKeys",
    "between",
    "after",
    "before",
    "key_between",
    "keys_between",
    "midpoint",
]
