from __future__ import annotations

from enum import Enum
from itertools import zip_longest
from typing import Sequence


class Ordering(str, Enum):
    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"


def compare(seq_a: Sequence[int], seq_b: Sequence[int]) -> Ordering:
    """Order two digit sequences as if both were right-padded with the low digit.

    ``(3,)`` and ``(3, 0)`` are therefore EQUAL, while ``(3,)`` is LESS than
    ``(3, 1)``.
    """
    for da, db in zip_longest(seq_a, seq_b, fillvalue=0):
        if da < db:
            return Ordering.LESS
        if da > db:
            return Ordering.GREATER
    return Ordering.EQUAL


def is_less(seq_a: Sequence[int], seq_b: Sequence[int]) -> bool:
    return compare(seq_a, seq_b) is Ordering.LESS
