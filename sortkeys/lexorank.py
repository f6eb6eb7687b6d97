from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from .alphabet import Alphabet
from .compare import is_less
from .errors import InvalidInput, InvalidOrder

logger = logging.getLogger(__name__)


# === Bounds ===


class BoundKind(str, Enum):
    CONCRETE = "concrete"
    VIRTUAL_LOW = "virtual_low"
    VIRTUAL_HIGH = "virtual_high"


@dataclass(frozen=True)
class Bound:
    """One side of a midpoint search.

    A concrete bound reads as its digits followed by endless low digits. The
    virtual bounds are endless runs of the low digit (0) or of the digit one
    past the high symbol (``size``); neither is ever rendered.
    """

    kind: BoundKind
    digits: Tuple[int, ...] = ()

    @classmethod
    def concrete(cls, digits: Iterable[int]) -> "Bound":
        return cls(BoundKind.CONCRETE, tuple(digits))

    def digit_at(self, index: int, size: int) -> int:
        if self.kind is BoundKind.VIRTUAL_LOW:
            return 0
        if self.kind is BoundKind.VIRTUAL_HIGH:
            return size
        return self.digits[index] if index < len(self.digits) else 0

    def exhausted(self, index: int) -> bool:
        return self.kind is not BoundKind.CONCRETE or index >= len(self.digits)


VIRTUAL_LOW = Bound(BoundKind.VIRTUAL_LOW)
VIRTUAL_HIGH = Bound(BoundKind.VIRTUAL_HIGH)


# === Engine ===


def midpoint(lower: Bound, upper: Bound, size: int) -> Optional[Tuple[int, ...]]:
    """Return digits strictly between ``lower`` and ``upper``, or None.

    The common prefix is copied. At the first differing position a gap of two
    or more yields the floor average and stops. A gap of exactly one keeps the
    lower digit and continues against a virtual-high upper bound, since any
    continuation of the lower digit already sorts below the upper one. None
    means the bounds are equal or out of order.
    """
    out: List[int] = []
    i = 0
    while True:
        l = lower.digit_at(i, size)
        r = upper.digit_at(i, size)
        if l + 1 < r:
            out.append((l + r) // 2)
            return tuple(out)
        if l + 1 == r:
            if upper.kind is not BoundKind.VIRTUAL_HIGH:
                logger.debug("adjacent digits %d/%d at position %d, extending", l, r, i)
                upper = VIRTUAL_HIGH
        elif l > r or (lower.exhausted(i) and upper.exhausted(i)):
            return None
        out.append(l)
        i += 1


# === Public operations ===


def _check_trailing(alphabet: Alphabet, digits: Tuple[int, ...], key: str, name: str) -> None:
    if digits and digits[-1] == 0:
        raise InvalidInput(
            f"{name} {key!r} ends in the low symbol {alphabet.low!r}",
            {name: key},
        )


def _checked_digits(alphabet: Alphabet, key: str, name: str) -> Tuple[int, ...]:
    digits = alphabet.to_digits(key)
    _check_trailing(alphabet, digits, key, name)
    return digits


def _render(alphabet: Alphabet, digits: Optional[Tuple[int, ...]]) -> str:
    if digits is None:
        raise InvalidInput("no key sorts strictly between the given bounds")
    return alphabet.from_digits(digits)


def between(alphabet: Alphabet, a: str, b: str) -> str:
    """Return a key ``m`` with ``a < m < b``.

    The empty string is accepted for ``a`` and stands for the minimum.
    """
    seq_a = alphabet.to_digits(a)
    seq_b = alphabet.to_digits(b)
    if not is_less(seq_a, seq_b):
        raise InvalidOrder(f"{a!r} does not sort before {b!r}", {"a": a, "b": b})
    _check_trailing(alphabet, seq_a, a, "a")
    _check_trailing(alphabet, seq_b, b, "b")
    return _render(alphabet, midpoint(Bound.concrete(seq_a), Bound.concrete(seq_b), alphabet.size))


def after(alphabet: Alphabet, a: str) -> str:
    """Return a key greater than ``a``. ``a`` may not begin with the high symbol."""
    seq_a = _checked_digits(alphabet, a, "a")
    if a[:1] == alphabet.high:
        raise InvalidInput(
            f"a {a!r} begins with the high symbol {alphabet.high!r}", {"a": a}
        )
    return _render(alphabet, midpoint(Bound.concrete(seq_a), VIRTUAL_HIGH, alphabet.size))


def before(alphabet: Alphabet, a: str) -> str:
    """Return a key less than ``a``."""
    seq_a = _checked_digits(alphabet, a, "a")
    if not seq_a:
        raise InvalidInput("nothing sorts before the empty key", {"a": a})
    return _render(alphabet, midpoint(VIRTUAL_LOW, Bound.concrete(seq_a), alphabet.size))


def key_between(alphabet: Alphabet, left: Optional[str] = None, right: Optional[str] = None) -> str:
    """Key for an item placed after ``left`` and before ``right``.

    Either neighbour may be None for the open end of a list; with both None
    the key sits in the middle of the whole key space.
    """
    if left is None and right is None:
        return _render(alphabet, midpoint(VIRTUAL_LOW, VIRTUAL_HIGH, alphabet.size))
    if left is None:
        return before(alphabet, right)
    if right is None:
        return after(alphabet, left)
    return between(alphabet, left, right)


def keys_between(
    alphabet: Alphabet,
    left: Optional[str] = None,
    right: Optional[str] = None,
    count: int = 1,
) -> List[str]:
    """Return ``count`` ascending keys strictly between ``left`` and ``right``.

    Keys come from repeated bisection so they stay short and evenly spaced.
    An open end bisects against the virtual bound, so a long run at the top
    of the key space may produce keys beginning with the high symbol.
    """
    if count < 0:
        raise InvalidInput(f"count must be non-negative, got {count}", {"count": count})
    lower = VIRTUAL_LOW
    upper = VIRTUAL_HIGH
    if left is not None:
        lower = Bound.concrete(alphabet.to_digits(left))
    if right is not None:
        upper = Bound.concrete(alphabet.to_digits(right))
    if left is not None and right is not None and not is_less(lower.digits, upper.digits):
        raise InvalidOrder(
            f"{left!r} does not sort before {right!r}", {"left": left, "right": right}
        )
    if left is not None:
        _check_trailing(alphabet, lower.digits, left, "left")
    if right is not None:
        _check_trailing(alphabet, upper.digits, right, "right")
    return [alphabet.from_digits(d) for d in _spread(lower, upper, count, alphabet.size)]


def _spread(lower: Bound, upper: Bound, count: int, size: int) -> List[Tuple[int, ...]]:
    if count == 0:
        return []
    mid = midpoint(lower, upper, size)
    if mid is None:
        raise InvalidInput("no key sorts strictly between the given bounds")
    pivot = Bound.concrete(mid)
    below = (count - 1) // 2
    return (
        _spread(lower, pivot, below, size)
        + [mid]
        + _spread(pivot, upper, count - 1 - below, size)
    )
