"""Per-cell candidate sets stored as 9-bit masks."""

from __future__ import annotations

from typing import Iterable, Iterator

DIGITS = range(1, 10)

CONTRADICTION_CHAR = "x"
PLACEHOLDER_CHAR = "."


def _check_digit(n: int) -> int:
    if not 0 <= n <= 9:
        raise ValueError(f"digit must be between 0 and 9, got {n}")
    return n


class Candidates(int):
    """The digits a single cell could still hold.

    Bit ``k - 1`` is set when digit ``k`` is still possible. The empty set
    marks a contradiction, a single bit marks a determined cell.
    """

    __slots__ = ()

    @classmethod
    def from_digit(cls, n: int) -> "Candidates":
        """Return ``{n}`` for 1-9, or every digit for 0 (an unknown cell)."""
        return _FROM_DIGIT[_check_digit(n)]

    @classmethod
    def of(cls, *digits: int) -> "Candidates":
        return NONE.include(*digits)

    def is_determined(self) -> bool:
        return self != 0 and self & (self - 1) == 0

    def is_empty(self) -> bool:
        return self == 0

    @property
    def digit(self) -> int:
        """The only remaining digit of a determined cell."""
        if not self.is_determined():
            raise ValueError(f"{self!r} is not determined")
        return self.bit_length()

    def values(self) -> Iterator[int]:
        """Yield the member digits in ascending order."""
        for n in DIGITS:
            if self & _BITS[n]:
                yield n

    __iter__ = values

    def __len__(self) -> int:
        return self.bit_count()

    def __contains__(self, n: object) -> bool:
        return isinstance(n, int) and 1 <= n <= 9 and bool(self & _BITS[n])

    def include(self, *digits: int) -> "Candidates":
        """Add digits; ``0`` adds the whole domain."""
        mask = int(self)
        for n in digits:
            mask |= _FROM_DIGIT[_check_digit(n)]
        return Candidates(mask)

    def exclude(self, *digits: int) -> "Candidates":
        mask = int(self)
        for n in digits:
            mask &= ~_FROM_DIGIT[_check_digit(n)]
        return Candidates(mask)

    def union(self, other: int) -> "Candidates":
        return Candidates(int(self) | int(other))

    def intersect(self, other: int) -> "Candidates":
        return Candidates(int(self) & int(other))

    def exclude_determined(self, group: Iterable["Candidates"]) -> "Candidates":
        """Drop every value that is already determined somewhere in *group*.

        Stops early once this set is itself down to a single digit.
        """
        mask = int(self)
        for other in group:
            if mask & (mask - 1) == 0:
                break
            if other and other & (other - 1) == 0:
                mask &= ~other
        return Candidates(mask)

    @staticmethod
    def missing(group: Iterable[int]) -> "Candidates":
        """Digits that no set in *group* contains."""
        seen = 0
        for other in group:
            seen |= other
        return Candidates(ALL & ~seen)

    def display_char(self) -> str:
        if self.is_determined():
            return str(self.digit)
        if self.is_empty():
            return CONTRADICTION_CHAR
        return PLACEHOLDER_CHAR

    def __repr__(self) -> str:
        return f"Candidates({{{', '.join(str(n) for n in self)}}})"


NONE = Candidates(0)
ALL = Candidates(0x1FF)

_BITS = [NONE] + [Candidates(1 << (n - 1)) for n in DIGITS]
_FROM_DIGIT = [ALL] + _BITS[1:]
