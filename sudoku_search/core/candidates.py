"""Fixed-universe candidate set backed by a single machine word."""

from __future__ import annotations
from typing import Iterable, Iterator

# Width of the backing word. Values must fit below this bit position.
WORD_BITS = 32
WORD_MASK = (1 << WORD_BITS) - 1

MIN_VALUE = 1
MAX_VALUE = 9

# Bits 1..9 set, bit 0 unused.
VALUE_MASK = 0b1111111110


class CandidateSet:
    """
    Set of Sudoku values stored as a bit mask.

    Value ``v`` lives at bit ``v``, so the 1..9 universe is ``VALUE_MASK``.
    All operations are constant time and only touch the receiver.
    """

    __slots__ = ("bits",)

    def __init__(self, bits: int = 0):
        assert 0 <= bits <= WORD_MASK, f"bits {bits:#x} do not fit in {WORD_BITS} bits"
        self.bits = bits

    @classmethod
    def full(cls) -> CandidateSet:
        """Set containing every value 1..9."""
        return cls(VALUE_MASK)

    @classmethod
    def from_values(cls, values: Iterable[int]) -> CandidateSet:
        s = cls()
        for v in values:
            s.insert(v)
        return s

    def copy(self) -> CandidateSet:
        return CandidateSet(self.bits)

    def contains(self, value: int) -> bool:
        assert 0 <= value < WORD_BITS, f"value {value} outside the set universe"
        return (self.bits >> value) & 1 == 1

    def insert(self, value: int) -> None:
        assert 0 <= value < WORD_BITS, f"value {value} outside the set universe"
        self.bits |= 1 << value

    def remove(self, value: int) -> None:
        """Remove ``value``. Removing an absent value is a no-op."""
        assert 0 <= value < WORD_BITS, f"value {value} outside the set universe"
        self.bits &= ~(1 << value) & WORD_MASK

    def is_empty(self) -> bool:
        return self.bits == 0

    def union_with(self, other: CandidateSet) -> None:
        """In-place union."""
        self.bits |= other.bits

    def complement_within(self, mask: int) -> None:
        """
        Replace the set with its complement restricted to ``mask``.

        Turns a set of used values into the set of values still available:
        an empty set complemented within ``VALUE_MASK`` is the full 1..9 set.
        """
        self.bits = ~self.bits & mask & WORD_MASK

    def cardinality(self) -> int:
        """Number of values present, via a SWAR parallel bit count."""
        x = self.bits
        x = (x & 0x55555555) + ((x >> 1) & 0x55555555)
        x = (x & 0x33333333) + ((x >> 2) & 0x33333333)
        x = (x & 0x0F0F0F0F) + ((x >> 4) & 0x0F0F0F0F)
        x = (x & 0x00FF00FF) + ((x >> 8) & 0x00FF00FF)
        x = (x & 0x0000FFFF) + ((x >> 16) & 0x0000FFFF)
        return x

    def __contains__(self, value: int) -> bool:
        return self.contains(value)

    def __len__(self) -> int:
        return self.cardinality()

    def __iter__(self) -> Iterator[int]:
        for v in range(MIN_VALUE, MAX_VALUE + 1):
            if self.contains(v):
                yield v

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CandidateSet):
            return False
        return self.bits == other.bits

    def __hash__(self) -> int:
        return hash(self.bits)

    def __str__(self) -> str:
        if self.is_empty():
            return "{}"
        return "{ " + ", ".join(str(v) for v in self) + " }"

    def __repr__(self) -> str:
        return f"CandidateSet({self})"
