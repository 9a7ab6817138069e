"""Fixed-length boolean vector with bitwise operations."""

from __future__ import annotations

from typing import Iterator


class BitVector:
    """A mutable vector of bits with a fixed length.

    Bit ``i`` corresponds to character ``i`` of the string form. Shifting
    right moves bits towards higher indices and shifting left moves them
    towards lower indices. Bits pushed past either end are dropped.
    """

    __slots__ = ("_length", "_bits")

    def __init__(self, length: int) -> None:
        if length <= 0:
            raise ValueError(f"bit vector length must be positive, got {length}")
        self._length = length
        self._bits = 0

    @classmethod
    def _from_raw(cls, length: int, bits: int) -> BitVector:
        vector = cls.__new__(cls)
        vector._length = length
        vector._bits = bits & ((1 << length) - 1)
        return vector

    @classmethod
    def from_string(cls, text: str) -> BitVector:
        """Build a vector from text; every character other than '0' is a set bit."""
        if text is None:
            raise ValueError("cannot build a bit vector from None")
        bits = 0
        for index, char in enumerate(text):
            if char != "0":
                bits |= 1 << index
        return cls._from_raw(len(text), bits)

    def copy(self) -> BitVector:
        return self._from_raw(self._length, self._bits)

    def __len__(self) -> int:
        return self._length

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._length:
            raise IndexError(f"bit index {index} out of range for length {self._length}")

    def __getitem__(self, index: int) -> int:
        self._check_index(index)
        return (self._bits >> index) & 1

    def __setitem__(self, index: int, value: int) -> None:
        self._check_index(index)
        if value:
            self._bits |= 1 << index
        else:
            self._bits &= ~(1 << index)

    def __iter__(self) -> Iterator[int]:
        return ((self._bits >> index) & 1 for index in range(self._length))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitVector):
            return NotImplemented
        return self._length == other._length and self._bits == other._bits

    __hash__ = None  # type: ignore[assignment]

    def _check_same_length(self, other: BitVector) -> None:
        if not isinstance(other, BitVector):
            raise TypeError(f"expected BitVector, got {type(other).__name__}")
        if self._length != other._length:
            raise ValueError(
                f"bit vector lengths differ: {self._length} and {other._length}"
            )

    def __or__(self, other: BitVector) -> BitVector:
        self._check_same_length(other)
        return self._from_raw(self._length, self._bits | other._bits)

    def __and__(self, other: BitVector) -> BitVector:
        self._check_same_length(other)
        return self._from_raw(self._length, self._bits & other._bits)

    def __xor__(self, other: BitVector) -> BitVector:
        self._check_same_length(other)
        return self._from_raw(self._length, self._bits ^ other._bits)

    def __invert__(self) -> BitVector:
        return self._from_raw(self._length, ~self._bits)

    def __rshift__(self, count: int) -> BitVector:
        """Move every bit ``count`` places towards higher indices.

        A non-positive count yields an unchanged copy.
        """
        if count <= 0:
            return self.copy()
        return self._from_raw(self._length, self._bits << count)

    def __lshift__(self, count: int) -> BitVector:
        """Move every bit ``count`` places towards lower indices.

        A non-positive count yields an unchanged copy.
        """
        if count <= 0:
            return self.copy()
        return self._from_raw(self._length, self._bits >> count)

    def __str__(self) -> str:
        return "".join("1" if bit else "0" for bit in self)

    def __repr__(self) -> str:
        return f"BitVector.from_string({str(self)!r})"

    def weight(self) -> int:
        """Number of set bits."""
        return bin(self._bits).count("1")