"""Ternary intervals: vectors over the alphabet '0', '1' and '-'."""

from __future__ import annotations

from typing import Iterator, Optional

from satdpll.bitvector import BitVector

DONT_CARE = "-"
_DEFAULT_LENGTH = 8


class BoolInterval:
    """A boolean interval stored as a value vector and a don't-care vector.

    Component ``i`` is '-' when bit ``i`` of ``dnc`` is set, otherwise it is
    '1' or '0' according to bit ``i`` of ``vec``.
    """

    __slots__ = ("vec", "dnc")

    def __init__(self, vec: BitVector, dnc: BitVector) -> None:
        if len(vec) != len(dnc):
            raise ValueError(
                f"value and don't-care vectors differ in length: {len(vec)} and {len(dnc)}"
            )
        self.vec = vec.copy()
        self.dnc = dnc.copy()

    @classmethod
    def from_string(cls, text: str) -> BoolInterval:
        """Parse text such as '1-0'; '-' is don't-care, '1' is one, anything else zero."""
        if text is None:
            raise ValueError("cannot build an interval from None")
        vec = BitVector(len(text))
        dnc = BitVector(len(text))
        for index, char in enumerate(text):
            if char == DONT_CARE:
                dnc[index] = 1
            elif char == "1":
                vec[index] = 1
        return cls(vec, dnc)

    @classmethod
    def from_vectors(
        cls, vec_text: Optional[str], dnc_text: Optional[str]
    ) -> BoolInterval:
        """Build an interval from two bit strings.

        When either is missing or their lengths differ, an all-zero interval
        of eight components is returned instead.
        """
        if vec_text is not None and dnc_text is not None and len(vec_text) == len(dnc_text):
            return cls(BitVector.from_string(vec_text), BitVector.from_string(dnc_text))
        return cls(BitVector(_DEFAULT_LENGTH), BitVector(_DEFAULT_LENGTH))

    def copy(self) -> BoolInterval:
        return BoolInterval(self.vec, self.dnc)

    def __len__(self) -> int:
        return len(self.vec)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoolInterval):
            return NotImplemented
        return self.vec == other.vec and self.dnc == other.dnc

    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, index: int) -> str:
        if self.dnc[index]:
            return DONT_CARE
        return "1" if self.vec[index] else "0"

    def __setitem__(self, index: int, value: str) -> None:
        """Set a component; '-' and '0' are taken as is, anything else as '1'."""
        if value == DONT_CARE:
            self.dnc[index] = 1
            self.vec[index] = 0
        elif value == "0":
            self.vec[index] = 0
            self.dnc[index] = 0
        else:
            self.vec[index] = 1
            self.dnc[index] = 0

    def __iter__(self) -> Iterator[str]:
        return (self[index] for index in range(len(self)))

    def __str__(self) -> str:
        return "".join(self)

    def __repr__(self) -> str:
        return f"BoolInterval.from_string({str(self)!r})"

    def rank(self) -> int:
        """Number of components that are not don't-care."""
        return len(self.vec) - self.dnc.weight()

    def _differences(self, other: BoolInterval) -> tuple[BitVector, BitVector]:
        either_dnc = self.dnc | other.dnc
        differing = (self.vec | either_dnc) ^ (other.vec | either_dnc)
        return either_dnc, differing

    def is_orthogonal(self, other: BoolInterval) -> bool:
        """True when some component is defined in both and differs."""
        _, differing = self._differences(other)
        return differing.weight() > 0

    def is_equal_component(self, other: BoolInterval) -> bool:
        """True when some component is defined in both and has the same value."""
        either_dnc, differing = self._differences(other)
        return (either_dnc | differing).weight() != len(self.vec)