"""A CNF equation under simplification, with the rules of the search."""

from __future__ import annotations

from enum import IntEnum
from typing import List, Optional, Sequence

from satdpll.bitvector import BitVector
from satdpll.interval import DONT_CARE, BoolInterval
from satdpll.strategy import BranchingStrategy, ColumnBranchingStrategy


class RuleOutcome(IntEnum):
    """Result of one pass of :meth:`BoolEquation.check_rules`."""

    NO_ROOT = 0
    SIMPLIFIED = 1
    BRANCH = 2


class BoolEquation:
    """A set of clause intervals together with the partial root found so far.

    ``clauses`` holds the rows; a removed row is replaced by ``None``.
    ``root`` is the interval of values assigned so far, ``mask`` marks with
    a set bit every column that no longer takes part in the search, and
    ``count`` is the number of rows that remain.
    """

    def __init__(
        self,
        clauses: Sequence[Optional[BoolInterval]],
        root: BoolInterval,
        mask: BitVector,
        strategy: Optional[BranchingStrategy] = None,
        count: Optional[int] = None,
    ) -> None:
        self.clauses: List[Optional[BoolInterval]] = list(clauses)
        self.root = root
        self.mask = mask.copy()
        self.strategy: BranchingStrategy = (
            strategy if strategy is not None else ColumnBranchingStrategy()
        )
        self.count = (
            count
            if count is not None
            else sum(1 for clause in self.clauses if clause is not None)
        )

    def copy(self) -> BoolEquation:
        """Return an equation that can be simplified without touching this one.

        The clause intervals themselves are shared; the row list, the root
        and the mask are copied.
        """
        return BoolEquation(
            self.clauses, self.root.copy(), self.mask, self.strategy, self.count
        )

    def _live_rows(self):
        return ((index, row) for index, row in enumerate(self.clauses) if row is not None)

    def _free_defined(self, interval: BoolInterval):
        return (
            column
            for column, bit in enumerate(self.mask)
            if bit != 1 and interval[column] != DONT_CARE
        )

    def check_rules(self) -> RuleOutcome:
        """Apply the first rule that fits and report what happened."""
        all_dnc: Optional[BitVector] = None
        any_not_zero: Optional[BitVector] = None
        all_one: Optional[BitVector] = None

        for _, interval in self._live_rows():
            if self.is_empty_row(interval):
                return RuleOutcome.NO_ROOT

            if self.count == 1:
                if self.assign_zero_column(interval.vec ^ interval.dnc):
                    return RuleOutcome.SIMPLIFIED
                if self.assign_one_column(interval.vec):
                    return RuleOutcome.SIMPLIFIED

            if self.is_single_literal_row(interval):
                column = next(self._free_defined(interval), None)
                if column is not None:
                    value = interval[column]
                    self.simplify(column, "0" if value == "0" else "1")
                return RuleOutcome.SIMPLIFIED

            if all_dnc is None:
                any_not_zero = interval.vec ^ interval.dnc
                all_one = interval.vec.copy()
                all_dnc = interval.dnc.copy()
            else:
                all_dnc = all_dnc & interval.dnc
                any_not_zero = any_not_zero | (interval.vec ^ interval.dnc)
                all_one = all_one & interval.vec

        if all_dnc is None:
            return RuleOutcome.BRANCH

        self.mask_free_columns(all_dnc)
        if self.assign_zero_column(any_not_zero):
            return RuleOutcome.SIMPLIFIED
        if self.assign_one_column(all_one):
            return RuleOutcome.SIMPLIFIED
        return RuleOutcome.BRANCH

    def is_empty_row(self, interval: BoolInterval) -> bool:
        """True when the row has no defined entry in an unmasked column."""
        return next(self._free_defined(interval), None) is None

    def is_single_literal_row(self, interval: BoolInterval) -> bool:
        """True when the row has exactly one defined entry in unmasked columns."""
        return sum(1 for _ in self._free_defined(interval)) == 1

    def mask_free_columns(self, vector: BitVector) -> None:
        """Mask every column whose bit is set in ``vector``."""
        for column, bit in enumerate(vector):
            if bit == 1 and self.mask[column] != 1:
                self.mask[column] = 1

    def _assign_first(self, vector: BitVector, bit_value: int, value: str) -> bool:
        for column, bit in enumerate(vector):
            if bit == bit_value and self.mask[column] != 1:
                self.simplify(column, value)
                return True
        return False

    def assign_zero_column(self, vector: BitVector) -> bool:
        """Assign '0' to the first unmasked column whose bit is clear."""
        return self._assign_first(vector, 0, "0")

    def assign_one_column(self, vector: BitVector) -> bool:
        """Assign '1' to the first unmasked column whose bit is set."""
        return self._assign_first(vector, 1, "1")

    def simplify(self, column: int, value: str) -> None:
        """Fix ``column`` to ``value``, dropping every row with that entry there."""
        for index, interval in list(self._live_rows()):
            entry = interval[column]
            if entry == value and entry != DONT_CARE:
                self.clauses[index] = None
                self.count -= 1
        self.root[column] = value
        self.mask[column] = 1

    def choose_branching_index(self) -> int:
        """Ask the branching strategy for the column to split on."""
        return self.strategy.choose_branching_index(self.clauses, self.mask)