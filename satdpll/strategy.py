"""Strategies that pick the column to branch on during the search."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from satdpll.bitvector import BitVector
from satdpll.interval import DONT_CARE, BoolInterval

Clauses = Sequence[Optional[BoolInterval]]


def _free_columns(mask: BitVector) -> list[int]:
    return [column for column, bit in enumerate(mask) if bit == 0]


def _live_clauses(clauses: Clauses) -> list[BoolInterval]:
    return [clause for clause in clauses if clause is not None]


class BranchingStrategy(ABC):
    """Chooses the column of the equation to split on.

    ``clauses`` holds the rows of the equation, with ``None`` standing for
    rows that have already been removed. ``mask`` marks with a set bit
    every column that already has a value.
    """

    @abstractmethod
    def choose_branching_index(self, clauses: Clauses, mask: BitVector) -> int:
        """Return the index of an unmasked column to branch on."""


class ColumnBranchingStrategy(BranchingStrategy):
    """Branch on the free column with the fewest don't-care entries.

    Ties go to the lowest column index.
    """

    def choose_branching_index(self, clauses: Clauses, mask: BitVector) -> int:
        columns = _free_columns(mask)
        if not columns:
            raise ValueError("every column is masked; nothing to branch on")
        rows = _live_clauses(clauses)
        return min(
            columns,
            key=lambda column: sum(1 for row in rows if row[column] == DONT_CARE),
        )


class RowBranchingStrategy(BranchingStrategy):
    """Branch on the first free defined column of the shortest row.

    The shortest row is the remaining row with the fewest defined entries in
    free columns, counting only rows with at least one. When no row has such
    an entry, the choice falls back to :class:`ColumnBranchingStrategy`.
    """

    def choose_branching_index(self, clauses: Clauses, mask: BitVector) -> int:
        rows = _live_clauses(clauses)
        if not rows:
            raise ValueError("no clauses remain; nothing to branch on")
        columns = _free_columns(mask)

        def defined_columns(row: BoolInterval) -> list[int]:
            return [column for column in columns if row[column] != DONT_CARE]

        weighted = [(len(defined_columns(row)), row) for row in rows]
        candidates = [(weight, row) for weight, row in weighted if weight > 0]
        chosen = min(candidates, key=lambda item: item[0])[1] if candidates else rows[0]

        defined = defined_columns(chosen)
        if defined:
            return defined[0]
        return ColumnBranchingStrategy().choose_branching_index(clauses, mask)