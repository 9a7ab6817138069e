"""Depth-first search for a root of a CNF given as ternary intervals."""

from __future__ import annotations

import argparse
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from satdpll.bitvector import BitVector
from satdpll.equation import BoolEquation, RuleOutcome
from satdpll.interval import BoolInterval
from satdpll.strategy import (
    BranchingStrategy,
    ColumnBranchingStrategy,
    RowBranchingStrategy,
)

DEFAULT_INPUT = "./SatExamples/Sat_ex11_3.pla"


@dataclass
class SearchNode:
    """A node of the search tree: an equation and the two branches made from it."""

    equation: BoolEquation
    left: Optional["SearchNode"] = None
    right: Optional["SearchNode"] = None

    @property
    def is_expanded(self) -> bool:
        return self.left is not None or self.right is not None


def parse_cnf(lines: Iterable[str]) -> List[BoolInterval]:
    """Turn lines such as '1-0' into clause intervals.

    Line breaks anywhere in a line and surrounding whitespace are removed.
    Every line must be as long as the first one.
    """
    clauses: List[BoolInterval] = []
    width: Optional[int] = None
    for number, line in enumerate(lines, start=1):
        text = line.replace("\r", "").replace("\n", "").strip()
        if not text:
            raise ValueError(f"line {number} holds no clause")
        if width is None:
            width = len(text)
        elif len(text) != width:
            raise ValueError(
                f"line {number} has {len(text)} components, expected {width}"
            )
        clauses.append(BoolInterval.from_string(text))
    return clauses


def load_cnf(path) -> List[BoolInterval]:
    """Read the clauses of a CNF file, one interval per line."""
    with open(path, encoding="utf-8") as handle:
        return parse_cnf(handle.read().splitlines())


def _empty_root(width: int) -> BoolInterval:
    return BoolInterval(
        BitVector.from_string("0" * width), BitVector.from_string("1" * width)
    )


def _is_root(clauses: Sequence[BoolInterval], root: BoolInterval) -> bool:
    return all(clause.is_equal_component(root) for clause in clauses)


def solve(
    clauses: Sequence[BoolInterval], strategy: Optional[BranchingStrategy] = None
) -> Optional[BoolInterval]:
    """Search for a root of the CNF.

    Returns the root as an interval, where '-' marks a free component, or
    ``None`` when the CNF has no root.
    """
    clauses = list(clauses)
    if not clauses:
        raise ValueError("the CNF holds no clauses")
    width = len(clauses[0])
    root = _empty_root(width)
    equation = BoolEquation(
        clauses,
        root,
        root.vec,
        strategy if strategy is not None else ColumnBranchingStrategy(),
        len(clauses),
    )

    stack: List[SearchNode] = [SearchNode(equation)]
    found = False
    while True:
        node = stack[-1]
        if node.is_expanded:
            stack.pop()
        else:
            current = node.equation
            while True:
                outcome = current.check_rules()
                if outcome is RuleOutcome.NO_ROOT:
                    stack.pop()
                    break
                if outcome is RuleOutcome.SIMPLIFIED:
                    if current.count == 0 or current.mask.weight() == len(current.mask):
                        found = _is_root(clauses, current.root)
                        if not found:
                            stack.pop()
                        break
                    continue
                column = current.choose_branching_index()
                zero_branch = current.copy()
                one_branch = current.copy()
                zero_branch.simplify(column, "0")
                one_branch.simplify(column, "1")
                node.left = SearchNode(zero_branch)
                node.right = SearchNode(one_branch)
                stack.append(node.right)
                stack.append(node.left)
                break
        if len(stack) <= 1 or found:
            break

    if found:
        return stack[-1].equation.root
    return None


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="satdpll", description="Find a root of a CNF stored as intervals."
    )
    parser.add_argument("path", nargs="?", default=None, help="CNF file, one clause per line")
    parser.add_argument(
        "strategy", nargs="?", default=None, help="'row' for row branching, otherwise column"
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    path = args.path if args.path is not None else DEFAULT_INPUT

    strategy: BranchingStrategy = ColumnBranchingStrategy()
    if args.path is not None and args.strategy is not None:
        if args.strategy == "row":
            strategy = RowBranchingStrategy()
            print("Using the row branching strategy")
        else:
            print("Using the column branching strategy")

    started = time.perf_counter()
    try:
        clauses = load_cnf(Path(path))
    except OSError:
        print("File does not exists.")
        return 0

    root = solve(clauses, strategy)
    elapsed = int((time.perf_counter() - started) * 1_000_000)

    if root is not None:
        print(f"Root is:\n {root}")
    else:
        print("Root is not exists!")
    print(f"Execution time: {elapsed} us")
    return 0