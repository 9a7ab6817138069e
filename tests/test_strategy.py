import pytest

from satdpll.bitvector import BitVector
from satdpll.interval import BoolInterval
from satdpll.strategy import (
    BranchingStrategy,
    ColumnBranchingStrategy,
    RowBranchingStrategy,
)


def _clauses(*rows):
    return [None if row is None else BoolInterval.from_string(row) for row in rows]


def _dash_count(clauses, column):
    return sum(1 for c in clauses if c is not None and c[column] == "-")


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        BranchingStrategy()


def test_column_strategy_result_is_free_and_minimal():
    clauses = _clauses("1-0-", "-0--", None, "--11", "0---")
    mask = BitVector.from_string("0100")
    result = ColumnBranchingStrategy().choose_branching_index(clauses, mask)
    assert mask[result] == 0
    free = [c for c in range(4) if mask[c] == 0]
    assert all(_dash_count(clauses, result) <= _dash_count(clauses, c) for c in free)


def test_column_strategy_tie_goes_to_lowest_free_column():
    clauses = _clauses("11", "00")
    mask = BitVector(2)
    strategy = ColumnBranchingStrategy()
    assert strategy.choose_branching_index(clauses, mask) == 0
    mask[0] = 1
    assert strategy.choose_branching_index(clauses, mask) == 1


def test_column_strategy_without_rows_takes_first_free_column():
    clauses = _clauses(None, None)
    mask = BitVector.from_string("110")
    assert ColumnBranchingStrategy().choose_branching_index(clauses, mask) == 2


def test_column_strategy_all_masked_raises():
    clauses = _clauses("10")
    with pytest.raises(ValueError):
        ColumnBranchingStrategy().choose_branching_index(clauses, BitVector.from_string("11"))


def test_row_strategy_picks_column_of_shortest_row():
    clauses = _clauses("110", "-1-", "011")
    mask = BitVector(3)
    result = RowBranchingStrategy().choose_branching_index(clauses, mask)
    assert mask[result] == 0
    assert clauses[1][result] != "-"


def test_row_strategy_ignores_masked_columns():
    clauses = _clauses("1-0", "11-")
    mask = BitVector.from_string("100")
    result = RowBranchingStrategy().choose_branching_index(clauses, mask)
    assert mask[result] == 0
    assert result in {1, 2}
    assert any(c[result] != "-" for c in clauses)


def test_row_strategy_skips_removed_rows():
    clauses = _clauses(None, "0-1", None)
    mask = BitVector(3)
    result = RowBranchingStrategy().choose_branching_index(clauses, mask)
    assert clauses[1][result] != "-"
    assert mask[result] == 0


def test_row_strategy_falls_back_to_column_strategy():
    clauses = _clauses("1--", "0--")
    mask = BitVector.from_string("100")
    row_choice = RowBranchingStrategy().choose_branching_index(clauses, mask)
    column_choice = ColumnBranchingStrategy().choose_branching_index(clauses, mask)
    assert row_choice == column_choice
    assert mask[row_choice] == 0


def test_row_strategy_without_rows_raises():
    with pytest.raises(ValueError):
        RowBranchingStrategy().choose_branching_index(_clauses(None), BitVector(2))


def test_strategies_do_not_modify_inputs():
    clauses = _clauses("1-0", "-01")
    before = [str(c) for c in clauses]
    mask = BitVector.from_string("010")
    for strategy in (ColumnBranchingStrategy(), RowBranchingStrategy()):
        strategy.choose_branching_index(clauses, mask)
    assert [str(c) for c in clauses] == before
    assert str(mask) == "010"