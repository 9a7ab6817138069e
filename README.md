# satdpll

A small DPLL solver for systems of Boolean clauses. Each clause is a line of
`0`, `1` and `-` characters, all lines of the same width: a `0` or `1` at a
column means that variable takes part in the clause, a `-` means it does not.
The solver searches a binary tree of partial assignments, simplifies with
single-literal and column rules, and reports a root of the system or that
none exists.

## Installing

```
pip install .
```

## Command line

```
satdpll path/to/problem.pla
satdpll path/to/problem.pla row
```

The first argument is the file with one clause per line. When it is left
out, `./SatExamples/Sat_ex11_3.pla` is read. The optional second argument
picks the branching strategy: `row` branches on a variable of the shortest
remaining clause, anything else on the free column with the fewest `-`
entries (the default when no second argument is given). When a second
argument is given, the chosen strategy is printed first.

The program then prints `Root is:` followed by the root found, written as an
interval of `0`, `1` and `-` where `-` marks a free component, or
`Root is not exists!` when the system has no root, and finally the time
taken in microseconds. If the file cannot be opened it prints
`File does not exists.`.

## Library use

```python
from satdpll.solver import parse_cnf, solve
from satdpll.strategy import RowBranchingStrategy

clauses = parse_cnf(["1-0", "-11", "0-1"])
root = solve(clauses, RowBranchingStrategy())
print(root if root is not None else "no root")
```

- `satdpll.solver.parse_cnf(lines)` turns lines into clause intervals,
  removing line breaks and surrounding whitespace. It raises `ValueError`
  for an empty line or a line whose width differs from the first.
- `satdpll.solver.load_cnf(path)` reads clauses straight from a file.
- `satdpll.solver.solve(clauses, strategy=None)` returns the root as a
  `BoolInterval`, or `None` when there is none. It raises `ValueError` for
  an empty list of clauses. `SearchNode` is the node type of its search tree.

The building blocks are available too:

- `satdpll.bitvector.BitVector`: fixed-length bit vectors with indexing,
  `|`, `&`, `^`, `~`, shifts, `weight()` and a `0`/`1` string form
  (`BitVector.from_string`).
- `satdpll.interval.BoolInterval`: ternary intervals with indexing by
  component, `rank()`, `is_orthogonal()` and `is_equal_component()`.
- `satdpll.strategy`: `BranchingStrategy` and its two implementations,
  `ColumnBranchingStrategy` and `RowBranchingStrategy`.
- `satdpll.equation.BoolEquation`: one node of the search with its rule
  checks; `check_rules()` returns a `RuleOutcome` (`NO_ROOT`, `SIMPLIFIED`
  or `BRANCH`).

## Limits

Input is only the plain interval format above; DIMACS files are not read.
The solver returns a single root and does not enumerate all of them.

## Running the tests

```
pip install .[test]
pytest
```