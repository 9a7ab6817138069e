"""DPLL satisfiability solving over ternary interval clauses."""

__version__ = "0.1.0"
__all__ = ["bitvector", "interval", "strategy", "equation", "solver"]