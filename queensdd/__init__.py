"""
    queensdd annotates N-Queens boards using a compiled boolean formula instead of search.

    The package consists of 4 modules:
    - `compiler`: maps cells to boolean variables and compiles the placement rules into one formula
    - `solver`: `QueensSolver`, which narrows the formula after each placement and marks blocked/forced cells
    - `engine`: `FormulaSpace`, the interface to the Sentential Decision Diagram package PySDD
    - `board`: the cell states and the numpy board
"""
# queensdd developers, 2019-2026

__version__ = "0.3.0"


from .board import CellState, BoardStatus
from .solver import QueensSolver
from .compiler import VariableIndex, compile_queens
from .engine import FormulaSpace
