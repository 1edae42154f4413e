"""
    The board of an N-Queens game: a numpy grid of cell states, indexed ``board[column, row]``.

    ===============
    List of classes
    ===============

    .. autosummary::
        :nosignatures:

        CellState
        BoardStatus

    =================
    List of functions
    =================

    .. autosummary::
        :nosignatures:

        new_board
        queens_on
        board_from_model
"""
from enum import Enum, IntEnum

import numpy as np


class CellState(IntEnum):
    """
    State of one cell

    Attributes:

        `OPEN`: undetermined, a queen may or may not go here

        `QUEEN`: a queen was placed here, or every legal completion has one here

        `BLOCKED`: no legal completion has a queen here
    """
    OPEN = 0
    QUEEN = 1
    BLOCKED = -1


class BoardStatus(Enum):
    """
    Status of a game as a whole

    Attributes:

        `NOT_INITIALIZED`: `initialize()` has not been called

        `IN_PROGRESS`: at least one legal completion exists and queens are still missing

        `SOLVED`: one queen on every column

        `UNSOLVABLE`: no legal completion exists for the current board
    """
    NOT_INITIALIZED = 1
    IN_PROGRESS = 2
    SOLVED = 3
    UNSOLVABLE = 4


def new_board(size):
    """
        A `size` x `size` board with all cells `OPEN`
    """
    return np.full((size, size), CellState.OPEN, dtype=int)


def queens_on(board):
    """
        The `(column, row)` cells holding a queen, in column-major order
    """
    return [(int(c), int(r)) for c, r in np.argwhere(board == CellState.QUEEN)]


def board_from_model(index, model):
    """
        A full board from a satisfying assignment: `QUEEN` where the variable is true, `BLOCKED` elsewhere

        :param index: VariableIndex of the board
        :param model: list of booleans indexed by variable
    """
    board = np.full((index.size, index.size), CellState.BLOCKED, dtype=int)
    for var, value in enumerate(model[:len(index)]):
        if value:
            board[index.cell(var)] = CellState.QUEEN
    return board
