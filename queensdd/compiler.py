"""
    Compiles the N-Queens placement rules into a single boolean formula.

    There is one boolean variable per cell of the board, true when the cell holds a queen.
    The compiled formula is the conjunction of four rule families:

    - column occupancy: every column holds at least one queen
    - row exclusion: a queen excludes every other cell of its row
    - column exclusion: a queen excludes every other cell of its column
    - diagonal exclusion: a queen excludes every cell on its two diagonals

    Each exclusion rule is the implication ``cell -> ~peer1 & ~peer2 & ...``,
    posted as ``~cell | (~peer1 & ~peer2 & ...)``.

    ===============
    List of classes
    ===============

    .. autosummary::
        :nosignatures:

        VariableIndex

    =================
    List of functions
    =================

    .. autosummary::
        :nosignatures:

        compile_queens
        column_occupancy
        row_exclusion
        column_exclusion
        diagonal_exclusion
        exclusion_rule
"""
import logging
from functools import reduce

from .exceptions import ConfigurationError
from .utils import is_int

logger = logging.getLogger(__name__)

# the four diagonal directions, as (column step, row step)
DIAGONAL_STEPS = ((-1, -1), (-1, 1), (1, -1), (1, 1))


class VariableIndex(object):
    """
        Fixed mapping between the cells of a `size` x `size` board and formula variables

        Cell `(column, row)` is variable ``row * size + column``.
    """

    def __init__(self, size):
        if not is_int(size) or size <= 0:
            raise ConfigurationError(f"Board size should be a positive integer, got {size}")
        self.size = int(size)

    def __len__(self):
        return self.size * self.size

    def var(self, column, row):
        return row * self.size + column

    def cell(self, var):
        row, column = divmod(var, self.size)
        return column, row

    def cells(self):
        """
            All cells, in variable order
        """
        return [self.cell(var) for var in range(len(self))]

    def contains(self, column, row):
        return 0 <= column < self.size and 0 <= row < self.size

    def row_peers(self, column, row):
        return [(c, row) for c in range(self.size) if c != column]

    def column_peers(self, column, row):
        return [(column, r) for r in range(self.size) if r != row]

    def diagonal_peers(self, column, row):
        """
            Walks the four diagonal rays from `(column, row)` until leaving the board
        """
        peers = []
        for dc, dr in DIAGONAL_STEPS:
            c, r = column + dc, row + dr
            while self.contains(c, r):
                peers.append((c, r))
                c, r = c + dc, r + dr
        return peers

    def peers(self, column, row):
        """
            All cells attacked by a queen on `(column, row)`
        """
        return self.row_peers(column, row) + self.column_peers(column, row) + self.diagonal_peers(column, row)

    def __repr__(self):
        return f"VariableIndex({self.size})"


def exclusion_rule(space, index, cell, peers):
    """
        ``cell -> none of peers``, as the formula ``~cell | (~peer1 & ~peer2 & ...)``

        With no peers the rule is trivially true.
    """
    none_of = reduce(space.conjoin,
                     [space.variable_false(index.var(*peer)) for peer in peers],
                     space.true())
    return space.disjoin(space.variable_false(index.var(*cell)), none_of)


def column_occupancy(space, index):
    """
        Every column holds at least one queen
    """
    rule = space.true()
    for column in range(index.size):
        clause = reduce(space.disjoin,
                        [space.variable_true(index.var(column, row)) for row in range(index.size)],
                        space.false())
        rule = space.conjoin(rule, clause)
    return rule


def row_exclusion(space, index, column, row):
    return exclusion_rule(space, index, (column, row), index.row_peers(column, row))


def column_exclusion(space, index, column, row):
    return exclusion_rule(space, index, (column, row), index.column_peers(column, row))


def diagonal_exclusion(space, index, column, row):
    return exclusion_rule(space, index, (column, row), index.diagonal_peers(column, row))


# per-cell rule families, in the order they are conjoined
CELL_RULES = (diagonal_exclusion, row_exclusion, column_exclusion)


def compile_queens(space, index):
    """
        Build the formula that is true exactly for the legal N-Queens placements

        The returned formula is kept (referenced) in `space`, the caller owns that reference.

        :param space: FormulaSpace with at least ``len(index)`` variables
        :param index: VariableIndex of the board
    """
    if space.var_count < len(index):
        raise ConfigurationError(f"Formula space has {space.var_count} variables, board needs {len(index)}")

    formula = space.keep(column_occupancy(space, index))
    space.check_capacity()

    # cells in variable order
    for column, row in index.cells():
        for rule in CELL_RULES:
            formula = space.replace(formula, space.conjoin(formula, rule(space, index, column, row)))

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("compiled %dx%d board: %d satisfying assignments, %d nodes",
                     index.size, index.size, space.solution_count(formula), space.node_count(formula))
    return formula
