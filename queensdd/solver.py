"""
    Incremental N-Queens board annotator.

    The placement rules are compiled once into a formula (see `queensdd.compiler`).
    Every queen placement narrows that working formula, after which each open cell
    is probed twice on a restricted copy of it:

    - with a queen on the cell: if the copy is unsatisfiable the cell is `BLOCKED`
    - without a queen on the cell: if the copy is unsatisfiable the cell is forced,
      it gets a `QUEEN` and the working formula is narrowed as for a manual placement

    Probes never modify the working formula; only `place_queen()` and forced
    deductions do, through `_commit()`.

    ===============
    List of classes
    ===============

    .. autosummary::
        :nosignatures:

        QueensSolver
"""
import logging
import warnings

from .board import CellState, BoardStatus, new_board, queens_on, board_from_model
from .compiler import VariableIndex, compile_queens
from .engine import FormulaSpace, DEFAULT_MAX_NODES, DEFAULT_VTREE
from .exceptions import ConfigurationError, InvalidMoveError, NotInitializedError
from .utils import is_int, is_cell

logger = logging.getLogger(__name__)


class QueensSolver(object):
    """
        Board annotator for one N-Queens game

        Creates the following attributes:
        - size: int, board dimension (None before `initialize()`)
        - max_nodes, vtree_type: configuration of the formula engine, see `FormulaSpace`
        - fixpoint: bool, repeat annotation passes until nothing changes (default),
                    or do a single pass per placement
        - space: FormulaSpace, the engine owned by this solver
        - index: VariableIndex, cell <-> variable mapping
    """

    def __init__(self, size=None, max_nodes=DEFAULT_MAX_NODES, vtree_type=DEFAULT_VTREE, fixpoint=True):
        """
        Arguments:
        - size: int, optional: when given, `initialize(size)` is called immediately
        - max_nodes: int, capacity of the formula engine's node table
        - vtree_type: str, vtree shape of the formula engine
        - fixpoint: bool, see class docstring
        """
        self.max_nodes = max_nodes
        self.vtree_type = vtree_type
        self.fixpoint = fixpoint

        self.size = None
        self.space = None
        self.index = None
        self._board = None
        self._compiled = None  # the rules as compiled, kept in self.space
        self._formula = None  # working formula, kept in self.space
        self._warned_unsolvable = False

        if size is not None:
            self.initialize(size)

    def initialize(self, size):
        """
            Start a new game on an empty `size` x `size` board

            Compiles the placement rules into a fresh formula engine, unless the
            previous game had the same size: then its compiled rules are reused.
            A failing call leaves the previous game (if any) untouched.
        """
        if not is_int(size) or size <= 0:
            raise ConfigurationError(f"QueensSolver: board size should be a positive integer, got {size!r}")
        if size * size > self.max_nodes:
            raise ConfigurationError(f"QueensSolver: a {size}x{size} board needs {size * size} variables, "
                                     f"more than the engine capacity of {self.max_nodes} nodes")

        if self.index is not None and self.index.size == size:
            # same board size, start over from the compiled rules
            self._formula = self.space.replace(self._formula, self._compiled)
            self.space.collect()
        else:
            index = VariableIndex(size)
            space = FormulaSpace(len(index), max_nodes=self.max_nodes, vtree_type=self.vtree_type)
            compiled = compile_queens(space, index)

            self.index = index
            self.space = space
            self._compiled = compiled
            self._formula = space.keep(compiled)

        self.size = int(size)
        self._board = new_board(self.size)
        self._warned_unsolvable = False
        logger.debug("initialized %dx%d board", self.size, self.size)
        return self

    def place_queen(self, column, row):
        """
            Put a queen on `(column, row)` and annotate the rest of the board

            Does nothing when the cell is not `OPEN`.
        """
        self._check_initialized()
        if not (is_cell(column, self.size) and is_cell(row, self.size)):
            raise InvalidMoveError(f"QueensSolver: ({column!r}, {row!r}) is not a cell of a {self.size}x{self.size} board")

        if self._board[column, row] != CellState.OPEN:
            return

        self._commit(column, row)
        self._board[column, row] = CellState.QUEEN
        self.reannotate()
        # only the working formula is still needed, drop all probes
        self.space.collect()

        if self.is_unsolvable() and not self._warned_unsolvable:
            self._warned_unsolvable = True
            warnings.warn(f"QueensSolver: placing a queen on ({column}, {row}) leaves no legal completion, "
                          f"all open cells are now blocked")

    def reannotate(self):
        """
            Mark every open cell that can no longer hold a queen as `BLOCKED`,
            and every open cell that must hold one as `QUEEN`

            Returns the number of cells that changed.
        """
        self._check_initialized()
        changed = 0
        while True:
            changed_in_pass = 0
            for column, row in self.index.cells():
                if self._board[column, row] != CellState.OPEN:
                    continue
                if self._is_blocked(column, row):
                    self._board[column, row] = CellState.BLOCKED
                    changed_in_pass += 1
                elif self._is_forced(column, row):
                    logger.debug("queen forced on (%d, %d)", column, row)
                    self._commit(column, row)
                    self._board[column, row] = CellState.QUEEN
                    changed_in_pass += 1
            changed += changed_in_pass
            if not self.fixpoint or changed_in_pass == 0:
                return changed

    def get_board(self):
        """
            Copy of the board, a numpy array of `CellState` values indexed ``[column, row]``
        """
        self._check_initialized()
        return self._board.copy()

    # Queries on the working formula

    def is_unsolvable(self):
        """
            True when no legal completion of the current board exists
        """
        self._check_initialized()
        return self.space.is_unsatisfiable(self._formula)

    def solution_count(self):
        """
            Number of legal full placements that agree with the queens on the board
        """
        self._check_initialized()
        return self.space.solution_count(self._formula)

    def node_count(self):
        self._check_initialized()
        return self.space.node_count(self._formula)

    def completion(self):
        """
            One legal full placement that agrees with the board, as a board of `QUEEN`/`BLOCKED` cells,
            or None when the board is unsolvable
        """
        self._check_initialized()
        model = self.space.any_model(self._formula)
        if model is None:
            return None
        return board_from_model(self.index, model)

    def queens(self):
        self._check_initialized()
        return queens_on(self._board)

    def status(self):
        if self._board is None:
            return BoardStatus.NOT_INITIALIZED
        if self.is_unsolvable():
            return BoardStatus.UNSOLVABLE
        if len(self.queens()) == self.size:
            return BoardStatus.SOLVED
        return BoardStatus.IN_PROGRESS

    # Internals

    def _check_initialized(self):
        if self._board is None:
            raise NotInitializedError("QueensSolver: call initialize(size) first")

    def _probe(self, column, row, value):
        """
            Is the working formula unsatisfiable when cell `(column, row)` is fixed to `value`?
        """
        lit = self.space.literal(self.index.var(column, row), value)
        return self.space.is_unsatisfiable(self.space.restrict(self._formula, lit))

    def _is_blocked(self, column, row):
        return self._probe(column, row, True)

    def _is_forced(self, column, row):
        return self._probe(column, row, False)

    def _commit(self, column, row):
        """
            Narrow the working formula with a queen on `(column, row)`
        """
        queen = self.space.variable_true(self.index.var(column, row))
        self._formula = self.space.replace(self._formula, self.space.conjoin(self._formula, queen))
