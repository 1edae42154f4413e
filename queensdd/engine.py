"""
    Interface to PySDD's API

    PySDD is a knowledge compilation package for Sentential Decision Diagrams (SDD)
    https://pysdd.readthedocs.io/en/latest/

    A `FormulaSpace` owns one SDD manager and exposes the handful of operations
    the constraint compiler and the board annotator need: literals, conjunction,
    disjunction, (pure) restriction and satisfiability/model counting.

    Variables are identified by their 0-based index; PySDD numbers its variables
    from 1 and uses negative numbers for negated literals, the conversion happens
    in `literal()`.

    Documentation of the solver's own Python API:
    https://pysdd.readthedocs.io/en/latest/classes/SddManager.html


    ===============
    List of classes
    ===============

    .. autosummary::
        :nosignatures:

        FormulaSpace
"""
import logging

from .exceptions import ConfigurationError, EngineExhaustedError, NotSupportedError

logger = logging.getLogger(__name__)

# capacity of the node table, in live SDD nodes
DEFAULT_MAX_NODES = 2_000_000
# a right-linear vtree makes the SDD an ordered BDD over variables 1..n
DEFAULT_VTREE = "right"
VTREE_TYPES = ("left", "right", "vertical", "balanced", "random")


class FormulaSpace(object):
    """
    A universe of boolean formulas over `var_count` variables

    Requires that the 'PySDD' python package is installed:
    $ pip install pysdd

    Creates the following attributes:
        - var_count: int, number of variables
        - max_nodes: int, maximum number of live SDD nodes before `EngineExhaustedError`
        - pysdd_vtree: a pysdd.sdd.Vtree
        - pysdd_manager: a pysdd.sdd.SddManager

    Formulas are `pysdd.sdd.SddNode` handles into the manager. A handle is only
    guaranteed to survive `collect()` when it was passed to `keep()`.
    """

    @staticmethod
    def supported():
        # try to import the package
        try:
            from pysdd.sdd import SddManager
            return True
        except ImportError:
            return False

    def __init__(self, var_count, max_nodes=DEFAULT_MAX_NODES, vtree_type=DEFAULT_VTREE):
        """
        Arguments:
        - var_count: int, number of boolean variables (>= 1)
        - max_nodes: int, capacity of the node table
        - vtree_type: str, shape of the variable tree, one of `VTREE_TYPES`
        """
        if not self.supported():
            raise NotSupportedError("FormulaSpace: Install the python 'pysdd' package to use the formula engine")
        if var_count < 1:
            raise ConfigurationError(f"FormulaSpace: need at least one variable, got {var_count}")
        if max_nodes < var_count:
            raise ConfigurationError(f"FormulaSpace: {var_count} variables do not fit in a node table of {max_nodes}")
        if vtree_type not in VTREE_TYPES:
            raise ConfigurationError(f"FormulaSpace: unknown vtree type '{vtree_type}', expected one of {VTREE_TYPES}")

        from pysdd.sdd import SddManager, Vtree

        self.var_count = var_count
        self.max_nodes = max_nodes
        self.pysdd_vtree = Vtree(var_count=var_count, vtree_type=vtree_type)
        self.pysdd_manager = SddManager.from_vtree(self.pysdd_vtree)
        # we manage references ourselves, see keep()/release()/collect()
        self.pysdd_manager.auto_gc_and_minimize_off()

    # Literals and constants

    def literal(self, var, value=True):
        """
            The PySDD literal of variable `var` (0-based): `var+1` when `value` is True, `-(var+1)` otherwise
        """
        if not 0 <= var < self.var_count:
            raise IndexError(f"FormulaSpace: variable {var} not in [0, {self.var_count})")
        return var + 1 if value else -(var + 1)

    def variable_true(self, var):
        return self.pysdd_manager.literal(self.literal(var, True))

    def variable_false(self, var):
        return self.pysdd_manager.literal(self.literal(var, False))

    def true(self):
        return self.pysdd_manager.true()

    def false(self):
        return self.pysdd_manager.false()

    # Combinators

    def conjoin(self, f, g):
        return self.pysdd_manager.conjoin(f, g)

    def disjoin(self, f, g):
        return self.pysdd_manager.disjoin(f, g)

    def restrict(self, f, lit):
        """
            Condition `f` on literal `lit` (as returned by `literal()`)

            Returns a new formula, `f` itself is left as is.
        """
        return self.pysdd_manager.condition(lit, f)

    # Queries

    def is_unsatisfiable(self, f):
        return f.is_false()

    def solution_count(self, f):
        """
            Number of satisfying assignments over *all* `var_count` variables
        """
        if f.is_false():
            return 0
        return f.global_model_count()

    def node_count(self, f):
        return f.count()

    def any_model(self, f):
        """
            One satisfying assignment, as a list of booleans indexed by variable,
            or None if `f` is unsatisfiable
        """
        if f.is_false():
            return None
        sol = next(f.models())
        # variables not mentioned in the model are free, pick False
        return [bool(sol.get(var + 1, 0)) for var in range(self.var_count)]

    # Memory management

    def keep(self, f):
        """
            Reference `f` so it survives garbage collection
        """
        # terminals are never collected
        if not (f.is_true() or f.is_false()):
            f.ref()
        return f

    def release(self, f):
        """
            Drop a reference taken with `keep()`
        """
        if not (f.is_true() or f.is_false()):
            f.deref()

    def collect(self):
        """
            Free all nodes not reachable from a kept formula.
            Every handle that was not kept is invalid afterwards.
        """
        before = self.pysdd_manager.count()
        self.pysdd_manager.garbage_collect()
        logger.debug("garbage collection: %d -> %d nodes", before, self.pysdd_manager.count())

    def check_capacity(self):
        """
            Raise `EngineExhaustedError` when the live nodes exceed `max_nodes`

            Only collects garbage when the table is over capacity, so all formulas
            that are still needed must be kept when calling this.
        """
        if self.pysdd_manager.count() <= self.max_nodes:
            return
        self.collect()
        live = self.pysdd_manager.live_count()
        if live > self.max_nodes:
            raise EngineExhaustedError(f"FormulaSpace: {live} live nodes exceed the capacity of {self.max_nodes}")

    def replace(self, old, new):
        """
            Keep `new` instead of `old`, checking the capacity while both are kept

            Returns `new`. On `EngineExhaustedError` `old` is still kept and `new` is not.
        """
        self.keep(new)
        try:
            self.check_capacity()
        except EngineExhaustedError:
            self.release(new)
            raise
        self.release(old)
        return new
