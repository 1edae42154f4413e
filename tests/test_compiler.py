import unittest

import pytest

from queensdd.compiler import (VariableIndex, compile_queens, column_occupancy, row_exclusion,
                               column_exclusion, diagonal_exclusion)
from queensdd.engine import FormulaSpace
from queensdd.exceptions import ConfigurationError

# number of solutions of the n-queens problem, n = 1..8
NQUEENS_SOLUTIONS = {1: 1, 2: 0, 3: 0, 4: 2, 5: 10, 6: 4, 7: 40, 8: 92}


class TestVariableIndex(unittest.TestCase):

    def test_bijection(self):
        index = VariableIndex(5)
        self.assertEqual(len(index), 25)
        self.assertEqual(index.var(0, 0), 0)
        self.assertEqual(index.var(4, 0), 4)
        self.assertEqual(index.var(0, 1), 5)
        self.assertEqual(index.var(3, 2), 13)
        self.assertEqual(sorted(index.var(c, r) for c, r in index.cells()), list(range(25)))
        for var in range(len(index)):
            self.assertEqual(index.var(*index.cell(var)), var)

    def test_invalid_size(self):
        self.assertRaises(ConfigurationError, VariableIndex, 0)
        self.assertRaises(ConfigurationError, VariableIndex, -3)
        self.assertRaises(ConfigurationError, VariableIndex, 2.5)
        self.assertRaises(ConfigurationError, VariableIndex, True)

    def test_peers(self):
        index = VariableIndex(4)
        self.assertEqual(index.row_peers(1, 2), [(0, 2), (2, 2), (3, 2)])
        self.assertEqual(index.column_peers(1, 2), [(1, 0), (1, 1), (1, 3)])
        self.assertEqual(sorted(index.diagonal_peers(1, 2)), [(0, 1), (0, 3), (2, 1), (2, 3), (3, 0)])
        self.assertEqual(sorted(index.diagonal_peers(0, 0)), [(1, 1), (2, 2), (3, 3)])
        self.assertEqual(len(index.peers(0, 0)), 9)

    def test_no_peers_on_single_cell(self):
        index = VariableIndex(1)
        self.assertEqual(index.peers(0, 0), [])


class TestRules(unittest.TestCase):

    def setUp(self):
        self.index = VariableIndex(3)
        self.space = FormulaSpace(len(self.index))

    def test_column_occupancy(self):
        # every column has a non-empty subset of its 3 cells: 7^3
        self.assertEqual(self.space.solution_count(column_occupancy(self.space, self.index)), 7 ** 3)

    def test_exclusion_rules(self):
        s, index = self.space, self.index
        for rule, peers in [(row_exclusion, index.row_peers(1, 1)),
                            (column_exclusion, index.column_peers(1, 1)),
                            (diagonal_exclusion, index.diagonal_peers(1, 1))]:
            f = rule(s, index, 1, 1)
            # with a queen on (1, 1) all peers are empty
            with_queen = s.restrict(f, s.literal(index.var(1, 1), True))
            for peer in peers:
                self.assertTrue(s.is_unsatisfiable(s.restrict(with_queen, s.literal(index.var(*peer), True))))
            # without a queen the rule does not constrain anything
            without_queen = s.restrict(f, s.literal(index.var(1, 1), False))
            self.assertEqual(s.solution_count(without_queen), 2 ** 9)

    def test_size_mismatch(self):
        self.assertRaises(ConfigurationError, compile_queens, FormulaSpace(4), VariableIndex(3))


@pytest.mark.parametrize("size", sorted(NQUEENS_SOLUTIONS))
def test_solution_count(size):
    index = VariableIndex(size)
    space = FormulaSpace(len(index))
    formula = compile_queens(space, index)
    assert space.solution_count(formula) == NQUEENS_SOLUTIONS[size]
    assert space.is_unsatisfiable(formula) == (NQUEENS_SOLUTIONS[size] == 0)


def test_single_cell():
    index = VariableIndex(1)
    space = FormulaSpace(1)
    formula = compile_queens(space, index)
    assert not space.is_unsatisfiable(formula)
    assert space.is_unsatisfiable(space.restrict(formula, space.literal(0, False)))


def test_vtree_does_not_change_solutions():
    index = VariableIndex(5)
    space = FormulaSpace(len(index), vtree_type="balanced")
    assert space.solution_count(compile_queens(space, index)) == NQUEENS_SOLUTIONS[5]
