"""
Compares the BDD engine with OR-Tools CP-SAT, used as a reference solver.

Skipped when `ortools` is not installed (`pip install -e .[test]`).
"""
import pytest
import numpy as np

cp_model = pytest.importorskip("ortools.sat.python.cp_model")

from queensbdd import QueensLogic, CellState
from queensbdd.variables import var_coord


class SolutionCollector(cp_model.CpSolverSolutionCallback):
    """Collect all solutions, as sorted lists of (x, y) queen cells."""

    def __init__(self, queens):
        cp_model.CpSolverSolutionCallback.__init__(self)
        self.__queens = queens
        self.solutions = []

    def on_solution_callback(self):
        self.solutions.append(sorted((x, self.value(q)) for x, q in enumerate(self.__queens)))


def reference_solutions(size, fixed=()):
    """ all N-queens solutions, one queen per line x, optionally with some queens fixed """
    model = cp_model.CpModel()
    queens = [model.new_int_var(0, size - 1, f"y_{x}") for x in range(size)]
    model.add_all_different(queens)
    model.add_all_different(queens[x] + x for x in range(size))
    model.add_all_different(queens[x] - x for x in range(size))
    for x, y in fixed:
        model.add(queens[x] == y)

    solver = cp_model.CpSolver()
    solver.parameters.enumerate_all_solutions = True
    collector = SolutionCollector(queens)
    solver.solve(model, collector)
    return collector.solutions


def test_same_solutions(board_size):
    solutions = reference_solutions(board_size)

    game = QueensLogic()
    game.initialize_game(board_size)
    assert game.count_solutions() == len(solutions)

    m = game.manager
    for sol in solutions:
        f = game.bdd
        for v in range(board_size * board_size):
            f = m.restrict(f, v, var_coord(board_size, v) in sol)
        assert m.is_true(f)


def test_open_cells_are_solution_cells(board_size):
    # a cell stays open iff some solution puts a queen on it
    solutions = reference_solutions(board_size)
    game = QueensLogic()
    game.initialize_game(board_size)

    board = game.get_game_board()
    open_cells = {(int(x), int(y)) for x, y in np.argwhere(board == CellState.EMPTY)}
    assert open_cells == {cell for sol in solutions for cell in sol}


@pytest.mark.parametrize("move", [(0, 0), (2, 2), (1, 3)])
def test_after_move_5(move):
    size = 5
    solutions = reference_solutions(size, fixed=[move])

    game = QueensLogic()
    game.initialize_game(size)
    game.insert_queen(*move)

    assert game.count_solutions() == len(solutions)
    board = game.get_game_board()
    not_blocked = {(int(x), int(y)) for x, y in np.argwhere(board != CellState.BLOCKED)}
    assert not_blocked == {cell for sol in solutions for cell in sol}
