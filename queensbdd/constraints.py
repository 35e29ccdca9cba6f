#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## constraints.py
##
"""
    Construction of the N-queens rules as a single BDD.

    Cell (x, y) is represented by the variable `var_index(size, x, y)`, true iff a
    queen occupies the cell. The full formula is the conjunction of

    - an exclusion rule per cell: either no queen on the cell, or a queen and
      no other queen on its column, row, slash-diagonal and backslash-diagonal
    - a coverage rule per line `x`: at least one of the cells (x, 0) .. (x, size-1) holds a queen

    Each of the four lines through a cell is enumerated by its own function, so
    the geometry can be checked independently of the decision diagrams.

    =================
    List of functions
    =================
    .. autosummary::
        :nosignatures:

        vertical_cells
        horizontal_cells
        slash_diagonal_cells
        backslash_diagonal_cells
        attacked_cells
        vertical_restriction
        horizontal_restriction
        slash_diagonal_restriction
        backslash_diagonal_restriction
        square_restriction
        exclusion_rule
        nqueen_rule
        queens_formula
"""
import logging

from .exceptions import ConfigurationError
from .utils import is_int
from .variables import check_coordinate, num_vars, var_index

logger = logging.getLogger(__name__)


# cells on the lines through (x, y), (x, y) itself excluded

def vertical_cells(size, x, y):
    check_coordinate(size, x, y)
    return [(x, j) for j in range(size) if j != y]


def horizontal_cells(size, x, y):
    check_coordinate(size, x, y)
    return [(i, y) for i in range(size) if i != x]


def slash_diagonal_cells(size, x, y):
    """
        Cells on the diagonal through (x, y) along which x and y grow together

        Walks from the board edge, so both rays from (x, y) are covered.
    """
    check_coordinate(size, x, y)
    normalize = min(x, y)
    i, j = x - normalize, y - normalize

    cells = []
    while i < size and j < size:
        if i != x:
            cells.append((i, j))
        i += 1
        j += 1
    return cells


def backslash_diagonal_cells(size, x, y):
    """
        Cells on the diagonal through (x, y) along which x shrinks as y grows

        Walks from the board edge, so both rays from (x, y) are covered.
    """
    check_coordinate(size, x, y)
    normalize = min(size - 1 - x, y)
    i, j = x + normalize, y - normalize

    cells = []
    while i >= 0 and j < size:
        if i != x:
            cells.append((i, j))
        i -= 1
        j += 1
    return cells


def attacked_cells(size, x, y):
    """
        All cells a queen on (x, y) attacks, without duplicates
    """
    lines = (vertical_cells, horizontal_cells, slash_diagonal_cells, backslash_diagonal_cells)
    return sorted({cell for line in lines for cell in line(size, x, y)})


# BDD builders

def _unoccupied(manager, size, cells):
    return manager.conjoin_all(manager.nith_var(var_index(size, i, j)) for i, j in cells)


def vertical_restriction(manager, size, x, y):
    """ no queen on the column of (x, y), apart from (x, y) itself """
    return _unoccupied(manager, size, vertical_cells(size, x, y))


def horizontal_restriction(manager, size, x, y):
    """ no queen on the row of (x, y), apart from (x, y) itself """
    return _unoccupied(manager, size, horizontal_cells(size, x, y))


def slash_diagonal_restriction(manager, size, x, y):
    return _unoccupied(manager, size, slash_diagonal_cells(size, x, y))


def backslash_diagonal_restriction(manager, size, x, y):
    return _unoccupied(manager, size, backslash_diagonal_cells(size, x, y))


def square_restriction(manager, size, x, y):
    """
        Exclusion rule of a single cell:
        no queen on (x, y), or a queen on (x, y) and none on any cell it attacks

        :param manager: BDDManager to build in
        :param size: board dimension
        :param x: queen's X
        :param y: queen's Y
        :return: BDD node
    """
    unoccupied = manager.conjoin_all([
        vertical_restriction(manager, size, x, y),
        horizontal_restriction(manager, size, x, y),
        slash_diagonal_restriction(manager, size, x, y),
        backslash_diagonal_restriction(manager, size, x, y),
    ])

    v = var_index(size, x, y)
    return manager.disjoin(manager.nith_var(v),
                           manager.conjoin(manager.ith_var(v), unoccupied))


def exclusion_rule(manager, size):
    """ conjunction of the exclusion rules of all cells """
    return manager.conjoin_all(square_restriction(manager, size, x, y)
                               for x in range(size) for y in range(size))


def nqueen_rule(manager, size):
    """
        Coverage rule: every line `x` holds at least one queen

        Together with the exclusion rule this makes it exactly one queen per line.
    """
    return manager.conjoin_all(
        manager.disjoin_all(manager.ith_var(var_index(size, x, y)) for y in range(size))
        for x in range(size)
    )


def queens_formula(manager, size):
    """
        The complete N-queens formula for a board of the given size

        The manager must already be sized for at least `size*size` variables.
    """
    if not is_int(size) or size <= 0:
        raise ConfigurationError(f"Board size must be a positive integer, got {size!r}")
    if manager.var_num < num_vars(size):
        raise ConfigurationError(f"Manager has {manager.var_num} variables, "
                                 f"a {size}x{size} board needs {num_vars(size)}")

    formula = manager.conjoin(exclusion_rule(manager, size), nqueen_rule(manager, size))
    logger.debug("Built %dx%d queens formula with %d nodes", size, size, manager.node_count(formula))
    return formula
