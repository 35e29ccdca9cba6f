#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## board.py
##
"""
    The `QueensLogic` class holds one N-queens game: the board and the BDD of all
    solutions that are still reachable from it.

    Every placed queen restricts the BDD on the variable of its cell. After each
    placement, every empty cell whose variable can no longer be true in any
    remaining solution is marked as blocked. When the number of empty cells drops
    to the number of queens still missing, those cells are forced and the game
    completes itself.

    Typical use, by a user interface:

    - creation, e.g. game = QueensLogic()
    - a new game, e.g. game.initialize_game(8)
    - a move, e.g. game.insert_queen(3, 5)
    - rendering from game.get_game_board()

    ===============
    List of classes
    ===============
    .. autosummary::
        :nosignatures:

        CellState
        QueensLogic
"""
import logging
import warnings
from enum import IntEnum

import numpy as np

from .constraints import queens_formula
from .exceptions import ConfigurationError, NotInitializedError
from .manager import BDDManager
from .utils import is_int
from .variables import check_coordinate, num_vars, var_coord, var_index

logger = logging.getLogger(__name__)


class CellState(IntEnum):
    """
        Content of a board cell, as stored in the board array
    """
    BLOCKED = -1  # a queen here makes the puzzle unsatisfiable
    EMPTY = 0
    QUEEN = 1


class QueensLogic(object):
    """
        Incremental N-queens game on top of a BDD.

        Creates the following attributes:
        - manager: BDDManager that stores the formula
        - size: int, board dimension (0 before the first game)
        - board: numpy int8 array of shape (size, size) holding `CellState` values, indexed board[x, y]
        - bdd: BDD node of the remaining solutions
    """

    def __init__(self, manager=None):
        """
            Arguments:
            - manager: BDDManager, optional: share an existing manager, e.g. across successive games
        """
        self.manager = manager if manager is not None else BDDManager()

        self.size = 0
        self.board = None
        self.bdd = None

    def initialize_game(self, size):
        """
            Start a new game on an empty `size` x `size` board.

            Cells that do not occur in any solution are marked blocked right away.
        """
        if not is_int(size) or size <= 0:
            raise ConfigurationError(f"Board size must be a positive integer, got {size!r}")

        self.size = int(size)
        self.board = np.full((self.size, self.size), CellState.EMPTY, dtype=np.int8)

        # never shrink a manager that may be shared with other games
        self.manager.set_var_num(max(self.manager.var_num, num_vars(self.size)))
        self.bdd = queens_formula(self.manager, self.size)

        self.update_game_board()

    def get_game_board(self):
        """
            Read-only view on the board, indexed [x, y], values are `CellState`'s
        """
        self._check_initialized()
        view = self.board.view()
        view.flags.writeable = False
        return view

    def insert_queen(self, x, y):
        """
            Place a queen on cell (x, y)

            Cells that already hold a queen or are blocked are left as they are.

            :param x: queen's X
            :param y: queen's Y
            :return: True, the placement is never refused
        """
        self._check_initialized()
        check_coordinate(self.size, x, y)

        state = self.board[x, y]
        if state == CellState.QUEEN:
            return True
        if state == CellState.BLOCKED:
            warnings.warn(f"Cell ({x}, {y}) is blocked, a queen there has no solution. Ignoring the placement.", stacklevel=2)
            return True

        self.board[x, y] = CellState.QUEEN
        self.bdd = self.manager.restrict(self.bdd, var_index(self.size, x, y), True)
        logger.debug("Queen placed on (%d, %d)", x, y)

        self.update_game_board()

        if self.should_autocomplete():
            self.autocomplete()

        return True

    def update_game_board(self):
        """
            Mark the empty cells on which a queen would make the formula unsatisfiable

            :return: number of newly blocked cells
        """
        blocked = 0
        for x in range(self.size):
            for y in range(self.size):
                if self.board[x, y] != CellState.EMPTY:
                    continue
                restricted = self.manager.restrict(self.bdd, var_index(self.size, x, y), True)
                if self.manager.is_false(restricted):
                    self.board[x, y] = CellState.BLOCKED
                    blocked += 1

        logger.debug("%d cells blocked", blocked)
        return blocked

    def should_autocomplete(self):
        """
            Whether the empty cells are exactly the queens still missing
        """
        return self.size - self.queens_placed() == self.empty_count()

    def autocomplete(self):
        """
            Place a queen on every empty cell
        """
        for x in range(self.size):
            for y in range(self.size):
                if self.board[x, y] == CellState.EMPTY:
                    self.board[x, y] = CellState.QUEEN
                    self.bdd = self.manager.restrict(self.bdd, var_index(self.size, x, y), True)
        logger.debug("Board completed with %d queens", self.queens_placed())

    # status

    def queens_placed(self):
        self._check_initialized()
        return int(np.count_nonzero(self.board == CellState.QUEEN))

    def empty_count(self):
        self._check_initialized()
        return int(np.count_nonzero(self.board == CellState.EMPTY))

    def is_solved(self):
        return self.queens_placed() == self.size

    def count_solutions(self):
        """
            Number of full solutions still reachable from the current board
        """
        self._check_initialized()
        # the variables of placed queens no longer occur in the formula, and count both ways
        count = self.manager.model_count(self.bdd, var_num=num_vars(self.size))
        return count // 2 ** self.queens_placed()

    def solution(self):
        """
            One full solution reachable from the current board,
            as a sorted list of (x, y) queen cells, or None if there is none
        """
        self._check_initialized()
        assignment = self.manager.sat_one(self.bdd)
        if assignment is None:
            return None

        cells = {var_coord(self.size, v) for v, val in assignment.items() if val}
        cells |= {(int(x), int(y)) for x, y in np.argwhere(self.board == CellState.QUEEN)}
        return sorted(cells)

    def _check_initialized(self):
        if self.board is None:
            raise NotInitializedError("Call initialize_game() first")
