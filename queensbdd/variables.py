#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## variables.py
##
"""
Mapping between board coordinates and decision diagram variables.

Cell `(x, y)` of a `size` x `size` board is represented by variable
``size * y + x``. The mapping is fixed for the lifetime of a game.

    =================
    List of functions
    =================
    .. autosummary::
        :nosignatures:

        num_vars
        check_coordinate
        var_index
        var_coord
"""
from .exceptions import InvalidCoordinateError, UnknownVariableError
from .utils import is_int


def num_vars(size):
    """ number of variables needed for a board of the given size
    """
    return size * size


def check_coordinate(size, x, y):
    """
        Raise `InvalidCoordinateError` unless `0 <= x, y < size`
    """
    if not (is_int(x) and is_int(y)) or not (0 <= x < size and 0 <= y < size):
        raise InvalidCoordinateError(f"Cell ({x}, {y}) is outside of a {size}x{size} board")


def var_index(size, x, y):
    """
        Variable identifier of cell (x, y)

        :param size: board dimension
        :param x: queen's X
        :param y: queen's Y
        :return: int in `[0, size*size)`
    """
    check_coordinate(size, x, y)
    return size * y + x


def var_coord(size, v):
    """
        Inverse of `var_index()`: the (x, y) cell of variable `v`
    """
    if not (0 <= v < num_vars(size)):
        raise UnknownVariableError(f"Variable {v} does not belong to a {size}x{size} board")
    y, x = divmod(v, size)
    return x, y
