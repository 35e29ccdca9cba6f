#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## manager.py
##
"""
    Interface to the `dd` package's binary decision diagrams (BDDs)

    dd keeps all formulas of one `dd.autoref.BDD` in a single shared, reduced and
    ordered node table. Formulas are `dd.autoref.Function` objects; two of them
    compare equal if and only if they represent the same boolean function.

    The `BDDManager` names variables by integer identifier: variable `v` is the
    dd variable ``x{v}``, declared in identifier order, variable 0 on top.

    Documentation of dd's own Python API:
    https://github.com/tulip-control/dd/blob/main/doc.md

    ===============
    List of classes
    ===============

    .. autosummary::
        :nosignatures:

        BDDManager
"""
import logging
from functools import reduce

from dd.autoref import BDD

from .exceptions import ConfigurationError, UnknownVariableError
from .utils import is_int

logger = logging.getLogger(__name__)


class BDDManager(object):
    """
        Owner of a `dd.autoref.BDD` and of the variable universe `0 .. var_num-1`

        Creates the following attributes:
        - var_num: int, number of usable variables (0 until `set_var_num()`)
        - dd_bdd: the dd.autoref.BDD that stores all nodes

        Several formulas (e.g. successive games) can be built on the same manager
        and will share their common sub-diagrams.

        A manager is not thread-safe; give each concurrently used game its own manager.
    """

    def __init__(self, var_num=None):
        """
            Arguments:
            - var_num: int, optional: size of the variable universe, see `set_var_num()`
        """
        self.var_num = 0
        self._declared = 0

        self.dd_bdd = BDD()
        # keep the variable order equal to the identifier order
        self.dd_bdd.configure(reordering=False)

        if var_num is not None:
            self.set_var_num(var_num)

    def set_var_num(self, var_num):
        """
            Fix the number of variables: afterwards variables `0 .. var_num-1` can be used.

            Can be called again (e.g. for a new game of another size), existing formulas stay valid.
        """
        if not is_int(var_num) or var_num <= 0:
            raise ConfigurationError(f"Variable count must be a positive integer, got {var_num!r}")
        self.var_num = int(var_num)

        # dd variables are never removed, only new ones are added at the bottom
        if self.var_num > self._declared:
            self.dd_bdd.declare(*[self._name(v) for v in range(self._declared, self.var_num)])
            self._declared = self.var_num
        logger.debug("BDD manager now has %d variables", self.var_num)

    # constants and literals

    def true(self):
        return self.dd_bdd.true

    def false(self):
        return self.dd_bdd.false

    def ith_var(self, v):
        """ the formula "variable v is true" """
        return self.dd_bdd.var(self._name(self._check_var(v)))

    def nith_var(self, v):
        """ the formula "variable v is false" """
        return ~self.ith_var(v)

    def is_false(self, f):
        return f == self.dd_bdd.false

    def is_true(self, f):
        return f == self.dd_bdd.true

    # boolean operations

    def conjoin(self, a, b):
        return a & b

    def disjoin(self, a, b):
        return a | b

    def negate(self, f):
        return ~f

    def conjoin_all(self, nodes):
        return reduce(self.conjoin, nodes, self.dd_bdd.true)

    def disjoin_all(self, nodes):
        return reduce(self.disjoin, nodes, self.dd_bdd.false)

    def restrict(self, f, v, value=True):
        """
            Substitute the constant `value` for variable `v` in formula `f`.

            The result no longer depends on `v`.
        """
        name = self._name(self._check_var(v))
        return self.dd_bdd.let({name: bool(value)}, f)

    # queries

    def support(self, f):
        """ identifiers of the variables `f` depends on """
        return {self._var(name) for name in self.dd_bdd.support(f)}

    def model_count(self, f, var_num=None):
        """
            Number of satisfying assignments of `f` over variables `0 .. var_num-1`

            Variables that `f` does not depend on count both ways.

            - var_num: int, optional: defaults to the manager's variable count
        """
        n = self.var_num if var_num is None else var_num
        outside = [v for v in self.support(f) if v >= n]
        if outside:
            raise UnknownVariableError(f"Formula depends on variable {max(outside)}, outside of a universe of {n}")
        return self.dd_bdd.count(f, nvars=n)

    def sat_one(self, f):
        """
            One satisfying assignment of `f` over the variables it depends on,
            as a dict {var: bool}. Returns None if `f` is unsatisfiable.
        """
        assignment = self.dd_bdd.pick(f)
        if assignment is None:
            return None
        return {self._var(name): bool(val) for name, val in assignment.items()}

    def node_count(self, f=None):
        """
            Number of nodes of `f`, or of all nodes stored by the manager if `f` is None
        """
        if f is None:
            return len(self.dd_bdd)
        return f.dag_size

    def collect_garbage(self):
        """
            Free the nodes no formula refers to anymore, live formulas are untouched
        """
        self.dd_bdd.collect_garbage()

    # internals

    def _check_var(self, v):
        if not is_int(v) or not (0 <= v < self.var_num):
            raise UnknownVariableError(f"Variable {v!r} outside of [0, {self.var_num})")
        return int(v)

    @staticmethod
    def _name(v):
        return f"x{v}"

    @staticmethod
    def _var(name):
        return int(name[1:])
