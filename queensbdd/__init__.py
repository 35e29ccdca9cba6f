"""
    queensbdd is a numpy-based engine for interactive N-queens games, built on binary decision diagrams.

    The package consists of 4 modules:
    - `variables`: the mapping between board cells and BDD variables
    - `manager`: a `BDDManager` owning shared, reduced, ordered BDDs and their boolean operations
    - `constraints`: construction of the N-queens rules as one BDD
    - `board`: the `QueensLogic` game, which restricts the BDD as queens are placed,
      blocks infeasible cells and completes forced boards
"""

__version__ = "0.3.1"


from .board import CellState, QueensLogic
from .manager import BDDManager
from .constraints import queens_formula
from .variables import var_index, var_coord
