"""
Command-line interface for queensbdd.

Usage:
    queensbdd [--verbose] <COMMAND>

Commands:
    version   Show the queensbdd library version.
    count N   Build the N-queens BDD and show its number of solutions and nodes.
"""

import argparse
import logging
import time

from queensbdd import __version__
from queensbdd.board import QueensLogic


def command_version(args):
    print(f"queensbdd version: {__version__}")

def command_count(args):
    game = QueensLogic()
    t0 = time.time()
    game.initialize_game(args.size)
    runtime = time.time() - t0

    print(f"{args.size}-queens: {game.count_solutions()} solutions")
    print(f"BDD nodes: {game.manager.node_count(game.bdd)} (built in {runtime:.2f}s)")
    print(f"Blocked cells on the empty board: {game.size * game.size - game.empty_count()}")

def main(argv=None):
    parser = argparse.ArgumentParser(description="queensbdd command line interface")
    parser.add_argument("--verbose", action="store_true", help="Log what the engine does")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # queensbdd version
    version_parser = subparsers.add_parser("version", help="Show version information")
    version_parser.set_defaults(func=command_version)

    # queensbdd count N
    count_parser = subparsers.add_parser("count", help="Count the solutions of the N-queens puzzle")
    count_parser.add_argument("size", type=int, help="Board dimension N")
    count_parser.set_defaults(func=command_count)

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s:%(name)s:%(message)s')
    args.func(args)
