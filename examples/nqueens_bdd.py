#!/usr/bin/python3
"""
Interactive N-queens with queensbdd

The player places queens one by one. After every move the engine blocks the
cells on which a queen could no longer be part of a solution, and once the
remaining cells are forced it places them itself.

This script plays the moves of a fixed sequence and prints the board after
each one: 'Q' is a queen, 'x' a blocked cell and '.' a free cell.
"""

# load the libraries
from queensbdd import QueensLogic, CellState

SYMBOLS = {CellState.QUEEN: 'Q', CellState.BLOCKED: 'x', CellState.EMPTY: '.'}

def board_str(board):
    # print with y as row, x as column
    n = board.shape[0]
    line = '+---'*n+'+\n'
    out = line
    for y in range(n):
        out += ''.join(f'| {SYMBOLS[CellState(board[x, y])]} ' for x in range(n)) + '|\n'
        out += line
    return out

def play(N, moves):
    game = QueensLogic()
    game.initialize_game(N)
    print(f"{N}-queens, {game.count_solutions()} solutions")
    print(board_str(game.get_game_board()))

    for (x, y) in moves:
        game.insert_queen(x, y)
        print(f"Queen on ({x}, {y}), {game.count_solutions()} solutions left")
        print(board_str(game.get_game_board()))
        if game.is_solved():
            print("Solved!")
            break
    return game

if __name__ == "__main__":
    N = 6
    play(N, [(0, 2), (1, 5)])
