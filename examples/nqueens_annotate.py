#!/usr/bin/python3
"""
N-queens board annotation with queensdd

The N-Queens problem is the problem of placing N queens on an N x N chess
board such that no two queens are attacking each other. A queen is attacking
another if it they are on the same row, same column, or same diagonal.

Here a player places queens one by one; after every move the board shows
which cells can no longer hold a queen (x) and which ones must hold one (Q).
"""

# load the libraries
from queensdd import QueensSolver, CellState, BoardStatus

SYMBOLS = {CellState.OPEN: '.', CellState.QUEEN: 'Q', CellState.BLOCKED: 'x'}

def show(board):
    # rows top to bottom, board is indexed [column, row]
    for row in range(board.shape[1]):
        print(' '.join(SYMBOLS[CellState(int(v))] for v in board[:, row]))
    print()

def play(N, moves):
    s = QueensSolver(N)
    print(f"{N}x{N} board, {s.solution_count()} solutions")

    for (column, row) in moves:
        s.place_queen(column, row)
        print(f"queen on ({column}, {row}): {s.solution_count()} solutions left")
        show(s.get_board())
        if s.status() != BoardStatus.IN_PROGRESS:
            break

    print(s.status())
    return s

if __name__ == "__main__":
    play(8, [(0, 1), (1, 4), (3, 0)])
