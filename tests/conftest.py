import pytest

from board import BOARD_COLS, BOARD_ROWS, VACANT, Board
from pieces import Piece

FILL_MARK = "#"


def fill_except(board: Board, keep):
    """Cover every vacant cell except those in keep with a single filler piece."""
    keep = set(keep)
    cells = [
        (r, c)
        for r in range(BOARD_ROWS)
        for c in range(BOARD_COLS)
        if board.matrix[r][c] == VACANT and (r, c) not in keep
    ]
    if cells:
        board.apply_block(Piece(FILL_MARK, BOARD_ROWS, BOARD_COLS, cells).posed(), 0, 0)
    return board


@pytest.fixture
def board():
    return Board(6, 28)


@pytest.fixture
def fill():
    return fill_except
