# board.py
# Board geometry, month/day coordinate maps, and the mutable puzzle board

from __future__ import annotations

import logging
from typing import Optional

from pieces import Pose, render_grid

LOGGER = logging.getLogger(__name__)

BOARD_ROWS = 7
BOARD_COLS = 7

VACANT = "."
BLOCKED = "x"
MONTH_MARK = "M"
DAY_MARK = "D"

# Fixed X-cells: two in the top-right corner, four along the bottom-right edge
BLOCKED_CELLS: tuple[tuple[int, int], ...] = (
    (0, 6),
    (1, 6),
    (6, 3),
    (6, 4),
    (6, 5),
    (6, 6),
)


class BoardError(ValueError):
    """Raised when a board cannot be built for the requested date."""


def month_cell(month: int) -> tuple[int, int]:
    """Months fill the first two rows, six per row."""
    return divmod(month - 1, 6)


def day_cell(day: int) -> tuple[int, int]:
    """Days start on row 2, seven per row."""
    row, col = divmod(day - 1, 7)
    return (2 + row, col)


# Month coordinates (1–12)
MONTH_COORDS: dict[int, tuple[int, int]] = {m: month_cell(m) for m in range(1, 13)}

# Day coordinates (1–31)
DAY_COORDS: dict[int, tuple[int, int]] = {d: day_cell(d) for d in range(1, 32)}


class Board:
    def __init__(self, month: int, day: int):
        if not 1 <= month <= 12:
            raise BoardError(f"month must be in 1..12, got {month}")
        # Day is not checked against the length of the month.
        if not 1 <= day <= 31:
            raise BoardError(f"day must be in 1..31, got {day}")

        self._month = month
        self._day = day
        self.matrix: list[list[str]] = [[VACANT] * BOARD_COLS for _ in range(BOARD_ROWS)]
        for r, c in BLOCKED_CELLS:
            self.matrix[r][c] = BLOCKED

        for (r, c), mark in ((MONTH_COORDS[month], MONTH_MARK), (DAY_COORDS[day], DAY_MARK)):
            if self.matrix[r][c] != VACANT:
                raise BoardError(
                    f"{mark} cell {(r, c)} collides with {self.matrix[r][c]!r} "
                    f"for {month}/{day}"
                )
            self.matrix[r][c] = mark
        LOGGER.debug(
            "Board %s/%s: month cell %s, day cell %s",
            month, day, MONTH_COORDS[month], DAY_COORDS[day],
        )

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    def first_vacant(self) -> Optional[tuple[int, int]]:
        for i in range(BOARD_ROWS):
            for j in range(BOARD_COLS):
                if self.matrix[i][j] == VACANT:
                    return (i, j)
        return None

    def get_cell(self, i: int, j: int) -> str:
        """Cell value, with anything off the grid reading as blocked."""
        if not (0 <= i < BOARD_ROWS and 0 <= j < BOARD_COLS):
            return BLOCKED
        return self.matrix[i][j]

    def _footprint(self, pose: Pose, i: int, j: int):
        # Cells translated off the grid are skipped, not reported.
        for ii, jj in pose:
            r, c = ii + i, jj + j
            if 0 <= r < BOARD_ROWS and 0 <= c < BOARD_COLS:
                yield r, c

    def apply_block(self, pose: Pose, i: int, j: int) -> None:
        for r, c in self._footprint(pose, i, j):
            self.matrix[r][c] = pose.mark

    def revert_block(self, pose: Pose, i: int, j: int) -> None:
        for r, c in self._footprint(pose, i, j):
            self.matrix[r][c] = VACANT

    def rows(self) -> tuple[tuple[str, ...], ...]:
        return tuple(tuple(row) for row in self.matrix)

    def count(self, symbol: str) -> int:
        return sum(row.count(symbol) for row in self.matrix)

    def vacant_count(self) -> int:
        return self.count(VACANT)

    def __str__(self) -> str:
        return render_board(self)


def render_board(board: Board) -> str:
    return render_grid(board.matrix)
