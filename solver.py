# solver.py
# Backtracking search; solves for a given date

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Optional, Sequence

from board import Board
from pieces import Piece, default_pieces, render_grid
from placements import Placement, candidate_placements

LOGGER = logging.getLogger(__name__)

SolutionCallback = Callable[[Board, Sequence[Placement]], None]


class PoolError(ValueError):
    """Raised when a piece is checked out twice or is not in the pool."""


class PiecePool:
    """Ordered pieces, each either checked in (available) or out on the current path."""

    def __init__(self, pieces: Iterable[Piece]):
        self._pieces: List[Piece] = list(pieces)
        self._available: List[bool] = [True] * len(self._pieces)

    def __len__(self) -> int:
        return len(self._pieces)

    def __iter__(self) -> Iterator[Piece]:
        return iter(self._pieces)

    def _index(self, piece: Piece) -> int:
        for idx, candidate in enumerate(self._pieces):
            if candidate is piece:
                return idx
        raise PoolError(f"piece {piece.mark!r} is not in this pool")

    def is_available(self, piece: Piece) -> bool:
        return self._available[self._index(piece)]

    def available(self) -> Iterator[Piece]:
        # Re-checks the flag on each step, so pieces checked out while
        # iterating are skipped.
        for idx, piece in enumerate(self._pieces):
            if self._available[idx]:
                yield piece

    @contextmanager
    def checked_out(self, piece: Piece) -> Iterator[Piece]:
        idx = self._index(piece)
        if not self._available[idx]:
            raise PoolError(f"piece {piece.mark!r} is already checked out")
        self._available[idx] = False
        try:
            yield piece
        finally:
            self._available[idx] = True


def search(
    board: Board,
    pool: PiecePool,
    _trail: Optional[List[Placement]] = None,
) -> Iterator[tuple[Placement, ...]]:
    """Depth-first enumeration of every tiling of the board's vacant cells.

    Yields the placement trail of each full cover while the board still
    holds it. Board and pool are restored when the generator finishes or
    is closed early.
    """
    trail: List[Placement] = [] if _trail is None else _trail

    # 1. find the first vacant cell on the board
    start = board.first_vacant()
    if start is None:
        # no vacant cell left, this is a valid solution
        yield tuple(trail)
        return

    # 2. apply available pieces one by one
    for piece in pool.available():
        with pool.checked_out(piece):
            for pose, placement in candidate_placements(board, piece, start):
                board.apply_block(pose, placement.row, placement.col)
                trail.append(placement)
                try:
                    yield from search(board, pool, trail)
                finally:
                    # revert after trying, move to the next offset/orientation
                    trail.pop()
                    board.revert_block(pose, placement.row, placement.col)


def solve(board: Board, pool: PiecePool, on_solution: SolutionCallback) -> int:
    """Run the full search, calling on_solution(board, placements) per tiling.

    The callback must only read the board. Returns the number of solutions.
    """
    found = 0
    for placements in search(board, pool):
        found += 1
        LOGGER.debug("Solution %d: %s", found, " ".join(p.mark for p in placements))
        on_solution(board, placements)
    return found


def count_solutions(board: Board, pool: PiecePool) -> int:
    return solve(board, pool, lambda _board, _placements: None)


@dataclass(frozen=True)
class Solution:
    rows: tuple[tuple[str, ...], ...]
    placements: tuple[Placement, ...]

    def render(self) -> str:
        return render_grid(self.rows)

    def __str__(self) -> str:
        return self.render()


def iter_solutions(
    month: int,
    day: int,
    pieces: Optional[Iterable[Piece]] = None,
) -> Iterator[Solution]:
    """Yield solution snapshots for a date, in discovery order."""
    board = Board(month, day)
    pool = PiecePool(default_pieces() if pieces is None else pieces)

    LOGGER.debug("Searching %s/%s with %d pieces", month, day, len(pool))
    for placements in search(board, pool):
        yield Solution(rows=board.rows(), placements=placements)


def solve_for_date(
    month: int,
    day: int,
    find_all: bool = False,
    pieces: Optional[Iterable[Piece]] = None,
):
    solutions = iter_solutions(month, day, pieces)

    if find_all:
        all_solutions = list(solutions)
        return all_solutions or None

    first = next(solutions, None)
    if first is None:
        return None
    return [first]
