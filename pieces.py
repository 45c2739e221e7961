# pieces.py
# Piece definitions + rotations/flips

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator


class PieceError(ValueError):
    """Raised when a piece definition does not fit its bounding box."""


class Orientation(Enum):
    R0 = 0
    R90 = 90
    R180 = 180
    R270 = 270

    @property
    def swaps_extents(self) -> bool:
        return self in (Orientation.R90, Orientation.R270)


ROTATIONS: tuple[Orientation, ...] = (
    Orientation.R0,
    Orientation.R90,
    Orientation.R180,
    Orientation.R270,
)

# Search order: unflipped rotations first, then the mirrored ones.
ALL_ORIENTATIONS: tuple[tuple[bool, Orientation], ...] = tuple(
    (reflected, orientation) for reflected in (False, True) for orientation in ROTATIONS
)


def transform_cell(
    cell: tuple[int, int],
    num_rows: int,
    num_cols: int,
    orientation: Orientation,
    reflected: bool,
) -> tuple[int, int]:
    """Map a canonical cell into the given pose.

    The mirror is applied before the rotation. Every case pivots on the
    canonical extents, so the result always lands inside the pose's
    (possibly swapped) bounding box.
    """
    r, c = cell
    R, C = num_rows, num_cols
    if reflected:
        if orientation is Orientation.R0:
            return (R - r - 1, c)
        if orientation is Orientation.R90:
            return (c, r)
        if orientation is Orientation.R180:
            return (r, C - c - 1)
        return (C - c - 1, R - r - 1)

    if orientation is Orientation.R0:
        return (r, c)
    if orientation is Orientation.R90:
        return (C - c - 1, r)
    if orientation is Orientation.R180:
        return (R - r - 1, C - c - 1)
    return (c, R - r - 1)


@dataclass(frozen=True)
class Piece:
    """Canonical (unrotated, unflipped) footprint of one puzzle piece."""

    mark: str
    num_rows: int
    num_cols: int
    cells: tuple[tuple[int, int], ...]

    def __post_init__(self) -> None:
        if len(self.mark) != 1:
            raise PieceError(f"piece mark must be a single character, got {self.mark!r}")
        if not self.cells:
            raise PieceError(f"piece {self.mark!r} has no cells")
        # Accept any iterable of pairs, store a tuple.
        object.__setattr__(self, "cells", tuple((int(r), int(c)) for r, c in self.cells))
        for r, c in self.cells:
            if not (0 <= r < self.num_rows and 0 <= c < self.num_cols):
                raise PieceError(
                    f"piece {self.mark!r}: cell {(r, c)} outside "
                    f"{self.num_rows}x{self.num_cols} bounding box"
                )

    def posed(self, orientation: Orientation = Orientation.R0, reflected: bool = False) -> "Pose":
        return Pose(self, orientation, reflected)

    def __len__(self) -> int:
        return len(self.cells)


def transformed_cells(
    piece: Piece, orientation: Orientation, reflected: bool
) -> tuple[tuple[int, int], ...]:
    return tuple(
        transform_cell(cell, piece.num_rows, piece.num_cols, orientation, reflected)
        for cell in piece.cells
    )


@dataclass(frozen=True)
class Pose:
    """One trial state of a piece: the piece plus an explicit orientation."""

    piece: Piece
    orientation: Orientation = Orientation.R0
    reflected: bool = False

    @property
    def mark(self) -> str:
        return self.piece.mark

    def rows(self) -> int:
        if self.orientation.swaps_extents:
            return self.piece.num_cols
        return self.piece.num_rows

    def cols(self) -> int:
        if self.orientation.swaps_extents:
            return self.piece.num_rows
        return self.piece.num_cols

    def cells(self) -> tuple[tuple[int, int], ...]:
        return transformed_cells(self.piece, self.orientation, self.reflected)

    def with_orientation(self, orientation: Orientation) -> "Pose":
        return Pose(self.piece, orientation, self.reflected)

    def with_reflected(self, reflected: bool) -> "Pose":
        return Pose(self.piece, self.orientation, reflected)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(self.cells())

    def __str__(self) -> str:
        return render_piece(self)


def render_grid(rows: Iterable[Iterable[str]]) -> str:
    """Text grid with a newline before each row and two spaces after each symbol."""
    return "".join("\n" + "".join(f"{symbol}  " for symbol in row) for row in rows)


def render_piece(pose: Pose) -> str:
    grid = [[" "] * pose.cols() for _ in range(pose.rows())]
    for r, c in pose:
        grid[r][c] = pose.mark
    return render_grid(grid)


# Canonical calendar pieces: (mark, rows, cols, cells)
PIECE_SHAPES: list[tuple[str, int, int, list[tuple[int, int]]]] = [
    ("1", 4, 2, [(0, 0), (1, 0), (2, 0), (2, 1), (3, 1)]),
    ("2", 4, 2, [(0, 0), (0, 1), (1, 1), (2, 1), (3, 1)]),
    ("3", 4, 2, [(0, 0), (1, 0), (2, 0), (3, 0), (1, 1)]),
    ("4", 3, 3, [(0, 2), (1, 0), (1, 1), (1, 2), (2, 0)]),
    ("5", 3, 3, [(0, 0), (0, 1), (0, 2), (1, 0), (2, 0)]),
    ("6", 3, 2, [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)]),
    ("7", 3, 2, [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1)]),
    ("8", 3, 2, [(0, 0), (1, 0), (2, 0), (0, 1), (2, 1)]),
]


def default_pieces() -> list[Piece]:
    return [Piece(mark, rows, cols, tuple(cells)) for mark, rows, cols, cells in PIECE_SHAPES]
