# placements.py
# Feasible piece placements around the first vacant board cell

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from board import VACANT, Board
from pieces import ALL_ORIENTATIONS, Orientation, Piece, Pose


@dataclass(frozen=True)
class Placement:
    mark: str
    orientation: Orientation
    reflected: bool
    row: int  # board offset of the pose's top-left corner
    col: int
    cells: tuple[tuple[int, int], ...]  # board coordinates covered by this placement


def fits(board: Board, pose: Pose, start: tuple[int, int], j_offset: int) -> bool:
    """True if the pose, shifted left by j_offset from start, lands only on vacant cells."""
    start_i, start_j = start
    if start_j < j_offset:
        return False
    for ri, ci in pose:
        if start_j + ci < j_offset:
            return False
        if board.get_cell(start_i + ri, start_j + ci - j_offset) != VACANT:
            return False
    return True


def candidate_placements(
    board: Board,
    piece: Piece,
    start: tuple[int, int],
) -> Iterator[tuple[Pose, Placement]]:
    """Yield every feasible (pose, placement) of piece anchored on start's row.

    Each column offset lets the piece reach left of the vacant cell.
    Feasibility is checked lazily, so the caller may apply and revert the
    placement between yields.
    """
    start_i, start_j = start
    for reflected, orientation in ALL_ORIENTATIONS:
        pose = piece.posed(orientation, reflected)
        for j_offset in range(pose.cols()):
            if not fits(board, pose, start, j_offset):
                continue
            oi, oj = start_i, start_j - j_offset
            yield pose, Placement(
                mark=piece.mark,
                orientation=orientation,
                reflected=reflected,
                row=oi,
                col=oj,
                cells=tuple((ri + oi, ci + oj) for ri, ci in pose),
            )
