from __future__ import annotations

import random
from typing import Iterable, List, Optional, Set, Tuple

from .board import Board
from .coords import SIZE, Square, on_board
from .errors import ContractViolation
from .stones import Cell

EMPTY_FEN = '7/7/7/7/7/7/7/ x 0 0'
STANDARD_FEN = 'x5o/7/7/7/7/7/o5x/ x 0 0'

# a1, g1, a7, g7
CORNERS: Tuple[Square, ...] = (0, SIZE - 1, SIZE * (SIZE - 1), SIZE * SIZE - 1)


def standard_board(gaps: Iterable[Square] = ()) -> Board:
    """Creates the usual starting position (one stone per corner) with the given gap squares."""
    board = Board.deserialize(STANDARD_FEN)
    for square in gaps:
        if not on_board(square):
            raise ContractViolation(f"gap square out of range: {square!r}")
        if square in CORNERS:
            raise ContractViolation(f"gap on a starting corner: {square}")
        board.cells[square] = Cell.GAP
    return board


def _mirrors(x: int, y: int) -> Set[Square]:
    far = SIZE - 1
    return {yy * SIZE + xx for xx in (x, far - x) for yy in (y, far - y)}


def gap_layout(seed: Optional[int] = None, max_groups: int = 3) -> Tuple[Square, ...]:
    """
    Draws a random gap set that is symmetric under both board reflections.
    Up to `max_groups` squares are picked from the lower-left quadrant (corner excluded)
    and mirrored into the other three quadrants.
    """
    rng = random.Random(seed)
    half = SIZE // 2
    candidates: List[Tuple[int, int]] = [
        (x, y) for y in range(half + 1) for x in range(half + 1) if (x, y) != (0, 0)
    ]
    groups = rng.randint(0, max(0, min(max_groups, len(candidates))))
    squares: Set[Square] = set()
    for x, y in rng.sample(candidates, groups):
        squares |= _mirrors(x, y)
    return tuple(sorted(squares))
