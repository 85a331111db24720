from __future__ import annotations

import logging

from .errors import ContractViolation

logger = logging.getLogger(__name__)

SIZE = 7
SQUARES = SIZE * SIZE
FILES = 'abcdefg'
RANKS = '1234567'

Square = int  # 0..48, row-major, row 0 is rank "1"


def on_board(square: object) -> bool:
    """True for an int square index in [0, 49)."""
    return isinstance(square, int) and not isinstance(square, bool) and 0 <= square < SQUARES


def coordinate_to_square(coordinate: str) -> Square:
    """Converts a coordinate such as 'c4' into a square index (file -> column, rank -> row)."""
    if (
        not isinstance(coordinate, str)
        or len(coordinate) != 2
        or coordinate[0] not in FILES
        or coordinate[1] not in RANKS
    ):
        logger.debug("rejecting coordinate %r", coordinate)
        raise ContractViolation(f"not a board coordinate: {coordinate!r}")
    x = FILES.index(coordinate[0])
    y = RANKS.index(coordinate[1])
    return y * SIZE + x


def square_to_coordinate(square: Square) -> str:
    """Converts a square index back into its 'a1'..'g7' coordinate."""
    if not on_board(square):
        logger.debug("rejecting square %r", square)
        raise ContractViolation(f"square out of range: {square!r}")
    y, x = divmod(square, SIZE)
    return FILES[x] + RANKS[y]
