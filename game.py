from __future__ import annotations

# Facade module that re-exports the Ataxx core.
# Used by the Flask app and tests; single-responsibility modules live under ataxx_core/*.

from ataxx_core.board import Board, DOUBLE_MARGIN, SINGLE_MARGIN
from ataxx_core.coords import (
    SIZE,
    SQUARES,
    Square,
    coordinate_to_square,
    on_board,
    square_to_coordinate,
)
from ataxx_core.errors import AtaxxError, ContractViolation, ParseError
from ataxx_core.layouts import CORNERS, EMPTY_FEN, STANDARD_FEN, gap_layout, standard_board
from ataxx_core.move import Move, MoveType, parse_move
from ataxx_core.stones import Cell, Player

__all__ = [
    'AtaxxError',
    'Board',
    'CORNERS',
    'Cell',
    'ContractViolation',
    'DOUBLE_MARGIN',
    'EMPTY_FEN',
    'Move',
    'MoveType',
    'ParseError',
    'Player',
    'SINGLE_MARGIN',
    'SIZE',
    'SQUARES',
    'STANDARD_FEN',
    'Square',
    'coordinate_to_square',
    'gap_layout',
    'on_board',
    'parse_move',
    'square_to_coordinate',
    'standard_board',
]


def main() -> None:
    # CLI driver delegated to ataxx_core.cli
    from ataxx_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
