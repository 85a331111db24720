from __future__ import annotations

import logging
from typing import Dict, List, Sequence, Tuple

from .coords import SIZE, SQUARES
from .errors import ParseError
from .stones import Cell, Player

logger = logging.getLogger(__name__)

_CELL_TO_CHAR: Dict[Cell, str] = {Cell.BLACK: 'x', Cell.WHITE: 'o', Cell.GAP: '-'}
_CHAR_TO_CELL: Dict[str, Cell] = {ch: cell for cell, ch in _CELL_TO_CHAR.items()}
_EMPTY_RUN_DIGITS = '1234567'
_TURN_CHARS: Dict[str, Player] = {
    'x': Player.BLACK, 'X': Player.BLACK, 'b': Player.BLACK, 'B': Player.BLACK,
    'o': Player.WHITE, 'O': Player.WHITE, 'w': Player.WHITE, 'W': Player.WHITE,
}

Snapshot = Tuple[List[Cell], Player, int, int]  # cells, turn, reversible moves, ply


def encode_layout(cells: Sequence[Cell]) -> str:
    """Encodes the 49 cells from rank 7 down to rank 1, coalescing empty runs into one digit."""
    parts: List[str] = []
    for y in range(SIZE - 1, -1, -1):
        run = 0
        for x in range(SIZE):
            cell = cells[y * SIZE + x]
            if cell is Cell.EMPTY:
                run += 1
                continue
            if run:
                parts.append(str(run))
                run = 0
            parts.append(_CELL_TO_CHAR[cell])
        if run:
            parts.append(str(run))
        parts.append('/')
    return ''.join(parts)


def encode(cells: Sequence[Cell], turn: Player, reversible_moves: int, ply: int) -> str:
    return f"{encode_layout(cells)} {turn.value} {reversible_moves} {ply}"


def _fail(message: str, text: str) -> ParseError:
    logger.debug("parse failure: %s (input %r)", message, text)
    return ParseError(message, text)


def _decode_row(row_text: str, rank: int, text: str) -> List[Cell]:
    row: List[Cell] = []
    for ch in row_text:
        if ch in _CHAR_TO_CELL:
            row.append(_CHAR_TO_CELL[ch])
        elif ch in _EMPTY_RUN_DIGITS:
            row.extend([Cell.EMPTY] * int(ch))
        else:
            raise _fail(f"unrecognized layout character {ch!r} on rank {rank}", text)
    if len(row) != SIZE:
        raise _fail(f"rank {rank} decodes to {len(row)} cells, expected {SIZE}", text)
    return row


def _decode_counter(field: str, name: str, text: str) -> int:
    if not (field.isascii() and field.isdigit()):
        raise _fail(f"{name} must be a non-negative integer, got {field!r}", text)
    return int(field)


def decode(text: str) -> Snapshot:
    """Parses '<row6>/.../<row0>/ <turn> <reversible> <ply>' into its parts. Raises ParseError."""
    if not isinstance(text, str):
        raise _fail(f"expected a string, got {type(text).__name__}", repr(text))
    fields = text.split()
    if len(fields) != 4:
        raise _fail(f"expected 4 fields, got {len(fields)}", text)
    layout, turn_field, reversible_field, ply_field = fields

    if layout.count('/') != SIZE:
        raise _fail(f"expected {SIZE} row separators, got {layout.count('/')}", text)
    rows = layout.split('/')
    if rows[-1] != '':
        raise _fail("layout must end with '/'", text)

    cells: List[Cell] = [Cell.EMPTY] * SQUARES
    for i, row_text in enumerate(rows[:SIZE]):
        y = SIZE - 1 - i
        cells[y * SIZE:(y + 1) * SIZE] = _decode_row(row_text, y + 1, text)

    if turn_field not in _TURN_CHARS:
        raise _fail(f"unrecognized side to move {turn_field!r}", text)
    turn = _TURN_CHARS[turn_field]

    reversible_moves = _decode_counter(reversible_field, 'reversible move counter', text)
    ply = _decode_counter(ply_field, 'ply', text)
    return cells, turn, reversible_moves, ply
