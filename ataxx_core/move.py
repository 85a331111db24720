from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Optional

from .coords import Square, coordinate_to_square, square_to_coordinate
from .errors import ContractViolation, ParseError

logger = logging.getLogger(__name__)

NULL_MOVE_TEXT = '0000'
_NULL_ALIASES = ('0000', 'pass', 'null')


class MoveType(enum.Enum):
    NULL = 'null'
    SINGLE = 'single'
    DOUBLE = 'double'


@dataclass(frozen=True)
class Move:
    """A proposed move. Square indices are not range-checked here; Board.is_legal answers that."""
    kind: MoveType
    to: Optional[Square] = None
    frm: Optional[Square] = None

    def __post_init__(self) -> None:
        if not isinstance(self.kind, MoveType):
            raise ContractViolation(f"unknown move kind: {self.kind!r}")
        if self.kind is MoveType.NULL:
            ok = self.to is None and self.frm is None
        elif self.kind is MoveType.SINGLE:
            ok = self.to is not None and self.frm is None
        else:
            ok = self.to is not None and self.frm is not None
        if not ok:
            raise ContractViolation(f"malformed {self.kind.value} move: to={self.to!r} frm={self.frm!r}")

    @classmethod
    def null(cls) -> 'Move':
        return cls(MoveType.NULL)

    @classmethod
    def single(cls, to: Square) -> 'Move':
        return cls(MoveType.SINGLE, to=to)

    @classmethod
    def double(cls, frm: Square, to: Square) -> 'Move':
        return cls(MoveType.DOUBLE, to=to, frm=frm)

    def to_text(self) -> str:
        """Renders the move as '0000', 'b2' or 'a1c3'."""
        if self.kind is MoveType.NULL:
            return NULL_MOVE_TEXT
        if self.kind is MoveType.SINGLE:
            return square_to_coordinate(self.to)
        return square_to_coordinate(self.frm) + square_to_coordinate(self.to)

    def __str__(self) -> str:
        return self.to_text()


def parse_move(text: str) -> Move:
    """Parses move notation: '0000'/'pass' for a pass, 'b2' for a placement, 'a1c3' for a jump."""
    raw = (text or '').strip().lower()
    if raw in _NULL_ALIASES:
        return Move.null()
    try:
        if len(raw) == 2:
            return Move.single(coordinate_to_square(raw))
        if len(raw) == 4:
            return Move.double(coordinate_to_square(raw[:2]), coordinate_to_square(raw[2:]))
    except ContractViolation as e:
        logger.debug("bad move text %r: %s", text, e)
        raise ParseError(f"bad move {text!r}: {e}", text) from e
    logger.debug("bad move text %r", text)
    raise ParseError(f"bad move {text!r}: expected '0000', 'b2' or 'a1c3'", text)
