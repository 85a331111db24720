from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from . import fen
from .coords import (
    FILES,
    RANKS,
    SIZE,
    SQUARES,
    Square,
    coordinate_to_square,
    on_board,
    square_to_coordinate,
)
from .errors import ContractViolation
from .move import Move, MoveType
from .stones import Cell, Player

logger = logging.getLogger(__name__)

# Chebyshev radius of a placement (captures use the same radius) and of a jump.
SINGLE_MARGIN = 1
DOUBLE_MARGIN = 2


def _empty_cells() -> List[Cell]:
    return [Cell.EMPTY] * SQUARES


@dataclass
class Board:
    """Mutable game position: 49 cells, side to move, ply and the reversible-move counter."""
    cells: List[Cell] = field(default_factory=_empty_cells)
    turn: Player = Player.BLACK
    ply: int = 0
    reversible_moves: int = 0

    def __post_init__(self) -> None:
        self.cells = list(self.cells)
        if len(self.cells) != SQUARES:
            raise ContractViolation(f"a board holds {SQUARES} cells, got {len(self.cells)}")
        if not all(isinstance(c, Cell) for c in self.cells):
            raise ContractViolation("every cell must be a Cell value")
        if not isinstance(self.turn, Player):
            raise ContractViolation(f"turn must be a Player, got {self.turn!r}")
        for name in ('ply', 'reversible_moves'):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 0:
                raise ContractViolation(f"{name} must be a non-negative int, got {value!r}")

    # ---------- serialization ----------

    def serialize(self) -> str:
        return fen.encode(self.cells, self.turn, self.reversible_moves, self.ply)

    @classmethod
    def deserialize(cls, text: str) -> 'Board':
        """Builds a board from its serialized form. Raises ParseError on malformed input."""
        cells, turn, reversible_moves, ply = fen.decode(text)
        return cls(cells=cells, turn=turn, ply=ply, reversible_moves=reversible_moves)

    # ---------- geometry ----------

    coordinate_to_square = staticmethod(coordinate_to_square)
    square_to_coordinate = staticmethod(square_to_coordinate)

    def at(self, square: Square) -> Cell:
        if not on_board(square):
            raise ContractViolation(f"square out of range: {square!r}")
        return self.cells[square]

    def surrounding_stones(self, square: Square, kind: Cell, margin: int) -> List[Square]:
        """
        Lists the squares holding `kind` within Chebyshev distance `margin` of `square`.
        The window is clipped to the grid and scanned row by row from rank 1 upwards,
        left to right, so results come back in ascending index order.
        """
        if not on_board(square):
            raise ContractViolation(f"square out of range: {square!r}")
        if not isinstance(margin, int) or margin < 0:
            raise ContractViolation(f"margin must be a non-negative int, got {margin!r}")
        y0, x0 = divmod(square, SIZE)
        found: List[Square] = []
        for y in range(max(0, y0 - margin), min(SIZE - 1, y0 + margin) + 1):
            for x in range(max(0, x0 - margin), min(SIZE - 1, x0 + margin) + 1):
                pos = y * SIZE + x
                if self.cells[pos] is kind:
                    found.append(pos)
        return found

    def reachable_squares(self, coordinate: str) -> List[Square]:
        """Empty squares a stone on `coordinate` could move or jump to."""
        square = coordinate_to_square(coordinate)
        return self.surrounding_stones(square, Cell.EMPTY, DOUBLE_MARGIN)

    # ---------- rules ----------

    def is_legal(self, move: Move) -> bool:
        friendly = self.turn.stone

        if move.kind is MoveType.NULL:
            # A pass is only allowed when no friendly stone can reach any empty square.
            for square, cell in enumerate(self.cells):
                if cell is Cell.EMPTY and self.surrounding_stones(square, friendly, DOUBLE_MARGIN):
                    return False
            return True

        if not on_board(move.to) or self.cells[move.to] is not Cell.EMPTY:
            return False

        if move.kind is MoveType.SINGLE:
            return len(self.surrounding_stones(move.to, friendly, SINGLE_MARGIN)) > 0

        if move.kind is MoveType.DOUBLE:
            # Jump distance is not checked here; callers pick destinations via reachable_squares.
            return on_board(move.frm) and self.cells[move.frm] is friendly

        return False

    def must_pass(self) -> bool:
        return self.is_legal(Move.null())

    def _require_playable(self, square: Square, role: str) -> None:
        if not on_board(square):
            logger.debug("make: %s square out of range: %r", role, square)
            raise ContractViolation(f"{role} square out of range: {square!r}")
        if self.cells[square] is Cell.GAP:
            logger.debug("make: %s square %d is a gap", role, square)
            raise ContractViolation(f"{role} square {square_to_coordinate(square)} is a gap")

    def _place(self, square: Square, friendly: Cell, hostile: Cell) -> None:
        self.cells[square] = friendly
        for captured in self.surrounding_stones(square, hostile, SINGLE_MARGIN):
            self.cells[captured] = friendly

    def make(self, move: Move) -> None:
        """
        Applies a move in place. The move must already have passed is_legal; only the
        square indices are checked (ContractViolation, raised before anything changes)
        so a misused call can never turn a gap into a stone.

        Single: counter resets to 0. Double: counter becomes previous + 1.
        Null: the turn passes, counter resets to 0, cells are untouched.
        """
        friendly = self.turn.stone
        hostile = self.turn.other().stone

        if move.kind is MoveType.DOUBLE:
            self._require_playable(move.frm, 'from')
            self._require_playable(move.to, 'to')
            self.cells[move.frm] = Cell.EMPTY
            reversible_moves = self.reversible_moves + 1
            self._place(move.to, friendly, hostile)
        elif move.kind is MoveType.SINGLE:
            self._require_playable(move.to, 'to')
            reversible_moves = 0
            self._place(move.to, friendly, hostile)
        elif move.kind is MoveType.NULL:
            reversible_moves = 0
        else:
            raise ContractViolation(f"unknown move kind: {move.kind!r}")

        logger.debug("ply %d: %s plays %s", self.ply, self.turn.name.lower(), move.to_text())
        self.turn = self.turn.other()
        self.reversible_moves = reversible_moves
        self.ply += 1

    # ---------- helpers for callers ----------

    def copy(self) -> 'Board':
        return Board(cells=list(self.cells), turn=self.turn, ply=self.ply, reversible_moves=self.reversible_moves)

    def count(self, kind: Cell) -> int:
        return sum(1 for c in self.cells if c is kind)

    def pretty(self) -> str:
        """Generates a human-readable grid, rank 7 on top, with file and rank labels."""
        lines: List[str] = []
        for y in range(SIZE - 1, -1, -1):
            row = [self.cells[y * SIZE + x].value for x in range(SIZE)]
            lines.append(f"{RANKS[y]} " + " ".join(row))
        lines.append("  " + " ".join(FILES))
        return "\n".join(lines)
