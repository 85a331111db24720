from __future__ import annotations

import enum
from typing import Optional


class Player(enum.Enum):
    WHITE = 'o'
    BLACK = 'x'

    def other(self) -> 'Player':
        return Player.BLACK if self is Player.WHITE else Player.WHITE

    @property
    def stone(self) -> 'Cell':
        """The cell value owned by this player."""
        return Cell.WHITE if self is Player.WHITE else Cell.BLACK


class Cell(enum.Enum):
    """Contents of a single square. WHITE/BLACK are the owned variants."""
    EMPTY = '.'
    GAP = '-'
    WHITE = 'o'
    BLACK = 'x'

    @property
    def owner(self) -> Optional[Player]:
        if self is Cell.WHITE:
            return Player.WHITE
        if self is Cell.BLACK:
            return Player.BLACK
        return None
