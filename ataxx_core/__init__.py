"""
Ataxx core Python package.

This package holds the rules engine: board state, its text snapshot format,
and single-move legality / application. Modules:
- stones.py: Cell, Player
- coords.py: square indices and 'a1'..'g7' coordinates
- move.py: Move, MoveType, move notation
- fen.py: snapshot encode/decode
- board.py: Board
- layouts.py: starting positions and gap layouts
- cli.py: command line driver
"""
