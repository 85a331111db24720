from __future__ import annotations

import argparse
import logging
import os
from typing import Callable, List, Optional

from .board import Board
from .errors import ParseError
from .layouts import gap_layout, standard_board
from .move import parse_move
from .stones import Cell

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    debug = os.getenv('ATAXX_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on')
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')


def build_board(fen_text: Optional[str], layout: str, gap_seed: Optional[int]) -> Board:
    """Creates the starting board from a snapshot or a named layout."""
    if fen_text:
        return Board.deserialize(fen_text)
    if layout == 'empty':
        return Board()
    gaps = gap_layout(gap_seed) if gap_seed is not None else ()
    return standard_board(gaps)


def game_over(board: Board) -> bool:
    """True when no move can change the position any more (the caller decides the result)."""
    if board.count(Cell.EMPTY) == 0:
        return True
    if board.count(Cell.BLACK) == 0 or board.count(Cell.WHITE) == 0:
        return True
    other = board.copy()
    other.turn = other.turn.other()
    return board.must_pass() and other.must_pass()


def score_line(board: Board) -> str:
    return f"x: {board.count(Cell.BLACK)}  o: {board.count(Cell.WHITE)}"


def play(board: Board, read: Callable[[str], str] = input, write: Callable[[str], None] = print) -> Board:
    """Hot-seat loop: reads moves until the game cannot continue or the user types 'quit'."""
    write(board.pretty())
    while not game_over(board):
        side = board.turn.value
        text = read(f"[{side}] move (b2, a1c3, pass, quit): ").strip()
        if text.lower() in ('quit', 'exit', 'q'):
            break
        try:
            move = parse_move(text)
        except ParseError as e:
            write(str(e))
            continue
        if not board.is_legal(move):
            write(f"Illegal move: {move}")
            continue
        board.make(move)
        write(board.pretty())
        write(board.serialize())
    write(score_line(board))
    return board


def main(argv: Optional[List[str]] = None) -> None:
    _configure_logging()
    parser = argparse.ArgumentParser(description='Ataxx rules engine: inspect or play positions')
    parser.add_argument('--fen', default=None, help='Start from a serialized position')
    parser.add_argument('--layout', choices=['standard', 'empty'], default='standard',
                        help='Starting layout when --fen is not given')
    parser.add_argument('--gap-seed', type=int, default=None, help='RNG seed for a symmetric gap layout')
    parser.add_argument('--play', action='store_true', help='Play a hot-seat game in the terminal')
    args = parser.parse_args(argv)

    try:
        board = build_board(args.fen, args.layout, args.gap_seed)
    except ParseError as e:
        parser.error(f"invalid --fen: {e}")
    logger.debug("starting position %s", board.serialize())

    if not args.play:
        print(board.pretty())
        print(board.serialize())
        return

    play(board)


if __name__ == '__main__':
    main()
