from __future__ import annotations

import logging
import os
from typing import Any, Dict, List

from flask import Flask, jsonify, request

from game import (
    Board,
    Cell,
    ContractViolation,
    DOUBLE_MARGIN,
    Move,
    MoveType,
    ParseError,
    SIZE,
    coordinate_to_square,
    gap_layout,
    parse_move,
    square_to_coordinate,
    standard_board,
)


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


logging.basicConfig(
    level=logging.DEBUG if _env_flag("ATAXX_DEBUG") else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = Flask(__name__)


def state_to_json(board: Board) -> Dict[str, Any]:
    return {
        "fen": board.serialize(),
        "cells": [c.value for c in board.cells],
        "turn": board.turn.value,
        "ply": int(board.ply),
        "reversibleMoves": int(board.reversible_moves),
        "counts": {
            "x": board.count(Cell.BLACK),
            "o": board.count(Cell.WHITE),
            "empty": board.count(Cell.EMPTY),
            "gap": board.count(Cell.GAP),
        },
        "mustPass": board.must_pass(),
    }


def board_from_json(body: Dict[str, Any]) -> Board:
    fen = body.get("fen")
    if not isinstance(fen, str):
        raise ParseError("fen required")
    return Board.deserialize(fen)


def _destinations(board: Board, coordinate: str) -> List[Dict[str, Any]]:
    origin = coordinate_to_square(coordinate)
    oy, ox = divmod(origin, SIZE)
    out: List[Dict[str, Any]] = []
    for sq in board.reachable_squares(coordinate):
        y, x = divmod(sq, SIZE)
        distance = max(abs(y - oy), abs(x - ox))
        out.append({
            "square": square_to_coordinate(sq),
            "move": square_to_coordinate(sq) if distance == 1 else coordinate + square_to_coordinate(sq),
            "kind": "single" if distance == 1 else "double",
        })
    return out


def _within_jump_range(board: Board, move: Move) -> bool:
    # Board.is_legal leaves the jump distance to the caller.
    if move.kind is not MoveType.DOUBLE:
        return True
    return move.to in board.surrounding_stones(move.frm, Cell.EMPTY, DOUBLE_MARGIN)


@app.get("/api/health")
def api_health() -> Any:
    return jsonify({"ok": True})


@app.post("/api/new")
def api_new() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    layout = str(body.get("layout", "standard"))
    seed = body.get("gapSeed", None)
    if layout not in ("standard", "empty"):
        return jsonify({"ok": False, "error": f"unknown layout: {layout}"}), 400
    if seed is not None and not isinstance(seed, int):
        return jsonify({"ok": False, "error": "gapSeed must be an integer"}), 400

    start_fen = os.getenv("ATAXX_START_FEN")
    if layout == "empty":
        board = Board()
    elif start_fen and seed is None:
        try:
            board = Board.deserialize(start_fen)
        except ParseError as e:
            logger.error("ATAXX_START_FEN is not a valid position: %s", e)
            return jsonify({"ok": False, "error": f"bad ATAXX_START_FEN: {e}"}), 500
    else:
        board = standard_board(gap_layout(seed) if seed is not None else ())
    return jsonify({"ok": True, "state": state_to_json(board)})


@app.post("/api/parse")
def api_parse() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        board = board_from_json(body)
    except ParseError as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    return jsonify({"ok": True, "state": state_to_json(board)})


@app.post("/api/legal")
def api_legal() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        board = board_from_json(body)
    except ParseError as e:
        return jsonify({"ok": False, "error": str(e)}), 400

    origin = body.get("from")
    if origin is None:
        return jsonify({"ok": True, "mustPass": board.must_pass(), "destinations": []})
    try:
        square = coordinate_to_square(str(origin))
    except ContractViolation as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    if board.cells[square] is not board.turn.stone:
        return jsonify({"ok": False, "error": f"no stone of the side to move on {origin}"}), 400
    return jsonify({
        "ok": True,
        "mustPass": board.must_pass(),
        "destinations": _destinations(board, str(origin)),
    })


@app.post("/api/move")
def api_move() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        board = board_from_json(body)
        move = parse_move(str(body.get("move", "")))
    except ParseError as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    if not board.is_legal(move) or not _within_jump_range(board, move):
        return jsonify({"ok": False, "error": "Illegal move", "state": state_to_json(board)}), 400
    board.make(move)
    logger.info("applied %s -> %s", move, board.serialize())
    return jsonify({"ok": True, "move": move.to_text(), "state": state_to_json(board)})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=_env_flag("FLASK_DEBUG", os.getenv("DEBUG", "0")))
