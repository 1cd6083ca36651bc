"""FastAPI REST interface for the engine."""

import logging
import threading
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from draughts.config import CONFIG
from draughts.core.board import CheckersBoard, Color, apply_move, parse_move, parse_square
from draughts.core.errors import DraughtsError
from draughts.core.movegen import generate_for_color
from draughts.core.search import SearchEngine

logging.basicConfig(level=CONFIG.log_level)

app = FastAPI(title=CONFIG.ui.engine_name, version="1.0.0")

board = CheckersBoard()
engine = SearchEngine(board, config=CONFIG)
_board_lock = threading.Lock()


class PositionRequest(BaseModel):
    grid: List[List[int]]
    turn: str = "light"


class TurnRequest(BaseModel):
    moves: List[str]  # e.g. ["c3:e5", "e5:g7"]


class SearchRequest(BaseModel):
    depth: Optional[int] = Field(default=None, ge=0)


def _color(name: str) -> Color:
    try:
        return Color[name.upper()]
    except KeyError:
        raise HTTPException(status_code=400, detail=f"Invalid color: {name}")


def _state():
    moves, mandatory = generate_for_color(board.turn, board.grid)
    return {
        "grid": board.get_snapshot(),
        "turn": board.turn.name.lower(),
        "legal_moves": [str(m) for m in moves],
        "mandatory_capture": mandatory,
        "is_game_over": not moves,
        "winner": board.turn.opponent().name.lower() if not moves else None,
    }


@app.get("/board")
def get_board():
    with _board_lock:
        return _state()


@app.post("/position")
def set_position(req: PositionRequest):
    with _board_lock:
        try:
            board.set_position(req.grid, _color(req.turn))
        except DraughtsError as e:
            raise HTTPException(status_code=400, detail=f"Invalid position: {e}")
        return _state()


@app.get("/moves/{square}")
def piece_moves(square: str):
    with _board_lock:
        try:
            x, y = parse_square(square)
            moves, has_capture = engine.list_moves(x, y)
        except DraughtsError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return {"moves": [str(m) for m in moves], "has_capture": has_capture}


@app.post("/turn")
def make_turn(req: TurnRequest):
    with _board_lock:
        mtx = board.get_snapshot()
        moves = []
        try:
            for text in req.moves:
                move = parse_move(text, mtx)
                moves.append(move)
                mtx = apply_move(mtx, move)
            board.make_turn(moves)
        except DraughtsError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return {"moves": [str(m) for m in moves], **_state()}


@app.post("/search")
def search_turn(req: SearchRequest = SearchRequest()):
    with _board_lock:
        if not generate_for_color(board.turn, board.grid)[0]:
            raise HTTPException(status_code=400, detail="Game is already over")
        engine.max_depth = req.depth if req.depth is not None else CONFIG("Bot", "MaxDepth")
        turn = engine.find_best_turns(board.turn)
        return {
            "turn": [str(m) for m in turn],
            "score": engine.last_score,
            "nodes": engine.nodes,
        }


@app.post("/undo")
def undo_turn():
    with _board_lock:
        board.undo_turn()
        return _state()


@app.post("/reset")
def reset_board():
    with _board_lock:
        board.reset()
        return _state()
