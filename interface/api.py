"""FastAPI REST interface for the engine."""

import threading

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import Optional

import rollerball
from rollerball.config import CONFIG
from rollerball.main import Engine, side_name

app = FastAPI(title=CONFIG.ui.engine_name, version=rollerball.__version__)

# Shared game session; every handler takes the lock.
engine = Engine(depth=CONFIG.search.depth)
_engine_lock = threading.Lock()


class PositionRequest(BaseModel):
    placement: str
    turn: str = "white"


class MoveRequest(BaseModel):
    move: str  # e.g. "a2a3"


class SearchRequest(BaseModel):
    depth: Optional[int] = None


def _winner_name():
    winner = engine.winner()
    return side_name(winner).lower() if winner is not None else None


@app.get("/board")
def get_board():
    with _engine_lock:
        return {
            "placement": engine.board.placement(),
            "turn": "white" if engine.white_to_move else "black",
            "legal_moves": engine.get_legal_moves(),
            "evaluation": engine.evaluate(),
            "is_game_over": engine.is_game_over(),
            "winner": _winner_name(),
            "status": engine.status(),
        }


@app.post("/position")
def set_position(req: PositionRequest):
    if req.turn not in ("white", "black"):
        raise HTTPException(status_code=400, detail=f"Invalid turn: {req.turn}")
    with _engine_lock:
        try:
            engine.set_position(req.placement, req.turn == "white")
        except ValueError as e:
            raise HTTPException(status_code=400, detail=f"Invalid placement: {e}")
        return {"placement": engine.board.placement(), "turn": req.turn}


@app.post("/move")
def make_move(req: MoveRequest):
    with _engine_lock:
        if engine.winner() is not None:
            raise HTTPException(status_code=400, detail="Game is already over")
        if not engine.make_move(req.move):
            raise HTTPException(status_code=400, detail=f"Illegal move: {req.move}")
        return {"placement": engine.board.placement(), "move": req.move, "status": engine.status()}


@app.post("/search")
def search_move(req: SearchRequest = SearchRequest()):
    with _engine_lock:
        if engine.winner() is not None:
            raise HTTPException(status_code=400, detail="Game is already over")
        best, score = engine.get_best_move(req.depth)
        return {
            "best_move": best,
            "score": score,
            "placement": engine.board.placement(),
        }


@app.post("/play")
def play_move(req: SearchRequest = SearchRequest()):
    with _engine_lock:
        if engine.is_game_over():
            raise HTTPException(status_code=400, detail="Game is already over")
        move = engine.play_best_move(req.depth)
        return {
            "move": move,
            "placement": engine.board.placement(),
            "status": engine.status(),
        }


@app.post("/reset")
def reset_board():
    with _engine_lock:
        engine.reset()
        return {"placement": engine.board.placement()}
