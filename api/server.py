"""FastAPI server exposing the game engine to a browser view.

Stateless per request: the client sends the position notation each time and
receives the resulting position back.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from minirooks.constants import START_POSITION
from minirooks.game import Game
from minirooks.move import MoveOutcome, Square
from minirooks.perft import perft, perft_divide

logger = logging.getLogger(__name__)

SQUARE_PATTERN = r"^[a-fA-F][1-6]$"


class PositionRequest(BaseModel):
    position: str = Field(default=START_POSITION)


class SelectRequest(BaseModel):
    position: str = Field(default=START_POSITION)
    square: str = Field(pattern=SQUARE_PATTERN)


class MoveRequest(BaseModel):
    position: str = Field(default=START_POSITION)
    from_square: str = Field(pattern=SQUARE_PATTERN)
    to_square: str = Field(pattern=SQUARE_PATTERN)


class PerftRequest(BaseModel):
    position: str = Field(default=START_POSITION)
    depth: int = Field(default=3, ge=1, le=5)
    divide: bool = Field(default=False)


app = FastAPI(title="Mini Rooks API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _game_from_position(position: str) -> Game:
    try:
        return Game(position)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def _position_payload(game: Game) -> dict:
    return {
        "position": game.position(),
        "side_to_move": game.turn.value,
        "board": [[None if piece is None else piece.symbol for piece in row] for row in game.board],
        "status": "game_over" if game.game_over else "ongoing",
        "winner": None if game.winner is None else game.winner.value,
        "message": game.status_message,
        "legal_moves": [move.notation() for move in game.legal_moves()],
    }


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/reset")
def reset() -> dict:
    return _position_payload(Game())


@app.post("/state")
def state(payload: PositionRequest) -> dict:
    return _position_payload(_game_from_position(payload.position))


@app.post("/select")
def select(payload: SelectRequest) -> dict:
    game = _game_from_position(payload.position)
    targets = game.select_square(payload.square)
    response = _position_payload(game)
    response["selected"] = None if game.selected is None else game.selected.name
    response["targets"] = [{"square": sq.name, "kind": kind.value} for sq, kind in sorted(targets.items())]
    return response


@app.post("/move")
def move(payload: MoveRequest) -> dict:
    game = _game_from_position(payload.position)
    from_sq = Square.parse(payload.from_square)
    to_sq = Square.parse(payload.to_square)
    outcome = game.attempt_move(from_sq, to_sq)
    if outcome is MoveOutcome.REJECTED_ILLEGAL:
        logger.info("illegal move %s%s in %s", from_sq, to_sq, payload.position)

    response = _position_payload(game)
    response["outcome"] = outcome.value
    response["last_move"] = f"{from_sq}{to_sq}" if outcome.applied else None
    return response


@app.post("/perft")
def run_perft(payload: PerftRequest) -> dict:
    game = _game_from_position(payload.position)
    if payload.divide:
        return {"divide": perft_divide(game, payload.depth)}
    return {"nodes": perft(game, payload.depth)}
