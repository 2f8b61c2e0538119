"""REST API route handlers for game commands and state."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, Response

from treasure_snake.keys import direction_for_key
from treasure_snake.server.models import (
    CommandResponse,
    DirectionRequest,
    GameStateResponse,
)
from treasure_snake.server.session import GameSession

router = APIRouter(prefix="/game", tags=["game"])


def _get_session(request: Request) -> GameSession:
    return request.app.state.session


def _command_response(session: GameSession, accepted: bool) -> CommandResponse:
    return CommandResponse(
        accepted=accepted,
        state=GameStateResponse(**session.state()),
    )


@router.get("")
async def get_game(request: Request) -> GameStateResponse:
    """Current game state."""
    return GameStateResponse(**_get_session(request).state())


@router.get("/frame.png", response_class=Response)
async def get_frame(request: Request) -> Response:
    """The current board rendered as a PNG image."""
    session = _get_session(request)
    return Response(content=session.frame_png(), media_type="image/png")


@router.post("/start")
async def start_game(request: Request) -> CommandResponse:
    """Start a new game, discarding any game in progress."""
    session = _get_session(request)
    accepted = await session.start()
    return _command_response(session, accepted)


@router.post("/pause")
async def pause_game(request: Request) -> CommandResponse:
    session = _get_session(request)
    accepted = await session.pause()
    return _command_response(session, accepted)


@router.post("/resume")
async def resume_game(request: Request) -> CommandResponse:
    session = _get_session(request)
    accepted = await session.resume()
    return _command_response(session, accepted)


@router.post("/toggle")
async def toggle_game(request: Request) -> CommandResponse:
    """Pause a running game or resume a paused one."""
    session = _get_session(request)
    accepted = await session.toggle()
    return _command_response(session, accepted)


@router.post("/direction")
async def set_direction(body: DirectionRequest, request: Request) -> CommandResponse:
    """Buffer a direction change for the next tick."""
    name = body.direction if body.direction is not None else body.key
    if name is None:
        raise HTTPException(status_code=422, detail="Provide 'direction' or 'key'.")
    direction = direction_for_key(name)
    if direction is None:
        raise HTTPException(status_code=422, detail=f"Unknown direction '{name}'.")
    session = _get_session(request)
    accepted = await session.set_direction(direction)
    return _command_response(session, accepted)
