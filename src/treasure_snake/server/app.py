"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from treasure_snake.config import GameConfig
from treasure_snake.server.routes import router
from treasure_snake.server.session import GameSession
from treasure_snake.server.websocket import ws_router


@asynccontextmanager
async def _lifespan(app: FastAPI):
    if getattr(app.state, "session", None) is None:
        app.state.session = GameSession(app.state.config, seed=app.state.seed)
    yield
    await app.state.session.cleanup()


def create_app(config: GameConfig | None = None, seed: int | None = None) -> FastAPI:
    """Build and return the FastAPI application."""
    app = FastAPI(
        title="Treasure Snake API", version="0.1.0", lifespan=_lifespan,
    )
    app.state.config = config
    app.state.seed = seed
    app.state.session = None
    app.include_router(router)
    app.include_router(ws_router)
    return app
