import logging
from contextlib import asynccontextmanager

from broadcaster import Broadcast
from fastapi import FastAPI

from .auth import PassCodes
from .config import ADMIN_PASS, BROADCAST_URL, LOG_LEVEL, PLAYER_PASS
from .game import GameCoordinator
from .middleware import add_cors_middleware, add_logging_middleware
from .routers import auth_router, websocket_router

logging.basicConfig(level=LOG_LEVEL)
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    coordinator: GameCoordinator = app.state.coordinator
    await coordinator.broadcast.connect()
    log.info("Minority game server starting up")
    yield
    await coordinator.broadcast.disconnect()
    log.info("Minority game server shutting down")


def create_app(
        admin_pass: str = ADMIN_PASS,
        player_pass: str = PLAYER_PASS,
        broadcast_url: str = BROADCAST_URL,
) -> FastAPI:
    app = FastAPI(title="Minority Game", version="0.1.0", lifespan=lifespan)
    app.state.coordinator = GameCoordinator(
        broadcast=Broadcast(broadcast_url),
        passcodes=PassCodes(admin_pass, player_pass),
    )

    app.add_middleware(add_cors_middleware)
    app.add_middleware(add_logging_middleware)

    app.include_router(auth_router)
    app.include_router(websocket_router)

    @app.get("/health")
    async def health_check():
        return {"status": "ok", "service": "minority-game", "phase": app.state.coordinator.state.phase}

    return app


app = create_app()
