from .auth import router as auth_router
from .websocket_router import router as websocket_router

__all__ = ["auth_router", "websocket_router"]
