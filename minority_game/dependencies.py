from typing import Annotated

from fastapi import Depends
from starlette.requests import HTTPConnection

from .game import GameCoordinator


def get_coordinator(connection: HTTPConnection) -> GameCoordinator:
    """Get the GameCoordinator owned by the running application."""
    return connection.app.state.coordinator


# convenience type alias for dependency injection
CoordinatorDep = Annotated[GameCoordinator, Depends(get_coordinator)]
