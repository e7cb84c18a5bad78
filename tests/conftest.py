import pytest
from broadcaster import Broadcast
from fastapi.testclient import TestClient

from minority_game.auth import PassCodes
from minority_game.game import (
    GameCoordinator,
    PlayerDirectory,
    RoundEngine,
    SessionRegistry,
    StateProjector,
)
from minority_game.main import create_app
from minority_game.models import GameState

ADMIN_PASS = "admin-secret"
PLAYER_PASS = "player-secret"


@pytest.fixture
def state():
    return GameState()


@pytest.fixture
def directory(state):
    return PlayerDirectory(state)


@pytest.fixture
def engine(state, directory):
    return RoundEngine(state, directory)


@pytest.fixture
def sessions():
    return SessionRegistry()


@pytest.fixture
def projector(engine, directory, sessions):
    return StateProjector(engine, directory, sessions)


@pytest.fixture
def coordinator():
    return GameCoordinator(Broadcast("memory://"), PassCodes(ADMIN_PASS, PLAYER_PASS))


@pytest.fixture
def client():
    app = create_app(admin_pass=ADMIN_PASS, player_pass=PLAYER_PASS, broadcast_url="memory://")
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def add_players(directory):
    """Register players by name and return their ids in order."""

    def _add(*names):
        return [directory.ensure(name)[0] for name in names]

    return _add
