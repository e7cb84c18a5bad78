from .directory import PlayerDirectory
from .engine import RoundEngine
from .sessions import SessionRegistry
from .projector import StateProjector
from .coordinator import GameCoordinator

__all__ = ["PlayerDirectory", "RoundEngine", "SessionRegistry", "StateProjector", "GameCoordinator"]
