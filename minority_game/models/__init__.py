from .enums import Role, Phase, PlayerStatus, Choice
from .game import (
    CamelModel,
    PlayerRecord,
    VoteCounts,
    QueueEntry,
    RoundResult,
    Winner,
    Connection,
    GameState,
)

__all__ = [
    "Role", "Phase", "PlayerStatus", "Choice",
    "CamelModel", "PlayerRecord", "VoteCounts", "QueueEntry", "RoundResult",
    "Winner", "Connection", "GameState",
]
