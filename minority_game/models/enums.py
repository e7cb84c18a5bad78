from enum import Enum


class Role(str, Enum):
    ADMIN = "admin"
    PLAYER = "player"
    VIEWER = "viewer"

    @classmethod
    def parse(cls, value: str | None) -> "Role":
        """Unknown or missing roles fall back to player."""
        if value == cls.ADMIN.value:
            return cls.ADMIN
        if value == cls.VIEWER.value:
            return cls.VIEWER
        return cls.PLAYER


class Phase(str, Enum):
    LOBBY = "lobby"
    VOTING = "voting"
    RESULT = "result"
    FINAL = "final"


class PlayerStatus(str, Enum):
    ACTIVE = "active"
    WAITING = "waiting"
    OUT = "out"


class Choice(str, Enum):
    A = "A"
    B = "B"
