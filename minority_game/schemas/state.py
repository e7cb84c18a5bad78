from typing import Literal

from ..models import (
    CamelModel,
    Choice,
    Phase,
    PlayerStatus,
    QueueEntry,
    Role,
    RoundResult,
    VoteCounts,
    Winner,
)


class YouView(CamelModel):
    name: str
    active: bool
    status: PlayerStatus
    choice: Choice | None = None
    winner: bool | None = None


class RosterEntry(CamelModel):
    id: str
    name: str
    status: PlayerStatus
    active: bool
    choice: Choice | None = None
    connected: int = 0


class AdminView(CamelModel):
    players: list[RosterEntry]
    counts: VoteCounts
    history: list[RoundResult]
    queue: list[QueueEntry]
    final_winners: list[Winner]


class StateSnapshot(CamelModel):
    type: Literal["state"] = "state"
    round: int
    phase: Phase
    question: str
    options: list[str]
    counts: VoteCounts | None = None
    minority: Choice | None = None
    total_players: int
    active_players: int
    votes_submitted: int
    final_winners: list[Winner] | None = None
    you: YouView | None = None
    last_result: RoundResult | None = None
    admin: AdminView | None = None

    def to_wire(self) -> dict:
        exclude = {"admin"} if self.admin is None else None
        return self.model_dump(mode="json", by_alias=True, exclude=exclude)


class AuthReply(CamelModel):
    type: Literal["auth"] = "auth"
    ok: bool
    role: Role | None = None
    reason: str | None = None

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class RegisteredReply(CamelModel):
    type: Literal["registered"] = "registered"
    player_id: str

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
