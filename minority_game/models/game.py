from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

from ..config import LOBBY_QUESTION
from .enums import Choice, Phase, PlayerStatus, Role


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PlayerRecord(CamelModel):
    name: str
    status: PlayerStatus = PlayerStatus.ACTIVE

    @computed_field
    @property
    def active(self) -> bool:
        return self.status == PlayerStatus.ACTIVE


class VoteCounts(BaseModel):
    A: int = 0
    B: int = 0

    @property
    def total(self) -> int:
        return self.A + self.B


class QueueEntry(CamelModel):
    id: str
    question: str
    options: list[str]


class RoundResult(CamelModel):
    round: int
    question: str
    counts: VoteCounts
    minority: Choice | None
    total_votes: int
    timestamp: int


class Winner(CamelModel):
    id: str
    name: str


class Connection(CamelModel):
    connection_id: str
    role: Role = Role.PLAYER
    player_id: str | None = None


class GameState(BaseModel):
    """Everything the round engine owns, held by one coordinator."""

    round: int = 0
    phase: Phase = Phase.LOBBY
    question: str = LOBBY_QUESTION
    options: list[str] = Field(default_factory=lambda: [Choice.A.value, Choice.B.value])
    votes: dict[str, Choice] = Field(default_factory=dict)
    players: dict[str, PlayerRecord] = Field(default_factory=dict)
    last_result: RoundResult | None = None
    history: list[RoundResult] = Field(default_factory=list)
    queue: list[QueueEntry] = Field(default_factory=list)
    final_winners: list[Winner] = Field(default_factory=list)
