import logging
import time
import uuid
from collections.abc import Iterable

from ..config import LOBBY_QUESTION
from ..models import (
    Choice,
    GameState,
    Phase,
    PlayerStatus,
    QueueEntry,
    RoundResult,
    VoteCounts,
    Winner,
)
from ..models.messages import RoundPrompt
from .directory import PlayerDirectory

log = logging.getLogger(__name__)

DEFAULT_OPTIONS = (Choice.A.value, Choice.B.value)


def _clean(text: str | None, fallback: str) -> str:
    return (text or "").strip() or fallback


class RoundEngine:
    """Round lifecycle: lobby -> voting -> result -> final, plus reset.

    Every method runs to completion without awaiting, so callers on the event
    loop never observe a half-applied transition. Rejected operations return
    False or None and leave the state untouched.
    """

    def __init__(self, state: GameState, directory: PlayerDirectory):
        self.state = state
        self.directory = directory

    def start(self, question: str | None, option_a: str | None, option_b: str | None) -> None:
        self.state.round += 1
        self.state.phase = Phase.VOTING
        self.state.question = _clean(question, f"Round {self.state.round}")
        self.state.options = [
            _clean(option_a, DEFAULT_OPTIONS[0]),
            _clean(option_b, DEFAULT_OPTIONS[1]),
        ]
        self.state.votes.clear()
        self.state.last_result = None
        self.state.final_winners = []
        log.info(f"Round {self.state.round} started: {self.state.question}")

    def record_vote(self, player_id: str | None, choice: str | None) -> bool:
        if self.state.phase != Phase.VOTING:
            return False
        try:
            choice = Choice(choice)
        except ValueError:
            return False

        record = self.directory.get(player_id)
        if record is None or record.status != PlayerStatus.ACTIVE:
            return False

        self.state.votes[player_id] = choice
        return True

    def tally(self) -> VoteCounts:
        counts = VoteCounts()
        for choice in self.state.votes.values():
            if choice == Choice.A:
                counts.A += 1
            elif choice == Choice.B:
                counts.B += 1
        return counts

    @staticmethod
    def determine_minority(counts: VoteCounts) -> Choice | None:
        # a one-sided or tied round eliminates nobody
        if counts.A == 0 or counts.B == 0:
            return None
        if counts.A == counts.B:
            return None
        return Choice.A if counts.A < counts.B else Choice.B

    def reveal(self) -> RoundResult | None:
        if self.state.phase != Phase.VOTING:
            return None
        if not self.state.votes:
            return None

        self.state.phase = Phase.RESULT
        counts = self.tally()
        minority = self.determine_minority(counts)

        eliminated = []
        if minority is not None:
            for player_id in self.directory.active_ids():
                if self.state.votes.get(player_id) != minority:
                    self.directory.set_status(player_id, PlayerStatus.OUT)
                    eliminated.append(player_id)

        result = RoundResult(
            round=self.state.round,
            question=self.state.question,
            counts=counts,
            minority=minority,
            total_votes=len(self.state.votes),
            timestamp=int(time.time() * 1000),
        )
        self.state.last_result = result
        self.state.history.append(result)
        log.info(
            f"Round {result.round} revealed: A={counts.A} B={counts.B} "
            f"minority={minority.value if minority else None} eliminated={len(eliminated)}"
        )
        return result

    def finalize(self) -> list[Winner]:
        self.state.phase = Phase.FINAL
        self.state.final_winners = [
            Winner(id=player_id, name=self.directory.get(player_id).name)
            for player_id in self.directory.active_ids()
        ]
        log.info(f"Game finalized with {len(self.state.final_winners)} winner(s)")
        return list(self.state.final_winners)

    def reset(self, keep_queue: bool = False) -> None:
        self.state.round = 0
        self.state.phase = Phase.LOBBY
        self.state.question = LOBBY_QUESTION
        self.state.options = list(DEFAULT_OPTIONS)
        self.state.votes.clear()
        self.state.last_result = None
        self.state.history = []
        self.state.final_winners = []
        if not keep_queue:
            self.state.queue = []
        self.directory.set_all(PlayerStatus.ACTIVE)
        log.info(f"Game reset (queue {'kept' if keep_queue else 'cleared'})")

    def enqueue(self, question: str | None, option_a: str | None, option_b: str | None) -> QueueEntry:
        entry = QueueEntry(
            id=str(uuid.uuid4()),
            question=_clean(question, f"Question {len(self.state.queue) + 1}"),
            options=[
                _clean(option_a, DEFAULT_OPTIONS[0]),
                _clean(option_b, DEFAULT_OPTIONS[1]),
            ],
        )
        self.state.queue.append(entry)
        return entry

    def enqueue_many(self, items: Iterable[RoundPrompt]) -> list[QueueEntry]:
        return [self.enqueue(item.question, item.option_a, item.option_b) for item in items]

    def dequeue(self, entry_id: str | None) -> bool:
        if not entry_id:
            return False
        remaining = [entry for entry in self.state.queue if entry.id != entry_id]
        if len(remaining) == len(self.state.queue):
            return False
        self.state.queue = remaining
        return True

    def start_next_from_queue(self) -> bool:
        if self.state.phase == Phase.VOTING:
            return False
        if not self.state.queue:
            return False

        entry = self.state.queue.pop(0)
        self.start(entry.question, entry.options[0], entry.options[1])
        return True
