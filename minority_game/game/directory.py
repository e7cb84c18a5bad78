import logging
import uuid

from ..config import DEFAULT_PLAYER_NAME
from ..models import GameState, PlayerRecord, PlayerStatus

log = logging.getLogger(__name__)


class PlayerDirectory:

    def __init__(self, state: GameState):
        self.state = state

    def __len__(self) -> int:
        return len(self.state.players)

    def __contains__(self, player_id: str) -> bool:
        return player_id in self.state.players

    def get(self, player_id: str | None) -> PlayerRecord | None:
        if not player_id:
            return None
        return self.state.players.get(player_id)

    def items(self):
        return self.state.players.items()

    def _find_by_name(self, name: str) -> str | None:
        for player_id, record in self.state.players.items():
            if record.name == name:
                return player_id
        return None

    def ensure(self, name: str | None, requested_id: str | None = None) -> tuple[str, PlayerRecord, bool]:
        """Resolve a registering player to a record, creating one if needed.

        A known requested id wins, then an exact display name match (so a player
        whose client lost its id can reclaim the old record), then a fresh id.
        """
        display_name = (name or "").strip() or DEFAULT_PLAYER_NAME

        player_id = requested_id if requested_id and requested_id in self.state.players else None
        if player_id is None:
            player_id = self._find_by_name(display_name)

        existing = self.get(player_id)
        if existing is not None:
            existing.name = display_name
            return player_id, existing, False

        player_id = str(uuid.uuid4())
        status = PlayerStatus.ACTIVE if self.state.round == 0 else PlayerStatus.WAITING
        record = PlayerRecord(name=display_name, status=status)
        self.state.players[player_id] = record
        log.info(f"New player {display_name} ({player_id}) joined as {status.value}")
        return player_id, record, True

    def set_status(self, player_id: str, status: PlayerStatus) -> None:
        record = self.state.players.get(player_id)
        if record is None:
            return
        record.status = status

    def set_all(self, status: PlayerStatus) -> None:
        for record in self.state.players.values():
            record.status = status

    def active_ids(self) -> list[str]:
        return [
            player_id
            for player_id, record in self.state.players.items()
            if record.status == PlayerStatus.ACTIVE
        ]

    def count_active(self) -> int:
        return len(self.active_ids())

    def remove(self, player_id: str | None) -> bool:
        if not player_id or player_id not in self.state.players:
            return False

        record = self.state.players.pop(player_id)
        self.state.votes.pop(player_id, None)
        log.info(f"Player {record.name} ({player_id}) left the game")
        return True
