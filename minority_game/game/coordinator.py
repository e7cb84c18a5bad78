import json
import logging

from broadcaster import Broadcast

from ..auth import PassCodes
from ..config import STATE_CHANNEL
from ..models import GameState, PlayerStatus, Role
from ..models.messages import RegisterMessage
from ..schemas import AuthReply
from .directory import PlayerDirectory
from .engine import RoundEngine
from .projector import StateProjector
from .sessions import SessionRegistry

log = logging.getLogger(__name__)


class GameCoordinator:
    """Single owner of the game state and everything that touches it.

    Mutations go through the engine, directory and registry held here. After a
    mutation the caller invokes republish(), which publishes a tick on the state
    channel; each socket's sender task answers the tick with its own snapshot.
    """

    def __init__(self, broadcast: Broadcast, passcodes: PassCodes, channel: str = STATE_CHANNEL):
        self.broadcast = broadcast
        self.passcodes = passcodes
        self.channel = channel

        self.state = GameState()
        self.sessions = SessionRegistry()
        self.directory = PlayerDirectory(self.state)
        self.engine = RoundEngine(self.state, self.directory)
        self.projector = StateProjector(self.engine, self.directory, self.sessions)

    def connect(self) -> str:
        connection_id = self.sessions.open()
        log.info(f"Connection {connection_id} opened ({len(self.sessions)} live)")
        return connection_id

    async def disconnect(self, connection_id: str) -> None:
        if self.sessions.close(connection_id) is None:
            return
        log.info(f"Connection {connection_id} closed ({len(self.sessions)} live)")
        await self.republish()

    def subscribe(self):
        return self.broadcast.subscribe(channel=self.channel)

    async def republish(self) -> None:
        await self.broadcast.publish(
            channel=self.channel,
            message=json.dumps({"type": "republish", "round": self.state.round}),
        )

    def snapshot_for(self, connection_id: str) -> dict:
        return self.projector.for_connection(connection_id).to_wire()

    def role_of(self, connection_id: str) -> Role | None:
        connection = self.sessions.get(connection_id)
        return connection.role if connection else None

    def player_of(self, connection_id: str) -> str | None:
        connection = self.sessions.get(connection_id)
        return connection.player_id if connection else None

    def register(self, connection_id: str, message: RegisterMessage) -> tuple[AuthReply, str | None]:
        """Authenticate a register request and bind the connection.

        Returns the auth reply and, for players, the resolved player id.
        """
        role = Role.parse(message.role)
        if not self.passcodes.verify(role, message.passcode):
            log.warning(f"Connection {connection_id} failed {role.value} authentication")
            return AuthReply(ok=False, reason="invalid_password"), None

        if role != Role.PLAYER:
            self.sessions.bind(connection_id, role)
            log.info(f"Connection {connection_id} registered as {role.value}")
            return AuthReply(ok=True, role=role), None

        player_id, record, _ = self.directory.ensure(message.name, message.player_id)
        if record.status == PlayerStatus.WAITING and self.state.round == 0:
            self.directory.set_status(player_id, PlayerStatus.ACTIVE)
        self.sessions.bind(connection_id, role, player_id)
        log.info(f"Connection {connection_id} registered as player {record.name} ({player_id})")
        return AuthReply(ok=True, role=role), player_id

    def leave(self, connection_id: str) -> bool:
        player_id = self.player_of(connection_id)
        if not self.directory.remove(player_id):
            return False
        self.sessions.unbind_player(connection_id)
        return True

    def vote(self, connection_id: str, choice: str | None) -> bool:
        return self.engine.record_vote(self.player_of(connection_id), choice)
