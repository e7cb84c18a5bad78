import logging
import uuid
from collections import Counter

from ..models import Connection, Role

log = logging.getLogger(__name__)


class SessionRegistry:
    """Live connections keyed by an opaque id handed out at accept time."""

    def __init__(self):
        self._connections: dict[str, Connection] = {}

    def __len__(self) -> int:
        return len(self._connections)

    def __contains__(self, connection_id: str) -> bool:
        return connection_id in self._connections

    def open(self) -> str:
        connection_id = uuid.uuid4().hex
        self._connections[connection_id] = Connection(connection_id=connection_id)
        return connection_id

    def get(self, connection_id: str) -> Connection | None:
        return self._connections.get(connection_id)

    def bind(self, connection_id: str, role: Role, player_id: str | None = None) -> None:
        connection = self._connections.get(connection_id)
        if connection is None:
            return
        connection.role = role
        connection.player_id = player_id

    def unbind_player(self, connection_id: str) -> None:
        connection = self._connections.get(connection_id)
        if connection is not None:
            connection.player_id = None

    def close(self, connection_id: str) -> Connection | None:
        return self._connections.pop(connection_id, None)

    def connection_counts(self) -> Counter:
        return Counter(
            connection.player_id
            for connection in self._connections.values()
            if connection.player_id
        )
