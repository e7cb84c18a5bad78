from ..models import Phase, Role
from ..schemas import AdminView, RosterEntry, StateSnapshot, YouView
from .directory import PlayerDirectory
from .engine import RoundEngine
from .sessions import SessionRegistry

REVEALED_PHASES = (Phase.RESULT, Phase.FINAL)


class StateProjector:
    """Builds the snapshot each observer is allowed to see.

    Tallies stay hidden until the result is revealed so nobody can follow the
    majority while voting is open. Only admins get the roster and the queue.
    """

    def __init__(self, engine: RoundEngine, directory: PlayerDirectory, sessions: SessionRegistry):
        self.engine = engine
        self.directory = directory
        self.sessions = sessions

    @property
    def state(self):
        return self.engine.state

    def for_connection(self, connection_id: str) -> StateSnapshot:
        connection = self.sessions.get(connection_id)
        if connection is None:
            return self.build(None, Role.PLAYER)
        return self.build(connection.player_id, connection.role)

    def build(self, player_id: str | None, role: Role) -> StateSnapshot:
        state = self.state
        counts = self.engine.tally()
        revealed = state.phase in REVEALED_PHASES

        # the revealed outcome stays fixed even if a voter leaves afterwards
        shown_counts, shown_minority = counts, self.engine.determine_minority(counts)
        if state.last_result is not None:
            shown_counts, shown_minority = state.last_result.counts, state.last_result.minority

        return StateSnapshot(
            round=state.round,
            phase=state.phase,
            question=state.question,
            options=list(state.options),
            counts=shown_counts if revealed else None,
            minority=shown_minority if revealed else None,
            total_players=len(self.directory),
            active_players=self.directory.count_active(),
            votes_submitted=len(state.votes),
            final_winners=list(state.final_winners) if state.phase == Phase.FINAL else None,
            you=self._you(player_id),
            last_result=state.last_result,
            admin=self._admin(counts) if role == Role.ADMIN else None,
        )

    def _you(self, player_id: str | None) -> YouView | None:
        record = self.directory.get(player_id)
        if record is None:
            return None

        winner = None
        if self.state.phase == Phase.FINAL:
            winner = any(w.id == player_id for w in self.state.final_winners)

        return YouView(
            name=record.name,
            active=record.active,
            status=record.status,
            choice=self.state.votes.get(player_id),
            winner=winner,
        )

    def _admin(self, counts) -> AdminView:
        connected = self.sessions.connection_counts()
        roster = [
            RosterEntry(
                id=player_id,
                name=record.name,
                status=record.status,
                active=record.active,
                choice=self.state.votes.get(player_id),
                connected=connected.get(player_id, 0),
            )
            for player_id, record in self.directory.items()
        ]
        return AdminView(
            players=roster,
            counts=counts,
            history=list(self.state.history),
            queue=list(self.state.queue),
            final_winners=list(self.state.final_winners),
        )
