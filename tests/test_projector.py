"""Tests for role-specific state snapshots."""

from minority_game.models import Phase, Role


def _three_player_round(engine, add_players):
    ids = add_players("A1", "A2", "B1")
    engine.start("q", "a", "b")
    for player_id, choice in zip(ids, ["A", "A", "B"]):
        engine.record_vote(player_id, choice)
    return ids


class TestCommonFields:

    def test_lobby_snapshot(self, projector):
        wire = projector.build(None, Role.VIEWER).to_wire()

        assert wire["type"] == "state"
        assert wire["round"] == 0
        assert wire["phase"] == "lobby"
        assert wire["options"] == ["A", "B"]
        assert wire["totalPlayers"] == 0
        assert wire["activePlayers"] == 0
        assert wire["votesSubmitted"] == 0
        assert wire["you"] is None
        assert wire["lastResult"] is None
        assert "admin" not in wire

    def test_tallies_hidden_while_voting(self, projector, engine, add_players):
        _three_player_round(engine, add_players)

        wire = projector.build(None, Role.PLAYER).to_wire()

        assert wire["phase"] == "voting"
        assert wire["votesSubmitted"] == 3
        assert wire["counts"] is None
        assert wire["minority"] is None

    def test_tallies_shown_after_reveal(self, projector, engine, add_players):
        _three_player_round(engine, add_players)
        engine.reveal()

        wire = projector.build(None, Role.VIEWER).to_wire()

        assert wire["counts"] == {"A": 2, "B": 1}
        assert wire["minority"] == "B"
        assert wire["activePlayers"] == 1
        assert wire["lastResult"]["totalVotes"] == 3
        assert wire["lastResult"]["minority"] == "B"
        assert wire["finalWinners"] is None

    def test_final_phase_shows_winners(self, projector, engine, add_players):
        ids = _three_player_round(engine, add_players)
        engine.reveal()
        engine.finalize()

        wire = projector.build(None, Role.VIEWER).to_wire()

        assert wire["phase"] == "final"
        assert wire["counts"] == {"A": 2, "B": 1}
        assert wire["finalWinners"] == [{"id": ids[2], "name": "B1"}]


    def test_revealed_outcome_survives_a_leave(self, projector, engine, directory, add_players):
        ids = _three_player_round(engine, add_players)
        engine.reveal()
        directory.remove(ids[2])

        wire = projector.build(None, Role.VIEWER).to_wire()

        assert wire["counts"] == {"A": 2, "B": 1}
        assert wire["minority"] == "B"
        assert wire["counts"] == wire["lastResult"]["counts"]
        assert wire["minority"] == wire["lastResult"]["minority"]

    def test_final_without_reveal_uses_live_tally(self, projector, engine, add_players):
        _three_player_round(engine, add_players)
        engine.finalize()

        wire = projector.build(None, Role.VIEWER).to_wire()

        assert wire["lastResult"] is None
        assert wire["counts"] == {"A": 2, "B": 1}
        assert wire["minority"] == "B"


class TestYouBlock:

    def test_you_reflects_own_vote(self, projector, engine, add_players):
        ids = _three_player_round(engine, add_players)

        you = projector.build(ids[2], Role.PLAYER).to_wire()["you"]

        assert you == {
            "name": "B1",
            "active": True,
            "status": "active",
            "choice": "B",
            "winner": None,
        }

    def test_winner_flag_in_final(self, projector, engine, add_players):
        ids = _three_player_round(engine, add_players)
        engine.reveal()
        engine.finalize()

        assert projector.build(ids[2], Role.PLAYER).you.winner is True
        assert projector.build(ids[0], Role.PLAYER).you.winner is False
        assert projector.build(ids[0], Role.PLAYER).you.status == "out"

    def test_unknown_player_has_no_you(self, projector):
        assert projector.build("ghost", Role.PLAYER).you is None


class TestAdminBlock:

    def test_admin_gets_live_counts_and_roster(self, projector, engine, sessions, add_players):
        ids = _three_player_round(engine, add_players)
        entry = engine.enqueue("next", "x", "y")
        for _ in range(2):
            sessions.bind(sessions.open(), Role.PLAYER, ids[0])

        wire = projector.build(None, Role.ADMIN).to_wire()
        admin = wire["admin"]

        assert wire["counts"] is None
        assert admin["counts"] == {"A": 2, "B": 1}
        assert admin["queue"] == [{"id": entry.id, "question": "next", "options": ["x", "y"]}]
        assert admin["history"] == []
        assert admin["finalWinners"] == []
        roster = {p["id"]: p for p in admin["players"]}
        assert roster[ids[0]]["connected"] == 2
        assert roster[ids[1]]["connected"] == 0
        assert roster[ids[0]]["choice"] == "A"
        assert roster[ids[0]]["active"] is True

    def test_non_admin_roles_never_see_admin_block(self, projector):
        assert projector.build(None, Role.PLAYER).admin is None
        assert projector.build(None, Role.VIEWER).admin is None


class TestForConnection:

    def test_uses_connection_binding(self, projector, sessions, add_players):
        (player_id,) = add_players("Zed")
        connection_id = sessions.open()
        sessions.bind(connection_id, Role.PLAYER, player_id)

        snapshot = projector.for_connection(connection_id)

        assert snapshot.you.name == "Zed"
        assert snapshot.phase == Phase.LOBBY

    def test_unknown_connection_gets_anonymous_view(self, projector):
        snapshot = projector.for_connection("gone")
        assert snapshot.you is None
        assert snapshot.admin is None
