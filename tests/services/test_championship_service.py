import pytest
from fastapi import HTTPException

from scoretracker.models.match import Match
from scoretracker.schemas import championship_schemas, player_schemas
from scoretracker.services import championship_service, player_service


def make_championship(db, name="Spring Cup"):
    return championship_service.create_championship(db, championship_schemas.ChampionshipCreate(name=name))


def add_players(db, championship, *names):
    return [
        player_service.create_player(db, player_schemas.PlayerCreate(name=name, championship_ids=[championship.id]))
        for name in names
    ]


class TestChampionshipService:

    def test_create_starts_as_draft(self, db):
        championship = make_championship(db)
        assert championship.id is not None
        assert championship.status == "draft"
        assert championship.is_finalized is False

    def test_get_missing_championship(self, db):
        with pytest.raises(HTTPException) as exc_info:
            championship_service.get_championship(db, 999)
        assert exc_info.value.status_code == 404

    def test_update_changes_only_given_fields(self, db):
        championship = championship_service.create_championship(
            db, championship_schemas.ChampionshipCreate(name="Old", description="keep me")
        )
        updated = championship_service.update_championship(
            db, championship.id, championship_schemas.ChampionshipUpdate(name="New")
        )
        assert updated.name == "New"
        assert updated.description == "keep me"
        assert updated.status == "draft"

    def test_roster_is_in_registration_order(self, db):
        championship = make_championship(db)
        add_players(db, championship, "Zoe", "Adam", "Mia")
        assert championship_service.get_roster(db, championship.id) == ["Zoe", "Adam", "Mia"]

    def test_roster_follows_join_order_not_creation_order(self, db):
        early = player_service.create_player(db, player_schemas.PlayerCreate(name="Early"))
        championship = make_championship(db)
        add_players(db, championship, "Late")
        player_service.update_player(db, early.id, player_schemas.PlayerUpdate(championship_ids=[championship.id]))

        assert championship_service.get_roster(db, championship.id) == ["Late", "Early"]
        db.refresh(championship)
        assert [p.name for p in championship.players] == ["Late", "Early"]

    def test_finalize_requires_two_players(self, db):
        championship = make_championship(db)
        add_players(db, championship, "Only")
        with pytest.raises(HTTPException) as exc_info:
            championship_service.finalize_championship(db, championship.id)
        assert exc_info.value.status_code == 400
        assert "At least 2 players" in exc_info.value.detail

    def test_finalize_is_one_way(self, db):
        championship = make_championship(db)
        add_players(db, championship, "A", "B")
        finalized = championship_service.finalize_championship(db, championship.id)
        assert finalized.status == "finalized"

        with pytest.raises(HTTPException, match="already finalized"):
            championship_service.finalize_championship(db, championship.id)

    def test_delete_without_matches(self, db):
        championship = make_championship(db)
        assert championship_service.delete_championship(db, championship.id) is True
        with pytest.raises(HTTPException):
            championship_service.get_championship(db, championship.id)

    def test_delete_with_matches_is_rejected(self, db):
        championship = make_championship(db)
        db.add(Match(championship_id=championship.id, player1="A", player2="B", game="x", status="pending"))
        db.commit()
        with pytest.raises(HTTPException) as exc_info:
            championship_service.delete_championship(db, championship.id)
        assert exc_info.value.status_code == 400

    def test_standings_use_only_finished_matches(self, db):
        championship = make_championship(db)
        add_players(db, championship, "A", "B", "C")
        db.add_all([
            Match(championship_id=championship.id, player1="A", player2="B", game="x", status="finished", winner="A"),
            Match(championship_id=championship.id, player1="B", player2="C", game="x", status="finished", winner=None),
            Match(championship_id=championship.id, player1="A", player2="C", game="x", status="started", winner=None),
        ])
        db.commit()

        standings = championship_service.get_standings(db, championship.id)
        assert [s.model_dump() for s in standings] == [
            {"player_name": "A", "points": 3},
            {"player_name": "B", "points": 1},
            {"player_name": "C", "points": 1},
        ]

    def test_standings_with_corrupt_winner_fail(self, db):
        championship = make_championship(db)
        add_players(db, championship, "A", "B")
        db.add(Match(championship_id=championship.id, player1="A", player2="B", game="x", status="finished", winner="Nobody"))
        db.commit()

        with pytest.raises(HTTPException) as exc_info:
            championship_service.get_standings(db, championship.id)
        assert exc_info.value.status_code == 500
