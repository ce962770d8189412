import pytest

from scoretracker.core.exceptions import InsufficientPlayers, InvalidWinner
from scoretracker.models.match import Match
from scoretracker.services.round_robin import generate_round_robin, compute_standings


def finished(player1, player2, winner=None, match_id=None):
    return Match(id=match_id, player1=player1, player2=player2, winner=winner, status="finished")


class TestGenerateRoundRobin:

    def test_three_players_in_roster_order(self):
        matches = generate_round_robin(["A", "B", "C"], "Chess Cup")
        assert [(m.player1, m.player2) for m in matches] == [("A", "B"), ("A", "C"), ("B", "C")]

    def test_new_matches_are_pending_with_empty_score(self):
        matches = generate_round_robin(["A", "B"], "Chess Cup", championship_id=7)
        assert len(matches) == 1
        match = matches[0]
        assert match.championship_id == 7
        assert match.game == "Chess Cup"
        assert match.status == "pending"
        assert match.player1_score == 0
        assert match.player2_score == 0
        assert match.winner is None
        assert match.started_at is None
        assert match.finished_at is None

    @pytest.mark.parametrize("n", [2, 3, 4, 5, 8, 13])
    def test_every_pair_exactly_once(self, n):
        names = [f"P{i}" for i in range(n)]
        matches = generate_round_robin(names, "League")

        assert len(matches) == n * (n - 1) // 2
        pairs = [frozenset((m.player1, m.player2)) for m in matches]
        assert len(set(pairs)) == len(pairs)
        assert all(m.player1 != m.player2 for m in matches)
        assert all(m.player1 in names and m.player2 in names for m in matches)

    @pytest.mark.parametrize("names", [[], ["Solo"]])
    def test_fewer_than_two_players(self, names):
        with pytest.raises(InsufficientPlayers):
            generate_round_robin(names, "League")

    def test_same_roster_gives_identical_schedules(self):
        first = generate_round_robin(["Ann", "Bob", "Cid", "Dee"], "League")
        second = generate_round_robin(["Ann", "Bob", "Cid", "Dee"], "League")
        assert [(m.player1, m.player2, m.game) for m in first] == [(m.player1, m.player2, m.game) for m in second]
        assert all(a is not b for a, b in zip(first, second))


class TestComputeStandings:

    def test_draw_gives_one_point_each(self):
        standings = compute_standings([finished("A", "B")], ["A", "B"])
        assert [(s.player_name, s.points) for s in standings] == [("A", 1), ("B", 1)]

    def test_player1_win(self):
        standings = compute_standings([finished("A", "B", winner="A")], ["A", "B"])
        assert [(s.player_name, s.points) for s in standings] == [("A", 3), ("B", 0)]

    def test_player2_win(self):
        standings = compute_standings([finished("A", "B", winner="B")], ["A", "B"])
        assert [(s.player_name, s.points) for s in standings] == [("B", 3), ("A", 0)]

    def test_ties_keep_roster_order(self):
        matches = [finished("A", "B", winner="A"), finished("B", "C")]
        standings = compute_standings(matches, ["A", "B", "C"])
        assert [s.model_dump() for s in standings] == [
            {"player_name": "A", "points": 3},
            {"player_name": "B", "points": 1},
            {"player_name": "C", "points": 1},
        ]

    def test_tie_order_follows_roster_not_name(self):
        standings = compute_standings([finished("Zed", "Amy")], ["Zed", "Amy"])
        assert [s.player_name for s in standings] == ["Zed", "Amy"]

    def test_player_without_matches_is_listed_with_zero(self):
        standings = compute_standings([finished("A", "B", winner="B")], ["A", "B", "Idle"])
        assert ("Idle", 0) in [(s.player_name, s.points) for s in standings]
        assert len(standings) == 3

    def test_unfinished_matches_are_ignored(self):
        matches = [
            Match(id=1, player1="A", player2="B", winner=None, status="pending"),
            Match(id=2, player1="A", player2="B", winner="A", status="started"),
        ]
        standings = compute_standings(matches, ["A", "B"])
        assert [(s.player_name, s.points) for s in standings] == [("A", 0), ("B", 0)]

    def test_points_accumulate_over_matches(self):
        matches = [
            finished("A", "B", winner="A"),
            finished("A", "C", winner="C"),
            finished("B", "C"),
        ]
        standings = compute_standings(matches, ["A", "B", "C"])
        assert [(s.player_name, s.points) for s in standings] == [("C", 4), ("A", 3), ("B", 1)]

    def test_winner_outside_match_fails(self):
        matches = [finished("A", "B", winner="A"), finished("A", "C", winner="Mallory", match_id=9)]
        with pytest.raises(InvalidWinner) as exc_info:
            compute_standings(matches, ["A", "B", "C"])
        assert exc_info.value.match_id == 9
        assert exc_info.value.winner == "Mallory"

    def test_empty_roster(self):
        assert compute_standings([], []) == []
