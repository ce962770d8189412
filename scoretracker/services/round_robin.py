"""
Round-robin match generation and standings for a championship.

Both functions are pure: they take plain inputs (player names, match records)
and return new objects without touching a database session. Loading inputs
and persisting results is left to the callers in match_service and
championship_service.
"""
from typing import Dict, Iterable, List, Optional, Sequence

from scoretracker.core.exceptions import InsufficientPlayers, InvalidWinner
from scoretracker.models.match import Match, MatchStatus
from scoretracker.schemas.championship_schemas import Standing

WIN_POINTS = 3
DRAW_POINTS = 1
LOSS_POINTS = 0

def generate_round_robin(player_names: Sequence[str], game: str, championship_id: Optional[int] = None) -> List[Match]:
    """
    Pairs every player with every other player exactly once, in input order.

    For names [A, B, C] this yields A-B, A-C, B-C. The caller must pass a
    de-duplicated roster and make sure the championship has no matches yet.
    The returned matches are transient (not added to any session).
    """
    if len(player_names) < 2:
        raise InsufficientPlayers(len(player_names))

    matches: List[Match] = []
    for i in range(len(player_names)):
        for j in range(i + 1, len(player_names)):
            matches.append(Match(
                championship_id=championship_id,
                player1=player_names[i],
                player2=player_names[j],
                game=game,
                status=MatchStatus.PENDING.value,
                player1_score=0,
                player2_score=0,
                winner=None,
                started_at=None,
                finished_at=None,
            ))
    return matches

def _award_points(points: Dict[str, int], match: Match) -> None:
    if match.winner is None:
        points[match.player1] = points.get(match.player1, 0) + DRAW_POINTS
        points[match.player2] = points.get(match.player2, 0) + DRAW_POINTS
    elif match.winner == match.player1:
        points[match.player1] = points.get(match.player1, 0) + WIN_POINTS
        points[match.player2] = points.get(match.player2, 0) + LOSS_POINTS
    elif match.winner == match.player2:
        points[match.player1] = points.get(match.player1, 0) + LOSS_POINTS
        points[match.player2] = points.get(match.player2, 0) + WIN_POINTS
    else:
        raise InvalidWinner(match.id, match.winner, match.player1, match.player2)

def compute_standings(matches: Iterable[Match], roster: Sequence[str]) -> List[Standing]:
    """
    Ranks the roster by points: 3 for a win, 1 each for a draw, 0 for a loss.

    Matches that are not finished are skipped. Every roster player is listed,
    including those with no matches. Ties keep roster order.
    Raises InvalidWinner if a finished match names a winner outside the match,
    so a corrupt record never yields a partial ranking.
    """
    points: Dict[str, int] = {}
    for match in matches:
        if match.status != MatchStatus.FINISHED.value:
            continue
        _award_points(points, match)

    standings = [Standing(player_name=name, points=points.get(name, 0)) for name in roster]
    # sorted() is stable, including with reverse=True
    return sorted(standings, key=lambda standing: standing.points, reverse=True)
