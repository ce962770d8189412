import datetime
import logging
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy import and_, or_
from sqlalchemy.orm import Session

from scoretracker.core.exceptions import (
    AlreadyGenerated,
    ChampionshipNotFinalized,
    DistinctPlayersViolation,
    DuplicatePairing,
    InsufficientPlayers,
    InvalidMatchTransition,
)
from scoretracker.models import championship as championship_model
from scoretracker.models import match as match_model
from scoretracker.models import player as player_model
from scoretracker.schemas import match_schemas
from scoretracker.services import championship_service, round_robin

logger = logging.getLogger(__name__)

def _determine_winner(match: match_model.Match) -> Optional[str]:
    """Higher score wins; equal scores are a draw (None)."""
    if match.player1_score > match.player2_score:
        return match.player1
    if match.player2_score > match.player1_score:
        return match.player2
    return None

def _require_status(match: match_model.Match, expected: match_model.MatchStatus, message: str) -> None:
    if match.status != expected.value:
        raise InvalidMatchTransition(message)

def _require_distinct(player1: str, player2: str) -> None:
    if player1 == player2:
        raise DistinctPlayersViolation(player1)

def _bad_request(e: Exception) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

def _check_player_in_championship(db: Session, name: str, championship_id: int, label: str) -> None:
    db_player = db.query(player_model.Player).filter(player_model.Player.name == name).first()
    if not db_player:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"{label} not found")
    if championship_id not in {c.id for c in db_player.championships}:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"{label} is not in this championship")

def _require_new_pairing(db: Session, championship_id: int, player1: str, player2: str) -> None:
    """Each pair meets once per championship, whichever side they are listed on."""
    existing = db.query(match_model.Match)\
        .filter(match_model.Match.championship_id == championship_id)\
        .filter(or_(
            and_(match_model.Match.player1 == player1, match_model.Match.player2 == player2),
            and_(match_model.Match.player1 == player2, match_model.Match.player2 == player1),
        ))\
        .first()
    if existing:
        raise DuplicatePairing(player1, player2)

def create_match(db: Session, match: match_schemas.MatchCreate) -> match_model.Match:
    championship = db.query(championship_model.Championship)\
        .filter(championship_model.Championship.id == match.championship_id)\
        .first()
    if not championship:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Championship not found")

    try:
        _require_distinct(match.player1, match.player2)
        if not championship.is_finalized:
            raise ChampionshipNotFinalized(championship.id, action="creating matches")
    except (DistinctPlayersViolation, ChampionshipNotFinalized) as e:
        raise _bad_request(e)

    _check_player_in_championship(db, match.player1, championship.id, "Player1")
    _check_player_in_championship(db, match.player2, championship.id, "Player2")

    try:
        _require_new_pairing(db, championship.id, match.player1, match.player2)
    except DuplicatePairing as e:
        raise _bad_request(e)

    db_match = match_model.Match(
        championship_id=championship.id,
        player1=match.player1,
        player2=match.player2,
        game=match.game or championship.name,
        status=match_model.MatchStatus.PENDING.value,
        player1_score=0,
        player2_score=0,
    )
    db.add(db_match)
    db.commit()
    db.refresh(db_match)
    return db_match

def list_matches(db: Session, championship_id: Optional[int] = None) -> List[match_model.Match]:
    query = db.query(match_model.Match)
    if championship_id is not None:
        query = query.filter(match_model.Match.championship_id == championship_id)
    return query.order_by(match_model.Match.created_at.desc(), match_model.Match.id.desc()).all()

def get_match(db: Session, match_id: int) -> match_model.Match:
    db_match = db.query(match_model.Match).filter(match_model.Match.id == match_id).first()
    if not db_match:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Match not found")
    return db_match

def generate_matches_for_championship(db: Session, championship_id: int) -> List[match_model.Match]:
    """
    Creates the full round-robin schedule for a finalized championship.
    All matches are inserted in a single commit.
    """
    championship = championship_service.get_championship(db, championship_id)
    roster = championship_service.get_roster(db, championship_id)

    try:
        if not championship.is_finalized:
            raise ChampionshipNotFinalized(championship_id)

        existing_matches_count = db.query(match_model.Match)\
            .filter(match_model.Match.championship_id == championship_id)\
            .count()
        if existing_matches_count > 0:
            raise AlreadyGenerated(championship_id)

        new_matches = round_robin.generate_round_robin(roster, championship.name, championship_id=championship_id)
    except (ChampionshipNotFinalized, AlreadyGenerated, InsufficientPlayers) as e:
        raise _bad_request(e)

    db.add_all(new_matches)
    db.commit()
    # Refresh each match to get IDs, etc.
    for match in new_matches:
        db.refresh(match)
    logger.info("Generated %d matches for championship %s", len(new_matches), championship_id)
    return new_matches

def start_match(db: Session, match_id: int) -> match_model.Match:
    db_match = get_match(db, match_id)
    try:
        _require_status(db_match, match_model.MatchStatus.PENDING, "Match is not in pending status")
    except InvalidMatchTransition as e:
        raise _bad_request(e)

    db_match.status = match_model.MatchStatus.STARTED.value
    db_match.started_at = datetime.datetime.utcnow()
    db.commit()
    db.refresh(db_match)
    return db_match

def update_match_score(db: Session, match_id: int, score: match_schemas.MatchScoreUpdate) -> match_model.Match:
    db_match = get_match(db, match_id)
    try:
        _require_status(db_match, match_model.MatchStatus.STARTED, "Match must be started to update score")
    except InvalidMatchTransition as e:
        raise _bad_request(e)

    db_match.player1_score = score.player1_score
    db_match.player2_score = score.player2_score
    db.commit()
    db.refresh(db_match)
    return db_match

def finish_match(db: Session, match_id: int) -> match_model.Match:
    db_match = get_match(db, match_id)
    try:
        _require_status(db_match, match_model.MatchStatus.STARTED, "Match must be started to finish it")
    except InvalidMatchTransition as e:
        raise _bad_request(e)

    db_match.winner = _determine_winner(db_match)
    db_match.status = match_model.MatchStatus.FINISHED.value
    db_match.finished_at = datetime.datetime.utcnow()
    db.commit()
    db.refresh(db_match)
    logger.info("Match %s finished %d-%d, winner: %s", match_id, db_match.player1_score, db_match.player2_score, db_match.winner or "draw")
    return db_match
