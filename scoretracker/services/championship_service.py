import logging
from typing import List

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from scoretracker.core.exceptions import InvalidWinner
from scoretracker.models import championship as championship_model
from scoretracker.models import match as match_model
from scoretracker.models import player as player_model
from scoretracker.schemas import championship_schemas
from scoretracker.services import round_robin

logger = logging.getLogger(__name__)

def create_championship(db: Session, championship: championship_schemas.ChampionshipCreate) -> championship_model.Championship:
    db_championship = championship_model.Championship(
        **championship.model_dump(),
        status=championship_model.ChampionshipStatus.DRAFT.value,
    )
    db.add(db_championship)
    db.commit()
    db.refresh(db_championship)
    logger.info("Created championship %s (%s)", db_championship.id, db_championship.name)
    return db_championship

def list_championships(db: Session) -> List[championship_model.Championship]:
    return db.query(championship_model.Championship)\
        .order_by(championship_model.Championship.created_at.desc(), championship_model.Championship.id.desc())\
        .all()

def get_championship(db: Session, championship_id: int) -> championship_model.Championship:
    db_championship = db.query(championship_model.Championship)\
        .filter(championship_model.Championship.id == championship_id)\
        .first()
    if not db_championship:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Championship not found")
    return db_championship

def update_championship(db: Session, championship_id: int, championship_update: championship_schemas.ChampionshipUpdate) -> championship_model.Championship:
    db_championship = get_championship(db, championship_id)

    update_data = championship_update.model_dump(exclude_unset=True)
    if update_data.get("name") is None:
        update_data.pop("name", None) # Name is required on the model
    for key, value in update_data.items():
        setattr(db_championship, key, value)

    db.commit()
    db.refresh(db_championship)
    return db_championship

def delete_championship(db: Session, championship_id: int) -> bool:
    db_championship = get_championship(db, championship_id)

    match_count = db.query(match_model.Match)\
        .filter(match_model.Match.championship_id == championship_id)\
        .count()
    if match_count > 0:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Championship has matches and cannot be deleted")

    db.delete(db_championship)
    db.commit()
    logger.info("Deleted championship %s", championship_id)
    return True

def get_roster(db: Session, championship_id: int) -> List[str]:
    """Player names of a championship, in the order they joined it."""
    players = db.query(player_model.Player)\
        .join(player_model.player_championships, player_model.Player.id == player_model.player_championships.c.player_id)\
        .filter(player_model.player_championships.c.championship_id == championship_id)\
        .order_by(player_model.player_championships.c.joined_at, player_model.Player.id)\
        .all()
    return [p.name for p in players]

def finalize_championship(db: Session, championship_id: int) -> championship_model.Championship:
    db_championship = get_championship(db, championship_id)

    if db_championship.is_finalized:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Championship is already finalized")

    if len(get_roster(db, championship_id)) < 2:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="At least 2 players are required to finalize a championship")

    db_championship.status = championship_model.ChampionshipStatus.FINALIZED.value
    db.commit()
    db.refresh(db_championship)
    logger.info("Finalized championship %s", championship_id)
    return db_championship

def get_standings(db: Session, championship_id: int) -> List[championship_schemas.Standing]:
    get_championship(db, championship_id)

    finished_matches = db.query(match_model.Match).filter(
        match_model.Match.championship_id == championship_id,
        match_model.Match.status == match_model.MatchStatus.FINISHED.value,
    ).all()
    roster = get_roster(db, championship_id)

    try:
        return round_robin.compute_standings(finished_matches, roster)
    except InvalidWinner as e:
        logger.error("Cannot compute standings for championship %s: %s", championship_id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to compute standings: invalid match data")
