import logging
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from scoretracker.models import championship as championship_model
from scoretracker.models import match as match_model
from scoretracker.models import player as player_model
from scoretracker.schemas import player_schemas

logger = logging.getLogger(__name__)

def _load_championships(db: Session, championship_ids: List[int]) -> List[championship_model.Championship]:
    """Fetches the requested championships, all of which must exist."""
    unique_ids = list(dict.fromkeys(championship_ids))
    if not unique_ids:
        return []

    championships = db.query(championship_model.Championship)\
        .filter(championship_model.Championship.id.in_(unique_ids))\
        .all()
    if len(championships) != len(unique_ids):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="One or more championships not found")
    return championships

def _check_name_available(db: Session, name: str, player_id: Optional[int] = None) -> None:
    query = db.query(player_model.Player).filter(player_model.Player.name == name)
    if player_id is not None:
        query = query.filter(player_model.Player.id != player_id)
    if query.first():
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=f"A player named '{name}' already exists")

def _has_matches(db: Session, name: str) -> bool:
    return db.query(match_model.Match).filter(
        (match_model.Match.player1 == name) | (match_model.Match.player2 == name)
    ).first() is not None

def _check_rosters_open(championships: List[championship_model.Championship]) -> None:
    for championship in championships:
        if championship.is_finalized:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Championship '{championship.name}' is finalized; its roster cannot change",
            )

def create_player(db: Session, player: player_schemas.PlayerCreate) -> player_model.Player:
    _check_name_available(db, player.name)
    championships = _load_championships(db, player.championship_ids)
    _check_rosters_open(championships)

    db_player = player_model.Player(name=player.name, championships=championships)
    db.add(db_player)
    db.commit()
    db.refresh(db_player)
    logger.info("Created player %s (%s)", db_player.id, db_player.name)
    return db_player

def list_players(db: Session, championship_id: Optional[int] = None) -> List[player_model.Player]:
    query = db.query(player_model.Player)
    if championship_id is not None:
        query = query.join(player_model.player_championships, player_model.Player.id == player_model.player_championships.c.player_id)\
            .filter(player_model.player_championships.c.championship_id == championship_id)
    return query.order_by(player_model.Player.created_at.desc(), player_model.Player.id.desc()).all()

def get_player(db: Session, player_id: int) -> player_model.Player:
    db_player = db.query(player_model.Player).filter(player_model.Player.id == player_id).first()
    if not db_player:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Player not found")
    return db_player

def update_player(db: Session, player_id: int, player_update: player_schemas.PlayerUpdate) -> player_model.Player:
    db_player = get_player(db, player_id)

    if player_update.name is not None and player_update.name != db_player.name:
        _check_name_available(db, player_update.name, player_id=player_id)
        if _has_matches(db, db_player.name):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Cannot rename a player who already has matches")
        db_player.name = player_update.name

    if player_update.championship_ids is not None:
        championships = _load_championships(db, player_update.championship_ids)
        current_ids = {c.id for c in db_player.championships}
        new_ids = {c.id for c in championships}
        # Joining or leaving a championship both change its roster
        changed = [c for c in db_player.championships if c.id not in new_ids]
        changed += [c for c in championships if c.id not in current_ids]
        _check_rosters_open(changed)
        db_player.championships = championships

    db.commit()
    db.refresh(db_player)
    return db_player

def delete_player(db: Session, player_id: int) -> bool:
    db_player = get_player(db, player_id)
    _check_rosters_open(db_player.championships)
    if _has_matches(db, db_player.name):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Cannot delete a player who already has matches")

    db.delete(db_player)
    db.commit()
    logger.info("Deleted player %s", player_id)
    return True
