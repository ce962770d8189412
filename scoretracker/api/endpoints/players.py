from typing import List, Dict, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from scoretracker.services import player_service
from scoretracker.schemas import player_schemas
from scoretracker.api.dependencies import get_db

router = APIRouter()

@router.get("", response_model=List[player_schemas.PlayerWithChampionships])
async def list_players_endpoint(championship_id: Optional[int] = None, db: Session = Depends(get_db)):
    return player_service.list_players(db=db, championship_id=championship_id)

@router.post("", response_model=player_schemas.PlayerWithChampionships, status_code=status.HTTP_201_CREATED)
async def create_player_endpoint(player_in: player_schemas.PlayerCreate, db: Session = Depends(get_db)):
    return player_service.create_player(db=db, player=player_in)

@router.get("/{player_id}", response_model=player_schemas.PlayerWithChampionships)
async def get_player_endpoint(player_id: int, db: Session = Depends(get_db)):
    return player_service.get_player(db=db, player_id=player_id)

@router.put("/{player_id}", response_model=player_schemas.PlayerWithChampionships)
async def update_player_endpoint(
    player_id: int,
    player_in: player_schemas.PlayerUpdate,
    db: Session = Depends(get_db),
):
    return player_service.update_player(db=db, player_id=player_id, player_update=player_in)

@router.delete("/{player_id}", response_model=Dict[str, str])
async def delete_player_endpoint(player_id: int, db: Session = Depends(get_db)):
    player_service.delete_player(db=db, player_id=player_id)
    return {"message": "Player deleted successfully"}
