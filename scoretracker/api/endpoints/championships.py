from typing import List, Dict

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from scoretracker.services import championship_service, match_service
from scoretracker.schemas import championship_schemas, match_schemas
from scoretracker.api.dependencies import get_db

router = APIRouter()

@router.get("", response_model=List[championship_schemas.ChampionshipRead])
async def list_championships_endpoint(db: Session = Depends(get_db)):
    return championship_service.list_championships(db=db)

@router.post("", response_model=championship_schemas.ChampionshipRead, status_code=status.HTTP_201_CREATED)
async def create_championship_endpoint(
    championship_in: championship_schemas.ChampionshipCreate,
    db: Session = Depends(get_db),
):
    return championship_service.create_championship(db=db, championship=championship_in)

@router.get("/{championship_id}", response_model=championship_schemas.ChampionshipDetail)
async def get_championship_endpoint(championship_id: int, db: Session = Depends(get_db)):
    return championship_service.get_championship(db=db, championship_id=championship_id)

@router.put("/{championship_id}", response_model=championship_schemas.ChampionshipRead)
async def update_championship_endpoint(
    championship_id: int,
    championship_in: championship_schemas.ChampionshipUpdate,
    db: Session = Depends(get_db),
):
    return championship_service.update_championship(
        db=db, championship_id=championship_id, championship_update=championship_in
    )

@router.delete("/{championship_id}", response_model=Dict[str, str])
async def delete_championship_endpoint(championship_id: int, db: Session = Depends(get_db)):
    championship_service.delete_championship(db=db, championship_id=championship_id)
    return {"message": "Championship deleted successfully"}

@router.post("/{championship_id}/finalize", response_model=championship_schemas.ChampionshipRead)
async def finalize_championship_endpoint(championship_id: int, db: Session = Depends(get_db)):
    return championship_service.finalize_championship(db=db, championship_id=championship_id)

@router.get("/{championship_id}/standings", response_model=List[championship_schemas.Standing])
async def get_standings_endpoint(championship_id: int, db: Session = Depends(get_db)):
    return championship_service.get_standings(db=db, championship_id=championship_id)

@router.post("/{championship_id}/generate-matches", response_model=match_schemas.GeneratedMatches, status_code=status.HTTP_201_CREATED)
async def generate_matches_endpoint(championship_id: int, db: Session = Depends(get_db)):
    matches = match_service.generate_matches_for_championship(db=db, championship_id=championship_id)
    return {"message": "Matches generated successfully", "count": len(matches), "matches": matches}
