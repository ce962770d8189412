from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from scoretracker.services import match_service
from scoretracker.schemas import match_schemas
from scoretracker.api.dependencies import get_db

router = APIRouter()

# Matches cannot be deleted once created, so there is no DELETE route.

@router.get("", response_model=List[match_schemas.MatchRead])
async def list_matches_endpoint(championship_id: Optional[int] = None, db: Session = Depends(get_db)):
    return match_service.list_matches(db=db, championship_id=championship_id)

@router.post("", response_model=match_schemas.MatchRead, status_code=status.HTTP_201_CREATED)
async def create_match_endpoint(match_in: match_schemas.MatchCreate, db: Session = Depends(get_db)):
    return match_service.create_match(db=db, match=match_in)

@router.get("/{match_id}", response_model=match_schemas.MatchRead)
async def get_match_endpoint(match_id: int, db: Session = Depends(get_db)):
    return match_service.get_match(db=db, match_id=match_id)

@router.post("/{match_id}/start", response_model=match_schemas.MatchRead)
async def start_match_endpoint(match_id: int, db: Session = Depends(get_db)):
    return match_service.start_match(db=db, match_id=match_id)

@router.put("/{match_id}/score", response_model=match_schemas.MatchRead)
async def update_match_score_endpoint(
    match_id: int,
    score_in: match_schemas.MatchScoreUpdate,
    db: Session = Depends(get_db),
):
    return match_service.update_match_score(db=db, match_id=match_id, score=score_in)

@router.post("/{match_id}/finish", response_model=match_schemas.MatchRead)
async def finish_match_endpoint(match_id: int, db: Session = Depends(get_db)):
    return match_service.finish_match(db=db, match_id=match_id)
