from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

class MatchBase(BaseModel):
    championship_id: int
    player1: str = Field(..., min_length=1)
    player2: str = Field(..., min_length=1)

class MatchCreate(MatchBase):
    game: Optional[str] = None # Defaults to the championship name

class MatchRead(MatchBase):
    id: int
    game: str
    status: str
    player1_score: int
    player2_score: int
    winner: Optional[str] = None
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class MatchScoreUpdate(BaseModel):
    player1_score: int = Field(..., ge=0)
    player2_score: int = Field(..., ge=0)

class GeneratedMatches(BaseModel):
    message: str
    count: int
    matches: List[MatchRead]
