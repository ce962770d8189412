from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from .player_schemas import PlayerRead
from .match_schemas import MatchRead

class ChampionshipBase(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None

class ChampionshipCreate(ChampionshipBase):
    pass

class ChampionshipUpdate(BaseModel):
    # Status is not editable here; use the finalize endpoint
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None

class ChampionshipRead(ChampionshipBase):
    id: int
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class ChampionshipDetail(ChampionshipRead):
    players: List[PlayerRead] = []
    matches: List[MatchRead] = []

class Standing(BaseModel):
    player_name: str
    points: int = 0
