from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

class PlayerBase(BaseModel):
    name: str = Field(..., min_length=1)

class PlayerCreate(PlayerBase):
    championship_ids: List[int] = Field(default_factory=list)

class PlayerUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    # None leaves memberships untouched, an empty list removes them all
    championship_ids: Optional[List[int]] = None

class ChampionshipSummary(BaseModel):
    id: int
    name: str
    status: str

    class Config:
        from_attributes = True

class PlayerRead(PlayerBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class PlayerWithChampionships(PlayerRead):
    championships: List[ChampionshipSummary] = []
