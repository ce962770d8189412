import datetime
from enum import Enum

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from scoretracker.core.database import Base
from .player import Player, player_championships

class ChampionshipStatus(str, Enum):
    DRAFT = "draft"
    FINALIZED = "finalized"

class Championship(Base):
    __tablename__ = "championships"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    status = Column(String, nullable=False, default=ChampionshipStatus.DRAFT.value) # draft -> finalized, never back
    created_at = Column(DateTime, default=datetime.datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.datetime.utcnow, onupdate=datetime.datetime.utcnow)

    players = relationship(
        "Player",
        secondary=player_championships,
        back_populates="championships",
        order_by=[player_championships.c.joined_at, Player.id],
    )
    matches = relationship("Match", back_populates="championship", order_by="Match.id")

    @property
    def is_finalized(self) -> bool:
        return self.status == ChampionshipStatus.FINALIZED.value
