import datetime
from enum import Enum

from sqlalchemy import Column, Integer, String, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from scoretracker.core.database import Base

class MatchStatus(str, Enum):
    PENDING = "pending"
    STARTED = "started"
    FINISHED = "finished"

class Match(Base):
    __tablename__ = "matches"

    id = Column(Integer, primary_key=True, index=True)
    championship_id = Column(Integer, ForeignKey("championships.id"), nullable=False, index=True)
    # Participants are stored by player name, not by foreign key
    player1 = Column(String, nullable=False)
    player2 = Column(String, nullable=False)
    game = Column(String, nullable=False)
    status = Column(String, nullable=False, default=MatchStatus.PENDING.value)
    player1_score = Column(Integer, nullable=False, default=0)
    player2_score = Column(Integer, nullable=False, default=0)
    winner = Column(String, nullable=True) # None on a finished match means a draw
    started_at = Column(DateTime, nullable=True)
    finished_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.datetime.utcnow, onupdate=datetime.datetime.utcnow)

    championship = relationship("Championship", back_populates="matches")
