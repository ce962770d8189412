import datetime

from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Table
from sqlalchemy.orm import relationship
from scoretracker.core.database import Base

player_championships = Table(
    "player_championships",
    Base.metadata,
    Column("player_id", Integer, ForeignKey("players.id", ondelete="CASCADE"), primary_key=True),
    Column("championship_id", Integer, ForeignKey("championships.id", ondelete="CASCADE"), primary_key=True),
    Column("joined_at", DateTime, default=datetime.datetime.utcnow), # roster order
)

class Player(Base):
    __tablename__ = "players"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, unique=True, index=True) # Matches reference players by name
    created_at = Column(DateTime, default=datetime.datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.datetime.utcnow, onupdate=datetime.datetime.utcnow)

    championships = relationship("Championship", secondary=player_championships, back_populates="players")
