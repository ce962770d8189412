from scoretracker.core.database import Base

# Import all models here to ensure they are registered with Base
from .player import Player, player_championships
from .championship import Championship, ChampionshipStatus
from .match import Match, MatchStatus
