class ScoreTrackerError(Exception):
    """Base class for errors raised by the championship and match logic."""

class InsufficientPlayers(ScoreTrackerError):
    def __init__(self, count: int):
        self.count = count
        super().__init__(f"At least 2 players are required to generate matches (got {count})")

class AlreadyGenerated(ScoreTrackerError):
    def __init__(self, championship_id: int):
        self.championship_id = championship_id
        super().__init__("Matches already exist for this championship")

class ChampionshipNotFinalized(ScoreTrackerError):
    def __init__(self, championship_id: int, action: str = "generating matches"):
        self.championship_id = championship_id
        super().__init__(f"Championship must be finalized before {action}")

class InvalidWinner(ScoreTrackerError):
    """A finished match names a winner that is neither of its players."""

    def __init__(self, match_id, winner: str, player1: str, player2: str):
        self.match_id = match_id
        self.winner = winner
        super().__init__(
            f"Match {match_id} has winner '{winner}' which is neither '{player1}' nor '{player2}'"
        )

class DistinctPlayersViolation(ScoreTrackerError):
    def __init__(self, name: str):
        self.name = name
        super().__init__("Players must be different")

class InvalidMatchTransition(ScoreTrackerError):
    def __init__(self, message: str):
        super().__init__(message)

class DuplicatePairing(ScoreTrackerError):
    """The two players already meet in this championship; round robins are single-leg."""

    def __init__(self, player1: str, player2: str):
        self.player1 = player1
        self.player2 = player2
        super().__init__(f"'{player1}' and '{player2}' already have a match in this championship")
