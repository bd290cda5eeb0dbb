"""Elo League.

Keep a roster of players rated with Elo, propose close matches, and update
ratings from their results.
"""

from elo_league.core.errors import FormatError
from elo_league.models import Draw, Match, Outcome, Player, Win
from elo_league.ranking.elo import odds
from elo_league.services.league import League
from elo_league.services.storage.codec import decode, encode

__version__ = "0.1.0"
__all__ = [
    "Draw",
    "FormatError",
    "League",
    "Match",
    "Outcome",
    "Player",
    "Win",
    "__version__",
    "decode",
    "encode",
    "odds",
]
