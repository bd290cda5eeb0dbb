from elo_league.models.match import Draw, Match, Outcome, Win
from elo_league.models.player import Player, PlayerRecord

__all__ = ["Draw", "Match", "Outcome", "Player", "PlayerRecord", "Win"]
