"""League services: state, matchmaking and storage."""

from elo_league.services.league import League

__all__ = ["League"]
