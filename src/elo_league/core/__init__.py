"""Core configuration and errors for Elo League."""

from elo_league.core.config import LeagueConfig, load_config
from elo_league.core.errors import (
    ConfigurationError,
    FormatError,
    LeagueError,
    PlayerFormatError,
)

__all__ = [
    "LeagueConfig",
    "load_config",
    "ConfigurationError",
    "FormatError",
    "LeagueError",
    "PlayerFormatError",
]
