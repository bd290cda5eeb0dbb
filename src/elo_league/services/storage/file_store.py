"""File-based storage for league documents."""

from __future__ import annotations

from pathlib import Path

import structlog

from elo_league.services.league import League
from elo_league.services.storage.codec import dumps, loads

logger = structlog.get_logger()


def load_league(path: Path) -> League:
    """Load a league from a JSON file.

    A missing file is an empty league, so the first save creates it.

    Raises:
        FormatError: If the file is not a league document.
    """
    if not path.exists():
        logger.debug("league_file_missing", path=str(path))
        return League()

    league = loads(path.read_text(encoding="utf-8"))
    logger.debug("loaded_league", path=str(path), players=len(league))
    return league


def save_league(league: League, path: Path) -> Path:
    """Write a league to a JSON file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps(league) + "\n", encoding="utf-8")
    logger.debug("saved_league", path=str(path), players=len(league))
    return path
