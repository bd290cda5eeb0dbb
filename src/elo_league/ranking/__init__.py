"""Ranking module for Elo League.

Pure Elo arithmetic: expected scores, win and draw updates.
"""

from elo_league.ranking.elo import (
    INITIAL_RATING,
    SENSITIVE_K_FACTOR,
    draw,
    expected_score,
    odds,
    round_half_away,
    win,
)

__all__ = [
    "INITIAL_RATING",
    "SENSITIVE_K_FACTOR",
    "draw",
    "expected_score",
    "odds",
    "round_half_away",
    "win",
]
