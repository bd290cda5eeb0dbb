"""Match proposal services."""

from elo_league.services.match.pairing import (
    PLAY_IN_MATCHES,
    pick_first,
    pick_second,
    propose_match,
    weighted_choice,
)

__all__ = [
    "PLAY_IN_MATCHES",
    "pick_first",
    "pick_second",
    "propose_match",
    "weighted_choice",
]
