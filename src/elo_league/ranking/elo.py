"""Elo rating calculations for Elo League."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

# Baseline sensitivity before the league's adaptive adjustment.
SENSITIVE_K_FACTOR = 32

# Rating given to the first player of an empty league.
INITIAL_RATING = 1000


def expected_score(rating_a: int, rating_b: int) -> float:
    """Calculate expected win probability for player A against player B.

    Uses the standard Elo formula:
    E_A = 1 / (1 + 10^((R_B - R_A) / 400))

    Args:
        rating_a: Rating of player A.
        rating_b: Rating of player B.

    Returns:
        Probability that A wins (0.0 to 1.0).
    """
    return 1.0 / (1.0 + 10 ** ((rating_b - rating_a) / 400))


def odds(rating_a: int, rating_b: int) -> float:
    """Chance that a player rated ``rating_a`` beats one rated ``rating_b``."""
    return expected_score(rating_a, rating_b)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero.

    The builtin ``round`` uses banker's rounding, which would send a
    16.5 point delta to 16 and a 17.5 point delta to 18.
    """
    return int(Decimal(value).quantize(Decimal(0), rounding=ROUND_HALF_UP))


def win(k_factor: int, winner_rating: int, loser_rating: int) -> tuple[int, int]:
    """Update Elo ratings after a decisive match.

    Args:
        k_factor: Sensitivity of the update.
        winner_rating: Current rating of the winner.
        loser_rating: Current rating of the loser.

    Returns:
        Tuple of (new_winner_rating, new_loser_rating). The transfer is
        zero-sum and never lowers the winner.
    """
    delta = round_half_away(k_factor * (1.0 - expected_score(winner_rating, loser_rating)))
    return winner_rating + delta, loser_rating - delta


def draw(k_factor: int, rating_a: int, rating_b: int) -> tuple[int, int]:
    """Update Elo ratings after a drawn match.

    The favourite gives points to the underdog; equal ratings stay put.

    Args:
        k_factor: Sensitivity of the update.
        rating_a: Current rating of player A.
        rating_b: Current rating of player B.

    Returns:
        Tuple of (new_rating_a, new_rating_b).
    """
    delta = round_half_away(k_factor * (0.5 - expected_score(rating_a, rating_b)))
    return rating_a + delta, rating_b - delta
