"""Weighted random pairing for Elo League."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TypeVar

from elo_league.models.match import Match
from elo_league.models.player import Player

T = TypeVar("T")

# Players with at most this many matches are still in their play-in period.
PLAY_IN_MATCHES = 5


def weighted_choice(rng: random.Random, items: Sequence[T], weights: Sequence[float]) -> T:
    """Pick one item with probability proportional to its weight.

    An all-zero weight vector means every candidate is equally extreme, so
    the pick falls back to uniform.

    Args:
        rng: Source of randomness.
        items: Candidates to choose from.
        weights: Non-negative weight per candidate.

    Returns:
        The chosen item.

    Raises:
        ValueError: If ``items`` is empty or lengths differ.
    """
    if not items:
        raise ValueError("Cannot choose from an empty sequence")
    if len(items) != len(weights):
        raise ValueError("items and weights must have the same length")

    if sum(weights) <= 0:
        return rng.choice(items)
    return rng.choices(items, weights=weights, k=1)[0]


def pick_first(rng: random.Random, players: Sequence[Player]) -> Player:
    """Choose the first player, favouring those who have played least.

    Players still in their play-in period are preferred outright. Within the
    pool each candidate weighs ``(most_matches - matches) ** 2``.
    """
    play_in = [p for p in players if p.matches <= PLAY_IN_MATCHES]
    pool = play_in or list(players)

    most_matches = max(p.matches for p in pool)
    weights = [(most_matches - p.matches) ** 2 for p in pool]
    return weighted_choice(rng, pool, weights)


def pick_second(rng: random.Random, first: Player, remaining: Sequence[Player]) -> Player:
    """Choose an opponent for ``first``, favouring close ratings.

    Each candidate weighs ``(widest_gap - gap) ** 2`` where gap is the
    rating distance to ``first``.
    """
    gaps = [abs(first.rating - p.rating) for p in remaining]
    widest_gap = max(gaps)
    weights = [(widest_gap - gap) ** 2 for gap in gaps]
    return weighted_choice(rng, remaining, weights)


def propose_match(rng: random.Random, players: Sequence[Player]) -> Match | None:
    """Propose the next match from a roster.

    1. The first player is drawn from the least-played candidates
    2. The opponent is drawn from everyone else, closest rating first
    3. A coin flip decides which one is listed first

    Args:
        rng: Source of randomness. Seed it for reproducible proposals.
        players: Current roster, ids unique.

    Returns:
        A proposed Match, or None when fewer than two players exist.
    """
    min_pair_size = 2
    if len(players) < min_pair_size:
        return None

    first = pick_first(rng, players)
    remaining = [p for p in players if p.id != first.id]
    second = pick_second(rng, first, remaining)

    if rng.random() < 0.5:
        first, second = second, first
    return Match(first=first, second=second)
