"""League state: roster, in-flight match, and rating updates."""

from __future__ import annotations

import random
from collections.abc import Iterable

import numpy as np
import structlog

from elo_league.models.match import Draw, Match, Outcome, Win
from elo_league.models.player import Player
from elo_league.ranking import elo
from elo_league.services.match.pairing import PLAY_IN_MATCHES, propose_match

logger = structlog.get_logger()

# Players rated at or above this percentile of the league update slowly.
TOP_PERCENTILE = 90


class League:
    """A pool of players and at most one match in progress.

    The roster and the in-flight slot are only changed through the methods
    below. If a match is in flight, both of its players are in the roster.
    """

    def __init__(self, players: Iterable[Player] = ()) -> None:
        """Initialize a league.

        Args:
            players: Existing players, kept in the given order.

        Raises:
            ValueError: If two players share an id.
        """
        self._players: dict[str, Player] = {}
        self._match: Match | None = None
        for player in players:
            if player.id in self._players:
                msg = f"Duplicate player id: {player.id}"
                raise ValueError(msg)
            self._players[player.id] = player

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._players

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, League):
            return NotImplemented
        return self.players == other.players and self._match == other._match

    def __repr__(self) -> str:
        return f"League(players={self.players!r}, current_match={self._match!r})"

    @property
    def players(self) -> list[Player]:
        """Players in insertion order."""
        return list(self._players.values())

    @property
    def current_match(self) -> Match | None:
        return self._match

    def get_player(self, player_id: str) -> Player | None:
        return self._players.get(player_id)

    def leaderboard(self) -> list[Player]:
        """Players sorted by rating descending, then by name."""
        return sorted(self._players.values(), key=lambda p: (-p.rating, p.name))

    def add_player(self, name: str) -> Player:
        """Admit a new player.

        The rating is seeded from the league average so newcomers start in
        the middle of the field.

        Args:
            name: Display name.

        Returns:
            The new player.
        """
        if self._players:
            rating = sum(p.rating for p in self._players.values()) // len(self._players)
        else:
            rating = elo.INITIAL_RATING

        player = Player.new(name, rating=rating)
        self._players[player.id] = player
        logger.info("player_added", player_id=player.id, name=name, rating=rating)
        return player

    def retire_player(self, player_id: str) -> None:
        """Remove a player, clearing the in-flight match if they are in it."""
        player = self._players.pop(player_id, None)
        if player is None:
            logger.debug("retire_unknown_player", player_id=player_id)
            return

        if self._match is not None and self._match.involves(player_id):
            logger.info("match_cleared", reason="player_retired", player_id=player_id)
            self._match = None
        logger.info("player_retired", player_id=player_id, name=player.name)

    def rename_player(self, player_id: str, name: str) -> None:
        player = self._players.get(player_id)
        if player is None:
            logger.debug("rename_unknown_player", player_id=player_id)
            return
        player.rename(name)

    def next_match(self, rng: random.Random) -> Match | None:
        """Propose the next match without changing the league.

        Args:
            rng: Source of randomness.

        Returns:
            A proposed Match, or None with fewer than two players.
        """
        return propose_match(rng, self.players)

    def start_match(self, match: Match) -> None:
        """Put ``match`` in flight.

        Stale proposals (a player gone or changed since the proposal) are
        declined silently and leave no match in flight.
        """
        first = self._players.get(match.first.id)
        second = self._players.get(match.second.id)
        if first is None or second is None:
            logger.debug("match_declined", reason="unknown_player", match=match)
            self._match = None
            return
        if first != match.first or second != match.second:
            logger.debug("match_declined", reason="stale_player", match=match)
            self._match = None
            return

        self._match = Match(first=first, second=second)
        logger.info("match_started", first=first.name, second=second.name)

    def k_factor(self, player: Player) -> int:
        """Sensitivity for ``player``'s next rating update.

        Provisional players move fast, the top of the table moves slowly.
        """
        if player.matches < PLAY_IN_MATCHES:
            return 2 * elo.SENSITIVE_K_FACTOR

        ratings = [p.rating for p in self._players.values()]
        if ratings and player.rating >= float(np.percentile(ratings, TOP_PERCENTILE)):
            return elo.SENSITIVE_K_FACTOR // 2

        return elo.SENSITIVE_K_FACTOR

    def finish_match(self, outcome: Outcome) -> None:
        """Apply an outcome and clear the in-flight match.

        K-factors come from the snapshots carried by the outcome. Players
        no longer in the league are skipped.

        Args:
            outcome: Win or Draw between two player snapshots.
        """
        if isinstance(outcome, Win):
            k_factor = self.k_factor(outcome.winner)
            new_winner, new_loser = elo.win(k_factor, outcome.winner.rating, outcome.loser.rating)
            updates = [(outcome.winner, new_winner), (outcome.loser, new_loser)]
        elif isinstance(outcome, Draw):
            leader = max(outcome.first, outcome.second, key=lambda p: p.rating)
            k_factor = self.k_factor(leader)
            new_first, new_second = elo.draw(k_factor, outcome.first.rating, outcome.second.rating)
            updates = [(outcome.first, new_first), (outcome.second, new_second)]
        else:
            msg = f"Unknown outcome: {outcome!r}"
            raise TypeError(msg)

        for snapshot, new_rating in updates:
            player = self._players.get(snapshot.id)
            if player is None:
                logger.debug("outcome_player_missing", player_id=snapshot.id)
                continue
            old_rating = player.rating
            player.record_match(new_rating)
            logger.info(
                "rating_updated",
                player_id=player.id,
                name=player.name,
                old_rating=old_rating,
                new_rating=new_rating,
                k_factor=k_factor,
            )

        self._match = None
