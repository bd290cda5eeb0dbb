"""Match and outcome models."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from elo_league.models.player import Player


@dataclass(frozen=True)
class Win:
    """A decisive result: ``winner`` beat ``loser``."""

    winner: Player
    loser: Player


@dataclass(frozen=True)
class Draw:
    """A drawn result between ``first`` and ``second``."""

    first: Player
    second: Player


Outcome = Win | Draw


@dataclass(frozen=True, eq=False)
class Match:
    """A pairing of two distinct players.

    Side order is kept for display only; two matches between the same
    players are equal whichever side each one is listed on.
    """

    first: Player
    second: Player

    def __post_init__(self) -> None:
        if self.first.id == self.second.id:
            msg = f"A player cannot be matched against itself: {self.first.id}"
            raise ValueError(msg)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Match):
            return NotImplemented
        return self.player_ids == other.player_ids

    def __hash__(self) -> int:
        return hash(self.player_ids)

    @property
    def player_ids(self) -> frozenset[str]:
        return frozenset((self.first.id, self.second.id))

    @property
    def players(self) -> tuple[Player, Player]:
        return self.first, self.second

    def involves(self, player_id: str) -> bool:
        return player_id in self.player_ids

    def win(self, winner_id: str) -> Win:
        """Build a Win outcome with snapshots of both players.

        Raises:
            ValueError: If ``winner_id`` is not part of this match.
        """
        if winner_id == self.first.id:
            winner, loser = self.first, self.second
        elif winner_id == self.second.id:
            winner, loser = self.second, self.first
        else:
            msg = f"Player {winner_id} is not part of this match"
            raise ValueError(msg)
        return Win(winner=dataclasses.replace(winner), loser=dataclasses.replace(loser))

    def draw(self) -> Draw:
        """Build a Draw outcome with snapshots of both players."""
        return Draw(first=dataclasses.replace(self.first), second=dataclasses.replace(self.second))
