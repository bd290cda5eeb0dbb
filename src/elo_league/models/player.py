"""Player entity and record decoding."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Annotated, Any

import pydantic
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from elo_league.core.errors import PlayerFormatError
from elo_league.ranking.elo import INITIAL_RATING

# Ids for records written before players had ids are derived from the name
# under this namespace, so reloading the same legacy file is stable.
LEGACY_ID_NAMESPACE = uuid.UUID("6f1c9a52-3d5e-4b8a-9c47-0e2b7d1f8a36")


def _whole_number(value: Any) -> Any:
    """JSON writers may emit 1000 as 1000.0; accept it as an integer."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


WholeNumber = Annotated[int, BeforeValidator(_whole_number)]


class PlayerRecord(BaseModel):
    """Serialized shape of a single player."""

    model_config = ConfigDict(strict=True)

    id: str | None = None
    name: str
    rating: WholeNumber
    matches: WholeNumber = Field(ge=0)


def describe_errors(exc: pydantic.ValidationError, prefix: str = "") -> list[str]:
    """Turn pydantic errors into 'field: message (found value)' lines."""
    lines = []
    for error in exc.errors():
        loc = ".".join(str(part) for part in (prefix, *error["loc"]) if part != "")
        line = f"{loc or 'record'}: {error['msg']}"
        if error["type"] != "missing":
            line += f" (found {error['input']!r})"
        lines.append(line)
    return lines


@dataclass
class Player:
    """A competitor in the league.

    Attributes:
        id: Stable identifier, independent of the display name.
        name: Display name. May be edited and may collide with other names.
        rating: Current Elo rating. Always an integer.
        matches: Number of finished matches. Only ever increases.
    """

    id: str
    name: str
    rating: int = INITIAL_RATING
    matches: int = 0

    @classmethod
    def new(cls, name: str, rating: int = INITIAL_RATING) -> Player:
        """Create a player with a fresh id and no matches played."""
        return cls(id=str(uuid.uuid4()), name=name, rating=rating)

    def record_match(self, new_rating: int) -> None:
        """Record a finished match.

        Args:
            new_rating: Rating after the match.
        """
        self.rating = new_rating
        self.matches += 1

    def rename(self, name: str) -> None:
        self.name = name

    def to_record(self) -> dict[str, Any]:
        return PlayerRecord(
            id=self.id, name=self.name, rating=self.rating, matches=self.matches
        ).model_dump()

    @classmethod
    def decode(cls, data: Any) -> Player:
        """Decode a player record.

        Records without an id get one derived from their name.

        Args:
            data: Mapping with name, rating, matches and optionally id.

        Returns:
            Decoded Player.

        Raises:
            PlayerFormatError: If the record is malformed.
        """
        try:
            record = PlayerRecord.model_validate(data)
        except pydantic.ValidationError as e:
            raise PlayerFormatError(describe_errors(e)) from e

        player_id = record.id or str(uuid.uuid5(LEGACY_ID_NAMESPACE, record.name))
        return cls(id=player_id, name=record.name, rating=record.rating, matches=record.matches)
