"""Encode and decode leagues as structured documents.

Two shapes are accepted on the way in:

- current: ``{"players": [{"id", "name", "rating", "matches"}, ...]}``
- legacy: ``{"<name>": {"name", "rating", "matches"}, ...}``, written before
  players had ids

Only the current shape is written. The in-flight match is never persisted.
"""

from __future__ import annotations

import json
from typing import Any

import pydantic
import structlog
from pydantic import BaseModel, TypeAdapter

from elo_league.core.errors import FormatError, PlayerFormatError
from elo_league.models.player import Player, describe_errors
from elo_league.services.league import League

logger = structlog.get_logger()


class LeagueDocument(BaseModel):
    """Current document shape. Records are validated one by one afterwards."""

    players: list[dict[str, Any]]


_LEGACY_DOCUMENT = TypeAdapter(dict[str, dict[str, Any]])


def encode(league: League) -> dict[str, Any]:
    """Serialize a league to a document."""
    return {"players": [player.to_record() for player in league.players]}


def decode(document: Any) -> League:
    """Decode a league from either document shape.

    Args:
        document: Parsed JSON data.

    Returns:
        League with no match in flight.

    Raises:
        FormatError: If the document matches neither shape, a record is
            invalid, or two records share an id.
    """
    try:
        current = LeagueDocument.model_validate(document)
    except pydantic.ValidationError as current_error:
        try:
            legacy = _LEGACY_DOCUMENT.validate_python(document)
        except pydantic.ValidationError as legacy_error:
            raise FormatError(
                "Expected an object with a 'players' list or a legacy name -> player mapping",
                describe_errors(current_error, "current")
                + describe_errors(legacy_error, "legacy"),
            ) from legacy_error
        players = [
            _decode_record({"name": name, **record}, name) for name, record in legacy.items()
        ]
        logger.info("decoded_legacy_league", players=len(players))
    else:
        players = [
            _decode_record(record, f"players.{index}")
            for index, record in enumerate(current.players)
        ]

    try:
        return League(players)
    except ValueError as e:
        raise FormatError(str(e), suggestion="Give every player a unique id.") from e


def _decode_record(record: dict[str, Any], location: str) -> Player:
    try:
        return Player.decode(record)
    except PlayerFormatError as e:
        raise FormatError(
            f"Invalid player record at {location}",
            [f"{location}.{detail}" for detail in e.details],
        ) from e


def dumps(league: League) -> str:
    """Serialize a league to JSON text."""
    return json.dumps(encode(league), indent=2, ensure_ascii=False)


def loads(text: str) -> League:
    """Decode a league from JSON text.

    Raises:
        FormatError: If the text is not JSON or not a league document.
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise FormatError(f"Not valid JSON: {e}") from e
    return decode(document)
