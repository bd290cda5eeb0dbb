"""Configuration schema and loading for Elo League."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, field_validator

from elo_league.core.errors import ConfigurationError


class LeagueConfig(BaseModel):
    """Settings for the command-line shell.

    Attributes:
        league_file: JSON file the league is loaded from and saved to.
        seed: Seed for match proposals. If None, proposals are not reproducible.
    """

    league_file: str = "league.json"
    seed: int | None = None

    @field_validator("league_file")
    @classmethod
    def validate_league_file(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("league_file cannot be empty")
        return v

    @property
    def league_path(self) -> Path:
        return Path(self.league_file)


def load_config(path: str | Path) -> LeagueConfig:
    """Load and validate configuration from YAML file.

    Args:
        path: Path to YAML configuration file.

    Returns:
        Validated LeagueConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ConfigurationError: If the file does not hold a mapping.
        pydantic.ValidationError: If a field is invalid.
    """
    config_path = Path(path)
    if not config_path.exists():
        msg = f"Configuration file not found: {config_path}"
        raise FileNotFoundError(msg)

    with config_path.open() as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Expected a mapping in {config_path}, found {type(data).__name__}",
            "Write settings as 'key: value' lines, e.g. 'league_file: league.json'.",
        )

    return LeagueConfig.model_validate(data)
