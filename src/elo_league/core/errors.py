"""Custom exceptions for decoding and configuration errors."""

from __future__ import annotations


class LeagueError(Exception):
    """Base exception carrying a message and an optional suggestion."""

    label = "Error"

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        self.message = message
        self.suggestion = suggestion
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"[{self.label}] {self.message}"
        if self.suggestion:
            msg += f"\n[Suggestion] {self.suggestion}"
        return msg


class FormatError(LeagueError):
    """Error when a league document matches no accepted shape.

    Attributes:
        details: Field-level descriptions of what was expected and found.
    """

    label = "Format Error"

    def __init__(
        self,
        message: str,
        details: list[str] | None = None,
        suggestion: str | None = None,
    ) -> None:
        self.details = list(details or [])
        super().__init__(message, suggestion)

    def _format_message(self) -> str:
        msg = f"[{self.label}] {self.message}"
        for detail in self.details:
            msg += f"\n  - {detail}"
        if self.suggestion:
            msg += f"\n[Suggestion] {self.suggestion}"
        return msg


class PlayerFormatError(FormatError):
    """Error when a single player record is invalid."""

    def __init__(self, details: list[str]) -> None:
        super().__init__("Invalid player record", details)


class ConfigurationError(LeagueError):
    """Error when the configuration file cannot be used."""

    label = "Configuration Error"
