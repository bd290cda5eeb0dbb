"""Tests for the command-line shell."""

import pytest
from typer.testing import CliRunner

from elo_league import __version__
from elo_league.cli import app
from elo_league.services.storage.file_store import load_league

runner = CliRunner()


@pytest.fixture
def league_path(tmp_path):
    return tmp_path / "league.json"


def invoke(league_path, *args):
    return runner.invoke(app, ["--league", str(league_path), *args])


def ratings(league_path):
    return {p.name: (p.rating, p.matches) for p in load_league(league_path).players}


class TestCli:
    """Tests for CLI commands."""

    def test_version(self):
        """Test --version prints the version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_add_creates_file(self, league_path):
        """Test adding players writes the league file."""
        result = invoke(league_path, "add", "alice", "bob")
        assert result.exit_code == 0, result.output
        assert "Added" in result.output
        assert ratings(league_path) == {"alice": (1000, 0), "bob": (1000, 0)}

    def test_win_updates_ratings(self, league_path):
        """Test recording a win between newcomers."""
        invoke(league_path, "add", "alice", "bob")
        result = invoke(league_path, "win", "alice", "bob")
        assert result.exit_code == 0, result.output
        assert ratings(league_path) == {"alice": (1032, 1), "bob": (968, 1)}

    def test_draw_between_equals(self, league_path):
        """Test recording a draw counts the match without moving ratings."""
        invoke(league_path, "add", "alice", "bob")
        result = invoke(league_path, "draw", "alice", "bob")
        assert result.exit_code == 0, result.output
        assert ratings(league_path) == {"alice": (1000, 1), "bob": (1000, 1)}

    def test_win_against_self_fails(self, league_path):
        """Test a player cannot beat itself."""
        invoke(league_path, "add", "alice")
        result = invoke(league_path, "win", "alice", "alice")
        assert result.exit_code == 1

    def test_unknown_player_fails(self, league_path):
        """Test naming a player that does not exist."""
        invoke(league_path, "add", "alice")
        result = invoke(league_path, "retire", "zed")
        assert result.exit_code == 1
        assert "no player" in result.output

    def test_ambiguous_name_fails(self, league_path):
        """Test a shared name must be given as an id."""
        invoke(league_path, "add", "sam", "sam")
        result = invoke(league_path, "retire", "sam")
        assert result.exit_code == 1
        assert "ambiguous" in result.output

    def test_retire_and_rename(self, league_path):
        """Test retiring and renaming through the shell."""
        invoke(league_path, "add", "alice", "bob")
        assert invoke(league_path, "retire", "bob").exit_code == 0
        assert invoke(league_path, "rename", "alice", "alicia").exit_code == 0
        assert ratings(league_path) == {"alicia": (1000, 0)}

    def test_next_proposes_match(self, league_path):
        """Test a proposal is printed with odds."""
        invoke(league_path, "add", "alice", "bob", "carol")
        result = invoke(league_path, "next", "--seed", "3")
        assert result.exit_code == 0, result.output
        assert " vs " in result.output
        assert "50%" in result.output

    def test_next_needs_two_players(self, league_path):
        """Test no proposal for a lone player."""
        invoke(league_path, "add", "alice")
        result = invoke(league_path, "next")
        assert result.exit_code == 0
        assert "at least two" in result.output

    def test_standings(self, league_path):
        """Test the standings table lists players."""
        invoke(league_path, "add", "alice", "bob")
        invoke(league_path, "win", "bob", "alice")
        result = invoke(league_path, "standings")
        assert result.exit_code == 0
        assert result.output.index("bob") < result.output.index("alice")

    def test_bad_league_file(self, league_path):
        """Test a malformed league file exits with an error."""
        league_path.write_text("[1, 2]", encoding="utf-8")
        result = invoke(league_path, "standings")
        assert result.exit_code == 1
        assert "Format Error" in result.output

    def test_config_sets_league_file(self, tmp_path):
        """Test the league file can come from the config."""
        league_path = tmp_path / "office.json"
        config_path = tmp_path / "config.yaml"
        config_path.write_text(f"league_file: {league_path}\n")

        result = runner.invoke(app, ["--config", str(config_path), "add", "alice"])

        assert result.exit_code == 0, result.output
        assert ratings(league_path) == {"alice": (1000, 0)}

    def test_missing_config_fails(self, tmp_path):
        """Test a missing config file exits with an error."""
        result = runner.invoke(app, ["--config", str(tmp_path / "nope.yaml"), "standings"])
        assert result.exit_code == 1
