"""Tests for player, match and outcome models."""

import pytest

from elo_league.core.errors import PlayerFormatError
from elo_league.models import Draw, Match, Player, Win


class TestPlayer:
    """Tests for the Player entity."""

    def test_new_player_defaults(self):
        """Test a new player starts with no matches and a fresh id."""
        a = Player.new("alice")
        b = Player.new("alice")
        assert a.matches == 0
        assert a.rating == 1000
        assert a.id != b.id

    def test_record_match(self):
        """Test recording a match sets the rating and counts the match."""
        player = Player(id="p1", name="alice", rating=1000, matches=3)
        player.record_match(1016)
        assert player.rating == 1016
        assert player.matches == 4

    def test_rename_keeps_id(self):
        """Test renaming changes only the display name."""
        player = Player(id="p1", name="alice")
        player.rename("alicia")
        assert player.name == "alicia"
        assert player.id == "p1"

    def test_to_record(self):
        """Test the serialized record shape."""
        player = Player(id="p1", name="alice", rating=1010, matches=2)
        assert player.to_record() == {"id": "p1", "name": "alice", "rating": 1010, "matches": 2}


class TestPlayerDecode:
    """Tests for decoding player records."""

    def test_decode_full_record(self):
        """Test a record with an id keeps it."""
        player = Player.decode({"id": "p1", "name": "alice", "rating": 990, "matches": 7})
        assert player == Player(id="p1", name="alice", rating=990, matches=7)

    def test_missing_id_is_derived_from_name(self):
        """Test records without ids get the same id every time."""
        first = Player.decode({"name": "alice", "rating": 990, "matches": 7})
        second = Player.decode({"name": "alice", "rating": 1200, "matches": 0})
        other = Player.decode({"name": "bob", "rating": 990, "matches": 7})
        assert first.id == second.id
        assert first.id != other.id

    def test_wrong_type_rejected(self):
        """Test a string rating is reported with the field name."""
        with pytest.raises(PlayerFormatError) as exc_info:
            Player.decode({"name": "alice", "rating": "1000", "matches": 0})
        assert any(detail.startswith("rating:") for detail in exc_info.value.details)
        assert "'1000'" in str(exc_info.value)

    def test_whole_number_floats_accepted(self):
        """Test JSON numbers like 1000.0 decode as integers."""
        player = Player.decode({"id": "p1", "name": "alice", "rating": 1000.0, "matches": 3.0})
        assert player == Player(id="p1", name="alice", rating=1000, matches=3)
        assert isinstance(player.rating, int)

    def test_boolean_rating_rejected(self):
        """Test booleans are not mistaken for numbers."""
        with pytest.raises(PlayerFormatError):
            Player.decode({"name": "alice", "rating": True, "matches": 0})

    def test_fractional_rating_rejected(self):
        """Test ratings must be whole numbers."""
        with pytest.raises(PlayerFormatError):
            Player.decode({"name": "alice", "rating": 1000.5, "matches": 0})

    def test_negative_matches_rejected(self):
        """Test match counts cannot be negative."""
        with pytest.raises(PlayerFormatError, match="matches"):
            Player.decode({"name": "alice", "rating": 1000, "matches": -1})

    def test_missing_field_reported(self):
        """Test a missing name is reported."""
        with pytest.raises(PlayerFormatError) as exc_info:
            Player.decode({"rating": 1000, "matches": 0})
        assert exc_info.value.details == ["name: Field required"]

    def test_non_mapping_rejected(self):
        """Test a record that is not an object fails."""
        with pytest.raises(PlayerFormatError):
            Player.decode(["alice", 1000, 0])


class TestMatch:
    """Tests for the Match model."""

    def test_self_match_rejected(self):
        """Test a player cannot face itself."""
        player = Player(id="p1", name="alice")
        with pytest.raises(ValueError, match="itself"):
            Match(first=player, second=Player(id="p1", name="alice again"))

    def test_equality_ignores_side_order(self):
        """Test matches compare by the players involved."""
        a = Player(id="a", name="alice")
        b = Player(id="b", name="bob")
        assert Match(first=a, second=b) == Match(first=b, second=a)
        assert hash(Match(first=a, second=b)) == hash(Match(first=b, second=a))

    def test_display_order_kept(self):
        """Test sides keep the order they were given in."""
        a = Player(id="a", name="alice")
        b = Player(id="b", name="bob")
        assert Match(first=b, second=a).players == (b, a)

    def test_win_builds_snapshots(self):
        """Test outcomes are unaffected by later changes to live players."""
        a = Player(id="a", name="alice")
        b = Player(id="b", name="bob")
        outcome = Match(first=a, second=b).win("b")

        a.record_match(1100)

        assert isinstance(outcome, Win)
        assert outcome.winner.id == "b"
        assert outcome.loser.rating == 1000
        assert outcome.loser.matches == 0

    def test_win_for_outsider_rejected(self):
        """Test only a participant can win."""
        match = Match(first=Player(id="a", name="alice"), second=Player(id="b", name="bob"))
        with pytest.raises(ValueError, match="not part"):
            match.win("c")

    def test_draw(self):
        """Test draws list both players in match order."""
        a = Player(id="a", name="alice")
        b = Player(id="b", name="bob")
        outcome = Match(first=a, second=b).draw()
        assert outcome == Draw(first=a, second=b)
