"""
Unit tests for Tile.

Tests tile state transitions and observation conversion.
"""
import dataclasses

import pytest
from minesweeper import Tile, TileState


# ============================================================================
# Tile Initialization Tests
# ============================================================================

class TestTileInitialization:
    """Test tile creation and default values."""

    def test_default_tile_is_hidden_safe_and_zero(self) -> None:
        """New tile is hidden, not a mine, with no adjacent mines."""
        tile = Tile()
        assert tile.is_mine is False
        assert tile.adjacent_mines == 0
        assert tile.state == TileState.HIDDEN
        assert tile.is_hidden is True

    def test_tile_is_immutable(self) -> None:
        """Tiles cannot be modified in place."""
        tile = Tile()
        with pytest.raises(dataclasses.FrozenInstanceError):
            tile.is_mine = True


# ============================================================================
# Tile Transition Tests
# ============================================================================

class TestTileTransitions:
    """Test reveal and flag transitions."""

    def test_revealed_returns_new_revealed_tile(self) -> None:
        """Revealing produces a new tile and leaves the original alone."""
        tile = Tile(adjacent_mines=2)
        revealed = tile.revealed()
        assert revealed.is_revealed is True
        assert revealed.adjacent_mines == 2
        assert tile.is_hidden is True

    def test_revealed_drops_flag(self) -> None:
        """A force-revealed flagged tile is no longer flagged."""
        tile = Tile().toggled().revealed()
        assert tile.is_revealed is True
        assert tile.is_flagged is False

    def test_toggled_flags_and_unflags(self) -> None:
        """Toggling twice returns to hidden."""
        flagged = Tile().toggled()
        assert flagged.is_flagged is True
        assert flagged.toggled() == Tile()

    def test_toggled_on_revealed_tile_is_noop(self) -> None:
        """Revealed tiles cannot be flagged."""
        tile = Tile().revealed()
        assert tile.toggled() is tile

    def test_flagged_only_applies_to_hidden_tiles(self) -> None:
        """Hidden tiles take a flag; revealed and flagged tiles are unchanged."""
        flagged = Tile().flagged()
        assert flagged.is_flagged is True
        assert flagged.flagged() is flagged
        revealed = Tile().revealed()
        assert revealed.flagged() is revealed

    def test_unflagged_removes_flag(self) -> None:
        """Unflagging returns a flagged tile to hidden and leaves others alone."""
        assert Tile().flagged().unflagged() == Tile()
        hidden = Tile()
        assert hidden.unflagged() is hidden
        revealed = Tile().revealed()
        assert revealed.unflagged() is revealed


# ============================================================================
# Tile Observation Tests
# ============================================================================

class TestTileObservation:
    """Test tile observation values."""

    def test_hidden_tile_observation_is_negative_one(self) -> None:
        assert Tile().to_observation() == -1

    def test_flagged_tile_observation_is_negative_two(self) -> None:
        assert Tile().toggled().to_observation() == -2

    @pytest.mark.parametrize("count", range(0, 9))
    def test_revealed_tile_observation_matches_adjacent_count(
        self, count: int
    ) -> None:
        """Revealed tile returns its adjacent mine count."""
        assert Tile(adjacent_mines=count).revealed().to_observation() == count

    def test_revealed_mine_observation_is_nine(self) -> None:
        assert Tile(is_mine=True).revealed().to_observation() == 9

    def test_chars(self) -> None:
        """Printed characters for each kind of tile."""
        assert Tile().to_char() == "."
        assert Tile().toggled().to_char() == "F"
        assert Tile(is_mine=True).revealed().to_char() == "*"
        assert Tile().revealed().to_char() == " "
        assert Tile(adjacent_mines=3).revealed().to_char() == "3"
