"""Tests for game configuration."""

import pytest

from treasure_snake.config import GameConfig, Palette
from treasure_snake.snake import Direction


class TestGameConfigDefaults:
    def test_defaults(self):
        config = GameConfig()
        assert config.grid_size == 20
        assert config.cell_size == 24
        assert config.tick_ms == 140
        assert config.treasure_reward == 10
        assert config.initial_snake == ((9, 10), (8, 10))
        assert config.initial_direction is Direction.RIGHT
        assert config.board_pixels == 480

    def test_frozen(self):
        config = GameConfig()
        with pytest.raises(AttributeError):
            config.grid_size = 30


class TestGameConfigValidation:
    def test_grid_too_small(self):
        with pytest.raises(ValueError, match="at least 4"):
            GameConfig(grid_size=3)

    @pytest.mark.parametrize(
        "field", ["cell_size", "tick_ms", "treasure_reward", "max_sample_attempts"],
    )
    def test_non_positive(self, field):
        with pytest.raises(ValueError, match=field):
            GameConfig(**{field: 0})

    def test_snake_too_short(self):
        with pytest.raises(ValueError, match="at least 2"):
            GameConfig(initial_snake=((5, 5),))

    def test_snake_off_grid(self):
        with pytest.raises(ValueError, match="off the grid"):
            GameConfig(grid_size=8)

    def test_snake_overlapping(self):
        with pytest.raises(ValueError, match="overlap"):
            GameConfig(initial_snake=((5, 5), (4, 5), (5, 5)))

    def test_snake_not_contiguous(self):
        with pytest.raises(ValueError, match="contiguous"):
            GameConfig(initial_snake=((5, 5), (3, 5)))

    def test_direction_into_body(self):
        with pytest.raises(ValueError, match="points back"):
            GameConfig(initial_direction=Direction.LEFT)


class TestGameConfigPersistence:
    def test_to_dict(self):
        d = GameConfig().to_dict()
        assert d["initial_snake"] == [[9, 10], [8, 10]]
        assert d["initial_direction"] == "right"

    def test_save_and_load(self, tmp_path):
        config = GameConfig(grid_size=30, tick_ms=90, initial_direction=Direction.UP)
        path = tmp_path / "nested" / "config.json"
        config.save(path)
        assert GameConfig.load(path) == config

    def test_from_dict_accepts_vectors(self):
        config = GameConfig.from_dict({"initial_direction": [0, 1]})
        assert config.initial_direction is Direction.DOWN

    def test_from_dict_unknown_direction_name(self):
        with pytest.raises(ValueError, match="Unknown initial_direction 'north'"):
            GameConfig.from_dict({"initial_direction": "north"})


class TestPalette:
    def test_defaults(self):
        palette = Palette()
        assert palette.accent == "#EC4899"
        assert palette.secondary == "#8B5CF6"
