"""Tests for the keyboard mapping."""

import pytest

from treasure_snake.engine import GameEngine
from treasure_snake.keys import direction_for_key, handle_key
from treasure_snake.snake import Direction


class TestDirectionForKey:
    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("ArrowUp", Direction.UP),
            ("ArrowDown", Direction.DOWN),
            ("ArrowLeft", Direction.LEFT),
            ("ArrowRight", Direction.RIGHT),
            ("w", Direction.UP),
            ("S", Direction.DOWN),
            ("a", Direction.LEFT),
            ("D", Direction.RIGHT),
            ("up", Direction.UP),
        ],
    )
    def test_recognized(self, key, expected):
        assert direction_for_key(key) is expected

    @pytest.mark.parametrize("key", ["q", "Enter", " ", "", "ArrowUpp"])
    def test_unrecognized(self, key):
        assert direction_for_key(key) is None


class TestHandleKey:
    def test_forwards_to_engine(self):
        engine = GameEngine(seed=0)
        engine.start()
        assert handle_key(engine, "ArrowDown")
        assert engine.state.pending_direction is Direction.DOWN

    def test_ignores_unknown_and_reverse(self):
        engine = GameEngine(seed=0)
        engine.start()
        assert not handle_key(engine, "x")
        assert not handle_key(engine, "a")
        assert engine.state.pending_direction is Direction.RIGHT
