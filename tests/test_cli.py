"""Tests for the command-line launcher."""

import json

import pytest
from PIL import Image

from treasure_snake.cli import main
from treasure_snake.config import GameConfig


class TestConfigCommand:
    def test_prints_defaults(self, capsys):
        assert main(["config"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["grid_size"] == 20
        assert data["tick_ms"] == 140

    def test_writes_overrides(self, tmp_path):
        path = tmp_path / "game.json"
        assert main(["config", "--tick-ms", "90", "--output", str(path)]) == 0
        assert GameConfig.load(path) == GameConfig(tick_ms=90)

    def test_loads_file(self, tmp_path, capsys):
        path = tmp_path / "game.json"
        GameConfig(cell_size=12).save(path)
        assert main(["config", "--config", str(path)]) == 0
        assert json.loads(capsys.readouterr().out)["cell_size"] == 12

    def test_invalid_override_exits(self):
        with pytest.raises(SystemExit):
            main(["config", "--grid-size", "8"])

    def test_bad_direction_in_file_exits(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"initial_direction": "north"}))
        with pytest.raises(SystemExit):
            main(["config", "--config", str(path)])


class TestRenderCommand:
    def test_writes_png(self, tmp_path):
        out = tmp_path / "frames" / "last.png"
        code = main([
            "render", "--keys", "s,s,d", "--seed", "1",
            "--cell-size", "10", "--output", str(out),
        ])
        assert code == 0
        with Image.open(out) as img:
            assert img.size == (200, 200)

    def test_ticks_without_keys(self, tmp_path):
        out = tmp_path / "frame.png"
        assert main(["render", "--ticks", "30", "--output", str(out)]) == 0
        assert out.exists()

    def test_tiny_cells(self, tmp_path):
        out = tmp_path / "tiny.png"
        assert main(["render", "--cell-size", "2", "--output", str(out)]) == 0
        with Image.open(out) as img:
            assert img.size == (40, 40)


class TestNoCommand:
    def test_prints_help(self, capsys):
        assert main([]) == 1
        assert "treasure-snake" in capsys.readouterr().out
