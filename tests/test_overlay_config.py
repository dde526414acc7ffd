"""Tests for overlay configuration loading."""

import json
from pathlib import Path

import pytest

from poker_overlay.config import OverlayConfig, WindowConfig, load_overlay_config


class TestDefaults:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_overlay_config(tmp_path / "nonexistent.json")
        assert config == OverlayConfig()

    def test_default_values(self):
        config = OverlayConfig()
        assert config.source == "auto"
        assert config.tool_name == "texassolver"
        assert config.probe_timeout == 2.0
        assert config.range_file is None
        assert config.default_stack_bb == 100
        assert config.window == WindowConfig(400, 600, 20)

    def test_config_is_frozen(self):
        with pytest.raises(AttributeError):
            OverlayConfig().source = "builtin"


class TestLoadOverlayConfig:
    def _write(self, tmp_path, data) -> Path:
        path = tmp_path / "config.json"
        path.write_text(json.dumps(data))
        return path

    def test_valid_config_loads(self, tmp_path):
        path = self._write(tmp_path, {
            "source": "BUILTIN",
            "tool_name": "/opt/solver/console_solver",
            "probe_timeout": 0.5,
            "range_file": str(tmp_path / "ranges.json"),
            "log_level": "debug",
            "default_stack_bb": 40,
            "window": {"width": 320, "height": 480},
        })
        config = load_overlay_config(path)
        assert config.source == "builtin"
        assert config.tool_name == "/opt/solver/console_solver"
        assert config.probe_timeout == 0.5
        assert config.range_file == tmp_path / "ranges.json"
        assert config.log_level == "DEBUG"
        assert config.default_stack_bb == 40
        assert config.window == WindowConfig(width=320, height=480, margin=20)

    def test_unknown_source_falls_back_to_auto(self, tmp_path, caplog):
        path = self._write(tmp_path, {"source": "piosolver"})
        config = load_overlay_config(path)
        assert config.source == "auto"
        assert "Unknown source" in caplog.text

    def test_invalid_json_gives_defaults(self, tmp_path, caplog):
        path = tmp_path / "config.json"
        path.write_text("{broken")
        assert load_overlay_config(path) == OverlayConfig()
        assert "Failed to read overlay config" in caplog.text

    def test_non_object_gives_defaults(self, tmp_path):
        path = self._write(tmp_path, ["builtin"])
        assert load_overlay_config(path) == OverlayConfig()

    def test_bad_number_keeps_default(self, tmp_path):
        path = self._write(tmp_path, {"probe_timeout": "fast", "default_stack_bb": -5})
        config = load_overlay_config(path)
        assert config.probe_timeout == 2.0
        assert config.default_stack_bb == 100

    def test_non_string_range_file_ignored(self, tmp_path, caplog):
        path = self._write(tmp_path, {"range_file": 5})
        assert load_overlay_config(path).range_file is None
        assert "range_file" in caplog.text

    def test_unknown_log_level_falls_back(self, tmp_path, caplog):
        path = self._write(tmp_path, {"log_level": "LOUD"})
        assert load_overlay_config(path).log_level == "INFO"
        assert "Unknown log_level" in caplog.text

    def test_log_level_is_case_insensitive(self, tmp_path):
        path = self._write(tmp_path, {"log_level": "debug"})
        assert load_overlay_config(path).log_level == "DEBUG"

    def test_bad_window_keeps_default(self, tmp_path):
        path = self._write(tmp_path, {"window": "big"})
        assert load_overlay_config(path).window == WindowConfig()
