"""Tests for the one-shot hint CLI."""

import json

from poker_overlay.interface.hint_cli import main


def _builtin_config(tmp_path, **extra):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"source": "builtin", **extra}))
    return str(path)


class TestHintCli:
    def test_preflop_lookup(self, tmp_path, capsys):
        code = main(["-p", "btn", "-c", "AsKh", "--config", _builtin_config(tmp_path)])
        out = capsys.readouterr().out
        assert code == 0
        assert "HINT: RAISE 3x" in out
        assert "Raise:      68%" in out
        assert "source=builtin, match=exact" in out

    def test_postflop_lookup(self, tmp_path, capsys):
        code = main([
            "-p", "CO", "-c", "Ah 7c", "-b", "Kd 8s 2h",
            "--config", _builtin_config(tmp_path),
        ])
        out = capsys.readouterr().out
        assert code == 0
        assert "HINT: BET 75%" in out
        assert "Board:      Kd 8s 2h" in out
        assert "Street:     FLOP" in out

    def test_zero_frequencies_hidden(self, tmp_path, capsys):
        main(["-p", "UTG", "-c", "JsJh", "--config", _builtin_config(tmp_path)])
        out = capsys.readouterr().out
        assert "Fold:" not in out

    def test_bad_cards_exit_code(self, tmp_path, capsys):
        code = main(["-p", "BTN", "-c", "AxKh", "--config", _builtin_config(tmp_path)])
        assert code == 2
        assert "Error" in capsys.readouterr().err

    def test_wrong_card_count(self, tmp_path, capsys):
        code = main(["-p", "BTN", "-c", "AsKhQd", "--config", _builtin_config(tmp_path)])
        assert code == 2

    def test_bad_board_size(self, tmp_path, capsys):
        code = main([
            "-p", "BTN", "-c", "AsKh", "-b", "2c 3d",
            "--config", _builtin_config(tmp_path),
        ])
        assert code == 2

    def test_broken_range_file_is_fatal(self, tmp_path, capsys):
        ranges = tmp_path / "ranges.json"
        ranges.write_text(json.dumps({"positions": {"BTN": {}}}))
        code = main([
            "-p", "BTN", "-c", "AsKh",
            "--config", _builtin_config(tmp_path, range_file=str(ranges)),
        ])
        assert code == 1
        assert "default" in capsys.readouterr().err

    def test_custom_range_file(self, tmp_path, capsys):
        ranges = tmp_path / "ranges.json"
        ranges.write_text(json.dumps({"positions": {"BTN": {
            "AKo": {"action": "RAISE 2x",
                    "frequencies": {"raise": 100, "call": 0, "fold": 0}},
            "default": {"action": "FOLD",
                        "frequencies": {"raise": 0, "call": 0, "fold": 100}},
        }}}))
        code = main([
            "-p", "BTN", "-c", "KhAs",
            "--config", _builtin_config(tmp_path, range_file=str(ranges)),
        ])
        out = capsys.readouterr().out
        assert code == 0
        assert "HINT: RAISE 2x" in out
        assert "match=category" in out
