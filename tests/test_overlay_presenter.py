"""Tests for OverlayPresenter with a mock OverlayView.

These tests verify the presenter logic without any Qt/PySide6 dependency
by mocking the view and, where needed, the hint provider.
"""

from __future__ import annotations

from unittest.mock import MagicMock

from poker_overlay.core.game_state import OverlayGameState
from poker_overlay.gui.presenter import OverlayPresenter, frequency_rows, parse_stack
from poker_overlay.hints.data_structures import (
    Recommendation,
    SourceKind,
    SourceStatus,
)
from poker_overlay.hints.engine import BuiltinHintEngine
from poker_overlay.utils.card import Card
from poker_overlay.utils.constants import Position, Street


def _cards(s: str) -> list[Card]:
    return [Card.from_str(c) for c in s.split()]


def _make_presenter(provider=None, status=None, state=None):
    view = MagicMock()
    presenter = OverlayPresenter(
        view=view,
        provider=provider or BuiltinHintEngine(),
        status=status,
        state=state,
    )
    return presenter, view


def _last_rec(view) -> Recommendation:
    return view.show_recommendation.call_args[0][0]


class TestHelpers:
    def test_frequency_rows_skip_zero(self):
        rec = Recommendation("RAISE 3x", {"raise": 95, "call": 5, "fold": 0})
        assert frequency_rows(rec) == [("Raise", 95), ("Call", 5)]

    def test_frequency_rows_postflop(self):
        rec = Recommendation("CHECK", {"bet": 20, "check": 70, "fold": 10})
        assert frequency_rows(rec) == [("Bet", 20), ("Check", 70), ("Fold", 10)]

    def test_parse_stack(self):
        assert parse_stack("40") == 40
        assert parse_stack(" 25bb ") == 25
        assert parse_stack("") == 100
        assert parse_stack("deep") == 100
        assert parse_stack("0") == 100


class TestDefaultState:
    def test_initial_state(self):
        state = OverlayGameState()
        assert state.position == Position.BTN
        assert state.stack_bb == 100
        assert state.hole_cards == _cards("As Kh")
        assert state.board == []
        assert state.street == Street.PREFLOP
        assert not state.is_locked

    def test_to_scenario(self):
        scenario = OverlayGameState().to_scenario()
        assert scenario.position == Position.BTN
        assert scenario.hole_cards == tuple(_cards("As Kh"))
        assert scenario.is_preflop


class TestStartAndRefresh:
    def test_start_shows_status_and_recommendation(self):
        status = SourceStatus(SourceKind.BUILTIN, True)
        presenter, view = _make_presenter(status=status)

        presenter.start()

        view.show_status.assert_called_once_with(
            {"type": "builtin", "initialized": True, "path": None},
        )
        view.show_game_state.assert_called_once_with(presenter.state)
        rec, rows = view.show_recommendation.call_args[0]
        assert rec.action == "RAISE 3x"
        assert rows == [("Raise", 68), ("Call", 22), ("Fold", 10)]
        assert presenter.last_recommendation is rec

    def test_start_without_status(self):
        presenter, view = _make_presenter()
        presenter.start()
        view.show_status.assert_not_called()
        view.show_recommendation.assert_called_once()

    def test_refresh_uses_provider(self):
        provider = MagicMock()
        provider.recommend.return_value = Recommendation("CHECK", {"check": 100})
        presenter, view = _make_presenter(provider=provider)

        presenter.refresh()

        scenario = provider.recommend.call_args[0][0]
        assert scenario.position == Position.BTN
        view.show_recommendation.assert_called_once_with(
            provider.recommend.return_value, [("Check", 100)],
        )


class TestStateEdits:
    def test_update_hole_cards(self):
        presenter, view = _make_presenter()
        presenter.update_position("UTG")
        presenter.update_hole_cards(*_cards("Jh Js"))
        rec = _last_rec(view)
        assert rec.frequencies == {"raise": 95, "call": 5, "fold": 0}

    def test_update_board_sets_street(self):
        presenter, view = _make_presenter()
        for board, street in [
            ("Kd 8s 2h", Street.FLOP),
            ("Kd 8s 2h 3c", Street.TURN),
            ("Kd 8s 2h 3c 4d", Street.RIVER),
            ("", Street.PREFLOP),
        ]:
            presenter.update_board(_cards(board))
            assert presenter.state.street == street

    def test_update_board_postflop_recommendation(self):
        presenter, view = _make_presenter()
        presenter.update_hole_cards(*_cards("Ah 7c"))
        presenter.update_board(_cards("Kd 8s 2h"))
        assert _last_rec(view).action == "BET 75%"

    def test_update_board_rejects_bad_size(self):
        presenter, view = _make_presenter()
        presenter.update_board(_cards("Kd 8s"))
        view.show_error.assert_called_once()
        assert presenter.state.board == []
        view.show_recommendation.assert_not_called()

    def test_update_position_unknown_degrades(self):
        presenter, view = _make_presenter()
        presenter.update_position("hj")
        assert presenter.state.position == "hj"
        assert _last_rec(view).action == "FOLD"

    def test_update_position_case_insensitive(self):
        presenter, view = _make_presenter()
        presenter.update_position(" co ")
        assert presenter.state.position == Position.CO

    def test_update_stack(self):
        presenter, view = _make_presenter()
        presenter.update_stack(35)
        assert presenter.state.stack_bb == 35
        view.show_game_state.assert_called_once()


class TestManualInput:
    def test_manual_input_updates_everything(self):
        presenter, view = _make_presenter()
        presenter.on_manual_input("A♥9♠", "CO", "60")
        assert presenter.state.hole_cards == _cards("Ah 9s")
        assert presenter.state.position == Position.CO
        assert presenter.state.stack_bb == 60
        assert _last_rec(view).action == "RAISE 2.5x"

    def test_short_card_input_keeps_cards(self):
        presenter, view = _make_presenter()
        presenter.on_manual_input("", "MP", "100")
        assert presenter.state.hole_cards == _cards("As Kh")
        assert _last_rec(view).frequencies == {"raise": 80, "call": 15, "fold": 5}

    def test_bad_stack_falls_back(self):
        presenter, view = _make_presenter()
        presenter.on_manual_input("AsKh", "BTN", "lots")
        assert presenter.state.stack_bb == 100

    def test_bad_cards_show_error(self):
        presenter, view = _make_presenter()
        presenter.on_manual_input("AxKh", "BTN", "100")
        view.show_error.assert_called_once()
        view.show_recommendation.assert_not_called()

    def test_board_input(self):
        presenter, view = _make_presenter()
        presenter.on_board_input("qd 8s 2h")
        assert presenter.state.street == Street.FLOP
        assert presenter.state.board == _cards("Qd 8s 2h")

    def test_board_input_parse_error(self):
        presenter, view = _make_presenter()
        presenter.on_board_input("Qd 8")
        view.show_error.assert_called_once()


class TestLock:
    def test_toggle_lock(self):
        presenter, view = _make_presenter()
        assert presenter.toggle_lock() is True
        view.set_click_through.assert_called_with(True)
        assert presenter.toggle_lock() is False
        view.set_click_through.assert_called_with(False)
