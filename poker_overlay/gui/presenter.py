"""Framework-agnostic presenter for the overlay.

OverlayPresenter owns the OverlayGameState, asks the hint provider for a
recommendation after every change, and pushes the result to the view.
It has NO Qt/PySide6 imports.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from poker_overlay.core.game_state import OverlayGameState
from poker_overlay.errors import CardParseError
from poker_overlay.hints.data_structures import HintProvider, Recommendation
from poker_overlay.hints.hand_keys import street_for_board
from poker_overlay.hints.sources import get_status
from poker_overlay.utils.card import Card, parse_cards
from poker_overlay.utils.constants import DEFAULT_STACK_BB, Position

if TYPE_CHECKING:
    from poker_overlay.gui.view_protocol import OverlayView
    from poker_overlay.hints.data_structures import SourceStatus

logger = logging.getLogger("poker_overlay.gui")


def frequency_rows(recommendation: Recommendation) -> list[tuple[str, int]]:
    """Display rows for the frequency breakdown.

    Zero frequencies are omitted and kinds are capitalized:
    {"raise": 68, "call": 22, "fold": 0} → [("Raise", 68), ("Call", 22)].
    """
    return [
        (kind.capitalize(), freq)
        for kind, freq in recommendation.frequencies.items()
        if freq > 0
    ]


def parse_stack(text: str, default: int = DEFAULT_STACK_BB) -> int:
    """Parse a stack entry in big blinds; anything unusable gives the default."""
    try:
        value = int(text.strip().lower().removesuffix("bb"))
    except ValueError:
        return default
    return value if value > 0 else default


class OverlayPresenter:
    """Coordinates state edits, hint lookups and rendering.

    Framework-agnostic: depends only on the OverlayView Protocol and a
    HintProvider.
    """

    def __init__(
        self,
        view: OverlayView,
        provider: HintProvider,
        status: SourceStatus | None = None,
        state: OverlayGameState | None = None,
    ) -> None:
        self._view = view
        self._provider = provider
        self._status = status
        self._state = state or OverlayGameState()
        self._last: Recommendation | None = None

    @property
    def state(self) -> OverlayGameState:
        return self._state

    @property
    def last_recommendation(self) -> Recommendation | None:
        return self._last

    def start(self) -> None:
        """Initial render: status line, state and recommendation."""
        if self._status is not None:
            self._view.show_status(get_status(self._status))
        self.refresh()

    def refresh(self) -> None:
        """Re-render the game state and look up a fresh recommendation."""
        self._view.show_game_state(self._state)
        rec = self._provider.recommend(self._state.to_scenario())
        self._last = rec
        self._view.show_recommendation(rec, frequency_rows(rec))

    # --- State edits ---

    def update_hole_cards(self, card1: Card, card2: Card) -> None:
        self._state.hole_cards = [card1, card2]
        self.refresh()

    def update_board(self, cards: list[Card]) -> None:
        """Replace the board; the street follows from its size."""
        street = street_for_board(len(cards))
        if street is None:
            self._view.show_error(
                f"Board must have 0, 3, 4 or 5 cards, got {len(cards)}."
            )
            return
        self._state.board = list(cards)
        self._state.street = street
        self.refresh()

    def update_position(self, position: str) -> None:
        try:
            self._state.position = Position(position.strip().upper())
        except ValueError:
            logger.debug("Unrecognized position %r", position)
            self._state.position = position
        self.refresh()

    def update_stack(self, stack_bb: int) -> None:
        self._state.stack_bb = stack_bb
        self.refresh()

    def on_manual_input(self, cards_text: str, position: str, stack_text: str) -> None:
        """Handle the manual input form.

        Cards are only replaced when at least two cards were typed; a
        stack that does not parse falls back to 100bb.
        """
        try:
            cards = parse_cards(cards_text)
        except CardParseError as e:
            self._view.show_error(str(e))
            return

        if len(cards) >= 2:
            self._state.hole_cards = cards[:2]
        self._state.stack_bb = parse_stack(stack_text)
        self.update_position(position)

    def on_board_input(self, board_text: str) -> None:
        try:
            cards = parse_cards(board_text)
        except CardParseError as e:
            self._view.show_error(str(e))
            return
        self.update_board(cards)

    def toggle_lock(self) -> bool:
        """Flip click-through. Returns the new locked state."""
        self._state.is_locked = not self._state.is_locked
        self._view.set_click_through(self._state.is_locked)
        return self._state.is_locked
