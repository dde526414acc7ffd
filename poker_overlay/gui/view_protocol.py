"""Abstract view interface for the overlay.

The OverlayView Protocol defines the contract between the
OverlayPresenter and any concrete UI framework. The presenter depends
only on this protocol, never on framework-specific imports.
"""

from __future__ import annotations

from typing import Protocol

from poker_overlay.core.game_state import OverlayGameState
from poker_overlay.hints.data_structures import Recommendation


class OverlayView(Protocol):
    """Interface that any GUI framework must implement."""

    def show_game_state(self, state: OverlayGameState) -> None:
        """Render position, stack, hole cards, board and street."""
        ...

    def show_recommendation(
        self,
        recommendation: Recommendation,
        rows: list[tuple[str, int]],
    ) -> None:
        """Render the primary action and the non-zero frequency rows."""
        ...

    def show_status(self, status: dict[str, object]) -> None:
        """Render the data-source status line."""
        ...

    def show_error(self, message: str) -> None:
        """Display an input error."""
        ...

    def set_click_through(self, enabled: bool) -> None:
        """Let mouse events pass through the overlay when enabled."""
        ...
