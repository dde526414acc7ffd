"""Game state shown by the overlay."""

from __future__ import annotations

from dataclasses import dataclass, field

from poker_overlay.hints.data_structures import Scenario
from poker_overlay.utils.card import Card
from poker_overlay.utils.constants import (
    DEFAULT_STACK_BB,
    Position,
    Rank,
    Street,
    Suit,
)


def _starting_hand() -> list[Card]:
    return [Card(Rank.ACE, Suit.SPADES), Card(Rank.KING, Suit.HEARTS)]


@dataclass
class OverlayGameState:
    """Mutable record edited by the user and rendered by the overlay."""

    position: Position | str = Position.BTN
    stack_bb: int = DEFAULT_STACK_BB
    hole_cards: list[Card] = field(default_factory=_starting_hand)
    board: list[Card] = field(default_factory=list)
    street: Street = Street.PREFLOP
    is_locked: bool = False

    def to_scenario(self) -> Scenario:
        """Snapshot the current state as a recommendation request."""
        return Scenario(
            position=self.position,
            hole_cards=tuple(self.hole_cards),
            board=tuple(self.board),
            street=self.street,
            stack_bb=self.stack_bb,
        )
