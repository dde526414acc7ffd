"""Card value type and card-string parsing."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

from poker_overlay.errors import CardParseError
from poker_overlay.utils.constants import (
    RANK_ORDER,
    SUIT_ORDER,
    SUIT_SYMBOLS,
    SYMBOL_SUITS,
    Rank,
    Suit,
)


@total_ordering
@dataclass(frozen=True)
class Card:
    """Represents a single playing card."""

    rank: Rank
    suit: Suit

    @classmethod
    def from_str(cls, s: str) -> Card:
        """Create a Card from a 2-character string like 'Ah' or 'T♦'.

        The suit may be a letter (s, h, d, c) or a suit symbol.

        Raises:
            CardParseError: If the string is not exactly 2 characters or
                contains invalid rank/suit characters.
        """
        if len(s) != 2:
            raise CardParseError(f"Card string must be 2 characters, got '{s}'")
        try:
            rank = Rank(s[0])
        except ValueError:
            raise CardParseError(f"Invalid rank character: '{s[0]}'") from None
        suit_char = s[1]
        if suit_char in SYMBOL_SUITS:
            return cls(rank=rank, suit=SYMBOL_SUITS[suit_char])
        try:
            suit = Suit(suit_char)
        except ValueError:
            raise CardParseError(f"Invalid suit character: '{suit_char}'") from None
        return cls(rank=rank, suit=suit)

    @property
    def strength(self) -> int:
        """0 for an ace, 12 for a deuce."""
        return RANK_ORDER.index(self.rank.value)

    @property
    def sort_key(self) -> tuple[int, int]:
        """Strongest rank first, suits in s/h/d/c order."""
        return self.strength, SUIT_ORDER.index(self.suit.value)

    @property
    def symbol(self) -> str:
        """Display form with a suit symbol, e.g. 'A♠'."""
        return f"{self.rank.value}{SUIT_SYMBOLS[self.suit]}"

    def __str__(self) -> str:
        return f"{self.rank.value}{self.suit.value}"

    def __repr__(self) -> str:
        return f"Card('{self}')"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        # Weaker rank sorts first; suits break ties so only equal cards tie.
        return self.sort_key > other.sort_key


def parse_cards(s: str) -> list[Card]:
    """Parse 'AsKh', 'As Kh' or 'A♠K♥' into a list of cards.

    Ranks are upper-cased and suit letters lower-cased first, so 'askh'
    parses too. Commas are treated as separators.

    Raises:
        CardParseError: On odd-length input or invalid characters.
    """
    s = s.replace(",", " ").strip()
    if not s:
        return []
    if " " in s:
        return [_parse_loose(c) for c in s.split()]
    if len(s) % 2 != 0:
        raise CardParseError(f"Invalid card string: '{s}' (odd length)")
    return [_parse_loose(s[i:i + 2]) for i in range(0, len(s), 2)]


def _parse_loose(s: str) -> Card:
    if len(s) != 2:
        raise CardParseError(f"Card string must be 2 characters, got '{s}'")
    return Card.from_str(s[0].upper() + s[1].lower())


def format_card_input(text: str, max_cards: int = 2) -> str:
    """Normalize free-typed card text for display.

    Strips everything that is not a rank or suit, pairs the remaining
    characters into cards, and renders suits as symbols:

    >>> format_card_input("askh")
    'A♠K♥'
    >>> format_card_input("a s k h q d")
    'A♠K♥'
    >>> format_card_input("A♠k")
    'A♠K'

    Suit symbols are read back as letters, so formatting already
    formatted text is a no-op. A trailing unpaired character is kept
    while typing and dropped once the card limit is reached. Pairs with an
    unknown suit are kept verbatim so the user can see what they typed.
    """
    text = "".join(SYMBOL_SUITS[c].value if c in SYMBOL_SUITS else c for c in text)
    allowed = set(RANK_ORDER) | {c.upper() for c in SUIT_ORDER}
    value = "".join(c for c in text.upper() if c in allowed)

    symbols = {s.value.upper(): sym for s, sym in SUIT_SYMBOLS.items()}
    formatted: list[str] = []
    for i in range(0, len(value), 2):
        pair = value[i:i + 2]
        formatted.append(pair[0] + symbols.get(pair[1:], pair[1:]))
    return "".join(formatted[:max_cards])
