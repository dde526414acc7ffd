"""Constants for the poker overlay."""

from enum import StrEnum


class Suit(StrEnum):
    SPADES = "s"
    HEARTS = "h"
    DIAMONDS = "d"
    CLUBS = "c"


class Rank(StrEnum):
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "T"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"


# Strongest first. Hand categories sort their two ranks by this string.
RANK_ORDER = "AKQJT98765432"

# Tie-break for pairs inside a hand key ("AsAh", never "AhAs").
SUIT_ORDER = "shdc"

SUIT_SYMBOLS: dict[Suit, str] = {
    Suit.SPADES: "♠",
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
}

SYMBOL_SUITS: dict[str, Suit] = {v: k for k, v in SUIT_SYMBOLS.items()}


class Position(StrEnum):
    UTG = "UTG"
    MP = "MP"
    CO = "CO"
    BTN = "BTN"
    SB = "SB"
    BB = "BB"


class Street(StrEnum):
    PREFLOP = "PREFLOP"
    FLOP = "FLOP"
    TURN = "TURN"
    RIVER = "RIVER"


# Board size → street. Any other size is not a legal board.
STREET_BY_BOARD_SIZE: dict[int, Street] = {
    0: Street.PREFLOP,
    3: Street.FLOP,
    4: Street.TURN,
    5: Street.RIVER,
}

DEFAULT_STACK_BB = 100
