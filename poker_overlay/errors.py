"""Exception types for the poker overlay."""


class PokerOverlayError(Exception):
    """Base class for all poker overlay errors."""


class RangeTableError(PokerOverlayError):
    """Raised when a range table violates its integrity rules.

    Always raised at construction or load time, never while answering a
    recommendation request.
    """


class CardParseError(PokerOverlayError, ValueError):
    """Raised when a card string cannot be parsed."""
