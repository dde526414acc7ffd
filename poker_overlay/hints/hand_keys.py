"""Hand key and hand category derivation.

Hand key: exact two-card encoding, strongest card first ("AsKh").
Hand category: coarse class used when the exact key is missing
("AKo", "AJs", "JJ").
"""

from __future__ import annotations

from poker_overlay.utils.card import Card
from poker_overlay.utils.constants import RANK_ORDER, STREET_BY_BOARD_SIZE, Street


def hand_key(card1: Card, card2: Card) -> str:
    """Canonical exact key for two hole cards.

    Order-independent: (K♥, A♠) and (A♠, K♥) both give 'AsKh'.
    Pairs put suits in s/h/d/c order ('AsAh').
    """
    hi, lo = sorted((card1, card2), reverse=True)
    return f"{hi}{lo}"


def hand_category(card1: Card, card2: Card) -> str:
    """Category key: 'JJ' for pairs, else ranks by RANK_ORDER plus s/o.

    >>> hand_category(Card.from_str("Js"), Card.from_str("Ah"))
    'AJo'
    """
    r1, r2 = card1.rank.value, card2.rank.value
    if r1 == r2:
        return r1 + r2
    hi, lo = sorted((r1, r2), key=RANK_ORDER.index)
    suffix = "s" if card1.suit == card2.suit else "o"
    return f"{hi}{lo}{suffix}"


def street_for_board(board_size: int) -> Street | None:
    """Street for a board of this size, or None if the size is not legal."""
    return STREET_BY_BOARD_SIZE.get(board_size)
