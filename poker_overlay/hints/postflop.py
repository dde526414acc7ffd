"""Postflop placeholder heuristic.

This is not a hand evaluator. Strength only looks at whether an ace,
king or queen appears among the hole and board cards, ignoring suits,
made hands, draws and board texture.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from poker_overlay.errors import RangeTableError
from poker_overlay.hints.data_structures import RangeEntry
from poker_overlay.utils.card import Card
from poker_overlay.utils.constants import Rank

STRENGTH_ACE_KING = 0.9
STRENGTH_ACE_OR_KING = 0.7
STRENGTH_QUEEN = 0.5
STRENGTH_BASELINE = 0.3


def hand_strength(hole_cards: Iterable[Card], board: Iterable[Card]) -> float:
    """Crude strength in (0, 1] from rank presence across all known cards."""
    ranks = {c.rank for c in [*hole_cards, *board]}
    has_ace = Rank.ACE in ranks
    has_king = Rank.KING in ranks

    if has_ace and has_king:
        return STRENGTH_ACE_KING
    if has_ace or has_king:
        return STRENGTH_ACE_OR_KING
    if Rank.QUEEN in ranks:
        return STRENGTH_QUEEN
    return STRENGTH_BASELINE


@dataclass(frozen=True)
class PostflopBucket:
    """A strength band. Applies when strength > min_strength."""

    min_strength: float
    entry: RangeEntry


DEFAULT_POSTFLOP_BUCKETS: tuple[PostflopBucket, ...] = (
    PostflopBucket(0.8, RangeEntry(
        "BET 75%", {"bet": 85, "check": 15, "fold": 0},
        "Strong hand - bet for value",
    )),
    PostflopBucket(0.6, RangeEntry(
        "BET 50%", {"bet": 60, "check": 40, "fold": 0},
        "Medium strength - mixed strategy",
    )),
    PostflopBucket(0.3, RangeEntry(
        "CHECK", {"bet": 20, "check": 70, "fold": 10},
        "Marginal hand - mostly check",
    )),
    PostflopBucket(0.0, RangeEntry(
        "CHECK/FOLD", {"bet": 5, "check": 30, "fold": 65},
        "Weak hand - check/fold",
    )),
)


def validate_buckets(buckets: Iterable[PostflopBucket]) -> tuple[PostflopBucket, ...]:
    """Sort buckets strongest first and check that every strength is covered.

    Raises:
        RangeTableError: If the list is empty or the weakest bucket does
            not start at 0.0.
    """
    ordered = tuple(sorted(buckets, key=lambda b: b.min_strength, reverse=True))
    if not ordered:
        raise RangeTableError("Postflop bucket list is empty")
    if ordered[-1].min_strength > 0.0:
        raise RangeTableError(
            f"Weakest postflop bucket starts at {ordered[-1].min_strength}, "
            "must start at 0.0"
        )
    return ordered


def buckets_from_list(data: list[Mapping[str, object]]) -> tuple[PostflopBucket, ...]:
    """Parse [{"min_strength": 0.8, "action": ..., "frequencies": ...}, ...]."""
    try:
        buckets = [
            PostflopBucket(float(item["min_strength"]), RangeEntry.from_dict(item))
            for item in data
        ]
    except (KeyError, TypeError, ValueError) as e:
        raise RangeTableError(f"Invalid postflop bucket: {e}") from e
    return validate_buckets(buckets)


def bucket_for_strength(
    strength: float,
    buckets: tuple[PostflopBucket, ...] = DEFAULT_POSTFLOP_BUCKETS,
) -> PostflopBucket:
    """First bucket (strongest first) whose lower bound is strictly below strength.

    Strength exactly on a threshold falls into the weaker bucket: 0.8 is
    "BET 50%", not "BET 75%". Strengths at or below the weakest bound
    still map to the weakest bucket.
    """
    for bucket in buckets:
        if strength > bucket.min_strength:
            return bucket
    return buckets[-1]
