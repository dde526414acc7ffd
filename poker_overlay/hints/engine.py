"""BuiltinHintEngine: range-table lookup for overlay hints.

Preflop: exact hand key → hand category → position default, with a
table-level catch-all for unrecognized positions.
Postflop: rank-presence heuristic mapped onto fixed strength buckets.

Includes structured logging for decision transparency and a resilience
wrapper that returns the table catch-all on unexpected errors, so
recommend() never raises.
"""

from __future__ import annotations

import logging
import time

from poker_overlay.hints.data_structures import (
    MatchLevel,
    Recommendation,
    Scenario,
    SourceKind,
)
from poker_overlay.hints.hand_keys import hand_category, hand_key
from poker_overlay.hints.postflop import bucket_for_strength, hand_strength
from poker_overlay.hints.range_table import RangeTable
from poker_overlay.utils.card import Card

logger = logging.getLogger("poker_overlay.hints")


class BuiltinHintEngine:
    """Range-table hint provider.

    Implements HintProvider. Holds only the read-only table, so one
    instance can serve any number of callers.

    Usage:
        engine = BuiltinHintEngine()
        rec = engine.recommend(scenario)
    """

    def __init__(self, table: RangeTable | None = None) -> None:
        self._table = table or RangeTable.builtin()

    @property
    def kind(self) -> SourceKind:
        return SourceKind.BUILTIN

    @property
    def table(self) -> RangeTable:
        return self._table

    def recommend(
        self,
        scenario: Scenario,
        source: SourceKind = SourceKind.BUILTIN,
    ) -> Recommendation:
        """Look up the recommendation for a scenario.

        Args:
            scenario: Position, cards and board to look up.
            source: Data source to stamp on the result. Pass-through
                providers set this to their own kind.

        Returns:
            Recommendation. Never raises: malformed input degrades to the
            least specific applicable default.
        """
        t_start = time.perf_counter()

        try:
            if scenario.is_preflop:
                result = self._recommend_preflop(scenario, source)
            else:
                result = self._recommend_postflop(scenario, source)
        except Exception:
            logger.exception(
                "Hint lookup failed for %r, returning table default", scenario,
            )
            return Recommendation.from_entry(
                self._table.table_default, source, MatchLevel.FALLBACK,
            )

        logger.debug(
            "%s %s → %s (match=%s, source=%s, %.2fms)",
            scenario.street,
            scenario.position,
            result.action,
            result.match,
            result.source,
            (time.perf_counter() - t_start) * 1000,
        )
        return result

    def _recommend_preflop(
        self, scenario: Scenario, source: SourceKind,
    ) -> Recommendation:
        table = self._table
        position = scenario.position

        if not table.has_position(position):
            logger.debug("Unrecognized position %r, using table default", position)
            return Recommendation.from_entry(
                table.table_default, source, MatchLevel.TABLE_DEFAULT,
            )

        cards = scenario.hole_cards
        if len(cards) != 2 or not all(isinstance(c, Card) for c in cards):
            logger.debug("Malformed hole cards %r, using position default", cards)
            return Recommendation.from_entry(
                table.position_default(position), source,
                MatchLevel.POSITION_DEFAULT,
            )

        entry = table.get(position, hand_key(cards[0], cards[1]))
        if entry is not None:
            return Recommendation.from_entry(entry, source, MatchLevel.EXACT)

        entry = table.get(position, hand_category(cards[0], cards[1]))
        if entry is not None:
            return Recommendation.from_entry(entry, source, MatchLevel.CATEGORY)

        return Recommendation.from_entry(
            table.position_default(position), source, MatchLevel.POSITION_DEFAULT,
        )

    def _recommend_postflop(
        self, scenario: Scenario, source: SourceKind,
    ) -> Recommendation:
        cards = [
            c for c in (*scenario.hole_cards, *scenario.board)
            if isinstance(c, Card)
        ]
        strength = hand_strength(cards, [])
        bucket = bucket_for_strength(strength, self._table.postflop_buckets)
        logger.debug(
            "Postflop strength %.2f → bucket > %.2f", strength, bucket.min_strength,
        )
        return Recommendation.from_entry(
            bucket.entry, source, MatchLevel.POSTFLOP_BUCKET,
        )
