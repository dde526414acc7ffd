"""Core data structures for the hint engine.

Scenario: One recommendation request (position, cards, board, stack).
RangeEntry: What a range table stores for a single hand key.
Recommendation: Engine output with frequencies, source and match level.
SourceKind / SourceStatus: Which data source answers requests.
HintProvider: Interface that any data source must implement.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Mapping, Protocol, runtime_checkable

from poker_overlay.utils.card import Card
from poker_overlay.utils.constants import (
    DEFAULT_STACK_BB,
    STREET_BY_BOARD_SIZE,
    Position,
    Street,
)

# Confidence attached to every table-backed recommendation.
DEFAULT_CONFIDENCE = 0.85

DEFAULT_REASONING = "GTO optimal play"


class SourceKind(StrEnum):
    BUILTIN = "builtin"
    TEXASSOLVER = "texassolver"
    WASM = "wasm"


class MatchLevel(StrEnum):
    """Which lookup step produced a recommendation."""

    EXACT = "exact"
    CATEGORY = "category"
    POSITION_DEFAULT = "position_default"
    TABLE_DEFAULT = "table_default"
    POSTFLOP_BUCKET = "postflop_bucket"
    FALLBACK = "fallback"


def _freeze(frequencies: Mapping[str, int]) -> Mapping[str, int]:
    return MappingProxyType(dict(frequencies))


@dataclass(frozen=True)
class Scenario:
    """A single recommendation request.

    Attributes:
        position: Hero's seat. Anything that is not a Position member is
            treated as an unrecognized position.
        hole_cards: Hero's two hole cards.
        board: Community cards (0, 3, 4 or 5).
        street: Betting round. Derived from the board size when omitted.
        stack_bb: Stack in big blinds. Accepted but not used by the lookup.
    """

    position: Position | str
    hole_cards: tuple[Card, ...]
    board: tuple[Card, ...] = ()
    street: Street | None = None
    stack_bb: int = DEFAULT_STACK_BB

    def __post_init__(self) -> None:
        # Accept lists from callers but keep the value hashable.
        object.__setattr__(self, "hole_cards", tuple(self.hole_cards))
        object.__setattr__(self, "board", tuple(self.board))
        if self.street is None:
            object.__setattr__(
                self, "street", STREET_BY_BOARD_SIZE.get(len(self.board)),
            )

    @classmethod
    def from_strings(
        cls,
        position: str,
        hole_cards: list[str],
        board: list[str] | None = None,
        stack_bb: int = DEFAULT_STACK_BB,
    ) -> Scenario:
        """Build a Scenario from card strings like ['As', 'Kh'].

        Raises:
            CardParseError: If any card string is malformed.
        """
        pos: Position | str
        try:
            pos = Position(position.strip().upper())
        except ValueError:
            pos = position
        return cls(
            position=pos,
            hole_cards=tuple(Card.from_str(c) for c in hole_cards),
            board=tuple(Card.from_str(c) for c in board or []),
            stack_bb=stack_bb,
        )

    @property
    def is_preflop(self) -> bool:
        return self.street == Street.PREFLOP


@dataclass(frozen=True)
class RangeEntry:
    """A stored recommendation for one hand key.

    Frequencies are integer percentages keyed by action kind
    ("raise", "call", "fold" preflop; "bet", "check", "fold" postflop).
    """

    action: str
    frequencies: Mapping[str, int]
    reasoning: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "frequencies", _freeze(self.frequencies))

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> RangeEntry:
        """Build from {"action": ..., "frequencies": {...}, "reasoning": ...}."""
        return cls(
            action=str(data["action"]),
            frequencies=dict(data["frequencies"]),  # type: ignore[arg-type]
            reasoning=data.get("reasoning"),  # type: ignore[arg-type]
        )


@dataclass(frozen=True)
class Recommendation:
    """Complete output for a recommendation request.

    Attributes:
        action: Human-readable label, e.g. "RAISE 3x".
        frequencies: Action kind → percentage in [0, 100].
        reasoning: Short rationale shown under the action.
        confidence: Fixed confidence for table-backed results [0.0, 1.0].
        source: Data source that answered the request.
        match: Lookup step that produced the entry.
    """

    action: str
    frequencies: Mapping[str, int]
    reasoning: str | None = None
    confidence: float = DEFAULT_CONFIDENCE
    source: SourceKind = SourceKind.BUILTIN
    match: MatchLevel = MatchLevel.EXACT

    def __post_init__(self) -> None:
        object.__setattr__(self, "frequencies", _freeze(self.frequencies))

    @classmethod
    def from_entry(
        cls,
        entry: RangeEntry,
        source: SourceKind,
        match: MatchLevel,
        confidence: float = DEFAULT_CONFIDENCE,
    ) -> Recommendation:
        return cls(
            action=entry.action,
            frequencies=entry.frequencies,
            reasoning=entry.reasoning or DEFAULT_REASONING,
            confidence=confidence,
            source=source,
            match=match,
        )

    @property
    def total(self) -> int:
        """Sum of all frequencies. Authored data does not always reach 100."""
        return sum(self.frequencies.values())

    @property
    def primary_kind(self) -> str | None:
        """The highest-frequency action kind."""
        if not self.frequencies:
            return None
        return max(self.frequencies, key=lambda k: self.frequencies[k])

    def with_source(self, source: SourceKind) -> Recommendation:
        """Return a copy stamped with a different data source."""
        return Recommendation(
            action=self.action,
            frequencies=self.frequencies,
            reasoning=self.reasoning,
            confidence=self.confidence,
            source=source,
            match=self.match,
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "action": self.action,
            "frequencies": dict(self.frequencies),
            "reasoning": self.reasoning,
            "confidence": self.confidence,
            "source": self.source.value,
            "match": self.match.value,
        }


@dataclass(frozen=True)
class SourceStatus:
    """Result of data-source initialization.

    Owned by the caller and passed to select_provider(); there is no
    process-wide source flag.
    """

    kind: SourceKind = SourceKind.BUILTIN
    initialized: bool = False
    tool_path: str | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "type": self.kind.value,
            "initialized": self.initialized,
            "path": self.tool_path,
        }


@runtime_checkable
class HintProvider(Protocol):
    """Interface that any data source must implement.

    Implementations include the BuiltinHintEngine (range table lookup)
    and the pass-through variants for external tools.

    Usage:
        def render(provider: HintProvider, scenario: Scenario):
            rec = provider.recommend(scenario)
    """

    @property
    def kind(self) -> SourceKind: ...

    def recommend(self, scenario: Scenario) -> Recommendation: ...
