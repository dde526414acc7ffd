"""Range-table hint engine for the overlay.

Maps a position, hole cards and board to an action label with a
mixed-strategy frequency breakdown. Preflop uses a static lookup with
exact → category → default fallback; postflop uses a rank-presence
heuristic. Not a solver.

Key public API:
    HintProvider      -- Interface for swappable hint sources
    BuiltinHintEngine -- Range-table implementation
    RangeTable        -- Validated (position, hand key) lookup table
    initialize        -- One-time data-source selection
    select_provider   -- Build the provider for a SourceStatus
"""

from poker_overlay.hints.data_structures import (
    HintProvider,
    MatchLevel,
    Recommendation,
    Scenario,
    SourceKind,
    SourceStatus,
)
from poker_overlay.hints.engine import BuiltinHintEngine
from poker_overlay.hints.range_table import RangeTable
from poker_overlay.hints.sources import get_status, initialize, select_provider

__all__ = [
    "HintProvider",
    "MatchLevel",
    "Recommendation",
    "Scenario",
    "SourceKind",
    "SourceStatus",
    "BuiltinHintEngine",
    "RangeTable",
    "get_status",
    "initialize",
    "select_provider",
]
