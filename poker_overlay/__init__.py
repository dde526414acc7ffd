"""Poker decision hints for a transparent always-on-top overlay.

Key public API:
    Scenario          -- Input to a recommendation request
    Recommendation    -- Action label, frequencies, source and match level
    BuiltinHintEngine -- Range-table lookup engine
    initialize        -- Probe for external tools and pick a data source
"""

from poker_overlay.hints.data_structures import Recommendation, Scenario
from poker_overlay.hints.engine import BuiltinHintEngine
from poker_overlay.hints.sources import initialize

__all__ = ["Scenario", "Recommendation", "BuiltinHintEngine", "initialize"]
