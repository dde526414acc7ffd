"""Static preflop range table.

The table maps (position, hand key) to a RangeEntry. Hand keys are
either exact combos ("AsKh"), categories ("AKo", "JJ") or the reserved
key "default". Every position must carry a "default" entry, and the
table itself carries a catch-all used for unrecognized positions. Both
rules are checked when the table is built, never at lookup time.

Tables can also be loaded from JSON:

    {
        "positions": {
            "UTG": {
                "AsAh": {"action": "RAISE 3x",
                         "frequencies": {"raise": 100, "call": 0, "fold": 0}},
                "default": {"action": "FOLD",
                            "frequencies": {"raise": 0, "call": 5, "fold": 95}}
            }
        },
        "default": {"action": "FOLD", "frequencies": {...}},
        "postflop": [{"min_strength": 0.8, "action": "BET 75%", ...}]
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping

from poker_overlay.errors import CardParseError, RangeTableError
from poker_overlay.hints.data_structures import RangeEntry
from poker_overlay.hints.hand_keys import hand_key
from poker_overlay.hints.postflop import (
    DEFAULT_POSTFLOP_BUCKETS,
    PostflopBucket,
    buckets_from_list,
)
from poker_overlay.utils.card import Card
from poker_overlay.utils.constants import RANK_ORDER, Position

logger = logging.getLogger("poker_overlay.hints.range_table")

DEFAULT_KEY = "default"

RangeKey = tuple[Position, str]


def _e(action: str, raise_: int, call: int, fold: int) -> RangeEntry:
    return RangeEntry(action, {"raise": raise_, "call": call, "fold": fold})


# Built-in preflop data. Hand-tuned constants, not solver output.
_BUILTIN_RANGES: dict[Position, dict[str, RangeEntry]] = {
    Position.UTG: {
        # Premium pairs
        "AsAh": _e("RAISE 3x", 100, 0, 0),
        "AsAd": _e("RAISE 3x", 100, 0, 0),
        "AsAc": _e("RAISE 3x", 100, 0, 0),
        "KsKh": _e("RAISE 3x", 100, 0, 0),
        "QsQh": _e("RAISE 3x", 100, 0, 0),
        "JsJh": _e("RAISE 3x", 95, 5, 0),
        "TsTh": _e("RAISE 3x", 85, 15, 0),
        # Big broadway
        "AsKs": _e("RAISE 3x", 90, 10, 0),
        "AsKh": _e("RAISE 3x", 75, 20, 5),
        "AsQs": _e("RAISE 3x", 80, 15, 5),
        "AsJs": _e("RAISE 3x", 70, 25, 5),
        DEFAULT_KEY: _e("FOLD", 0, 5, 95),
    },
    Position.MP: {
        "AsKh": _e("RAISE 3x", 80, 15, 5),
        "9s9h": _e("RAISE 3x", 85, 15, 0),
        "AsTs": _e("RAISE 3x", 65, 30, 5),
        DEFAULT_KEY: _e("FOLD", 0, 10, 90),
    },
    Position.CO: {
        "AsKh": _e("RAISE 3x", 85, 10, 5),
        "7s7h": _e("RAISE 3x", 70, 25, 5),
        "Ah9s": _e("RAISE 2.5x", 60, 35, 5),
        DEFAULT_KEY: _e("FOLD", 0, 15, 85),
    },
    Position.BTN: {
        "AsKh": _e("RAISE 3x", 68, 22, 10),
        "5s5h": _e("RAISE 2.5x", 65, 30, 5),
        "Kh9s": _e("RAISE 2.5x", 45, 40, 15),
        DEFAULT_KEY: _e("FOLD", 0, 20, 80),
    },
    Position.SB: {
        "AsKh": _e("RAISE 3x", 75, 20, 5),
        DEFAULT_KEY: _e("FOLD", 0, 25, 75),
    },
    Position.BB: {
        "AsKh": _e("CALL", 25, 70, 5),
        DEFAULT_KEY: _e("CHECK/FOLD", 0, 35, 65),
    },
}

# Catch-all for positions the table does not know. Matches the tightest
# position default (UTG).
_BUILTIN_TABLE_DEFAULT = _e("FOLD", 0, 5, 95)


def _check_entry(where: str, entry: RangeEntry) -> None:
    if not entry.frequencies:
        raise RangeTableError(f"{where}: entry has no frequencies")
    for kind, value in entry.frequencies.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise RangeTableError(
                f"{where}: frequency for '{kind}' must be an integer, got {value!r}"
            )
        if not 0 <= value <= 100:
            raise RangeTableError(
                f"{where}: frequency for '{kind}' out of range [0, 100]: {value}"
            )


def _canonical_key(where: str, key: str) -> str:
    """Key the engine will actually look up for this table key.

    Exact combos are reordered strongest card first ("KhAs" -> "AsKh").
    Categories must already be canonical ("AKo", "JJ"), since "KAo"
    could never match.

    Raises:
        RangeTableError: If the key is neither "default", a two-card
            combo, nor a canonical category.
    """
    if key == DEFAULT_KEY:
        return key
    if len(key) == 4:
        try:
            first, second = Card.from_str(key[:2]), Card.from_str(key[2:])
        except CardParseError as e:
            raise RangeTableError(f"{where}: invalid hand key: {e}") from None
        if first == second:
            raise RangeTableError(f"{where}: hand key repeats a card")
        return hand_key(first, second)

    if len(key) in (2, 3) and all(r in RANK_ORDER for r in key[:2]):
        hi, lo = (RANK_ORDER.index(r) for r in key[:2])
        if len(key) == 2 and hi == lo:
            return key
        if len(key) == 3 and key[2] in "so" and hi < lo:
            return key
    raise RangeTableError(
        f"{where}: '{key}' is not a hand key; use 'default', a combo like "
        "'AsKh' or a category like 'AKo', 'AJs', 'JJ'"
    )


class RangeTable:
    """Read-only (position, hand key) → RangeEntry mapping.

    Usage:
        table = RangeTable.builtin()
        entry = table.get(Position.BTN, "AsKh")
        fallback = table.position_default(Position.BTN)
    """

    def __init__(
        self,
        ranges: Mapping[Position, Mapping[str, RangeEntry]],
        table_default: RangeEntry,
        postflop_buckets: tuple[PostflopBucket, ...] = DEFAULT_POSTFLOP_BUCKETS,
    ) -> None:
        """Build and validate the table.

        Raises:
            RangeTableError: If a position has no "default" entry, a hand
                key is malformed or duplicated, or any frequency (postflop
                buckets included) is not an integer percentage.
        """
        entries: dict[RangeKey, RangeEntry] = {}
        for position, hands in ranges.items():
            if DEFAULT_KEY not in hands:
                raise RangeTableError(
                    f"Position {position} has no '{DEFAULT_KEY}' entry"
                )
            for key, entry in hands.items():
                where = f"{position}/{key}"
                _check_entry(where, entry)
                range_key = (Position(position), _canonical_key(where, key))
                if range_key in entries:
                    raise RangeTableError(
                        f"{where}: duplicates hand key '{range_key[1]}'"
                    )
                entries[range_key] = entry
        _check_entry("table default", table_default)
        for bucket in postflop_buckets:
            _check_entry(f"postflop/>{bucket.min_strength}", bucket.entry)

        self._entries: Mapping[RangeKey, RangeEntry] = MappingProxyType(entries)
        self._positions = frozenset(Position(p) for p in ranges)
        self._table_default = table_default
        self._postflop_buckets = postflop_buckets

    @classmethod
    def builtin(cls) -> RangeTable:
        """The bundled preflop ranges and postflop buckets."""
        return cls(_BUILTIN_RANGES, _BUILTIN_TABLE_DEFAULT)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> RangeTable:
        """Build from the JSON layout described in the module docstring.

        The "default" and "postflop" sections are optional and fall back
        to the built-in catch-all and buckets.

        Raises:
            RangeTableError: On unknown positions, malformed entries, or
                a missing position default.
        """
        raw_positions = data.get("positions")
        if not isinstance(raw_positions, dict) or not raw_positions:
            raise RangeTableError("Range data needs a non-empty 'positions' object")

        ranges: dict[Position, dict[str, RangeEntry]] = {}
        try:
            for pos_name, hands in raw_positions.items():
                try:
                    position = Position(pos_name.strip().upper())
                except ValueError:
                    raise RangeTableError(f"Unknown position: '{pos_name}'") from None
                ranges[position] = {
                    key: RangeEntry.from_dict(entry) for key, entry in hands.items()
                }
            table_default = (
                RangeEntry.from_dict(data["default"])  # type: ignore[arg-type]
                if "default" in data
                else _BUILTIN_TABLE_DEFAULT
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise RangeTableError(f"Malformed range entry: {e}") from e

        buckets = DEFAULT_POSTFLOP_BUCKETS
        if "postflop" in data:
            buckets = buckets_from_list(data["postflop"])  # type: ignore[arg-type]

        return cls(ranges, table_default, buckets)

    @classmethod
    def load(cls, path: Path | str) -> RangeTable:
        """Load and validate a JSON range file.

        Raises:
            RangeTableError: If the file cannot be read or fails validation.
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            raise RangeTableError(f"Failed to read range file {path}: {e}") from e

        if not isinstance(data, dict):
            raise RangeTableError(f"Range file {path} must contain a JSON object")
        table = cls.from_dict(data)
        logger.info(
            "Range table loaded from %s: %d entries across %d positions",
            path, len(table), len(table.positions),
        )
        return table

    @property
    def positions(self) -> frozenset[Position]:
        return self._positions

    @property
    def table_default(self) -> RangeEntry:
        return self._table_default

    @property
    def postflop_buckets(self) -> tuple[PostflopBucket, ...]:
        return self._postflop_buckets

    def has_position(self, position: object) -> bool:
        return position in self._positions

    def get(self, position: Position, key: str) -> RangeEntry | None:
        return self._entries.get((position, key))

    def position_default(self, position: Position) -> RangeEntry:
        """The "default" entry of a known position.

        Raises:
            KeyError: If the position is not in the table.
        """
        return self._entries[(position, DEFAULT_KEY)]

    def keys_for(self, position: Position) -> list[str]:
        """All hand keys stored for a position, "default" included."""
        return [key for (pos, key) in self._entries if pos == position]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RangeKey]:
        return iter(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
