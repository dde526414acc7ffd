"""One-shot command line hint lookup.

Usage:
    python -m poker_overlay.interface.hint_cli --position BTN --cards AsKh
    python -m poker_overlay.interface.hint_cli -p CO -c "Ah 9s" -b "Kd 7c 2h"

Example output:
    ══════════════════════════════════════════
      HINT: RAISE 3x
    ══════════════════════════════════════════
      Hand:       As Kh
      Position:   BTN
      Street:     PREFLOP
      Raise:      68%
      Call:       22%
      Fold:       10%

      GTO optimal play
      (source=builtin, match=exact, confidence=85%)
    ══════════════════════════════════════════
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from poker_overlay.config import load_overlay_config
from poker_overlay.errors import CardParseError, RangeTableError
from poker_overlay.gui.presenter import frequency_rows
from poker_overlay.hints.data_structures import Recommendation, Scenario
from poker_overlay.hints.hand_keys import street_for_board
from poker_overlay.hints.range_table import RangeTable
from poker_overlay.hints.sources import initialize, select_provider
from poker_overlay.utils.card import parse_cards
from poker_overlay.utils.constants import Position

EXIT_BAD_INPUT = 2

_RULE = "═" * 42


def _parse_position(s: str) -> Position | str:
    """Parse position string, case-insensitive. Unknown names pass through."""
    try:
        return Position(s.strip().upper())
    except ValueError:
        return s


def format_recommendation(scenario: Scenario, rec: Recommendation) -> str:
    lines = [
        _RULE,
        f"  HINT: {rec.action}",
        _RULE,
        f"  Hand:       {' '.join(str(c) for c in scenario.hole_cards)}",
    ]
    if scenario.board:
        lines.append(f"  Board:      {' '.join(str(c) for c in scenario.board)}")
    lines.append(f"  Position:   {scenario.position}")
    lines.append(f"  Street:     {scenario.street}")
    for label, pct in frequency_rows(rec):
        lines.append(f"  {label + ':':<11} {pct}%")
    lines.append("")
    if rec.reasoning:
        lines.append(f"  {rec.reasoning}")
    lines.append(
        f"  (source={rec.source}, match={rec.match}, "
        f"confidence={rec.confidence:.0%})"
    )
    lines.append(_RULE)
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Look up a poker hint")
    parser.add_argument("-p", "--position", required=True, help="UTG/MP/CO/BTN/SB/BB")
    parser.add_argument("-c", "--cards", required=True, help="Hole cards, e.g. AsKh")
    parser.add_argument("-b", "--board", default="", help="Board cards, e.g. 'Ah Kd 2c'")
    parser.add_argument("-s", "--stack", type=int, default=None, help="Stack in bb")
    parser.add_argument("--config", type=Path, default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_overlay_config(args.config)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        hole_cards = parse_cards(args.cards)
        board = parse_cards(args.board)
    except CardParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    if len(hole_cards) != 2:
        print(f"Error: need exactly 2 hole cards, got {len(hole_cards)}", file=sys.stderr)
        return EXIT_BAD_INPUT
    if street_for_board(len(board)) is None:
        print(f"Error: board must have 0, 3, 4 or 5 cards, got {len(board)}", file=sys.stderr)
        return EXIT_BAD_INPUT

    try:
        table = RangeTable.load(config.range_file) if config.range_file else None
    except RangeTableError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    provider = select_provider(initialize(config), table)
    scenario = Scenario(
        position=_parse_position(args.position),
        hole_cards=tuple(hole_cards),
        board=tuple(board),
        stack_bb=args.stack or config.default_stack_bb,
    )
    print(format_recommendation(scenario, provider.recommend(scenario)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
