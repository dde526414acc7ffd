"""Entry point for the hint overlay.

Usage:
    python -m poker_overlay.gui.main [--config PATH]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from PySide6.QtCore import Qt
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import QApplication

from poker_overlay.config import load_overlay_config
from poker_overlay.core.game_state import OverlayGameState
from poker_overlay.errors import RangeTableError
from poker_overlay.gui.overlay_window import OverlayWindow
from poker_overlay.gui.presenter import OverlayPresenter
from poker_overlay.gui.styles import OVERLAY_STYLESHEET
from poker_overlay.hints.range_table import RangeTable
from poker_overlay.hints.sources import initialize, select_provider

logger = logging.getLogger("poker_overlay.gui")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Poker hint overlay")
    parser.add_argument("--config", type=Path, default=None)
    args = parser.parse_args(argv)

    config = load_overlay_config(args.config)
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # A broken range file is fatal at startup, never at lookup time.
    try:
        table = RangeTable.load(config.range_file) if config.range_file else None
    except RangeTableError as e:
        logger.error("%s", e)
        sys.exit(1)

    status = initialize(config)
    provider = select_provider(status, table)

    app = QApplication(sys.argv)
    app.setApplicationName("Poker Overlay")
    app.setStyleSheet(OVERLAY_STYLESHEET)

    window = OverlayWindow(config.window)
    presenter = OverlayPresenter(
        view=window,
        provider=provider,
        status=status,
        state=OverlayGameState(stack_bb=config.default_stack_bb),
    )

    # Wire UI signals to presenter
    window.lock_toggled.connect(presenter.toggle_lock)
    window.minimize_requested.connect(window.showMinimized)
    window.close_requested.connect(window.close)
    window.manual_input_submitted.connect(presenter.on_manual_input)
    window.board_submitted.connect(presenter.on_board_input)

    # Shortcuts work while click-through is on
    for keys, slot in (("Ctrl+L", presenter.toggle_lock), ("Ctrl+M", window.showMinimized)):
        shortcut = QShortcut(QKeySequence(keys), window)
        shortcut.setContext(Qt.ApplicationShortcut)
        shortcut.activated.connect(slot)

    presenter.start()
    window.show()
    window.dock_right()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
