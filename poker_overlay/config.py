"""Overlay configuration loaded from an optional JSON file.

Default path: ~/.poker_overlay/config.json

Expected JSON format (every key optional):
    {
        "source": "auto",
        "tool_name": "texassolver",
        "probe_timeout": 2.0,
        "range_file": "~/.poker_overlay/ranges.json",
        "log_level": "INFO",
        "default_stack_bb": 100,
        "window": {"width": 400, "height": 600, "margin": 20}
    }

"source" is one of auto, builtin, texassolver, wasm. "auto" probes for
the external tool and uses it when found.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from poker_overlay.utils.constants import DEFAULT_STACK_BB

logger = logging.getLogger("poker_overlay.config")

DEFAULT_CONFIG_PATH = Path.home() / ".poker_overlay" / "config.json"

SOURCE_AUTO = "auto"
VALID_SOURCES = ("auto", "builtin", "texassolver", "wasm")
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class WindowConfig:
    """Overlay window geometry. The window docks to the right screen edge."""

    width: int = 400
    height: int = 600
    margin: int = 20


@dataclass(frozen=True)
class OverlayConfig:
    """Runtime settings for the overlay and its hint source."""

    source: str = SOURCE_AUTO
    tool_name: str = "texassolver"
    probe_timeout: float = 2.0
    range_file: Path | None = None
    log_level: str = "INFO"
    default_stack_bb: int = DEFAULT_STACK_BB
    window: WindowConfig = field(default_factory=WindowConfig)


def load_overlay_config(config_path: Path | None = None) -> OverlayConfig:
    """Load overlay configuration from JSON.

    A missing file gives the defaults. An unreadable or malformed file is
    logged and also gives the defaults, so a broken config never keeps
    the overlay from starting. Individual bad values fall back to their
    defaults with a warning.
    """
    path = config_path or DEFAULT_CONFIG_PATH
    if not path.exists():
        logger.debug("No config at %s, using defaults", path)
        return OverlayConfig()

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Failed to read overlay config at %s: %s", path, e)
        return OverlayConfig()

    if not isinstance(data, dict):
        logger.warning("Overlay config at %s is not a JSON object", path)
        return OverlayConfig()

    defaults = OverlayConfig()

    source = str(data.get("source", defaults.source)).lower()
    if source not in VALID_SOURCES:
        logger.warning(
            "Unknown source '%s' in %s, using '%s'", source, path, SOURCE_AUTO,
        )
        source = SOURCE_AUTO

    range_file = data.get("range_file")
    if range_file is not None and not isinstance(range_file, str):
        logger.warning("Config key range_file must be a path string, got %r", range_file)
        range_file = None

    log_level = str(data.get("log_level", defaults.log_level)).upper()
    if log_level not in VALID_LOG_LEVELS:
        logger.warning(
            "Unknown log_level '%s' in %s, using '%s'",
            log_level, path, defaults.log_level,
        )
        log_level = defaults.log_level

    return OverlayConfig(
        source=source,
        tool_name=str(data.get("tool_name", defaults.tool_name)),
        probe_timeout=_number(data, "probe_timeout", defaults.probe_timeout),
        range_file=Path(range_file).expanduser() if range_file else None,
        log_level=log_level,
        default_stack_bb=int(
            _number(data, "default_stack_bb", defaults.default_stack_bb)
        ),
        window=_window(data.get("window")),
    )


def _number(data: dict, key: str, default: float) -> float:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        logger.warning("Config key %s must be a positive number, got %r", key, value)
        return default
    return value


def _window(data: object) -> WindowConfig:
    if data is None:
        return WindowConfig()
    if not isinstance(data, dict):
        logger.warning("Config key window must be an object, got %r", data)
        return WindowConfig()
    defaults = WindowConfig()
    return WindowConfig(
        width=int(_number(data, "width", defaults.width)),
        height=int(_number(data, "height", defaults.height)),
        margin=int(_number(data, "margin", defaults.margin)),
    )
