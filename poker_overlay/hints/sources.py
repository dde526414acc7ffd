"""Hint data sources and the one-time external tool probe.

Only the built-in range table produces real recommendations today.
TexasSolverProvider and WasmPostflopProvider are explicit placeholders:
they answer through the built-in engine and stamp their own kind on the
result, so callers can already be wired against them.

Initialization returns a SourceStatus value owned by the caller instead
of flipping process-wide flags:

    status = initialize(load_overlay_config())
    provider = select_provider(status)
    rec = provider.recommend(scenario)
"""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import Callable

from poker_overlay.config import OverlayConfig
from poker_overlay.hints.data_structures import (
    HintProvider,
    Recommendation,
    Scenario,
    SourceKind,
    SourceStatus,
)
from poker_overlay.hints.engine import BuiltinHintEngine
from poker_overlay.hints.range_table import RangeTable

logger = logging.getLogger("poker_overlay.hints.sources")

ToolProbe = Callable[[str, float], str | None]


def probe_tool(name: str, timeout: float = 2.0) -> str | None:
    """Resolve an executable by name on PATH, or check an explicit path.

    Best effort: a missing tool, a missing `which`, a timeout or a
    permission error all give None.

    Returns:
        Absolute path of the executable, or None.
    """
    if os.sep in name:
        path = Path(name).expanduser()
        if path.is_file() and os.access(path, os.X_OK):
            return str(path)
        logger.debug("Tool path %s is not an executable file", path)
        return None

    try:
        result = subprocess.run(
            ["which", name],
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        logger.debug("Probe for %s timed out after %.1fs", name, timeout)
        return None
    except OSError as e:
        logger.debug("Probe for %s failed: %s", name, e)
        return None

    resolved = result.stdout.strip()
    if result.returncode != 0 or not resolved:
        return None
    return resolved.splitlines()[0]


def initialize(
    config: OverlayConfig | None = None,
    probe: ToolProbe = probe_tool,
) -> SourceStatus:
    """Pick the hint data source once at startup.

    "builtin" and "wasm" are used as configured, with no probe.
    "texassolver" and "auto" probe for the configured tool and use it when
    found. When it is not found, both fall back to builtin, so an explicit
    "texassolver" is a preference rather than a requirement. A probe that
    raises also falls back to builtin.

    Never raises.
    """
    config = config or OverlayConfig()

    if config.source == SourceKind.BUILTIN:
        logger.info("Using built-in range tables")
        return SourceStatus(kind=SourceKind.BUILTIN, initialized=True)

    if config.source == SourceKind.WASM:
        logger.info("WASM postflop source selected (answers via built-in tables)")
        return SourceStatus(kind=SourceKind.WASM, initialized=True)

    try:
        tool_path = probe(config.tool_name, config.probe_timeout)
    except Exception:
        logger.exception("Tool probe for %s failed, using built-in", config.tool_name)
        return SourceStatus(kind=SourceKind.BUILTIN, initialized=True)

    if tool_path:
        logger.info("%s found at %s", config.tool_name, tool_path)
        return SourceStatus(
            kind=SourceKind.TEXASSOLVER, initialized=True, tool_path=tool_path,
        )

    logger.info("%s not found, using built-in range tables", config.tool_name)
    return SourceStatus(kind=SourceKind.BUILTIN, initialized=True)


def get_status(status: SourceStatus) -> dict[str, object]:
    """Status payload for display: {"type", "initialized", "path"}."""
    return status.to_dict()


class PassthroughProvider:
    """Base for data sources that are not implemented yet.

    Delegates every request to the built-in engine. The first request
    logs that the delegation happened.
    """

    source_kind = SourceKind.BUILTIN

    def __init__(
        self,
        builtin: BuiltinHintEngine,
        tool_path: str | None = None,
    ) -> None:
        self._builtin = builtin
        self._tool_path = tool_path
        self._announced = False

    @property
    def kind(self) -> SourceKind:
        return self.source_kind

    @property
    def tool_path(self) -> str | None:
        return self._tool_path

    def recommend(self, scenario: Scenario) -> Recommendation:
        if not self._announced:
            logger.debug(
                "%s integration not implemented yet, answering from built-in tables",
                self.kind,
            )
            self._announced = True
        return self._builtin.recommend(scenario, source=self.kind)


class TexasSolverProvider(PassthroughProvider):
    """TexasSolver placeholder. The binary is located but never invoked."""

    source_kind = SourceKind.TEXASSOLVER


class WasmPostflopProvider(PassthroughProvider):
    """WASM postflop solver placeholder."""

    source_kind = SourceKind.WASM


def select_provider(
    status: SourceStatus,
    table: RangeTable | None = None,
) -> HintProvider:
    """Build the provider matching an initialization result."""
    builtin = BuiltinHintEngine(table)
    if status.kind == SourceKind.TEXASSOLVER:
        return TexasSolverProvider(builtin, status.tool_path)
    if status.kind == SourceKind.WASM:
        return WasmPostflopProvider(builtin)
    return builtin
