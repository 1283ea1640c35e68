"""Severity ordering and the filters built from severity settings.

A severity setting is one of:

* a single severity (``"warn"``, ``Severity.WARN``, ``2``) -- exact match
* a range mapping ``{"min": ..., "max": ...}`` -- inclusive, with ``max``
  the most severe end (default ``ERROR``) and ``min`` the least severe end
  (default ``HINT``)
* an iterable of severities -- membership
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, Callable

from lsprotocol import types

from .error_handling import ConfigurationError

if TYPE_CHECKING:
    from .diagnostic import Diagnostic

logger = logging.getLogger("lsp_lines.severity")


class Severity(enum.IntEnum):
    """Fixed total order ERROR < WARN < INFO < HINT.

    The values are ranks, not host numbering; hosts convert through
    ``to_severity``.
    """

    ERROR = 1
    WARN = 2
    INFO = 3
    HINT = 4


DiagnosticFilter = Callable[["Diagnostic"], bool]

SeveritySetting = Any

_NAMES = {
    "error": Severity.ERROR,
    "warn": Severity.WARN,
    "warning": Severity.WARN,
    "info": Severity.INFO,
    "information": Severity.INFO,
    "hint": Severity.HINT,
}

_LSP_SEVERITIES = {
    types.DiagnosticSeverity.Error: Severity.ERROR,
    types.DiagnosticSeverity.Warning: Severity.WARN,
    types.DiagnosticSeverity.Information: Severity.INFO,
    types.DiagnosticSeverity.Hint: Severity.HINT,
}


def to_severity(value: SeveritySetting) -> Severity:
    """Canonicalize a severity name, rank or LSP severity"""
    if isinstance(value, Severity):
        return value

    if isinstance(value, types.DiagnosticSeverity):
        return _LSP_SEVERITIES[value]

    if isinstance(value, str):
        severity = _NAMES.get(value.strip().lower())
        if severity is None:
            raise ConfigurationError(f"Invalid severity: {value}")
        return severity

    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return Severity(value)
        except ValueError:
            raise ConfigurationError(f"Invalid severity: {value}") from None

    raise ConfigurationError(f"Invalid severity: {value!r}")


def severity_filter(setting: SeveritySetting) -> DiagnosticFilter:
    if isinstance(setting, Mapping):
        unknown = set(setting) - {"min", "max"}
        if unknown:
            raise ConfigurationError(
                f"Invalid severity range keys: {', '.join(sorted(map(str, unknown)))}"
            )

        most = to_severity(setting["max"]) if setting.get("max") is not None else Severity.ERROR
        least = to_severity(setting["min"]) if setting.get("min") is not None else Severity.HINT

        def in_range(diagnostic: Diagnostic) -> bool:
            return most <= diagnostic.severity <= least

        return in_range

    if isinstance(setting, Iterable) and not isinstance(setting, str):
        allowed = frozenset(to_severity(item) for item in setting)

        def is_member(diagnostic: Diagnostic) -> bool:
            return diagnostic.severity in allowed

        return is_member

    only = to_severity(setting)

    def is_equal(diagnostic: Diagnostic) -> bool:
        return diagnostic.severity == only

    return is_equal


def _show_all(diagnostic: Diagnostic) -> bool:
    return True


def on_line(diagnostic: Diagnostic, line: int) -> bool:
    """Whether the diagnostic's line span covers ``line``"""
    if diagnostic.end_line is not None:
        return diagnostic.line <= line <= diagnostic.end_line
    return diagnostic.line == line


def build_filter(
    severity: SeveritySetting | None,
    current_line_severity: SeveritySetting | bool | None = None,
    cursor_line: int | None = None,
) -> DiagnosticFilter | None:
    """Build the effective filter, or None when nothing is configured.

    ``current_line_severity`` replaces ``severity`` for diagnostics covering
    ``cursor_line``; ``True`` or ``False`` there means every severity is shown.
    """
    base = severity_filter(severity) if severity is not None else None

    if current_line_severity is None or cursor_line is None:
        return base

    # A boolean means no filtering on the cursor line
    if isinstance(current_line_severity, bool):
        current = _show_all
    else:
        current = severity_filter(current_line_severity)

    rest = base or _show_all

    def dispatch(diagnostic: Diagnostic) -> bool:
        if on_line(diagnostic, cursor_line):
            return current(diagnostic)
        return rest(diagnostic)

    logger.debug(f"Severity override active for cursor line {cursor_line}")
    return dispatch
