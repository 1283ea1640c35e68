"""Per-line layout stacks.

Each source line with diagnostics gets a left-to-right record of how much
blank space to leave and what sits at each successive diagnostic column.
The renderer reconstructs indentation and connector shapes from it without
measuring columns again.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import reduce
from typing import NamedTuple

from .diagnostic import Diagnostic
from .metrics import MetricsProbe
from .severity import Severity

logger = logging.getLogger("lsp_lines.stack")


class Spacer(NamedTuple):
    width: int


class DiagnosticEntry(NamedTuple):
    diagnostic: Diagnostic


class Overlap(NamedTuple):
    """The previous and current diagnostic share line and column"""

    severity: Severity


class Blank(NamedTuple):
    """A diagnostic with an empty message; shapes connectors, emits no text"""

    diagnostic: Diagnostic


StackElement = Spacer | DiagnosticEntry | Overlap | Blank

Stacks = dict[int, list[StackElement]]


class _Cursor(NamedTuple):
    line: int = -1
    column: int = 0


def sort_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    return sorted(diagnostics, key=lambda diag: (diag.line, diag.column))


def build_stacks(diagnostics: Iterable[Diagnostic], probe: MetricsProbe) -> Stacks:
    stacks: Stacks = {}

    def place(prev: _Cursor, diagnostic: Diagnostic) -> _Cursor:
        stack = stacks.setdefault(diagnostic.line, [])

        if diagnostic.line != prev.line:
            stack.append(Spacer(probe.visual_width(diagnostic.line, 0, diagnostic.column)))
        elif diagnostic.column != prev.column:
            # The previous diagnostic's column is already drawn by its own
            # connector, so measure from the column after it.
            gap = probe.visual_width(diagnostic.line, prev.column + 1, diagnostic.column)
            stack.append(Spacer(max(gap - probe.boundary_adjust, 0)))
        else:
            stack.append(Overlap(diagnostic.severity))

        if diagnostic.is_blank:
            stack.append(Blank(diagnostic))
        else:
            stack.append(DiagnosticEntry(diagnostic))

        return _Cursor(diagnostic.line, diagnostic.column)

    reduce(place, sort_diagnostics(diagnostics), _Cursor())

    logger.debug(f"Built layout stacks for {len(stacks)} line(s)")
    return stacks
