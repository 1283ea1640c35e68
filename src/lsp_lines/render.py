"""Turns a line's layout stack into virtual lines.

The stack is drawn last element first: the right-most diagnostic sits on
the virtual line directly below the source text and each earlier one is
pushed a line further down, drawing a connector through the columns of the
diagnostics already drawn above it.

    x = call(first, second)
             │      └──── second problem
             └──── first problem
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from functools import reduce
from typing import NamedTuple

from .constants import (
    CORNER,
    CROSS,
    DEFAULT_ARROW_WIDTH,
    HORIZONTAL,
    NO_HIGHLIGHT,
    TEE_RIGHT,
    TEE_UP,
    VERTICAL,
)
from .diagnostic import Diagnostic
from .severity import Severity
from .stack import Blank, DiagnosticEntry, Overlap, Spacer, StackElement

Span = tuple[str, str]
VirtualLine = list[Span]
Highlights = Mapping[Severity, str]


class Margin(NamedTuple):
    """Accumulated state of the walk over elements left of a diagnostic"""

    spans: tuple[Span, ...] = ()
    overlap: bool = False
    multi: int = 0


def center_glyph(overlap: bool, multi: int) -> str:
    if overlap and multi > 0:
        return CROSS
    if overlap:
        return TEE_RIGHT
    if multi > 0:
        return TEE_UP
    return CORNER


def walk_prefix(
    stack: Sequence[StackElement],
    index: int,
    highlights: Highlights,
    fill_highlight: str,
    line_highlight: str,
) -> Margin:
    """Fold the elements before ``stack[index]`` into its left margin.

    ``fill_highlight`` styles blank padding, ``line_highlight`` the
    horizontal rules drawn through padding once a blank diagnostic has been
    crossed.
    """

    def step(margin: Margin, pair: tuple[StackElement, StackElement]) -> Margin:
        element, following = pair
        match element:
            case Spacer(width=width):
                if width <= 0:
                    return margin
                if margin.multi == 0:
                    span = (" " * width, fill_highlight)
                else:
                    span = (HORIZONTAL * width, line_highlight)
                return margin._replace(spans=margin.spans + (span,))
            case DiagnosticEntry(diagnostic=diagnostic):
                spans = margin.spans
                # An overlap folds into the connector drawn for it
                if not isinstance(following, Overlap):
                    spans += ((VERTICAL, highlights[diagnostic.severity]),)
                return margin._replace(spans=spans, overlap=False)
            case Blank(diagnostic=diagnostic):
                glyph = CORNER if margin.multi == 0 else TEE_UP
                return Margin(
                    spans=margin.spans + ((glyph, highlights[diagnostic.severity]),),
                    overlap=margin.overlap,
                    multi=margin.multi + 1,
                )
            case Overlap():
                return margin._replace(overlap=True)
            case _:
                raise TypeError(f"Unknown stack element {element!r}")

    return reduce(step, zip(stack[:index], stack[1 : index + 1]), Margin())


def message_lines(diagnostic: Diagnostic) -> list[str]:
    return [part for part in diagnostic.text.split("\n") if part]


def render_diagnostic(
    stack: Sequence[StackElement],
    index: int,
    highlights: Highlights,
    arrow_width: int = DEFAULT_ARROW_WIDTH,
    highlight_whole_line: bool = True,
) -> list[VirtualLine]:
    """Virtual lines for the diagnostic at ``stack[index]``"""
    diagnostic = stack[index].diagnostic
    highlight = highlights[diagnostic.severity]
    fill = highlight if highlight_whole_line else NO_HIGHLIGHT

    margin = walk_prefix(stack, index, highlights, fill, highlight)

    glyph = center_glyph(margin.overlap, margin.multi)
    center: list[Span] = [(f"{glyph}{HORIZONTAL * arrow_width} ", highlight)]

    virt_lines = []
    for text in message_lines(diagnostic):
        virt_lines.append([*margin.spans, *center, (text, highlight)])

        # Continuation lines keep the margin but not the connector
        if margin.overlap:
            center = [(VERTICAL, highlight), (" " * (arrow_width + 1), fill)]
        else:
            center = [(" " * (arrow_width + 2), fill)]

    return virt_lines


def render_stack(
    stack: Sequence[StackElement],
    highlights: Highlights,
    arrow_width: int = DEFAULT_ARROW_WIDTH,
    highlight_whole_line: bool = True,
) -> list[VirtualLine]:
    """Virtual lines for one source line, top to bottom"""
    virt_lines: list[VirtualLine] = []

    for index in range(len(stack) - 1, -1, -1):
        if not isinstance(stack[index], DiagnosticEntry):
            continue
        virt_lines.extend(
            render_diagnostic(
                stack,
                index,
                highlights,
                arrow_width=arrow_width,
                highlight_whole_line=highlight_whole_line,
            )
        )

    return virt_lines
