"""Visual-column measurement.

Diagnostic columns are character offsets, but connectors have to line up
with display cells: tabs expand, wide glyphs take two cells and inline
annotations (inlay hints) push text to the right.
"""

from collections import defaultdict
from collections.abc import Iterable, Sequence
from typing import Protocol

from lsprotocol import types
from wcwidth import wcwidth

DEFAULT_TABSTOP = 8


class MetricsProbe(Protocol):
    # Subtracted from same-line gaps; depends on how the host indexes columns.
    boundary_adjust: int

    def visual_width(self, line: int, start_col: int, end_col: int) -> int:
        """Display cells spanned by the half-open column range"""
        ...


class HasLines(Protocol):
    @property
    def lines(self) -> Sequence[str]: ...


def char_cells(char: str, cell: int, tabstop: int = DEFAULT_TABSTOP) -> int:
    """Cells taken by ``char`` when drawn starting at ``cell``"""
    if char == "\t":
        return tabstop - cell % tabstop
    width = wcwidth(char)
    if width < 0:
        # Control characters
        return 1
    return width


def label_cells(hint: types.InlayHint) -> int:
    if isinstance(hint.label, str):
        label = hint.label
    else:
        label = "".join(part.value for part in hint.label)

    cells = sum(max(wcwidth(char), 0) for char in label)
    if hint.padding_left:
        cells += 1
    if hint.padding_right:
        cells += 1
    return cells


class TextMetrics:
    """Measures columns against a document's current text and inlay hints.

    Nothing is cached; every query reads the document again so edits and
    newly added hints are always reflected.
    """

    boundary_adjust = 0

    def __init__(
        self,
        document: HasLines,
        inlay_hints: Iterable[types.InlayHint] = (),
        tabstop: int = DEFAULT_TABSTOP,
    ):
        self.document = document
        self.inlay_hints = inlay_hints
        self.tabstop = tabstop

    def line_text(self, line: int) -> str:
        lines = self.document.lines
        if line >= len(lines):
            return ""
        return lines[line].rstrip("\r\n")

    def _hint_cells(self, line: int) -> dict[int, int]:
        cells: dict[int, int] = defaultdict(int)
        for hint in self.inlay_hints:
            if hint.position.line == line:
                cells[hint.position.character] += label_cells(hint)
        return cells

    def _offsets(self, line: int, col: int) -> tuple[int, int]:
        """Cell offset of column ``col`` before and after hints anchored there"""
        text = self.line_text(line)
        hints = self._hint_cells(line)

        cell = 0
        for index in range(col):
            cell += hints.get(index, 0)
            # Past the end of the line every column is one cell
            char = text[index] if index < len(text) else " "
            cell += char_cells(char, cell, self.tabstop)

        return cell, cell + hints.get(col, 0)

    def visual_width(self, line: int, start_col: int, end_col: int) -> int:
        start, _ = self._offsets(line, start_col)
        _, end = self._offsets(line, end_col)
        return end - start
