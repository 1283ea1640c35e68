import unittest

from lsprotocol import types
from pygls.workspace import TextDocument

from lsp_lines.metrics import TextMetrics, char_cells, label_cells


class _Lines:
    def __init__(self, *lines):
        self.lines = list(lines)


def _metrics(source: str, **kwargs) -> TextMetrics:
    return TextMetrics(TextDocument("file:///tmp/sample.py", source), **kwargs)


def _hint(line, character, label, **kwargs):
    return types.InlayHint(
        position=types.Position(line=line, character=character),
        label=label,
        **kwargs,
    )


class TestTextMetrics(unittest.TestCase):
    def test_ascii(self):
        metrics = _metrics("abcdef\nxyz\n")
        self.assertEqual(3, metrics.visual_width(0, 0, 3))
        self.assertEqual(2, metrics.visual_width(1, 1, 3))

    def test_empty_range(self):
        self.assertEqual(0, _metrics("abc\n").visual_width(0, 2, 2))

    def test_tab_expands_to_tabstop(self):
        self.assertEqual(8, _metrics("\tx\n").visual_width(0, 0, 1))
        self.assertEqual(4, _metrics("\tx\n", tabstop=4).visual_width(0, 0, 1))

    def test_tab_depends_on_absolute_cell(self):
        metrics = _metrics("ab\tc\n")
        self.assertEqual(8, metrics.visual_width(0, 0, 3))
        self.assertEqual(6, metrics.visual_width(0, 2, 3))

    def test_wide_characters(self):
        self.assertEqual(4, _metrics("漢字x\n").visual_width(0, 0, 2))

    def test_combining_characters(self):
        self.assertEqual(1, _metrics("e\u0301x\n").visual_width(0, 0, 2))

    def test_past_end_of_line(self):
        metrics = _metrics("ab\n")
        self.assertEqual(5, metrics.visual_width(0, 0, 5))
        self.assertEqual(4, metrics.visual_width(9, 0, 4))

    def test_crlf_is_not_measured(self):
        metrics = _metrics("ab\r\ncd\r\n")
        self.assertEqual("ab", metrics.line_text(0))

    def test_inlay_hint_widens_range(self):
        metrics = _metrics(
            "abcdef\n", inlay_hints=[_hint(0, 2, ": int", padding_left=True)]
        )
        # Hint anchored inside or at either end of the range is counted
        self.assertEqual(8, metrics.visual_width(0, 0, 2))
        self.assertEqual(8, metrics.visual_width(0, 2, 4))
        self.assertEqual(2, metrics.visual_width(0, 3, 5))

    def test_inlay_hint_on_other_line(self):
        metrics = _metrics("abc\nabc\n", inlay_hints=[_hint(1, 1, "xx")])
        self.assertEqual(3, metrics.visual_width(0, 0, 3))
        self.assertEqual(5, metrics.visual_width(1, 0, 3))

    def test_measures_current_text(self):
        document = _Lines("abc")
        metrics = TextMetrics(document)
        self.assertEqual(3, metrics.visual_width(0, 0, 3))

        document.lines[0] = "\tbc"
        self.assertEqual(10, metrics.visual_width(0, 0, 3))


class TestCells(unittest.TestCase):
    def test_char_cells(self):
        self.assertEqual(1, char_cells("a", 0))
        self.assertEqual(2, char_cells("字", 0))
        self.assertEqual(5, char_cells("\t", 3))
        self.assertEqual(1, char_cells("\x1b", 0))

    def test_label_parts(self):
        hint = _hint(
            0,
            0,
            [types.InlayHintLabelPart(value="x: "), types.InlayHintLabelPart(value="int")],
            padding_right=True,
        )
        self.assertEqual(7, label_cells(hint))
