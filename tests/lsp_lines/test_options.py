"""Tests for option loading"""

import pytest

from lsp_lines.error_handling import ConfigurationError
from lsp_lines.options import CurrentLineOptions, VirtualLinesOptions


class TestFromDict:
    """Editor-style option tables"""

    def test_nested_table(self):
        opts = VirtualLinesOptions.from_dict(
            {
                "virtual_lines": {
                    "severity": {"min": "warn"},
                    "highlight_whole_line": False,
                    "arrow_width": 2,
                    "current_line_opts": {"severity": True},
                }
            }
        )

        assert opts.severity == {"min": "warn"}
        assert opts.highlight_whole_line is False
        assert opts.arrow_width == 2
        assert opts.current_line == CurrentLineOptions(severity=True)

    def test_inner_table(self):
        opts = VirtualLinesOptions.from_dict(
            {"current_line": {"highlight_whole_line": False}}
        )

        assert opts.severity is None
        assert opts.arrow_width == 4
        assert opts.current_line.highlight_whole_line is False

    def test_enabled_flag(self):
        assert VirtualLinesOptions.from_dict({"virtual_lines": True}) == VirtualLinesOptions()

    def test_unknown_keys_ignored(self):
        opts = VirtualLinesOptions.from_dict({"only_current_line": True})
        assert opts == VirtualLinesOptions()

    @pytest.mark.parametrize(
        "config",
        [
            {"arrow_width": -1},
            {"arrow_width": "4"},
            {"arrow_width": True},
            {"virtual_lines": 3},
            {"current_line": "yes"},
        ],
    )
    def test_invalid(self, config):
        with pytest.raises(ConfigurationError):
            VirtualLinesOptions.from_dict(config)

    def test_not_a_mapping(self):
        with pytest.raises(ConfigurationError):
            VirtualLinesOptions.from_dict(["severity"])


class TestHighlightsLine:
    """Whole-line highlight resolution"""

    def test_global_flag(self):
        assert VirtualLinesOptions().highlights_line(3, 3)
        assert not VirtualLinesOptions(highlight_whole_line=False).highlights_line(3, 3)

    def test_current_line_takes_precedence(self):
        opts = VirtualLinesOptions(
            highlight_whole_line=False,
            current_line=CurrentLineOptions(highlight_whole_line=True),
        )

        assert opts.highlights_line(3, 3)
        assert not opts.highlights_line(4, 3)

    def test_current_line_disables(self):
        opts = VirtualLinesOptions(
            current_line=CurrentLineOptions(highlight_whole_line=False),
        )

        assert not opts.highlights_line(3, 3)
        assert opts.highlights_line(4, 3)

    def test_unset_override_falls_back(self):
        opts = VirtualLinesOptions(
            highlight_whole_line=False, current_line=CurrentLineOptions()
        )
        assert not opts.highlights_line(3, 3)
