"""Per-call rendering options"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from .constants import DEFAULT_ARROW_WIDTH
from .error_handling import ConfigurationError
from .severity import SeveritySetting

logger = logging.getLogger("lsp_lines.options")


@dataclass
class CurrentLineOptions:
    """Overrides applied to the line under the cursor"""

    severity: SeveritySetting | bool | None = None
    highlight_whole_line: bool | None = None


@dataclass
class VirtualLinesOptions:
    severity: SeveritySetting | None = None
    highlight_whole_line: bool = True
    arrow_width: int = DEFAULT_ARROW_WIDTH
    current_line: CurrentLineOptions | None = None

    def __post_init__(self):
        width = self.arrow_width
        if isinstance(width, bool) or not isinstance(width, int) or width < 0:
            raise ConfigurationError(
                f"arrow_width must be a non-negative integer, got {width!r}"
            )

    def highlights_line(self, line: int, cursor_line: int | None) -> bool:
        """Whether spacer spans on ``line`` carry the severity highlight"""
        if (
            self.current_line is not None
            and self.current_line.highlight_whole_line is not None
            and line == cursor_line
        ):
            return self.current_line.highlight_whole_line is not False
        return self.highlight_whole_line is not False

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> "VirtualLinesOptions":
        """Load from an editor-style option table.

        Accepts ``{"virtual_lines": {...}}`` or the inner table itself.
        """
        if not isinstance(config, Mapping):
            raise ConfigurationError(
                f"options: expected a mapping, got {type(config).__name__}"
            )

        inner = config.get("virtual_lines", config)
        if inner is True or inner is None:
            inner = {}
        if not isinstance(inner, Mapping):
            raise ConfigurationError(
                f"virtual_lines: expected a mapping, got {type(inner).__name__}"
            )

        current = inner.get("current_line_opts", inner.get("current_line"))
        if current is not None and not isinstance(current, Mapping):
            raise ConfigurationError(
                f"current_line: expected a mapping, got {type(current).__name__}"
            )

        known = {field.name for field in fields(cls)}
        kwargs = {}
        for key, value in inner.items():
            if key in ("current_line_opts", "current_line"):
                continue
            if key not in known:
                logger.debug(f"Ignoring unknown virtual_lines option '{key}'")
                continue
            kwargs[key] = value

        if current is not None:
            kwargs["current_line"] = CurrentLineOptions(
                severity=current.get("severity"),
                highlight_whole_line=current.get("highlight_whole_line"),
            )

        return cls(**kwargs)
