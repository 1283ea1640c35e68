"""Diagnostic records consumed by the renderer"""

from dataclasses import dataclass

from lsprotocol import types
from pygls.workspace import TextDocument

from .error_handling import ConfigurationError
from .severity import Severity, to_severity


@dataclass(frozen=True)
class Diagnostic:
    """A problem at a (0-based) position in a document"""

    line: int
    column: int
    severity: Severity = Severity.ERROR
    message: str = ""
    end_line: int | None = None
    code: str | int | None = None
    source: str | None = None

    def __post_init__(self):
        if self.line < 0 or self.column < 0:
            raise ConfigurationError(
                f"Invalid diagnostic position {self.line}:{self.column}"
            )
        if self.end_line is not None and self.end_line < self.line:
            raise ConfigurationError(
                f"Diagnostic end_line {self.end_line} precedes line {self.line}"
            )
        object.__setattr__(self, "severity", to_severity(self.severity))

    @property
    def is_blank(self) -> bool:
        return not self.message.strip()

    @property
    def text(self) -> str:
        if self.code is not None:
            return f"{self.code}: {self.message}"
        return self.message

    @classmethod
    def from_lsp(
        cls, diagnostic: types.Diagnostic, document: TextDocument | None = None
    ) -> "Diagnostic":
        """Convert an LSP diagnostic; a missing severity is treated as error.

        LSP columns count UTF-16 code units. With the ``document`` they were
        reported against, the column is converted to a character offset.
        """
        start = diagnostic.range.start
        if document is not None:
            start = document.position_codec.position_from_client_units(
                document.lines, start
            )
        severity = diagnostic.severity or types.DiagnosticSeverity.Error

        return cls(
            line=start.line,
            column=start.character,
            end_line=diagnostic.range.end.line,
            severity=to_severity(severity),
            message=diagnostic.message,
            code=diagnostic.code,
            source=diagnostic.source,
        )
