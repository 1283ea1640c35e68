"""Host capabilities the renderer needs, and an in-memory implementation"""

import logging
from collections import defaultdict
from typing import Protocol

from lsprotocol import types
from pygls.workspace import TextDocument

from .metrics import DEFAULT_TABSTOP, MetricsProbe, TextMetrics
from .render import VirtualLine

logger = logging.getLogger("lsp_lines.host")


class AnnotationHost(Protocol):
    def is_loaded(self, buffer: int) -> bool: ...

    def cursor_line(self) -> int | None: ...

    def metrics(self, buffer: int) -> MetricsProbe: ...

    def install(
        self, owner: int, buffer: int, line: int, virt_lines: list[VirtualLine]
    ) -> None: ...

    def clear_all(self, owner: int, buffer: int) -> None: ...


class DocumentHost:
    """Keeps buffers as pygls text documents and annotations in memory.

    Annotations are grouped by ``(owner, buffer)`` so one owner can clear its
    own virtual lines without touching another's.
    """

    def __init__(self, tabstop: int = DEFAULT_TABSTOP):
        self.tabstop = tabstop
        self.documents: dict[int, TextDocument] = {}
        self.inlay_hints: dict[int, list[types.InlayHint]] = defaultdict(list)
        self.cursor: int | None = None
        self._annotations: dict[tuple[int, int], dict[int, list[VirtualLine]]] = {}

    def open(self, buffer: int, uri: str, source: str) -> TextDocument:
        document = TextDocument(uri, source)
        self.documents[buffer] = document
        return document

    def close(self, buffer: int) -> None:
        self.documents.pop(buffer, None)
        self.inlay_hints.pop(buffer, None)
        for key in [key for key in self._annotations if key[1] == buffer]:
            del self._annotations[key]

    def set_cursor(self, line: int | None) -> None:
        self.cursor = line

    def add_inlay_hint(self, buffer: int, hint: types.InlayHint) -> None:
        self.inlay_hints[buffer].append(hint)

    def is_loaded(self, buffer: int) -> bool:
        return buffer in self.documents

    def cursor_line(self) -> int | None:
        return self.cursor

    def metrics(self, buffer: int) -> TextMetrics:
        return TextMetrics(
            self.documents[buffer],
            inlay_hints=self.inlay_hints[buffer],
            tabstop=self.tabstop,
        )

    def install(
        self, owner: int, buffer: int, line: int, virt_lines: list[VirtualLine]
    ) -> None:
        self._annotations.setdefault((owner, buffer), {})[line] = [
            list(virt_line) for virt_line in virt_lines
        ]

    def clear_all(self, owner: int, buffer: int) -> None:
        if self._annotations.pop((owner, buffer), None) is not None:
            logger.debug(f"Cleared virtual lines for owner {owner} buffer {buffer}")

    def annotations(self, owner: int, buffer: int) -> dict[int, list[VirtualLine]]:
        stored = self._annotations.get((owner, buffer), {})
        return {
            line: [list(virt_line) for virt_line in virt_lines]
            for line, virt_lines in stored.items()
        }
