"""Entry points: render diagnostics into a buffer, or clear them"""

import logging
from collections.abc import Mapping

from .constants import DEFAULT_SOURCE_KIND, HIGHLIGHTS
from .diagnostic import Diagnostic
from .error_handling import ConfigurationError, require_int, require_list
from .host import AnnotationHost
from .options import VirtualLinesOptions
from .render import VirtualLine, render_stack
from .severity import build_filter
from .stack import build_stacks

logger = logging.getLogger("lsp_lines.display")


def _resolve_options(options) -> VirtualLinesOptions:
    if options is None:
        return VirtualLinesOptions()
    if isinstance(options, VirtualLinesOptions):
        return options
    if isinstance(options, Mapping):
        return VirtualLinesOptions.from_dict(options)
    raise ConfigurationError(
        f"options: expected a mapping or VirtualLinesOptions, got {type(options).__name__}"
    )


def _highlight_groups(source_kind: str | None):
    kind = source_kind or DEFAULT_SOURCE_KIND
    if kind not in HIGHLIGHTS:
        raise ConfigurationError(
            f"Unknown diagnostic source '{kind}', expected one of {', '.join(HIGHLIGHTS)}"
        )
    return HIGHLIGHTS[kind]


def show(
    owner_id: int,
    buffer_id: int,
    diagnostics: list[Diagnostic],
    options: VirtualLinesOptions | Mapping | None = None,
    source_kind: str | None = None,
    *,
    host: AnnotationHost,
) -> dict[int, list[VirtualLine]]:
    """Replace the owner's virtual lines in a buffer with the diagnostics.

    Returns the virtual lines installed per source line. Nothing is installed
    until every line has been rendered.
    """
    if not host.is_loaded(buffer_id):
        logger.debug(f"Buffer {buffer_id} not loaded, skipping render")
        return {}

    require_int("owner_id", owner_id)
    require_int("buffer_id", buffer_id)
    require_list("diagnostics", diagnostics, "a list of diagnostics")
    for diagnostic in diagnostics:
        if not isinstance(diagnostic, Diagnostic):
            raise ConfigurationError(
                f"diagnostics: expected Diagnostic items, got {type(diagnostic).__name__}"
            )

    opts = _resolve_options(options)
    highlights = _highlight_groups(source_kind)
    cursor_line = host.cursor_line()

    current = opts.current_line
    keep = build_filter(
        opts.severity,
        current.severity if current is not None else None,
        cursor_line,
    )
    if keep is not None:
        diagnostics = [diagnostic for diagnostic in diagnostics if keep(diagnostic)]

    host.clear_all(owner_id, buffer_id)
    if not diagnostics:
        return {}

    stacks = build_stacks(diagnostics, host.metrics(buffer_id))

    rendered = {
        line: render_stack(
            stack,
            highlights,
            arrow_width=opts.arrow_width,
            highlight_whole_line=opts.highlights_line(line, cursor_line),
        )
        for line, stack in stacks.items()
    }

    for line, virt_lines in rendered.items():
        host.install(owner_id, buffer_id, line, virt_lines)

    logger.debug(
        f"Installed {len(diagnostics)} diagnostic(s) on {len(rendered)} line(s) "
        f"for owner {owner_id} buffer {buffer_id}"
    )
    return rendered


def hide(owner_id: int, buffer_id: int, *, host: AnnotationHost) -> None:
    if not host.is_loaded(buffer_id):
        return
    host.clear_all(owner_id, buffer_id)
