"""Render diagnostics as virtual lines beneath the source they point at"""

import logging

from .diagnostic import Diagnostic
from .display import hide, show
from .error_handling import ConfigurationError
from .host import AnnotationHost, DocumentHost
from .metrics import MetricsProbe, TextMetrics
from .options import CurrentLineOptions, VirtualLinesOptions
from .preview import preview
from .render import VirtualLine, center_glyph, render_stack
from .severity import Severity, build_filter, severity_filter, to_severity
from .stack import Blank, DiagnosticEntry, Overlap, Spacer, build_stacks

# Module-level logger
logger = logging.getLogger("lsp_lines")

__all__ = [
    # Entry points
    "hide",
    "show",
    "preview",
    # Data model
    "Diagnostic",
    "Severity",
    "VirtualLine",
    # Errors
    "ConfigurationError",
    # Configuration
    "CurrentLineOptions",
    "VirtualLinesOptions",
    # Severity filtering
    "build_filter",
    "severity_filter",
    "to_severity",
    # Measurement
    "MetricsProbe",
    "TextMetrics",
    # Layout
    "Blank",
    "DiagnosticEntry",
    "Overlap",
    "Spacer",
    "build_stacks",
    "center_glyph",
    "render_stack",
    # Hosts
    "AnnotationHost",
    "DocumentHost",
]
