from .severity import Severity


HIGHLIGHTS = {
    "native": {
        Severity.ERROR: "DiagnosticVirtualTextError",
        Severity.WARN: "DiagnosticVirtualTextWarn",
        Severity.INFO: "DiagnosticVirtualTextInfo",
        Severity.HINT: "DiagnosticVirtualTextHint",
    },
    "coc": {
        Severity.ERROR: "CocErrorVirtualText",
        Severity.WARN: "CocWarningVirtualText",
        Severity.INFO: "CocInfoVirtualText",
        Severity.HINT: "CocHintVirtualText",
    },
}

DEFAULT_SOURCE_KIND = "native"

DEFAULT_ARROW_WIDTH = 4

NO_HIGHLIGHT = ""

HORIZONTAL = "─"
VERTICAL = "│"
CORNER = "└"
TEE_UP = "┴"
TEE_RIGHT = "├"
CROSS = "┼"
