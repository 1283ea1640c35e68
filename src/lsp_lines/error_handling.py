"""Error types and input-shape checks"""

from typing import Any


class ConfigurationError(ValueError):
    """Invalid severity, option value or malformed input shape"""


def require_int(name: str, value: Any) -> int:
    # bool is an int subclass but never a valid id
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(
            f"{name}: expected an integer, got {type(value).__name__}"
        )
    return value


def require_list(name: str, value: Any, expected: str) -> list:
    if not isinstance(value, list):
        raise ConfigurationError(
            f"{name}: expected {expected}, got {type(value).__name__}"
        )
    return value
