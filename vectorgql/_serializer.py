"""
Helpers that render Python values in the textual GraphQL syntax the
service expects.
"""
import math
from datetime import datetime, timezone
from typing import Any, Iterable, Optional


def escape(value: Optional[str]) -> str:
    """Escape double quotes so the value can be embedded in a quoted string."""
    if value is None:
        return ""
    return value.replace('"', '\\"')


def quote(value: Optional[str]) -> str:
    """Wrap an escaped value in double quotes."""
    return f'"{escape(value)}"'


def block_string(value: str) -> str:
    """Wrap a value in triple quotes, escaping inner triple quotes."""
    return '"""' + value.replace('"""', '\\"""') + '"""'


def array_with_quotes(values: Optional[Iterable[str]]) -> str:
    """
    Format values as a GraphQL list of quoted strings.

    Args:
        values: Strings to render

    Returns:
        Formatted list (e.g. '["a","b"]')
    """
    if values is None:
        return "[]"
    return f"[{','.join(quote(value) for value in values)}]"


def array(values: Optional[Iterable[Any]]) -> str:
    """Format values as a GraphQL list of unquoted scalars (e.g. "[1,2,3]")."""
    if values is None:
        return "[]"
    return f"[{','.join(scalar(value) for value in values)}]"


def vector(values: Iterable[float]) -> str:
    """
    Format vector components as a GraphQL list of floats.

    Components are coerced to float so integer input renders the same way
    float input does (e.g. [0, 1] -> "[0.0,1.0]").

    Raises:
        ValueError: If a component is NaN or infinite
    """
    components = [float(value) for value in values]
    for component in components:
        _check_finite(component)
    return f"[{','.join(str(component) for component in components)}]"


def date(value: datetime) -> str:
    """Format a datetime as a quoted RFC 3339 timestamp, naive values as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return quote(value.isoformat(timespec="seconds"))


def _check_finite(value: float) -> None:
    # GraphQL has no literal for NaN or infinity
    if not math.isfinite(value):
        raise ValueError(f"Non-finite number cannot be serialized: {value}")


def scalar(value: Any) -> str:
    """
    Format a single unquoted scalar.

    Raises:
        ValueError: If the value type is not supported, or the value is NaN or infinite
    """
    # Check bool first since bool is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    elif isinstance(value, (int, float)):
        if isinstance(value, float):
            _check_finite(value)
        return str(value)
    else:
        raise ValueError(f"Unsupported value type: {type(value)}")
