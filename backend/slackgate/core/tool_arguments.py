"""Tool Arguments — presence checks and numeric coercion for agent-supplied arguments.

Invariants:
    - A required argument is missing when absent, None, or an empty string
    - Numeric arguments fall back to their default when absent or None
    - Numeric arguments above their cap are clamped, never rejected
    - Non-numeric values raise InvalidArgumentsError (caller error, not upstream)

Design Decisions:
    - Agents send JSON numbers as floats ("limit": 5.0): int() truncation accepted
    - Booleans are not numbers here: "limit": true is a caller mistake
"""

from typing import Any

from slackgate.core.errors import InvalidArgumentsError


def missing_required(input_data: dict, required: list[str]) -> list[str]:
    return [
        name for name in required
        if input_data.get(name) is None or input_data.get(name) == ""
    ]


def bounded_int(
    input_data: dict, name: str, default: int, maximum: int | None = None,
) -> int:
    """Read input_data[name] as an int, defaulted and capped."""
    raw: Any = input_data.get(name)
    if raw is None:
        return default
    if isinstance(raw, bool):
        raise InvalidArgumentsError(f"Argument '{name}' must be a number")
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise InvalidArgumentsError(f"Argument '{name}' must be a number")
    if maximum is not None:
        value = min(value, maximum)
    return value


def optional_str(input_data: dict, name: str) -> str | None:
    value = input_data.get(name)
    if value is None or value == "":
        return None
    return str(value)
