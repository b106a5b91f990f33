"""Tools Registry — ordered catalog of every tool and lookup of its schema.

Invariants:
    - ALL_TOOLS order is the catalog order returned to the agent
    - Every ToolName member has exactly one schema, every schema name is a ToolName
    - required_arguments() is the single source of argument validation for dispatch

Design Decisions:
    - Explicit imports from each define_*_tools.py: no auto-discovery (ADR: ExMA)
    - Flat list, no per-context filtering: every tool is valid at every moment
"""

from typing import Any

from slackgate.services.define_channel_tools import TOOLS_CHANNELS
from slackgate.services.define_search_tools import TOOLS_SEARCH
from slackgate.services.define_user_tools import TOOLS_USERS


ALL_TOOLS: list[dict[str, Any]] = [
    *TOOLS_CHANNELS,   # 6 tools
    *TOOLS_USERS,      # 2 tools
    *TOOLS_SEARCH,     # 1 tool
]
# Total: 9

_TOOLS_BY_NAME = {tool["name"]: tool for tool in ALL_TOOLS}


def get_tool(name: str) -> dict[str, Any] | None:
    """Descriptor for name, or None when it is not in the catalog."""
    return _TOOLS_BY_NAME.get(name)


def required_arguments(name: str) -> list[str]:
    """Names listed under input_schema.required, in schema order."""
    tool = get_tool(name)
    if tool is None:
        return []
    return list(tool["input_schema"].get("required", []))
