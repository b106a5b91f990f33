"""JSON Tree — one bottom-up map over decoded JSON, shared by every payload traversal.

Invariants:
    - Output has the same shape as input: arrays keep length and order, objects keep keys
    - Input is never mutated: every object/array on the path is rebuilt
    - visit() sees each object exactly once, after every object nested inside it
    - Scalars and None are returned as-is
    - No Python recursion: nesting depth is bounded by memory, not the interpreter stack

Design Decisions:
    - Visitor is per-object only: both traversals (timestamps, identities) act on object
      fields, never on bare scalars
    - Copy first with an explicit stack, then visit level by level from the deepest:
      a child object always sits deeper than its parent, so children finish first
    - amap_tree gathers one whole level concurrently; completion order within a level
      is irrelevant, only the assembled tree is observed
    - No visited-set: values from json.loads are trees, reference cycles are impossible
"""

import asyncio
from collections.abc import Awaitable, Callable

from slackgate.core.domain_types import JsonObject, JsonValue

ObjectVisitor = Callable[[JsonObject], JsonObject]
AsyncObjectVisitor = Callable[[JsonObject], Awaitable[JsonObject]]

# (container, key) addressing one object inside its rebuilt parent
Slot = tuple[list | dict, int | str]


def _rebuild(value: JsonValue) -> tuple[list, list[list[Slot]]]:
    """Shallow-copy every array and object; return the root holder and object slots by depth."""
    holder: list = [value]
    levels: list[list[Slot]] = []
    stack: list[tuple[list | dict, int | str, int]] = [(holder, 0, 0)]
    while stack:
        container, key, depth = stack.pop()
        match container[key]:
            case list() as node:
                node = container[key] = list(node)
                children = range(len(node))
            case dict() as node:
                node = container[key] = dict(node)
                while len(levels) <= depth:
                    levels.append([])
                levels[depth].append((container, key))
                children = node.keys()
            case _:
                continue
        stack.extend(
            (node, child, depth + 1)
            for child in children
            if isinstance(node[child], (list, dict))
        )
    return holder, levels


def map_tree(value: JsonValue, visit: ObjectVisitor) -> JsonValue:
    """Rebuild value, applying visit() to every object, innermost first."""
    holder, levels = _rebuild(value)
    for level in reversed(levels):
        for container, key in level:
            container[key] = visit(container[key])
    return holder[0]


async def amap_tree(value: JsonValue, visit: AsyncObjectVisitor) -> JsonValue:
    """Async twin of map_tree for visitors that suspend (network lookups)."""
    holder, levels = _rebuild(value)
    for level in reversed(levels):
        visited = await asyncio.gather(*(visit(container[key]) for container, key in level))
        for (container, key), obj in zip(level, visited):
            container[key] = obj
    return holder[0]
