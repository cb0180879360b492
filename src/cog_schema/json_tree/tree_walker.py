"""Depth-first traversal over arbitrary JSON trees."""

from __future__ import annotations

from collections.abc import Callable

from .json_values import JsonContainer, JsonValue

JsonVisitor = Callable[[JsonValue, JsonContainer | None, str | int | None], bool]


def walk_json(
    node: JsonValue,
    visit: JsonVisitor,
    parent: JsonContainer | None = None,
    key: str | int | None = None,
) -> bool:
    """Visit `node` and then its children until a visitor returns True.

    The visitor receives the value, its containing list or dict and the index
    or member name inside that container. Children are only visited when the
    visitor returned False for their container. Returns True as soon as any
    visitor call returned True; nothing further is visited after that.

    Visitors may rewrite the visited node. Children are read from a snapshot
    taken after the visit, so keys added to the node are walked as well.
    """
    if visit(node, parent, key):
        return True
    if isinstance(node, list):
        for index, item in enumerate(list(node)):
            if walk_json(item, visit, node, index):
                return True
    elif isinstance(node, dict):
        for name, child in list(node.items()):
            if walk_json(child, visit, node, name):
                return True
    return False
