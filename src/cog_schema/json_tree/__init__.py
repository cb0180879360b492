"""JSON tree traversal exports."""

from .json_values import JsonContainer, JsonValue
from .tree_walker import JsonVisitor, walk_json

__all__ = ["JsonContainer", "JsonValue", "JsonVisitor", "walk_json"]
