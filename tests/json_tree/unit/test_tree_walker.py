"""Tree walker tests."""

from __future__ import annotations

from cog_schema.json_tree import walk_json


def test_visits_root_first_then_children_in_order() -> None:
    document = {"a": [1, {"b": 2}], "c": "x"}
    visited: list[object] = []

    def _record(value, _parent, key) -> bool:
        visited.append(key)
        return False

    stopped = walk_json(document, _record)

    assert stopped is False
    assert visited == [None, "a", 0, 1, "b", "c"]


def test_passes_parent_container_and_key() -> None:
    document = {"items": ["first"]}
    seen: list[tuple[object, object]] = []

    def _record(value, parent, key) -> bool:
        if value == "first":
            seen.append((parent, key))
        return False

    walk_json(document, _record)

    assert seen == [(document["items"], 0)]


def test_stops_everything_after_first_match() -> None:
    document = {"first": {"$ref": "a", "inner": {"$ref": "b"}}, "second": {"$ref": "c"}}
    matched: list[str] = []

    def _find_ref(value, _parent, _key) -> bool:
        if isinstance(value, dict) and "$ref" in value:
            matched.append(value["$ref"])
            return True
        return False

    assert walk_json(document, _find_ref) is True
    assert matched == ["a"]


def test_does_not_descend_below_a_match_in_list() -> None:
    document = [{"stop": True, "child": {"stop": True}}, {"stop": True}]
    hits = 0

    def _stop(value, _parent, _key) -> bool:
        nonlocal hits
        if isinstance(value, dict) and value.get("stop"):
            hits += 1
            return True
        return False

    assert walk_json(document, _stop) is True
    assert hits == 1


def test_visitor_may_add_keys_to_visited_node() -> None:
    document = {"node": {"$type": "Other"}}

    def _expand(value, _parent, _key) -> bool:
        if isinstance(value, dict) and "$type" in value:
            value["$ref"] = "#/definitions/" + value["$type"]
        return False

    walk_json(document, _expand)

    assert document["node"] == {"$type": "Other", "$ref": "#/definitions/Other"}


def test_scalars_are_visited_once() -> None:
    visited: list[object] = []

    walk_json("text", lambda value, parent, key: visited.append((value, parent, key)) or False)

    assert visited == [("text", None, None)]
