"""Unit tests for valid-reference queries over hierarchies."""

from dataclasses import dataclass

from backoffice.domain.references import descendant_ids, valid_references


@dataclass
class Node:
    id: str
    parent_id: str | None = None


TREE = (
    Node("root"),
    Node("a", "root"),
    Node("a1", "a"),
    Node("a1x", "a1"),
    Node("b", "root"),
)


def test_new_record_may_reference_anything():
    assert valid_references(TREE, None) == TREE


def test_excludes_self_and_all_descendants():
    ids = [n.id for n in valid_references(TREE, "a")]
    assert ids == ["root", "b"]


def test_leaf_only_excludes_itself():
    ids = [n.id for n in valid_references(TREE, "b")]
    assert ids == ["root", "a", "a1", "a1x"]


def test_existing_cycle_does_not_loop_forever():
    cyclic = (Node("x", "y"), Node("y", "x"), Node("z"))
    assert descendant_ids(cyclic, "x") == {"y"}
    assert [n.id for n in valid_references(cyclic, "x")] == ["z"]
