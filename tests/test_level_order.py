from __future__ import annotations

import pytest

from tree_inversion.binary_tree import Node
from tree_inversion.level_order import (
    TreeBuildError,
    build_tree_from_level_order,
    copy_tree,
    in_order_values,
    level_order_traversal,
    render_tree,
)


def test_build_tree_from_level_order_wires_children() -> None:
    root = build_tree_from_level_order([4, 2, 7, 1, 3, 6, 9])
    assert root == Node(4, Node(2, Node(1), Node(3)), Node(7, Node(6), Node(9)))


def test_build_tree_skips_placeholders_of_missing_parents() -> None:
    root = build_tree_from_level_order([1, None, 2, 3])
    assert root == Node(1, right=Node(2, left=Node(3)))


@pytest.mark.parametrize("values", [[], [None], [None, 1, 2]])
def test_build_tree_returns_none_for_empty_input(values: list) -> None:
    assert build_tree_from_level_order(values) is None


def test_build_tree_accepts_generators() -> None:
    root = build_tree_from_level_order(value for value in (1, 2, 3))
    assert level_order_traversal(root) == [1, 2, 3]


@pytest.mark.parametrize("values", [[1, "two"], ["1"], [1, True], [1.5]])
def test_build_tree_rejects_non_integer_payloads(values: list) -> None:
    with pytest.raises(TreeBuildError):
        build_tree_from_level_order(values)


def test_tree_build_error_is_a_type_error() -> None:
    with pytest.raises(TypeError):
        build_tree_from_level_order([1, 2, object()])


def test_level_order_round_trip() -> None:
    values = [1, 2, 3, None, 5, None, 7]
    assert level_order_traversal(build_tree_from_level_order(values)) == values

    skewed = [1, 2, None, 3, None, 4]
    assert level_order_traversal(build_tree_from_level_order(skewed)) == skewed


def test_level_order_traversal_of_empty_tree() -> None:
    assert level_order_traversal(None) == []


def test_in_order_values() -> None:
    root = build_tree_from_level_order([4, 2, 7, 1, 3, 6, 9])
    assert in_order_values(root) == [1, 2, 3, 4, 6, 7, 9]
    assert in_order_values(None) == []


def test_copy_tree_creates_new_nodes() -> None:
    root = build_tree_from_level_order([4, 2, 7, 1, None, 6])
    clone = copy_tree(root)

    assert clone == root
    assert clone is not root
    assert clone.left is not root.left
    assert clone.right.left is not root.right.left

    clone.left.value = 99
    assert root.left.value == 2
    assert copy_tree(None) is None


def test_helpers_handle_deep_trees() -> None:
    depth = 3_000
    root = Node(0)
    current = root
    for value in range(1, depth):
        current.right = Node(value)
        current = current.right

    clone = copy_tree(root)
    assert in_order_values(clone) == list(range(depth))
    assert len(level_order_traversal(clone)) == 2 * depth - 1


def test_render_tree_renders_structure_with_placeholders() -> None:
    root = Node(1, Node(2, right=Node(4)), Node(3))
    assert render_tree(root) == "\n".join(["1", "2 3", "· 4 · ·"])


def test_render_tree_trims_placeholder_only_levels() -> None:
    root = build_tree_from_level_order([4, 2, 7])
    assert render_tree(root) == "\n".join(["4", "2 7"])


def test_render_tree_empty_tree() -> None:
    assert render_tree(None) == "<empty>"


def test_render_tree_stays_linear_for_skewed_trees() -> None:
    root = Node(0)
    current = root
    for value in range(1, 40):
        current.left = Node(value)
        current = current.left

    rows = render_tree(root).splitlines()

    assert len(rows) == 40
    assert rows[0] == "0"
    assert rows[1:] == [f"{value} ·" for value in range(1, 40)]


def test_render_tree_only_expands_present_nodes() -> None:
    root = build_tree_from_level_order([1, None, 2, 3, None, None, 4])
    assert render_tree(root) == "\n".join(["1", "· 2", "3 ·", "· 4"])
