"""Construction and inspection helpers for :class:`~tree_inversion.binary_tree.Node` trees.

These helpers back the demo CLI and the test-suite:

* ``build_tree_from_level_order`` – materialise a tree from a level-order
  sequence that uses ``None`` placeholders for missing children.
* ``level_order_traversal`` – the inverse listing, handy for comparing shapes.
* ``in_order_values`` – in-order payloads as a list.
* ``copy_tree`` – structural copy built from fresh nodes.
* ``render_tree`` – deterministic ASCII rendering, one row per level.

Every helper walks the tree with an explicit queue or stack so arbitrarily
deep (skewed) trees never hit the interpreter's recursion limit.  Level walks
only expand the children of present nodes, keeping work linear in the node
count.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, Iterator, List, Optional, Tuple

from .binary_tree import Node


__all__ = [
    "TreeBuildError",
    "build_tree_from_level_order",
    "copy_tree",
    "in_order_values",
    "level_order_traversal",
    "render_tree",
]


PLACEHOLDER = "·"


class TreeBuildError(TypeError):
    """Raised when a level-order payload contains non-integer values."""


def _checked_value(value: object, position: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TreeBuildError(
            f"Level-order values must be integers or None (position {position}: {value!r})"
        )
    return value


def build_tree_from_level_order(values: Iterable[Optional[int]]) -> Optional[Node]:
    """Construct a tree from a level-order sequence.

    Placeholders are only expected for children of present nodes, so
    ``[1, None, 2, 3]`` describes ``1 -> right 2 -> left 3``.  Returns ``None``
    for an empty sequence or a ``None`` root.  Surplus values after the last
    attachable slot are ignored.
    """

    iterator = iter(enumerate(values))
    first = next(iterator, None)
    if first is None or first[1] is None:
        return None

    root = Node(_checked_value(first[1], first[0]))
    pending: Deque[Node] = deque([root])

    while pending:
        parent = pending.popleft()
        for side in ("left", "right"):
            entry = next(iterator, None)
            if entry is None:
                return root
            position, value = entry
            if value is None:
                continue
            child = Node(_checked_value(value, position))
            setattr(parent, side, child)
            pending.append(child)

    return root


def _iter_levels(root: Node) -> Iterator[List[Optional[Node]]]:
    """Yield the child slots of each level, ``None`` marking a missing child.

    Only present nodes contribute slots to the next level, so every level holds
    at most twice as many slots as the previous level has nodes.
    """

    level: List[Optional[Node]] = [root]
    while any(node is not None for node in level):
        yield level
        level = [
            child
            for node in level
            if node is not None
            for child in (node.left, node.right)
        ]


def level_order_traversal(root: Optional[Node]) -> List[Optional[int]]:
    """Return the level-order listing of *root* with trailing ``None`` trimmed.

    The listing is the input format accepted by
    :func:`build_tree_from_level_order`.
    """

    if root is None:
        return []

    listing = [
        None if node is None else node.value
        for level in _iter_levels(root)
        for node in level
    ]
    while listing[-1] is None:
        listing.pop()
    return listing


def in_order_values(root: Optional[Node]) -> List[int]:
    """Return the payloads of *root* visited left, current, right."""

    values: List[int] = []
    stack: List[Node] = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        values.append(current.value)
        current = current.right
    return values


def copy_tree(root: Optional[Node]) -> Optional[Node]:
    """Return a structurally identical tree made of new nodes."""

    if root is None:
        return None

    clone = Node(root.value)
    pairs: Deque[Tuple[Node, Node]] = deque([(root, clone)])
    while pairs:
        source, target = pairs.popleft()
        if source.left is not None:
            target.left = Node(source.left.value)
            pairs.append((source.left, target.left))
        if source.right is not None:
            target.right = Node(source.right.value)
            pairs.append((source.right, target.right))
    return clone


def render_tree(root: Optional[Node]) -> str:
    """Render *root* level by level, marking missing children with ``·``.

    Each row lists the child slots of the previous row's nodes only, so a
    skewed tree renders two entries per level instead of a full-width row.
    """

    if root is None:
        return "<empty>"

    return "\n".join(
        " ".join(PLACEHOLDER if node is None else str(node.value) for node in level)
        for level in _iter_levels(root)
    )
