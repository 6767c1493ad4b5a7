"""Binary tree inversion via recursive and iterative traversal.

The module exposes the two building blocks used throughout the package:

* ``Node`` – a ``@dataclass`` holding an integer payload and optional
  left/right children.
* ``BinaryTree`` – a thin container around a root node offering
  ``invert_recursive`` (pre-order depth-first swap), ``invert_iterative``
  (breadth-first swap driven by a FIFO queue) and an in-order ``print``.

Both inversion strategies rewire existing links in place; no node is created or
released.  An absent node is always a valid no-op.  Callers must supply an
acyclic tree: cycles are not detected and lead to non-terminating traversal.

``invert_recursive`` and ``print`` recurse once per level, so trees deeper
than :func:`sys.getrecursionlimit` raise ``RecursionError``.  Use
``invert_iterative`` for such inputs.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
import logging
import sys
from typing import Deque, Optional, TextIO

logger = logging.getLogger(__name__)

__all__ = [
    "Node",
    "BinaryTree",
]


@dataclass(slots=True)
class Node:
    """Tree vertex with an integer value and two optional children."""

    value: int
    left: Optional["Node"] = None
    right: Optional["Node"] = None


class BinaryTree:
    """Container owning a tree rooted at ``root``."""

    __slots__ = ("root",)

    def __init__(self, root: Optional[Node] = None) -> None:
        self.root = root

    def get_root(self) -> Optional[Node]:
        return self.root

    def set_root(self, node: Optional[Node]) -> None:
        """Replace the root reference without inspecting *node*."""

        self.root = node

    def invert_recursive(self, node: Optional[Node]) -> Optional[Node]:
        """Mirror the subtree at *node* depth-first and return *node*.

        Children are swapped before descending, then the new left subtree is
        processed ahead of the new right subtree.
        """

        if node is None:
            return None

        node.left, node.right = node.right, node.left
        self.invert_recursive(node.left)
        self.invert_recursive(node.right)
        return node

    def invert_iterative(self, node: Optional[Node]) -> Optional[Node]:
        """Mirror the subtree at *node* level by level and return *node*.

        Auxiliary memory is bounded by the widest level of the tree and the
        traversal is not limited by the interpreter's recursion depth.
        """

        if node is None:
            return None

        queue: Deque[Node] = deque([node])
        visited = 0
        while queue:
            current = queue.popleft()
            current.left, current.right = current.right, current.left
            visited += 1
            if current.left is not None:
                queue.append(current.left)
            if current.right is not None:
                queue.append(current.right)

        logger.debug("Iterative inversion swapped %d nodes", visited)
        return node

    def print(
        self,
        node: Optional[Node],
        *,
        file: Optional[TextIO] = None,
        sep: str = " ",
    ) -> None:
        """Write the subtree at *node* in-order, each value followed by *sep*."""

        if node is None:
            return

        stream = file if file is not None else sys.stdout
        self.print(node.left, file=stream, sep=sep)
        stream.write(f"{node.value}{sep}")
        self.print(node.right, file=stream, sep=sep)
