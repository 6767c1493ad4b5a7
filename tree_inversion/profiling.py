"""Side-by-side profiling of the recursive and iterative inversion strategies.

``compare_strategies`` inverts two structural copies of a tree, one per
strategy, under :mod:`tracemalloc` and verifies that both copies end up with the
same shape.  The caller's tree is never mutated.  ``write_profiles_to_csv``
persists the captured metrics for later comparison.
"""

from __future__ import annotations

from dataclasses import dataclass
import csv
import logging
import time
import tracemalloc
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple

from .binary_tree import BinaryTree, Node
from .level_order import copy_tree, in_order_values, level_order_traversal

logger = logging.getLogger(__name__)

__all__ = [
    "StrategyProfile",
    "compare_strategies",
    "write_profiles_to_csv",
]

CSV_HEADER = ["strategy", "node_count", "time_seconds", "peak_bytes"]


@dataclass(frozen=True)
class StrategyProfile:
    """Timing and memory captured for one inversion strategy."""

    name: str
    node_count: int
    time_seconds: float
    peak_bytes: int

    def to_row(self) -> List[str]:
        """Serialise the profile for CSV persistence."""

        return [
            self.name,
            str(self.node_count),
            f"{self.time_seconds:.9f}",
            str(self.peak_bytes),
        ]


def _run(
    name: str, invert: Callable[[Optional[Node]], Optional[Node]], root: Optional[Node]
) -> Tuple[float, int]:
    tracemalloc.start()
    try:
        start = time.perf_counter()
        invert(root)
        elapsed = time.perf_counter() - start
        current, peak = tracemalloc.get_traced_memory()
        logger.debug("%s traced memory: current=%d peak=%d", name, current, peak)
    finally:
        if tracemalloc.is_tracing():
            tracemalloc.stop()
    return elapsed, peak


def compare_strategies(root: Optional[Node]) -> Tuple[StrategyProfile, StrategyProfile]:
    """Profile both inversion strategies on copies of *root*.

    Returns ``(recursive, iterative)`` profiles.  Raises ``AssertionError`` when
    the two mirrored copies differ, and ``RecursionError`` when *root* is deeper
    than the recursive strategy can handle.
    """

    tree = BinaryTree()
    recursive_copy = copy_tree(root)
    iterative_copy = copy_tree(root)
    node_count = len(in_order_values(root))

    recursive_time, recursive_peak = _run(
        "recursive", tree.invert_recursive, recursive_copy
    )
    iterative_time, iterative_peak = _run(
        "iterative", tree.invert_iterative, iterative_copy
    )

    recursive_shape = level_order_traversal(recursive_copy)
    iterative_shape = level_order_traversal(iterative_copy)
    if recursive_shape != iterative_shape:
        raise AssertionError(
            "Inversion strategies produced divergent trees: "
            f"recursive={recursive_shape}, iterative={iterative_shape}"
        )

    logger.info(
        "Inverted %d nodes: recursive %.6fs / %d bytes, iterative %.6fs / %d bytes",
        node_count,
        recursive_time,
        recursive_peak,
        iterative_time,
        iterative_peak,
    )

    return (
        StrategyProfile(
            name="recursive",
            node_count=node_count,
            time_seconds=recursive_time,
            peak_bytes=recursive_peak,
        ),
        StrategyProfile(
            name="iterative",
            node_count=node_count,
            time_seconds=iterative_time,
            peak_bytes=iterative_peak,
        ),
    )


def write_profiles_to_csv(
    path: Path, profiles: Iterable[StrategyProfile], *, newline: str = ""
) -> None:
    """Persist profiling results to ``path`` using a fixed header."""

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline=newline) as handle:
        writer = csv.writer(handle)
        writer.writerow(CSV_HEADER)
        for profile in profiles:
            writer.writerow(profile.to_row())
