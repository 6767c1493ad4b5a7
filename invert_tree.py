"""Command line demo for binary tree inversion.

Builds a tree from a level-order sequence (the canonical seven-node fixture by
default), prints its in-order traversal, then applies each configured
inversion strategy in turn and prints the traversal after every step.  With the
defaults the output walks ``1 2 3 4 6 7 9`` to ``9 7 6 4 3 2 1`` via recursive
inversion and back again via iterative inversion.

Settings come from an optional JSON/YAML file (``--config``); ``--values`` and
``--steps`` override the file.  ``--profile-output`` additionally compares both
strategies on copies of the tree and writes the metrics to CSV.

Exit status is 0 on success, 2 for invalid input and 1 when profiling fails or
the tree is deeper than in-order printing and recursive inversion can handle.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from tree_inversion.binary_tree import BinaryTree, Node
from tree_inversion.config import (
    DemoConfig,
    DemoConfigError,
    load_demo_config,
    parse_steps,
    parse_values,
)
from tree_inversion.level_order import (
    TreeBuildError,
    build_tree_from_level_order,
    render_tree,
)
from tree_inversion.profiling import compare_strategies, write_profiles_to_csv

logger = logging.getLogger(__name__)

TITLE = "BINARY TREE INVERSION"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Invert a binary tree recursively and iteratively, printing each state.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Optional JSON or YAML file with values, steps, separator and render keys.",
    )
    parser.add_argument(
        "--values",
        type=str,
        default=None,
        help=(
            "Comma separated level-order values; use 'null' for missing children. "
            "Defaults to 4,2,7,1,3,6,9."
        ),
    )
    parser.add_argument(
        "--steps",
        type=str,
        default=None,
        help="Comma separated inversion strategies to apply (recursive, iterative).",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Also print a level-by-level rendering after every state.",
    )
    parser.add_argument(
        "--profile-output",
        type=Path,
        default=None,
        help="Compare both strategies on copies of the tree and write the metrics to this CSV.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )
    return parser


def _resolve_config(args: argparse.Namespace) -> DemoConfig:
    config = load_demo_config(args.config)
    values = parse_values(args.values) if args.values is not None else config.values
    steps = parse_steps(args.steps) if args.steps is not None else config.steps
    return DemoConfig(
        values=values,
        steps=steps,
        separator=config.separator,
        render=config.render or args.render,
    )


def _emit_state(tree: BinaryTree, label: str, config: DemoConfig) -> None:
    print(f"{label}: ", end="")
    tree.print(tree.get_root(), sep=config.separator)
    print()
    if config.render:
        print(render_tree(tree.get_root()))


def run_demo(root: Optional[Node], config: DemoConfig) -> BinaryTree:
    """Print the original tree and its state after each configured inversion."""

    tree = BinaryTree()
    tree.set_root(root)

    print(TITLE)
    _emit_state(tree, "Original tree", config)
    for step in config.steps:
        if step == "recursive":
            tree.invert_recursive(tree.get_root())
        else:
            tree.invert_iterative(tree.get_root())
        logger.info("Applied %s inversion", step)
        _emit_state(tree, f"After {step} inversion", config)
    return tree


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for the inversion demo."""

    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    try:
        config = _resolve_config(args)
        root = build_tree_from_level_order(config.values)
    except (DemoConfigError, TreeBuildError) as exc:
        logger.error("Invalid demo input: %s", exc)
        return 2

    if args.profile_output is not None:
        try:
            profiles = compare_strategies(root)
        except (AssertionError, RecursionError) as exc:
            logger.error("Failed to profile inversion strategies: %s", exc)
            return 1
        write_profiles_to_csv(args.profile_output, profiles)
        logger.info("Profiles written to %s", args.profile_output)

    try:
        run_demo(root, config)
    except RecursionError as exc:
        logger.error(
            "Tree is too deep for in-order printing or recursive inversion: %s", exc
        )
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
