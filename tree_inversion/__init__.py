"""Binary tree inversion with recursive and iterative strategies."""

from .binary_tree import BinaryTree, Node
from .config import DemoConfig, DemoConfigError, load_demo_config
from .level_order import (
    TreeBuildError,
    build_tree_from_level_order,
    copy_tree,
    in_order_values,
    level_order_traversal,
    render_tree,
)
from .profiling import StrategyProfile, compare_strategies, write_profiles_to_csv

__all__ = [
    "BinaryTree",
    "DemoConfig",
    "DemoConfigError",
    "Node",
    "StrategyProfile",
    "TreeBuildError",
    "build_tree_from_level_order",
    "compare_strategies",
    "copy_tree",
    "in_order_values",
    "level_order_traversal",
    "load_demo_config",
    "render_tree",
    "write_profiles_to_csv",
]
