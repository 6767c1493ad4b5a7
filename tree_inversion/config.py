"""Demo configuration loading.

A configuration file is optional; without one the demo uses the canonical
seven-node fixture and the original recursive-then-iterative sequence.  Files
ending in ``.json`` are parsed with :mod:`json`, anything else as YAML.

Example YAML payload::

    values: [4, 2, 7, 1, 3, 6, 9]
    steps: [recursive, iterative]
    separator: " "
    render: false
"""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence, Tuple

import yaml

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_STEPS",
    "DEFAULT_VALUES",
    "DemoConfig",
    "DemoConfigError",
    "STRATEGIES",
    "load_demo_config",
    "parse_steps",
    "parse_values",
]

DEFAULT_VALUES: Tuple[Optional[int], ...] = (4, 2, 7, 1, 3, 6, 9)
STRATEGIES = ("recursive", "iterative")
DEFAULT_STEPS: Tuple[str, ...] = STRATEGIES
_NULL_TOKENS = {"", "none", "null"}


class DemoConfigError(ValueError):
    """Raised when demo configuration or CLI payloads are invalid."""


@dataclass(frozen=True)
class DemoConfig:
    """Validated demo settings."""

    values: Tuple[Optional[int], ...] = DEFAULT_VALUES
    steps: Tuple[str, ...] = DEFAULT_STEPS
    separator: str = " "
    render: bool = False


def parse_values(payload: str | Sequence[object]) -> Tuple[Optional[int], ...]:
    """Normalise a level-order payload from a comma separated string or a list.

    ``null``/``none`` (any case) or an empty item in a string payload become
    ``None`` placeholders.
    """

    if isinstance(payload, str):
        items: list[object] = []
        for token in payload.split(","):
            token = token.strip()
            if token.lower() in _NULL_TOKENS:
                items.append(None)
                continue
            try:
                items.append(int(token, 10))
            except ValueError as exc:
                raise DemoConfigError(f"Invalid tree value {token!r}") from exc
    elif isinstance(payload, Sequence):
        items = list(payload)
    else:
        raise DemoConfigError("values must be a list or a comma separated string")

    normalised: list[Optional[int]] = []
    for index, item in enumerate(items):
        if item is not None and (not isinstance(item, int) or isinstance(item, bool)):
            raise DemoConfigError(
                f"values[{index}] must be an integer or null, got {item!r}"
            )
        normalised.append(item)
    return tuple(normalised)


def parse_steps(payload: str | Sequence[object]) -> Tuple[str, ...]:
    """Normalise the sequence of inversion strategies to apply."""

    if isinstance(payload, str):
        items: list[object] = [token.strip() for token in payload.split(",") if token.strip()]
    elif isinstance(payload, Sequence):
        items = list(payload)
    else:
        raise DemoConfigError("steps must be a list or a comma separated string")

    steps: list[str] = []
    for item in items:
        name = str(item).strip().lower()
        if name not in STRATEGIES:
            raise DemoConfigError(
                f"Unknown inversion strategy {item!r}; expected one of {', '.join(STRATEGIES)}"
            )
        steps.append(name)
    return tuple(steps)


def _read_payload(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DemoConfigError(f"Unable to read config {path}: {exc}") from exc

    if path.suffix.lower() == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise DemoConfigError(f"Failed to parse JSON from {path}: {exc}") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DemoConfigError(f"Failed to parse YAML from {path}: {exc}") from exc


def load_demo_config(path: Optional[str | Path]) -> DemoConfig:
    """Load demo settings from *path*, falling back to defaults when ``None``."""

    if path is None:
        return DemoConfig()

    config_path = Path(path)
    payload = _read_payload(config_path)
    if payload is None:
        payload = {}
    if not isinstance(payload, Mapping):
        raise DemoConfigError("Config root must be a mapping")

    unknown = sorted(set(payload) - {"values", "steps", "separator", "render"})
    if unknown:
        raise DemoConfigError(f"Unknown config keys: {', '.join(map(str, unknown))}")

    separator = payload.get("separator", " ")
    if not isinstance(separator, str):
        raise DemoConfigError("separator must be a string")
    render = payload.get("render", False)
    if not isinstance(render, bool):
        raise DemoConfigError("render must be a boolean")

    config = DemoConfig(
        values=parse_values(payload["values"]) if "values" in payload else DEFAULT_VALUES,
        steps=parse_steps(payload["steps"]) if "steps" in payload else DEFAULT_STEPS,
        separator=separator,
        render=render,
    )
    logger.debug("Loaded demo config from %s: %s", config_path, config)
    return config
