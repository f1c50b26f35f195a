"""Configuration for the runnable scripts (``config.yaml``, key ``geokernel``).

Example
-------
geokernel:
  hull:
    include_collinear: false
    turn: counterclockwise
  sweep:
    ignore_mutual_endpoints: false
  io:
    x_col: x
    y_col: y
    encoding: utf-8-sig
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from .geometry.orientation import TURN_PREDICATES

REPO_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_CONFIG = REPO_ROOT / "config.yaml"


@dataclass(frozen=True)
class KernelConfig:
    include_collinear: bool = False
    turn: str = "counterclockwise"
    ignore_mutual_endpoints: bool = False
    x_col: str = "x"
    y_col: str = "y"
    encoding: str = "utf-8-sig"

    def __post_init__(self):
        if self.turn not in TURN_PREDICATES:
            raise ValueError(f"hull.turn must be one of {sorted(TURN_PREDICATES)}, got {self.turn!r}")


def _section(root: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value = root.get(name, {})
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"geokernel.{name} must be a mapping")
    return value


def _get_bool(section: Mapping[str, Any], key: str, default: bool, where: str) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"{where}.{key} must be true/false, got {value!r}")
    return value


def _get_str(section: Mapping[str, Any], key: str, default: str, where: str) -> str:
    value = section.get(key, default)
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{where}.{key} must be a non-empty string, got {value!r}")
    return value.strip()


def config_from_mapping(raw: Any) -> KernelConfig:
    """Build a ``KernelConfig`` from the parsed YAML document."""
    if raw is None:
        return KernelConfig()
    if not isinstance(raw, dict):
        raise ValueError("config.yaml must be a mapping at the top level")
    root = raw.get("geokernel", {})
    if root is None:
        return KernelConfig()
    if not isinstance(root, dict):
        raise ValueError("config.yaml key 'geokernel' must be a mapping")

    hull = _section(root, "hull")
    sweep = _section(root, "sweep")
    io = _section(root, "io")
    defaults = KernelConfig()
    return KernelConfig(
        include_collinear=_get_bool(hull, "include_collinear", defaults.include_collinear, "hull"),
        turn=_get_str(hull, "turn", defaults.turn, "hull"),
        ignore_mutual_endpoints=_get_bool(sweep, "ignore_mutual_endpoints", defaults.ignore_mutual_endpoints, "sweep"),
        x_col=_get_str(io, "x_col", defaults.x_col, "io"),
        y_col=_get_str(io, "y_col", defaults.y_col, "io"),
        encoding=_get_str(io, "encoding", defaults.encoding, "io"),
    )


def load_config(config_path: str | Path | None = None) -> KernelConfig:
    """Read ``config.yaml``; with no path, use the repo default if it exists."""
    if config_path is None:
        if not DEFAULT_CONFIG.exists():
            return KernelConfig()
        config_path = DEFAULT_CONFIG
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config not found: {config_path}. Expected a YAML file with geokernel.*")
    raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    return config_from_mapping(raw)
