"""Deterministic config hashing using SHA-256 over sorted JSON."""

import hashlib
import json
from dataclasses import asdict
from typing import Any

from mazes.config.maze import MazeConfig


def config_hash(config: Any) -> str:
    """Deterministic SHA-256 hash of a config dataclass.

    Returns:
        First 16 hex characters of the SHA-256 hash.
    """
    serialized = json.dumps(
        asdict(config),
        sort_keys=True,
        ensure_ascii=True,
        separators=(",", ":"),
        indent=None,
    )
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()[:16]


def maze_id(config: MazeConfig) -> str:
    """Scannable identifier for the maze a config produces.

    Only grid parameters and the seed determine the maze, so solve
    settings and the description are left out.

    Format: {rows}x{cols}_s{seed}_{grid hash}
    Example: 10x10_s42_3f1c9a0b7e2d4c55
    """
    return (
        f"{config.grid.rows}x{config.grid.cols}"
        f"_s{config.seed}"
        f"_{config_hash(config.grid)}"
    )
