"""Reproducibility infrastructure: seed management."""

from mazes.reproducibility.seed import set_seed, verify_seed_determinism

__all__ = [
    "set_seed",
    "verify_seed_determinism",
]
