"""Data models for prisoners simulation."""

from .config import NUM_BOXES, NUM_PICKS, NUM_TRIES, ExperimentConfig

__all__ = [
    "ExperimentConfig",
    "NUM_BOXES",
    "NUM_PICKS",
    "NUM_TRIES",
]
