"""Simulation engine components."""

from .boxes import Boxes, cycle_lengths, make_boxes
from .strategy import LoopStrategy, RandomStrategy, Strategy, StrategyKind, get_strategy
from .trial import SearcherStatus, run_all, run_single, run_trial, search

__all__ = [
    "Boxes",
    "LoopStrategy",
    "RandomStrategy",
    "SearcherStatus",
    "Strategy",
    "StrategyKind",
    "cycle_lengths",
    "get_strategy",
    "make_boxes",
    "run_all",
    "run_single",
    "run_trial",
    "search",
]
