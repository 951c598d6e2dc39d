"""Trial runner: all prisoners searching one room."""

from enum import Enum

import numpy as np

from prisoners.simulation.boxes import Boxes, make_boxes
from prisoners.simulation.strategy import Strategy, StrategyKind, get_strategy


class SearcherStatus(str, Enum):
    """Search state of a single prisoner."""

    SEARCHING = "searching"
    FOUND = "found"
    EXHAUSTED = "exhausted"


def search(strategy: Strategy, index: int, boxes: Boxes, num_picks: int) -> SearcherStatus:
    """Let one prisoner open up to num_picks boxes.

    Args:
        strategy: The prisoner's strategy state
        index: The prisoner's own number
        boxes: Box contents for this trial
        num_picks: Pick budget

    Returns:
        FOUND if the prisoner's number turned up, EXHAUSTED otherwise
    """
    status = SearcherStatus.SEARCHING
    last_inside = None

    for _ in range(num_picks):
        found = boxes[strategy.next_index(last_inside)]
        if found == index:
            status = SearcherStatus.FOUND
            break
        last_inside = found
    else:
        status = SearcherStatus.EXHAUSTED

    return status


def run_single(
    strategy_cls: type[Strategy],
    index: int,
    boxes: Boxes,
    num_picks: int,
    rng: np.random.Generator,
) -> bool:
    """A single prisoner searching for themselves. Returns True if found."""
    strategy = strategy_cls(index, len(boxes), rng)
    return search(strategy, index, boxes, num_picks) is SearcherStatus.FOUND


def run_all(
    strategy_cls: type[Strategy],
    boxes: Boxes,
    num_picks: int,
    rng: np.random.Generator,
) -> bool:
    """All prisoners searching for themselves. Returns True if all found.

    Stops at the first prisoner who fails.
    """
    return all(
        run_single(strategy_cls, index, boxes, num_picks, rng)
        for index in range(len(boxes))
    )


def run_trial(
    kind: StrategyKind | str,
    num_boxes: int,
    num_picks: int,
    rng: np.random.Generator,
) -> bool:
    """Run one trial against a freshly shuffled room.

    Args:
        kind: Strategy every prisoner uses
        num_boxes: Number of boxes and prisoners
        num_picks: Pick budget per prisoner
        rng: Random number generator

    Returns:
        True if every prisoner found their number
    """
    boxes = make_boxes(num_boxes, rng)
    return run_all(get_strategy(kind), boxes, num_picks, rng)
