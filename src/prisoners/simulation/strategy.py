"""Box-opening strategies."""

from enum import Enum

import numpy as np

from prisoners.simulation.boxes import make_boxes


class StrategyKind(str, Enum):
    """Available strategies."""

    RANDOM = "random"
    LOOP = "loop"

    @property
    def label(self) -> str:
        """Human readable name."""
        return self.value.capitalize()


class Strategy:
    """Chooses which box a single prisoner opens next.

    A new instance is created for every prisoner, so instances may keep
    per-prisoner state between picks.
    """

    def __init__(self, index: int, num_boxes: int, rng: np.random.Generator):
        """Set up the strategy for one prisoner.

        Args:
            index: The prisoner's own number
            num_boxes: Number of boxes in the room
            rng: Random number generator
        """
        self.index = index
        self.num_boxes = num_boxes

    def next_index(self, last_inside: int | None) -> int:
        """Return the next box to open.

        Args:
            last_inside: Number found in the previously opened box
                (None before the first pick)

        Returns:
            Index of the box to open
        """
        raise NotImplementedError


class RandomStrategy(Strategy):
    """Opens boxes in a random order without repeats.

    The prisoner shuffles their own copy of the box indices and pops one
    off the back per pick.
    """

    def __init__(self, index: int, num_boxes: int, rng: np.random.Generator):
        super().__init__(index, num_boxes, rng)
        self.try_queue = list(make_boxes(num_boxes, rng))

    def next_index(self, last_inside: int | None) -> int:
        # An empty queue means more picks than boxes, which config forbids
        return self.try_queue.pop()


class LoopStrategy(Strategy):
    """Follows the cycle starting at the prisoner's own box.

    The first pick is the box matching the prisoner's number, every later
    pick is the box matching the number just found.
    """

    def next_index(self, last_inside: int | None) -> int:
        if last_inside is None:
            return self.index
        return last_inside


STRATEGIES: dict[StrategyKind, type[Strategy]] = {
    StrategyKind.RANDOM: RandomStrategy,
    StrategyKind.LOOP: LoopStrategy,
}


def get_strategy(kind: StrategyKind | str) -> type[Strategy]:
    """Look up the strategy class for a kind (or its string value)."""
    return STRATEGIES[StrategyKind(kind)]
