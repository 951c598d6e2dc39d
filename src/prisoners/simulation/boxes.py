"""Box contents: random permutations and their cycles."""

import numpy as np

# boxes[i] is the prisoner number hidden in box i
Boxes = tuple[int, ...]


def make_boxes(num_boxes: int, rng: np.random.Generator | None = None) -> Boxes:
    """Shuffle the prisoner numbers 0..num_boxes-1 into the boxes.

    Every permutation is equally likely (Fisher-Yates shuffle).

    Args:
        num_boxes: Number of boxes
        rng: Random number generator (None = fresh generator from OS entropy)

    Returns:
        Immutable permutation of range(num_boxes)
    """
    rng = rng if rng is not None else np.random.default_rng()
    return tuple(rng.permutation(num_boxes).tolist())


def cycle_lengths(boxes: Boxes) -> list[int]:
    """Lengths of the cycles of a permutation, largest first."""
    seen = [False] * len(boxes)
    lengths: list[int] = []

    for start in range(len(boxes)):
        if seen[start]:
            continue
        length = 0
        current = start
        while not seen[current]:
            seen[current] = True
            current = boxes[current]
            length += 1
        lengths.append(length)

    return sorted(lengths, reverse=True)
