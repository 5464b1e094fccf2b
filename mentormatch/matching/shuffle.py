"""Seeded shuffles used by the ordering engine.

weighted_shuffle performs weighted sampling without replacement: at every
step an item is drawn with probability proportional to its weight among the
items still remaining. Higher-weighted items tend to come first without ever
being guaranteed to.

Complexity is O(n^2) in the number of items, which is fine for the tens to low
hundreds of candidates a listing shows. Switching to an O(n log n) scheme
(exponential-variate sort keys, say) would change the permutation produced
for a given seed, so any such change has to ship as a new ordering version.
"""

from typing import Callable, List, Sequence, TypeVar

T = TypeVar("T")


class WeightMismatchError(ValueError):
    """Raised when items and weights have different lengths.

    This is a caller bug, never a runtime condition to recover from.
    """

    def __init__(self, item_count: int, weight_count: int):
        self.item_count = item_count
        self.weight_count = weight_count
        super().__init__(
            f"Items and weights must have the same length "
            f"(got {item_count} items and {weight_count} weights)"
        )


def weighted_shuffle(
    items: Sequence[T], weights: Sequence[int], rng: Callable[[], float]
) -> List[T]:
    """Return a weighted random permutation of items.

    Algorithm:
    1. Keep a working list of (item, weight) pairs
    2. Draw r = rng() * total remaining weight
    3. Walk the list subtracting weights; the first item that brings r to <= 0 wins
    4. Move the winner to the result and repeat until the working list is empty

    Exactly one rng() call is made per item. If the walk never crosses zero
    (total weight 0, or float rounding) the first remaining item is taken.

    Args:
        items: Items to permute (not modified)
        weights: Non-negative weight per item
        rng: Generator returning floats in [0, 1)

    Returns:
        New list containing every item exactly once

    Raises:
        WeightMismatchError: If len(items) != len(weights)
    """
    if len(items) != len(weights):
        raise WeightMismatchError(len(items), len(weights))

    remaining = list(zip(items, weights))
    result: List[T] = []

    while remaining:
        total_weight = sum(weight for _, weight in remaining)
        value = rng() * total_weight

        selected_index = 0
        if total_weight > 0:
            for index, (_, weight) in enumerate(remaining):
                value -= weight
                if value <= 0:
                    selected_index = index
                    break

        item, _ = remaining.pop(selected_index)
        result.append(item)

    return result


def fisher_yates_shuffle(items: Sequence[T], rng: Callable[[], float]) -> List[T]:
    """Return a uniform random permutation of items.

    Classic backwards Fisher-Yates: for i from n-1 down to 1 swap position i
    with j = floor(rng() * (i + 1)). Makes n-1 rng() calls. Kept for the
    legacy no-viewer ordering; it does not produce the same permutation as
    weighted_shuffle with uniform weights.
    """
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = int(rng() * (i + 1))
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled
