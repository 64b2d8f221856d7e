"""
Random permutation shared by the randomized strategies.
"""
import random
from typing import List, Sequence, TypeVar

T = TypeVar('T')


def shuffle(items: Sequence[T], rng=None) -> List[T]:
    """
    Return a uniformly shuffled copy of items.

    Each element gets an independent key from rng.random() and the copy is
    sorted by key. The input is never modified.

    Args:
        items: Any ordered sequence
        rng: Random source with a random() method (default: the random module)

    Returns:
        New list with the same elements in random order
    """
    source = rng if rng is not None else random
    keyed = [(source.random(), i) for i in range(len(items))]
    keyed.sort()
    return [items[i] for _, i in keyed]
