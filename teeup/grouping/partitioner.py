"""
Group partitioning.

Splits a roster snapshot into groups of a target size using one of three
strategies:
- random: shuffle, then cut into consecutive slices
- stratified: shuffle each category bucket, then deal round-robin
- balanced: sort by handicap, then snake-draft across groups

Every strategy places each participant exactly once, and group sizes
differ by at most one.
"""

import math
from typing import Callable, Dict, List, Sequence, TypeVar, Union

from teeup.grouping.models import Category, Participant, Partition, Strategy
from teeup.grouping.shuffle import shuffle

T = TypeVar('T')

# Bucket order for the stratified strategy
CATEGORY_ORDER = [Category.A, Category.B, Category.UNSPECIFIED]


def validate_group_size(group_size: int) -> int:
    """Raise ValueError unless group_size is an integer >= 1."""
    if isinstance(group_size, bool) or not isinstance(group_size, int):
        raise ValueError(f"Group size must be an integer, got {group_size!r}")
    if group_size < 1:
        raise ValueError(f"Group size must be at least 1, got {group_size}")
    return group_size


def ideal_group_count(num_participants: int, group_size: int) -> int:
    """Number of groups needed so that no group exceeds group_size."""
    return math.ceil(num_participants / group_size)


def group_sizes(partition: Partition) -> List[int]:
    return [len(group) for group in partition]


def chunk(items: Sequence[T], size: int) -> List[List[T]]:
    """Cut items into consecutive chunks of size; the last holds the remainder."""
    return [list(items[i:i + size]) for i in range(0, len(items), size)]


def slice_evenly(items: Sequence[T], count: int) -> List[List[T]]:
    """
    Cut items into count consecutive slices whose lengths differ by at most one.

    Longer slices come first. With len(items) a multiple of count this is
    the same as chunk(items, len(items) // count).
    """
    base, extra = divmod(len(items), count)
    slices = []
    start = 0
    for i in range(count):
        length = base + (1 if i < extra else 0)
        slices.append(list(items[start:start + length]))
        start += length
    return slices


def fold_remainder(chunks: List[List[T]], ideal_count: int) -> List[List[T]]:
    """
    Deal the members of any chunk beyond ideal_count into the first chunks.

    Members are placed round-robin starting at chunk 0. Does nothing unless
    there are more chunks than ideal_count.
    """
    if len(chunks) <= ideal_count:
        return chunks

    kept = [list(c) for c in chunks[:ideal_count]]
    leftovers = [item for c in chunks[ideal_count:] for item in c]
    for i, item in enumerate(leftovers):
        kept[i % ideal_count].append(item)
    return kept


def _uniform_random(participants: Sequence[Participant], group_size: int, rng) -> Partition:
    shuffled = shuffle(participants, rng)
    return slice_evenly(shuffled, ideal_group_count(len(shuffled), group_size))


def _uniform_random_folded(participants: Sequence[Participant], group_size: int, rng) -> Partition:
    # No undersized group: a short final chunk is folded into the full ones
    shuffled = shuffle(participants, rng)
    ideal_count = max(1, len(shuffled) // group_size)
    return fold_remainder(chunk(shuffled, group_size), ideal_count)


def _gender_stratified(participants: Sequence[Participant], group_size: int, rng) -> Partition:
    buckets: Dict[Category, List[Participant]] = {c: [] for c in CATEGORY_ORDER}
    for p in participants:
        buckets[p.category].append(p)

    count = max(1, ideal_group_count(len(participants), group_size))
    groups: Partition = [[] for _ in range(count)]

    # The cursor carries over between buckets so group sizes stay within one
    cursor = 0
    for category in CATEGORY_ORDER:
        for p in shuffle(buckets[category], rng):
            groups[cursor % count].append(p)
            cursor += 1
    return groups


def handicap_sort_key(participant: Participant):
    """Ascending handicap, unrated players last."""
    if participant.skill_rating is None:
        return (1, 0.0)
    return (0, participant.skill_rating)


def _handicap_balanced(participants: Sequence[Participant], group_size: int, rng=None) -> Partition:
    ordered = sorted(participants, key=handicap_sort_key)
    count = ideal_group_count(len(ordered), group_size)
    groups: Partition = [[] for _ in range(count)]

    for i, p in enumerate(ordered):
        round_num, pos = divmod(i, count)
        index = pos if round_num % 2 == 0 else count - 1 - pos
        groups[index].append(p)
    return groups


STRATEGY_FUNCTIONS: Dict[Strategy, Callable[..., Partition]] = {
    Strategy.UNIFORM_RANDOM: _uniform_random,
    Strategy.GENDER_STRATIFIED: _gender_stratified,
    Strategy.HANDICAP_BALANCED: _handicap_balanced,
}


def partition(
    participants: Sequence[Participant],
    group_size: int,
    strategy: Union[Strategy, str] = Strategy.UNIFORM_RANDOM,
    rng=None,
    fold_remainder: bool = False
) -> Partition:
    """
    Split participants into groups.

    Args:
        participants: Roster snapshot (not modified)
        group_size: Target players per group, at least 1
        strategy: Strategy or its string value ('random', 'stratified', 'balanced')
        rng: Random source with a random() method (default: the random module)
        fold_remainder: For the random strategy, fold a short final group
            into the full groups instead of keeping it

    Returns:
        List of groups; empty if participants is empty

    Raises:
        ValueError: If group_size is invalid or strategy is unknown
    """
    validate_group_size(group_size)
    strategy = Strategy(strategy)

    if not participants:
        return []

    if strategy is Strategy.UNIFORM_RANDOM and fold_remainder:
        return _uniform_random_folded(participants, group_size, rng)

    return STRATEGY_FUNCTIONS[strategy](participants, group_size, rng)
