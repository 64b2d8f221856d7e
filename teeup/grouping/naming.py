"""
Display names for groups.
"""
from typing import List, Optional, Sequence

from teeup.grouping.shuffle import shuffle
from teeup.utils.constants import TEAM_NAME_POOL, FALLBACK_GROUP_LABEL


def fallback_label(index: int) -> str:
    """Deterministic label for a 0-based group index."""
    return FALLBACK_GROUP_LABEL.format(number=index + 1)


def assign_names(
    group_count: int,
    rng=None,
    pool: Optional[Sequence[str]] = None
) -> List[str]:
    """
    Pick a name for each group.

    The pool is shuffled and names are taken in that order. Groups beyond
    the pool size get "Group N" (1-based) instead.

    Args:
        group_count: Number of names to return
        rng: Random source with a random() method (default: the random module)
        pool: Candidate names (default: TEAM_NAME_POOL)

    Returns:
        List of exactly group_count names
    """
    if group_count < 0:
        raise ValueError(f"Group count cannot be negative, got {group_count}")

    shuffled = shuffle(TEAM_NAME_POOL if pool is None else pool, rng)
    return [
        shuffled[i] if i < len(shuffled) else fallback_label(i)
        for i in range(group_count)
    ]
