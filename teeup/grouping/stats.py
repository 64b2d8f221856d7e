"""
Per-group rating statistics.
"""
from typing import List, Optional

from teeup.grouping.models import Group, Partition


def average_rating(group: Group) -> Optional[float]:
    """
    Mean handicap of the rated members of a group.

    Unrated members are skipped. Returns None when nobody in the group has
    a rating. No rounding is applied.
    """
    ratings = [p.skill_rating for p in group if p.skill_rating is not None]
    if not ratings:
        return None
    return sum(ratings) / len(ratings)


def average_ratings(partition: Partition) -> List[Optional[float]]:
    """average_rating for every group, in partition order."""
    return [average_rating(group) for group in partition]
