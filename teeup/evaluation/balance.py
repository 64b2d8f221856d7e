"""
Balance metrics for a draw.

Measures how evenly handicaps are spread across groups so strategies can
be compared. Only groups with a defined average take part in the rating
metrics.
"""

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import numpy as np

from teeup.grouping.models import Participant, Partition, Strategy
from teeup.grouping.partitioner import partition, group_sizes
from teeup.grouping.stats import average_ratings


@dataclass
class BalanceSummary:
    """Balance metrics for one partition."""
    group_averages: List[Optional[float]] = field(default_factory=list)
    rating_spread: Optional[float] = None   # max - min of group averages
    rating_std: Optional[float] = None      # population std of group averages
    size_spread: int = 0                    # max - min of group sizes

    def to_dict(self) -> dict:
        return {
            'group_averages': self.group_averages,
            'rating_spread': self.rating_spread,
            'rating_std': self.rating_std,
            'size_spread': self.size_spread,
        }


@dataclass
class StrategyComparison:
    """Aggregate rating spread of one strategy over repeated draws."""
    strategy: Strategy
    trials: int
    mean_spread: Optional[float]
    worst_spread: Optional[float]


def summarize_balance(groups: Partition) -> BalanceSummary:
    """
    Compute balance metrics for a partition.

    Args:
        groups: Partition to evaluate

    Returns:
        BalanceSummary; rating metrics are None if no group has a rated member
    """
    averages = average_ratings(groups)
    sizes = group_sizes(groups)
    size_spread = int(np.ptp(sizes)) if sizes else 0

    defined = np.array([a for a in averages if a is not None], dtype=float)
    if defined.size == 0:
        return BalanceSummary(group_averages=averages, size_spread=size_spread)

    return BalanceSummary(
        group_averages=averages,
        rating_spread=float(np.ptp(defined)),
        rating_std=float(np.std(defined)),
        size_spread=size_spread
    )


def compare_strategies(
    participants: Sequence[Participant],
    group_size: int,
    trials: int = 100,
    seed: Optional[int] = None,
    strategies: Optional[Sequence[Strategy]] = None
) -> List[StrategyComparison]:
    """
    Draw with each strategy repeatedly and aggregate the rating spread.

    Args:
        participants: Roster snapshot
        group_size: Target group size
        trials: Draws per strategy
        seed: Seed for a private random source (None = unseeded)
        strategies: Strategies to compare (default: all)

    Returns:
        One StrategyComparison per strategy, in the given order
    """
    if trials < 1:
        raise ValueError(f"Need at least 1 trial, got {trials}")

    rng = random.Random(seed)
    results = []

    for strategy in strategies or list(Strategy):
        spreads = []
        for _ in range(trials):
            groups = partition(participants, group_size, strategy, rng=rng)
            summary = summarize_balance(groups)
            if summary.rating_spread is not None:
                spreads.append(summary.rating_spread)

        if spreads:
            values = np.array(spreads)
            mean_spread = float(values.mean())
            worst_spread = float(values.max())
        else:
            mean_spread = worst_spread = None

        results.append(StrategyComparison(
            strategy=strategy,
            trials=trials,
            mean_spread=mean_spread,
            worst_spread=worst_spread
        ))

    return results
