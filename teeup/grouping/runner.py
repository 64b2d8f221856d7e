"""
Draw runner that ties the pipeline together.

partition -> group names -> per-group averages -> report text
"""

import random
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence

from teeup.grouping.models import Participant, Partition, Strategy
from teeup.grouping.partitioner import partition, validate_group_size
from teeup.grouping.naming import assign_names
from teeup.grouping.stats import average_ratings
from teeup.grouping.display import format_result, format_draw_header, format_balance_line
from teeup.evaluation.balance import summarize_balance
from teeup.utils.constants import DEFAULT_GROUP_SIZE


@dataclass
class DrawConfig:
    """Configuration for a draw."""
    group_size: int = DEFAULT_GROUP_SIZE
    strategy: Strategy = Strategy.UNIFORM_RANDOM
    seed: Optional[int] = None
    fold_remainder: bool = False


@dataclass
class DrawResult:
    """Result of a single draw."""
    groups: Partition
    names: List[str]
    averages: List[Optional[float]]
    report: str
    strategy: Strategy
    group_size: int
    total_count: int
    seed: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            'strategy': self.strategy.value,
            'group_size': self.group_size,
            'total_count': self.total_count,
            'seed': self.seed,
            'groups': [
                {
                    'name': name,
                    'average_rating': average,
                    'members': [
                        {
                            'id': p.id,
                            'display_name': p.display_name,
                            'skill_rating': p.skill_rating,
                            'category': p.category.value,
                        }
                        for p in group
                    ],
                }
                for name, average, group in zip(self.names, self.averages, self.groups)
            ],
            'report': self.report,
        }


class DrawRunner:
    """
    Runs one draw per call to run().

    Usage:
        runner = DrawRunner(DrawConfig(group_size=4, strategy=Strategy.HANDICAP_BALANCED))
        result = runner.run(roster.snapshot())
        print(result.report)
    """

    def __init__(self, config: Optional[DrawConfig] = None, verbose: bool = False,
                 show_balance: bool = False):
        """
        Initialize the draw runner.

        Args:
            config: Draw configuration (default settings if None)
            verbose: Print draw settings before each draw
            show_balance: Print a balance summary after each draw
        """
        config = config or DrawConfig()
        self.config = replace(config, strategy=Strategy(config.strategy))
        validate_group_size(self.config.group_size)
        self.verbose = verbose
        self.show_balance = show_balance

        # Seeded draws get a private random source; otherwise the process-wide one
        self.rng = random.Random(self.config.seed) if self.config.seed is not None else None

    def run(self, participants: Sequence[Participant]) -> DrawResult:
        """
        Draw groups for a roster snapshot.

        Args:
            participants: Roster snapshot

        Returns:
            DrawResult with groups, names, averages and report

        Raises:
            ValueError: If the roster is empty
        """
        if not participants:
            raise ValueError("Roster is empty, add at least one player")

        participants = tuple(participants)
        ids = [p.id for p in participants]
        if len(set(ids)) != len(ids):
            raise ValueError("Participant ids must be unique")

        if self.verbose:
            print(format_draw_header(
                len(participants),
                self.config.group_size,
                self.config.strategy.value,
                self.config.seed
            ))

        groups = partition(
            participants,
            self.config.group_size,
            self.config.strategy,
            rng=self.rng,
            fold_remainder=self.config.fold_remainder
        )
        names = assign_names(len(groups), rng=self.rng)
        averages = average_ratings(groups)
        report = format_result(groups, names, len(participants))

        if self.show_balance:
            summary = summarize_balance(groups)
            print(format_balance_line(
                summary.rating_spread, summary.rating_std, summary.size_spread
            ))

        return DrawResult(
            groups=groups,
            names=names,
            averages=averages,
            report=report,
            strategy=self.config.strategy,
            group_size=self.config.group_size,
            total_count=len(participants),
            seed=self.config.seed
        )
