"""
Grouping module for splitting a roster into tee-time groups.

Provides:
- partition: Random, stratified and handicap-balanced partitioning
- assign_names: Group names from the curated pool
- average_rating: Mean handicap per group
- format_result: Shareable text report

The draw pipeline lives in teeup.grouping.runner.
"""

from teeup.grouping.models import Participant, Category, Strategy, Group, Partition
from teeup.grouping.shuffle import shuffle
from teeup.grouping.partitioner import partition, ideal_group_count, group_sizes
from teeup.grouping.naming import assign_names
from teeup.grouping.stats import average_rating, average_ratings
from teeup.grouping.display import format_result

__all__ = [
    'Participant',
    'Category',
    'Strategy',
    'Group',
    'Partition',
    'shuffle',
    'partition',
    'ideal_group_count',
    'group_sizes',
    'assign_names',
    'average_rating',
    'average_ratings',
    'format_result',
]
