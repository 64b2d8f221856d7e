"""
Text formatting for draw results.

Builds the plain-text report that gets pasted into group chats, plus a few
short lines used by the runner and CLI.
"""

from typing import List, Optional, Sequence

from teeup.grouping.models import Participant, Partition
from teeup.grouping.stats import average_rating
from teeup.utils.constants import REPORT_TITLE


def format_rating(value: float) -> str:
    """Member rating as written in the report: 12 -> '12', 7.5 -> '7.5'."""
    return f"{value:.15g}"


def format_member(participant: Participant) -> str:
    if participant.skill_rating is None:
        return participant.display_name
    return f"{participant.display_name} ({format_rating(participant.skill_rating)})"


def format_group_header(name: str, average: Optional[float]) -> str:
    if average is None:
        return f"[{name}]"
    return f"[{name}] avg handicap {average:.1f}"


def format_result(partition: Partition, names: Sequence[str], total_count: int) -> str:
    """
    Format a draw as a shareable text block.

    Layout:
        title line
        summary line with total participants and group count
        per group: header with name and average (if any), member line, blank line

    Args:
        partition: Groups in draw order
        names: One name per group, same order
        total_count: Number of participants in the draw

    Returns:
        Report text
    """
    if len(names) < len(partition):
        raise ValueError(f"Need {len(partition)} group names, got {len(names)}")

    lines = []
    lines.append(REPORT_TITLE)
    lines.append(f"Participants: {total_count} | Groups: {len(partition)}")
    lines.append("")

    for name, group in zip(names, partition):
        lines.append(format_group_header(name, average_rating(group)))
        lines.append(", ".join(format_member(p) for p in group))
        lines.append("")

    # Every line, blank separators included, ends with a newline
    return "\n".join(lines) + "\n"


def format_draw_header(
    num_participants: int,
    group_size: int,
    strategy: str,
    seed: Optional[int]
) -> str:
    """Format draw settings for verbose output."""
    lines = []
    lines.append(f"Players: {num_participants}")
    lines.append(f"Group size: {group_size}")
    lines.append(f"Strategy: {strategy}")
    if seed is not None:
        lines.append(f"Seed: {seed}")
    lines.append("")
    return "\n".join(lines)


def format_balance_line(rating_spread: Optional[float], rating_std: Optional[float],
                        size_spread: int) -> str:
    """Format a one-line balance summary."""
    if rating_spread is None:
        return f"Balance: no rated groups, size spread {size_spread}"
    return (f"Balance: avg handicap spread {rating_spread:.2f}, "
            f"std {rating_std:.2f}, size spread {size_spread}")


def format_comparison(rows: List[tuple]) -> str:
    """
    Format a strategy comparison table.

    Args:
        rows: (strategy, mean_spread, worst_spread) tuples; spreads may be None
    """
    lines = []
    lines.append(f"{'Strategy':<14}{'Mean spread':<14}{'Worst spread':<14}")
    lines.append("-" * 42)
    for strategy, mean_spread, worst_spread in rows:
        mean_str = "-" if mean_spread is None else f"{mean_spread:.2f}"
        worst_str = "-" if worst_spread is None else f"{worst_spread:.2f}"
        lines.append(f"{strategy:<14}{mean_str:<14}{worst_str:<14}")
    return "\n".join(lines)
