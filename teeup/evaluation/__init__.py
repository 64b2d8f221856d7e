"""
Evaluation module for measuring how balanced a draw is.
"""
from teeup.evaluation.balance import (
    BalanceSummary,
    StrategyComparison,
    summarize_balance,
    compare_strategies,
)

__all__ = [
    'BalanceSummary',
    'StrategyComparison',
    'summarize_balance',
    'compare_strategies',
]
