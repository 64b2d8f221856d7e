"""
Utilities module for teeup.
"""
from teeup.utils.constants import (
    DEFAULT_GROUP_SIZE, TEAM_NAME_POOL, FALLBACK_GROUP_LABEL,
    DEFAULT_PLAYER_NAME, REPORT_TITLE, CATEGORY_ALIASES,
    DEFAULT_HOST, DEFAULT_PORT
)

__all__ = [
    'DEFAULT_GROUP_SIZE', 'TEAM_NAME_POOL', 'FALLBACK_GROUP_LABEL',
    'DEFAULT_PLAYER_NAME', 'REPORT_TITLE', 'CATEGORY_ALIASES',
    'DEFAULT_HOST', 'DEFAULT_PORT'
]
