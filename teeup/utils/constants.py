"""
Constants for the teeup group draw.
"""

# Default number of players per group (a golf foursome)
DEFAULT_GROUP_SIZE = 4

# Curated group names, drawn in random order for each draw.
# Beyond the pool size, groups fall back to FALLBACK_GROUP_LABEL.
TEAM_NAME_POOL = [
    "Eagle",
    "Birdie",
    "Albatross",
    "Draw",
    "Fade",
    "Long Iron",
    "Bunker Escape",
    "Tee Shot Legends",
    "On the Green",
    "Drive for Show",
]

FALLBACK_GROUP_LABEL = "Group {number}"

# Default display name for roster lines with an empty name field
DEFAULT_PLAYER_NAME = "Player {number}"

# Report layout
REPORT_TITLE = "=== TEE TIME GROUPS ==="

# Category tokens accepted when parsing a roster line
CATEGORY_ALIASES = {
    "a": "A",
    "m": "A",
    "b": "B",
    "f": "B",
}

# Draw API server (main.py --serve)
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
