"""
Roster parsing and the caller-side roster.

Roster text has one player per line:

    name[, handicap[, category]]

Blank lines are ignored. A handicap that is missing or not a number is
treated as unknown.
"""

import math
from typing import Dict, Iterable, List, Optional, Tuple

from teeup.grouping.models import Category, Participant
from teeup.utils.constants import DEFAULT_PLAYER_NAME, CATEGORY_ALIASES


def parse_rating(raw: Optional[str]) -> Optional[float]:
    """Parse a handicap field; None for empty or unparsable input."""
    if raw is None:
        return None
    raw = raw.strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_category(raw: Optional[str]) -> Category:
    """Map a category token to Category; unknown tokens are UNSPECIFIED."""
    if not raw:
        return Category.UNSPECIFIED
    value = CATEGORY_ALIASES.get(raw.strip().lower())
    return Category(value) if value else Category.UNSPECIFIED


def parse_line(line: str, number: int, participant_id: Optional[int] = None) -> Participant:
    """
    Parse a single roster line.

    Args:
        line: Non-blank roster line
        number: 1-based position, used for the default name
        participant_id: Id to assign (default: number)
    """
    fields = [f.strip() for f in line.split(",")]
    name = fields[0] or DEFAULT_PLAYER_NAME.format(number=number)
    rating = parse_rating(fields[1]) if len(fields) > 1 else None
    category = parse_category(fields[2]) if len(fields) > 2 else Category.UNSPECIFIED

    return Participant(
        id=number if participant_id is None else participant_id,
        display_name=name,
        skill_rating=rating,
        category=category
    )


def parse_roster(text: str) -> List[Participant]:
    """
    Parse roster text into participants.

    Ids are the 1-based positions of the non-blank lines.
    """
    lines = [line.strip() for line in text.splitlines()]
    lines = [line for line in lines if line]
    return [parse_line(line, i) for i, line in enumerate(lines, 1)]


class Roster:
    """
    Mutable player list held by the caller.

    Ids come from a counter and are never reused, even after removal.
    Draws work on snapshot(), never on the roster itself.

    Usage:
        roster = Roster.from_text("Kim, 12\\nLee, 8")
        roster.add("Park", 20)
        groups = partition(roster.snapshot(), 2, Strategy.HANDICAP_BALANCED)
    """

    def __init__(self, participants: Iterable[Participant] = ()):
        self._players: Dict[int, Participant] = {}
        self._next_id = 1
        for p in participants:
            if p.id in self._players:
                raise ValueError(f"Duplicate participant id: {p.id}")
            self._players[p.id] = p
            self._next_id = max(self._next_id, p.id + 1)

    @classmethod
    def from_text(cls, text: str) -> 'Roster':
        return cls(parse_roster(text))

    def add(
        self,
        display_name: str,
        skill_rating: Optional[float] = None,
        category: Category = Category.UNSPECIFIED
    ) -> Participant:
        """Register a player under a fresh id."""
        participant = Participant(
            id=self._next_id,
            display_name=display_name,
            skill_rating=skill_rating,
            category=Category(category)
        )
        self._players[participant.id] = participant
        self._next_id += 1
        return participant

    def add_line(self, line: str) -> Participant:
        """Register a player from a roster line."""
        participant = parse_line(line, self._next_id, participant_id=self._next_id)
        self._players[participant.id] = participant
        self._next_id += 1
        return participant

    def remove(self, participant_id: int) -> Participant:
        """Remove a player; raises KeyError for unknown ids."""
        if participant_id not in self._players:
            raise KeyError(f"No participant with id {participant_id}")
        return self._players.pop(participant_id)

    def get(self, participant_id: int) -> Optional[Participant]:
        return self._players.get(participant_id)

    def clear(self):
        """Remove every player. The id counter keeps counting."""
        self._players.clear()

    def snapshot(self) -> Tuple[Participant, ...]:
        """Immutable copy in registration order."""
        return tuple(self._players.values())

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self):
        return iter(self.snapshot())

    def __contains__(self, participant_id) -> bool:
        return participant_id in self._players
