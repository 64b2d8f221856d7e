"""
Roster module: parsing roster text and holding the caller-side player list.
"""
from teeup.roster.roster import Roster, parse_roster, parse_line, parse_rating, parse_category

__all__ = ['Roster', 'parse_roster', 'parse_line', 'parse_rating', 'parse_category']
