"""Preset teams and team lookup from scanned sheet text."""

import re
from typing import Iterable, Optional

from .constants import ABBREV_TO_TEAM, TEAM_ABBREV_MAP, TEAM_ABBREV_NORMALIZE
from .models import Team

PLACEHOLDER_TEAM = Team(name='Team', abbreviation='TM', id='placeholder')

CHIEFS = Team(
    name='Kansas City Chiefs', abbreviation='KC',
    primary_color='#E31837', secondary_color='#FFB81C', id='kc',
)
EAGLES = Team(
    name='Philadelphia Eagles', abbreviation='PHI',
    primary_color='#004C54', secondary_color='#A5ACAF', id='phi',
)
FORTY_NINERS = Team(
    name='San Francisco 49ers', abbreviation='SF',
    primary_color='#AA0000', secondary_color='#B3995D', id='sf',
)
RAVENS = Team(
    name='Baltimore Ravens', abbreviation='BAL',
    primary_color='#241773', secondary_color='#9E7C0C', id='bal',
)
BILLS = Team(
    name='Buffalo Bills', abbreviation='BUF',
    primary_color='#00338D', secondary_color='#C60C30', id='buf',
)
LIONS = Team(
    name='Detroit Lions', abbreviation='DET',
    primary_color='#0076B6', secondary_color='#B0B7BC', id='det',
)
COWBOYS = Team(
    name='Dallas Cowboys', abbreviation='DAL',
    primary_color='#003594', secondary_color='#869397', id='dal',
)
PACKERS = Team(
    name='Green Bay Packers', abbreviation='GB',
    primary_color='#203731', secondary_color='#FFB612', id='gb',
)

ALL_TEAMS = [CHIEFS, EAGLES, FORTY_NINERS, RAVENS, BILLS, LIONS, COWBOYS, PACKERS]

_PRESETS_BY_ABBREV = {team.abbreviation: team for team in ALL_TEAMS}


def team_from_abbreviation(abbreviation: str) -> Optional[Team]:
    """
    Build a team from an NFL abbreviation.

    Presets (with colors) win over the plain name table.

    Examples:
        "KC" -> Kansas City Chiefs (preset colors)
        "jac" -> Jacksonville Jaguars
        "XYZ" -> None
    """
    abbrev = abbreviation.strip().upper()
    abbrev = TEAM_ABBREV_NORMALIZE.get(abbrev, abbrev)
    if abbrev in _PRESETS_BY_ABBREV:
        return _PRESETS_BY_ABBREV[abbrev]
    if abbrev in ABBREV_TO_TEAM:
        return Team(name=ABBREV_TO_TEAM[abbrev], abbreviation=abbrev, id=abbrev.lower())
    return None


def league_teams() -> list[Team]:
    """All 32 NFL teams, presets included."""
    return [team_from_abbreviation(abbrev) for abbrev in TEAM_ABBREV_MAP.values()]


def _tokens(text: str) -> list[str]:
    return [t for t in re.split(r'[^0-9a-z]+', text.lower()) if t]


def find_team_by_text(text: str, teams: Optional[Iterable[Team]] = None) -> Optional[Team]:
    """
    Match raw sheet text (e.g. an OCR'd header) to a team.

    Single-character input and single-character tokens never match, so a
    stray initial cannot pick a team.

    Order of checks:
    - abbreviation as a delimited token ("KC Chiefs", "kc-phi")
    - full team name contained in the text
    - a team name word (3+ letters) appearing as a token ("Eagles")
    """
    if not text or len(text.strip()) <= 1:
        return None

    candidates = list(teams) if teams is not None else ALL_TEAMS
    tokens = [t for t in _tokens(text) if len(t) > 1]
    if not tokens:
        return None
    lowered = ' '.join(tokens)

    for team in candidates:
        abbrev = team.abbreviation.lower()
        if len(abbrev) > 1 and abbrev in tokens:
            return team

    for team in candidates:
        if ' '.join(_tokens(team.name)) in lowered:
            return team

    for team in candidates:
        name_words = [w for w in _tokens(team.name) if len(w) >= 3]
        if any(word in tokens for word in name_words):
            return team

    return None
