"""Data models for the box pool engine."""

import re
import uuid
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


def new_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Team:
    """Team identity shown on the grid headers."""
    name: str
    abbreviation: str
    primary_color: str = '#000000'
    secondary_color: str = '#FFFFFF'
    logo_url: Optional[str] = None
    id: str = field(default_factory=new_id)

    def __post_init__(self):
        for attr in ('primary_color', 'secondary_color'):
            if not re.fullmatch(r'#[0-9A-Fa-f]{6}', getattr(self, attr)):
                raise ValueError(f'{attr} must be a #RRGGBB color, got {getattr(self, attr)!r}')

    @property
    def short_name(self) -> str:
        """First word of the team name (e.g. 'Kansas')."""
        words = self.name.split()
        return words[0] if words else self.name


@dataclass
class QuarterScores:
    """
    Cumulative score at the end of each quarter.

    A quarter is frozen once both its home and away values are set.
    Frozen quarters are never overwritten.
    """
    q1_home: Optional[int] = None
    q1_away: Optional[int] = None
    q2_home: Optional[int] = None
    q2_away: Optional[int] = None
    q3_home: Optional[int] = None
    q3_away: Optional[int] = None
    q4_home: Optional[int] = None
    q4_away: Optional[int] = None

    def score_for_quarter(self, quarter: int) -> Optional[Tuple[int, int]]:
        """Return (home, away) for a frozen quarter, None otherwise."""
        if quarter not in (1, 2, 3, 4):
            return None
        home = getattr(self, f'q{quarter}_home')
        away = getattr(self, f'q{quarter}_away')
        if home is None or away is None:
            return None
        return home, away

    def set_quarter(self, quarter: int, home: int, away: int) -> bool:
        """
        Freeze a quarter's score.

        Returns:
            True if the quarter was recorded, False if it was already
            frozen or the quarter number is out of range.
        """
        if quarter not in (1, 2, 3, 4) or self.score_for_quarter(quarter) is not None:
            return False
        setattr(self, f'q{quarter}_home', home)
        setattr(self, f'q{quarter}_away', away)
        return True

    def frozen_quarters(self) -> List[int]:
        return [q for q in (1, 2, 3, 4) if self.score_for_quarter(q) is not None]

    def merged_with(self, newer: 'QuarterScores') -> 'QuarterScores':
        """Keep every quarter frozen here and pick up quarters newly frozen in `newer`."""
        merged = QuarterScores()
        for quarter in (1, 2, 3, 4):
            score = self.score_for_quarter(quarter) or newer.score_for_quarter(quarter)
            if score is not None:
                merged.set_quarter(quarter, *score)
        return merged


@dataclass
class GameScore:
    """Snapshot of a game as handed over by the score source."""
    home_team: Team
    away_team: Team
    home_score: int = 0
    away_score: int = 0
    quarter: int = 0  # 0 = not started, 5+ = overtime
    time_remaining: str = '15:00'
    is_game_active: bool = False
    is_game_over: bool = False
    quarter_scores: QuarterScores = field(default_factory=QuarterScores)
    # (home, away) after each scoring change, oldest first
    score_changes: List[Tuple[int, int]] = field(default_factory=list)

    @property
    def home_last_digit(self) -> int:
        return self.home_score % 10

    @property
    def away_last_digit(self) -> int:
        return self.away_score % 10

    @property
    def total_points(self) -> int:
        return self.home_score + self.away_score

    @property
    def status_text(self) -> str:
        if self.is_game_over:
            return 'Final'
        if not self.is_game_active:
            return 'Pre-Game'
        if self.quarter <= 4:
            return f'Q{self.quarter} - {self.time_remaining}'
        return f'OT - {self.time_remaining}'

    @property
    def score_display(self) -> str:
        return (
            f'{self.away_team.abbreviation} {self.away_score} - '
            f'{self.home_score} {self.home_team.abbreviation}'
        )


@dataclass
class BoxSquare:
    """One cell of the 10x10 grid."""
    row: int
    column: int
    player_name: str = ''
    is_winner: bool = False
    quarter_wins: List[int] = field(default_factory=list)  # quarters won (1-4)
    period_wins: List[str] = field(default_factory=list)  # ids of other periods won
    id: str = field(default_factory=new_id)

    @property
    def is_empty(self) -> bool:
        return not self.player_name.strip()

    @property
    def display_name(self) -> str:
        return 'Empty' if self.is_empty else self.player_name

    @property
    def initials(self) -> str:
        words = self.player_name.split()
        if len(words) >= 2:
            return (words[0][0] + words[1][0]).upper()
        if words:
            return words[0][:2].upper()
        return ''

    def clear_winner_state(self) -> None:
        self.is_winner = False
        self.quarter_wins = []
        self.period_wins = []
