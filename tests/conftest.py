"""Shared fixtures for box pool tests."""

import pytest

from boxpool.grid import BoxGrid
from boxpool.models import GameScore, QuarterScores
from boxpool.pool_structure import PoolStructure
from boxpool.teams import CHIEFS, EAGLES

# home_numbers[col] / away_numbers[row]
HOME_NUMBERS = [3, 7, 0, 9, 1, 5, 8, 2, 6, 4]
AWAY_NUMBERS = [6, 1, 9, 3, 0, 8, 4, 2, 7, 5]


@pytest.fixture
def grid():
    """Grid with fixed header digits and a $100 quarterly pool."""
    return BoxGrid(
        name='Office Pool',
        home_team=CHIEFS,
        away_team=EAGLES,
        home_numbers=list(HOME_NUMBERS),
        away_numbers=list(AWAY_NUMBERS),
        pool_structure=PoolStructure(total_pool_amount=100),
    )


@pytest.fixture
def make_score():
    """Factory for KC (home) vs PHI (away) score snapshots."""
    def _make(home=0, away=0, quarter=0, active=None, over=False, quarter_scores=None, changes=None):
        return GameScore(
            home_team=CHIEFS,
            away_team=EAGLES,
            home_score=home,
            away_score=away,
            quarter=quarter,
            is_game_active=(quarter > 0 and not over) if active is None else active,
            is_game_over=over,
            quarter_scores=quarter_scores or QuarterScores(),
            score_changes=list(changes or []),
        )
    return _make
