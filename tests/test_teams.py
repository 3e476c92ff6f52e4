"""Unit tests for team presets and lookup."""

import pytest

from boxpool.models import GameScore, QuarterScores, Team
from boxpool.teams import (
    ALL_TEAMS,
    CHIEFS,
    EAGLES,
    FORTY_NINERS,
    PACKERS,
    find_team_by_text,
    league_teams,
    team_from_abbreviation,
)


class TestTeamFromAbbreviation:
    """Tests for abbreviation lookup."""

    def test_preset(self):
        assert team_from_abbreviation('kc') is CHIEFS

    def test_legacy_code(self):
        team = team_from_abbreviation('JAC')
        assert team.name == 'Jacksonville Jaguars'
        assert team.abbreviation == 'JAX'

    def test_unknown(self):
        assert team_from_abbreviation('XYZ') is None

    def test_league(self):
        teams = league_teams()
        assert len(teams) == 32
        assert len({t.abbreviation for t in teams}) == 32
        assert CHIEFS in teams


class TestFindTeamByText:
    """Tests for matching sheet text to a team."""

    def test_abbreviation_token(self):
        assert find_team_by_text('KC') is CHIEFS
        assert find_team_by_text('gb packers') is PACKERS

    def test_full_name(self):
        assert find_team_by_text('Philadelphia Eagles (away)') is EAGLES

    def test_name_word(self):
        assert find_team_by_text('EAGLES') is EAGLES
        assert find_team_by_text('Go 49ers!') is FORTY_NINERS

    def test_single_characters_never_match(self):
        assert find_team_by_text('k') is None
        assert find_team_by_text('k c') is None
        assert find_team_by_text('') is None

    def test_custom_candidates(self):
        team = Team(name='Springfield Atoms', abbreviation='SPA')
        assert find_team_by_text('atoms', teams=[team]) is team
        assert find_team_by_text('atoms') is None

    def test_presets_listed(self):
        assert len(ALL_TEAMS) == 8


class TestModels:
    """Tests for team and score helpers."""

    def test_short_name(self):
        assert CHIEFS.short_name == 'Kansas'

    def test_color_format_checked(self):
        """Test a color that cannot be saved is rejected when the team is built."""
        with pytest.raises(ValueError, match='primary_color'):
            Team(name='Springfield Atoms', abbreviation='SPA', primary_color='red')
        with pytest.raises(ValueError, match='secondary_color'):
            Team(name='Springfield Atoms', abbreviation='SPA', secondary_color='#FFF')
        assert Team(name='Springfield Atoms', abbreviation='SPA', primary_color='#a1B2c3')

    def test_status_text(self):
        score = GameScore(home_team=CHIEFS, away_team=EAGLES)
        assert score.status_text == 'Pre-Game'
        score.is_game_active = True
        score.quarter = 5
        score.time_remaining = '8:12'
        assert score.status_text == 'OT - 8:12'
        score.is_game_over = True
        assert score.status_text == 'Final'

    def test_last_digits(self):
        score = GameScore(home_team=CHIEFS, away_team=EAGLES, home_score=27, away_score=20)
        assert (score.home_last_digit, score.away_last_digit) == (7, 0)
        assert score.total_points == 47

    def test_quarter_freezes_once(self):
        scores = QuarterScores()
        assert scores.set_quarter(1, 7, 3)
        assert not scores.set_quarter(1, 10, 3)
        assert scores.score_for_quarter(1) == (7, 3)
        assert not scores.set_quarter(5, 0, 0)
        assert scores.frozen_quarters() == [1]

    def test_merge_keeps_frozen(self):
        older = QuarterScores(q1_home=7, q1_away=3)
        newer = QuarterScores(q1_home=10, q1_away=3, q2_home=14, q2_away=10)
        merged = older.merged_with(newer)
        assert merged.score_for_quarter(1) == (7, 3)
        assert merged.score_for_quarter(2) == (14, 10)
        assert merged.frozen_quarters() == [1, 2]
