from .models import BoxSquare, GameScore, QuarterScores, Team
from .teams import ALL_TEAMS, find_team_by_text, team_from_abbreviation
from .pool_structure import (
    ByQuarter,
    CustomPayout,
    CustomPeriod,
    CustomPeriods,
    EqualSplit,
    FinalOnly,
    FinalPeriod,
    FirstScoreChange,
    FirstScorePeriod,
    FixedAmount,
    HalftimeAndFinal,
    HalftimeOnly,
    HalftimePeriod,
    Percentage,
    PerScoreChange,
    PoolStructure,
    QuarterPeriod,
    ScoreChangePeriod,
    STANDARD_QUARTERLY,
    default_for_sport,
)
from .grid import BoxGrid, ScoreChangeInfo, new_grid
from .name_matcher import edit_distance, matches_owner, name_similarity, normalize_owner_name
from .views import (
    FinalizedWinning,
    OnTheHuntItem,
    Urgency,
    finalized_winnings,
    grid_as_text,
    on_the_hunt_items,
)
from .validators import GridIntegrityError, validate_pool_structure, validate_quarter_scores
from .storage import (
    game_score_from_dict,
    grid_from_dict,
    grid_to_dict,
    load_game_score,
    load_grid,
    pool_structure_from_dict,
    save_grid,
)
from .sheet_parser import parse_grid_from_sheet, write_grid_to_sheet

__all__ = [
    # Models
    'BoxSquare',
    'GameScore',
    'QuarterScores',
    'Team',
    # Teams
    'ALL_TEAMS',
    'find_team_by_text',
    'team_from_abbreviation',
    # Pool structure
    'PoolStructure',
    'STANDARD_QUARTERLY',
    'default_for_sport',
    'ByQuarter',
    'HalftimeOnly',
    'FinalOnly',
    'FirstScoreChange',
    'HalftimeAndFinal',
    'CustomPeriods',
    'PerScoreChange',
    'FixedAmount',
    'Percentage',
    'EqualSplit',
    'CustomPayout',
    'QuarterPeriod',
    'HalftimePeriod',
    'FinalPeriod',
    'FirstScorePeriod',
    'CustomPeriod',
    'ScoreChangePeriod',
    # Grid
    'BoxGrid',
    'ScoreChangeInfo',
    'new_grid',
    'GridIntegrityError',
    # Name matching
    'normalize_owner_name',
    'edit_distance',
    'name_similarity',
    'matches_owner',
    # Views
    'OnTheHuntItem',
    'Urgency',
    'on_the_hunt_items',
    'FinalizedWinning',
    'finalized_winnings',
    'grid_as_text',
    # Validation
    'validate_pool_structure',
    'validate_quarter_scores',
    # Persistence (JSON / Excel)
    'save_grid',
    'load_grid',
    'grid_to_dict',
    'grid_from_dict',
    'load_game_score',
    'game_score_from_dict',
    'pool_structure_from_dict',
    'parse_grid_from_sheet',
    'write_grid_to_sheet',
]
