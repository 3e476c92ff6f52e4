"""The 10x10 squares grid: digit lookup, winner tracking, and ownership."""

import logging
import random
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Sequence, Tuple

from .config import get_default_currency, get_default_pool_name, get_default_teams
from .constants import DEFAULT_POOL_NAME, DIGITS, GRID_SIZE
from .models import BoxSquare, GameScore, QuarterScores, Team, new_id
from .name_matcher import matches_owner
from .pool_structure import (
    ByQuarter,
    CustomPeriod,
    CustomPeriods,
    FinalOnly,
    FinalPeriod,
    FirstScoreChange,
    FirstScorePeriod,
    HalftimeAndFinal,
    HalftimeOnly,
    HalftimePeriod,
    PerScoreChange,
    PoolPeriod,
    PoolStructure,
    QuarterPeriod,
    ScoreChangePeriod,
    STANDARD_QUARTERLY,
)
from .teams import CHIEFS, EAGLES
from .validators import ensure_grid_integrity

logger = logging.getLogger('boxpool.grid')

ScorePair = Tuple[int, int]


def shuffled_digits(rng: Optional[random.Random] = None) -> List[int]:
    digits = list(DIGITS)
    (rng or random).shuffle(digits)
    return digits


def empty_squares() -> List[List[BoxSquare]]:
    return [[BoxSquare(row=r, column=c) for c in range(GRID_SIZE)] for r in range(GRID_SIZE)]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ScoreChangeInfo:
    """Running totals for a per-score-change pool."""
    count: int
    paid: float
    remainder: float


@dataclass
class BoxGrid:
    """
    A squares pool: two teams, two digit headers, and 100 owned squares.

    `home_numbers[col]` is the home digit for a column and
    `away_numbers[row]` the away digit for a row. Winner fields on the
    squares are rebuilt from scratch by `update_winners`; the grid is
    otherwise only changed through `update_square` and
    `randomize_numbers`. A grid instance should have a single writer.
    """
    name: str = DEFAULT_POOL_NAME
    home_team: Team = CHIEFS
    away_team: Team = EAGLES
    home_numbers: List[int] = field(default_factory=shuffled_digits)
    away_numbers: List[int] = field(default_factory=shuffled_digits)
    squares: List[List[BoxSquare]] = field(default_factory=empty_squares)
    created_at: datetime = field(default_factory=utc_now)
    last_modified: datetime = field(default_factory=utc_now)
    current_score: Optional[GameScore] = None
    pool_structure: Optional[PoolStructure] = None
    owner_labels: Optional[List[str]] = None
    shared_code: Optional[str] = None
    id: str = field(default_factory=new_id)

    def __post_init__(self):
        ensure_grid_integrity(self.home_numbers, self.away_numbers, self.squares)

    @property
    def resolved_pool_structure(self) -> PoolStructure:
        """Pool structure, defaulting to standard quarterly for older pools."""
        if self.pool_structure is not None:
            return self.pool_structure
        return replace(STANDARD_QUARTERLY)

    def _iter_squares(self):
        for row in self.squares:
            yield from row

    # Lookups

    def square_at(self, row: int, column: int) -> Optional[BoxSquare]:
        if not (0 <= row < GRID_SIZE and 0 <= column < GRID_SIZE):
            return None
        return self.squares[row][column]

    def winning_position(self, home_digit: int, away_digit: int) -> Optional[Tuple[int, int]]:
        """(row, column) for a pair of last digits, None if either digit isn't on the headers."""
        if home_digit not in self.home_numbers or away_digit not in self.away_numbers:
            return None
        return self.away_numbers.index(away_digit), self.home_numbers.index(home_digit)

    def winning_square_for_pair(self, score: Optional[ScorePair]) -> Optional[BoxSquare]:
        if score is None:
            return None
        home, away = score
        position = self.winning_position(home % 10, away % 10)
        if position is None:
            return None
        return self.squares[position[0]][position[1]]

    def winning_square(self, score: GameScore) -> Optional[BoxSquare]:
        """Square that would win on the live score right now."""
        return self.winning_square_for_pair((score.home_score, score.away_score))

    # Mutation

    def touch(self) -> None:
        self.last_modified = utc_now()

    def update_square(self, row: int, column: int, player_name: str) -> bool:
        """Set a square's owner. Out-of-range positions are ignored (returns False)."""
        square = self.square_at(row, column)
        if square is None:
            return False
        square.player_name = player_name
        self.touch()
        return True

    def randomize_numbers(self, rng: Optional[random.Random] = None) -> None:
        """Draw new header digits (normally once all names are in)."""
        self.home_numbers = shuffled_digits(rng)
        self.away_numbers = shuffled_digits(rng)
        self.touch()

    def _score_for_period(
        self,
        period: PoolPeriod,
        quarter_scores: QuarterScores,
        total_score: Optional[ScorePair],
        score_changes: Sequence[ScorePair],
    ) -> Optional[ScorePair]:
        if isinstance(period, QuarterPeriod):
            return quarter_scores.score_for_quarter(period.number)
        if isinstance(period, HalftimePeriod):
            return quarter_scores.score_for_quarter(2)
        if isinstance(period, FirstScorePeriod):
            if score_changes:
                return tuple(score_changes[0])
            return total_score
        if isinstance(period, ScoreChangePeriod):
            if period.number <= len(score_changes):
                return tuple(score_changes[period.number - 1])
            return None
        if isinstance(period, (FinalPeriod, CustomPeriod)):
            return total_score
        raise TypeError(f'Unknown period: {period!r}')

    def update_winners(
        self,
        quarter_scores: QuarterScores,
        total_score: Optional[ScorePair] = None,
        score_changes: Sequence[ScorePair] = (),
    ) -> None:
        """
        Recompute every square's winner state from the full current scores.

        All winner flags are cleared first, so this must be given the
        complete state each time; calling it twice with the same input
        leaves the same result.

        Args:
            quarter_scores: Frozen end-of-quarter scores
            total_score: Current (home, away) score, used for final and custom periods
            score_changes: (home, away) after each scoring change, oldest first
        """
        for square in self._iter_squares():
            square.clear_winner_state()

        for period in self.resolved_pool_structure.periods:
            square = self.winning_square_for_pair(
                self._score_for_period(period, quarter_scores, total_score, score_changes)
            )
            if square is None:
                continue
            square.is_winner = True
            if isinstance(period, QuarterPeriod):
                square.quarter_wins.append(period.number)
            else:
                square.period_wins.append(period.id)
            logger.debug(f'{self.name}: {period.label} -> ({square.row}, {square.column}) {square.display_name}')

    def apply_score(self, score: GameScore) -> None:
        """
        Store a score snapshot and recompute winners from it.

        Quarters frozen by an earlier snapshot are kept even when the new
        one omits or changes them.
        """
        if self.current_score is not None:
            score = replace(
                score,
                quarter_scores=self.current_score.quarter_scores.merged_with(score.quarter_scores),
            )
        self.current_score = score
        self.update_winners(
            score.quarter_scores,
            total_score=(score.home_score, score.away_score),
            score_changes=score.score_changes,
        )
        self.touch()

    # Period state

    def current_period(self, score: GameScore) -> Optional[PoolPeriod]:
        """
        The period in progress for a live score, None when none applies.

        Custom-labelled periods have no known mapping to game time.
        """
        structure = self.resolved_pool_structure
        pool_type = structure.pool_type
        quarter = score.quarter

        if isinstance(pool_type, ByQuarter):
            if score.is_game_over or not 1 <= quarter <= 4:
                return None
            return QuarterPeriod(quarter) if quarter in pool_type.quarters else None
        if isinstance(pool_type, HalftimeOnly):
            return HalftimePeriod() if quarter == 2 and not score.is_game_over else None
        if isinstance(pool_type, FinalOnly):
            return FinalPeriod() if score.is_game_over else None
        if isinstance(pool_type, FirstScoreChange):
            return FirstScorePeriod() if score.total_points > 0 else None
        if isinstance(pool_type, HalftimeAndFinal):
            if score.is_game_over or quarter >= 3:
                return FinalPeriod()
            return HalftimePeriod() if quarter in (1, 2) else None
        if isinstance(pool_type, CustomPeriods):
            return None
        if isinstance(pool_type, PerScoreChange):
            next_change = len(score.score_changes) + 1
            if score.is_game_over or next_change > structure.score_change_count:
                return FinalPeriod()
            return ScoreChangePeriod(next_change)
        raise TypeError(f'Unknown pool type: {pool_type!r}')

    def is_period_finalized(self, period: PoolPeriod, score: GameScore) -> bool:
        """Whether a period's outcome can no longer change."""
        if score.is_game_over:
            return True
        if isinstance(period, QuarterPeriod):
            return score.quarter > period.number
        if isinstance(period, HalftimePeriod):
            return score.quarter >= 3
        if isinstance(period, FinalPeriod):
            return False
        if isinstance(period, FirstScorePeriod):
            return score.total_points > 0
        if isinstance(period, ScoreChangePeriod):
            return len(score.score_changes) >= period.number
        if isinstance(period, CustomPeriod):
            # TODO: map sport-specific labels ("3rd Inning") to game progress
            return False
        raise TypeError(f'Unknown period: {period!r}')

    def square_that_won(self, period: PoolPeriod) -> Optional[BoxSquare]:
        for square in self._iter_squares():
            if isinstance(period, QuarterPeriod):
                if period.number in square.quarter_wins:
                    return square
            elif period.id in square.period_wins:
                return square
        return None

    def score_change_info(self, score: GameScore) -> Optional[ScoreChangeInfo]:
        """Score changes so far, amount paid, and what is left for the final."""
        structure = self.resolved_pool_structure
        pool_type = structure.pool_type
        if not isinstance(pool_type, PerScoreChange) or structure.total_pool_amount is None:
            return None
        count = len(score.score_changes)
        paid = min(count, structure.score_change_count) * pool_type.amount_per_change
        return ScoreChangeInfo(
            count=count,
            paid=paid,
            remainder=max(structure.total_pool_amount - paid, 0.0),
        )

    # Players and ownership

    @property
    def all_players(self) -> List[str]:
        return sorted({sq.player_name for sq in self._iter_squares() if not sq.is_empty})

    @property
    def is_complete(self) -> bool:
        return all(not sq.is_empty for sq in self._iter_squares())

    @property
    def filled_count(self) -> int:
        return sum(1 for sq in self._iter_squares() if not sq.is_empty)

    def squares_for_player(self, player_name: str) -> List[BoxSquare]:
        """Squares whose name equals `player_name`, ignoring case."""
        target = player_name.lower()
        return [sq for sq in self._iter_squares() if sq.player_name.lower() == target]

    def is_owner_square(self, square: BoxSquare, owner_labels: Iterable[str]) -> bool:
        return matches_owner(square.player_name, owner_labels)

    def squares_for_owner(self, owner_labels: Iterable[str]) -> List[BoxSquare]:
        """Squares belonging to the owner, tolerating OCR noise in the cell text."""
        labels = list(owner_labels)
        if not labels:
            return []
        return [sq for sq in self._iter_squares() if matches_owner(sq.player_name, labels)]

    def effective_owner_labels(self, global_name: Optional[str] = None) -> List[str]:
        """
        Labels identifying "my" squares in this pool.

        The pool's own labels win; otherwise the global display name is used.
        """
        labels = [label.strip() for label in (self.owner_labels or []) if label.strip()]
        if labels:
            return labels
        name = (global_name or '').strip()
        return [name] if name else []


def new_grid(
    name: Optional[str] = None,
    home_team: Optional[Team] = None,
    away_team: Optional[Team] = None,
    pool_structure: Optional[PoolStructure] = None,
    rng: Optional[random.Random] = None,
) -> BoxGrid:
    """
    Create an empty pool with shuffled headers, using configured defaults.

    Example:
        grid = new_grid(name='Office Pool')
        grid.update_square(0, 0, 'Mike')
    """
    default_home, default_away = get_default_teams()
    if pool_structure is None:
        pool_structure = replace(STANDARD_QUARTERLY, currency_code=get_default_currency())
    return BoxGrid(
        name=name or get_default_pool_name(),
        home_team=home_team or default_home,
        away_team=away_team or default_away,
        home_numbers=shuffled_digits(rng),
        away_numbers=shuffled_digits(rng),
        pool_structure=pool_structure,
    )
