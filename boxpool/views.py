"""Derived views over a grid: near misses, settled payouts, and text export."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from .grid import BoxGrid
from .models import BoxSquare, GameScore, Team
from .pool_structure import PoolPeriod


class Urgency(Enum):
    """How many points the scoring team needs, grouped by a single score."""
    ONE_FIELD_GOAL = 'one field goal/safety'  # 1-3 pts
    ONE_TOUCHDOWN = 'one touchdown'  # 4-6 pts
    CLOSE = 'close'  # 7-9 pts

    @classmethod
    def for_points(cls, points_needed: int) -> 'Urgency':
        if 1 <= points_needed <= 3:
            return cls.ONE_FIELD_GOAL
        if 4 <= points_needed <= 6:
            return cls.ONE_TOUCHDOWN
        return cls.CLOSE

    @property
    def points_band(self) -> str:
        return {
            Urgency.ONE_FIELD_GOAL: '1-3 pts',
            Urgency.ONE_TOUCHDOWN: '4-6 pts',
            Urgency.CLOSE: '7+ pts',
        }[self]


@dataclass
class OnTheHuntItem:
    """One of my squares that a single score would turn into the winner."""
    square: BoxSquare
    grid_id: str
    pool_name: str
    team_needs_to_score: Team
    points_needed: int  # 1-9

    @property
    def id(self) -> str:
        return f'{self.grid_id}-{self.square.id}'

    @property
    def urgency(self) -> Urgency:
        return Urgency.for_points(self.points_needed)


def digit_delta(current: int, target: int) -> int:
    """Points needed to move a last digit from `current` to `target` (10 = already there)."""
    delta = (target - current) % 10
    return 10 if delta == 0 else delta


def on_the_hunt_items(
    grid: BoxGrid,
    score: GameScore,
    owner_labels: Iterable[str],
) -> list[OnTheHuntItem]:
    """
    My squares that are one score away from winning on the live score.

    A square qualifies when one team's digit already matches and the other
    team needs 1-9 more points. Squares winning right now are skipped.
    """
    current_home = score.home_last_digit
    current_away = score.away_last_digit
    items = []

    for square in grid.squares_for_owner(owner_labels):
        my_home = grid.home_numbers[square.column]
        my_away = grid.away_numbers[square.row]
        home_delta = digit_delta(current_home, my_home)
        away_delta = digit_delta(current_away, my_away)

        if home_delta == 10 and away_delta == 10:
            continue
        if home_delta < 10 and current_away == my_away:
            items.append(OnTheHuntItem(
                square=square,
                grid_id=grid.id,
                pool_name=grid.name,
                team_needs_to_score=grid.home_team,
                points_needed=home_delta,
            ))
        if away_delta < 10 and current_home == my_home:
            items.append(OnTheHuntItem(
                square=square,
                grid_id=grid.id,
                pool_name=grid.name,
                team_needs_to_score=grid.away_team,
                points_needed=away_delta,
            ))

    return items


@dataclass
class FinalizedWinning:
    """A settled period and who it paid."""
    period: PoolPeriod
    square: BoxSquare
    amount: Optional[float]  # None when the payout can't be resolved to a number

    @property
    def period_label(self) -> str:
        return self.period.label

    @property
    def winner_name(self) -> str:
        return self.square.display_name


def finalized_winnings(grid: BoxGrid, score: GameScore) -> list[FinalizedWinning]:
    """
    Winners of every period whose outcome is locked in.

    Expects winners to have been computed for `score` (see BoxGrid.apply_score).
    Periods without a determinable winning square are left out.
    """
    structure = grid.resolved_pool_structure
    winnings = []
    for index, period in enumerate(structure.periods):
        if not grid.is_period_finalized(period, score):
            continue
        square = grid.square_that_won(period)
        if square is None:
            continue
        winnings.append(FinalizedWinning(
            period=period,
            square=square,
            amount=structure.amount_per_period(index),
        ))
    return winnings


def grid_as_text(grid: BoxGrid) -> str:
    """Plain-text grid with header digits and owner initials."""
    lines = [
        'Pool Grid',
        f'{grid.away_team.name} vs {grid.home_team.name}',
        '',
        '    ' + ''.join(f'{n:3d}' for n in grid.home_numbers),
        '    ' + '-' * 30,
    ]
    for row_index, row in enumerate(grid.squares):
        cells = ''.join(f'{sq.initials or "--":>3}' for sq in row)
        lines.append(f'{grid.away_numbers[row_index]} | {cells}')
    return '\n'.join(lines) + '\n'
