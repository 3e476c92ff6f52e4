"""Validation functions for grid layout, quarter scores, and pool structures."""

from typing import Sequence

from .constants import DIGITS, GRID_SIZE
from .models import BoxSquare, QuarterScores
from .pool_structure import (
    CustomPayout,
    FixedAmount,
    Percentage,
    PerScoreChange,
    PoolStructure,
)


class GridIntegrityError(ValueError):
    """Digit permutations or the square matrix are malformed."""


def validate_digits(digits: Sequence[int], axis: str) -> list[str]:
    """
    Check that a header is a permutation of 0-9.

    Args:
        digits: Header digits in column (home) or row (away) order
        axis: 'home' or 'away', used in messages

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []
    if len(digits) != GRID_SIZE:
        errors.append(f'{axis} numbers has {len(digits)} digits (expected {GRID_SIZE})')

    missing = sorted(set(DIGITS) - set(digits))
    if missing:
        errors.append(f'{axis} numbers missing digits: {", ".join(map(str, missing))}')

    out_of_range = sorted({d for d in digits if d not in DIGITS})
    if out_of_range:
        errors.append(f'{axis} numbers has invalid digits: {", ".join(map(str, out_of_range))}')

    seen = set()
    duplicates = set()
    for digit in digits:
        if digit in seen:
            duplicates.add(digit)
        seen.add(digit)
    if duplicates:
        errors.append(f'{axis} numbers has duplicate digits: {", ".join(map(str, sorted(duplicates)))}')

    return errors


def validate_grid_layout(
    home_numbers: Sequence[int],
    away_numbers: Sequence[int],
    squares: Sequence[Sequence[BoxSquare]],
) -> list[str]:
    """
    Validate a grid's permutation and shape invariants.

    Checks:
    - home and away numbers are each a permutation of 0-9
    - the square matrix is exactly 10x10
    - every square's stored row/column matches its matrix position

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = validate_digits(home_numbers, 'home') + validate_digits(away_numbers, 'away')

    if len(squares) != GRID_SIZE:
        errors.append(f'grid has {len(squares)} rows (expected {GRID_SIZE})')

    for row_index, row in enumerate(squares):
        if len(row) != GRID_SIZE:
            errors.append(f'row {row_index} has {len(row)} squares (expected {GRID_SIZE})')
        for col_index, square in enumerate(row):
            if square.row != row_index or square.column != col_index:
                errors.append(
                    f'square at ({row_index}, {col_index}) claims position '
                    f'({square.row}, {square.column})'
                )

    return errors


def ensure_grid_integrity(
    home_numbers: Sequence[int],
    away_numbers: Sequence[int],
    squares: Sequence[Sequence[BoxSquare]],
) -> None:
    """Raise GridIntegrityError if the layout invariants are violated."""
    errors = validate_grid_layout(home_numbers, away_numbers, squares)
    if errors:
        raise GridIntegrityError('; '.join(errors))


def validate_quarter_scores(quarter_scores: QuarterScores) -> list[str]:
    """
    Flag quarters with only one side recorded and scores that go backwards.

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []
    previous = None
    for quarter in (1, 2, 3, 4):
        home = getattr(quarter_scores, f'q{quarter}_home')
        away = getattr(quarter_scores, f'q{quarter}_away')
        if (home is None) != (away is None):
            warnings.append(f'Q{quarter} has a partial score (home={home}, away={away})')
            continue
        if home is None:
            continue
        if home < 0 or away < 0:
            warnings.append(f'Q{quarter} has a negative score ({home}-{away})')
        if previous is not None and (home < previous[0] or away < previous[1]):
            warnings.append(
                f'Q{quarter} score {home}-{away} is lower than the previous quarter '
                f'({previous[0]}-{previous[1]})'
            )
        previous = (home, away)
    return warnings


def validate_pool_structure(structure: PoolStructure) -> list[str]:
    """
    Sanity-check a pool structure from the rules parser.

    None of these are fatal: short payout lists are padded when displayed.

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []
    count = len(structure.periods)
    style = structure.payout_style

    if count == 0:
        warnings.append('Pool has no payout periods')

    if isinstance(style, FixedAmount) and len(style.amounts) < count:
        warnings.append(f'{len(style.amounts)} fixed amounts for {count} periods')
    if isinstance(style, Percentage):
        if len(style.percents) < count:
            warnings.append(f'{len(style.percents)} percentages for {count} periods')
        total_pct = sum(style.percents[:count])
        if abs(total_pct - 100) > 0.01:
            warnings.append(f'Percentages add up to {total_pct:g}% (expected 100%)')
    if isinstance(style, CustomPayout) and len(style.descriptions) < count:
        warnings.append(f'{len(style.descriptions)} payout descriptions for {count} periods')

    total = structure.total_pool_amount
    if total is not None and total < 0:
        warnings.append(f'Total pool amount is negative ({total:g})')

    if isinstance(structure.pool_type, PerScoreChange) and total is not None:
        paid = structure.pool_type.amount_per_change * structure.score_change_count
        if paid > total:
            warnings.append(
                f'Score change payouts ({paid:g}) exceed the total pool ({total:g})'
            )

    return warnings
