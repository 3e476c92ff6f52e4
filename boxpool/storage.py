"""Saving and loading pools and score snapshots as JSON."""

import logging
from pathlib import Path
from typing import Any

from .grid import BoxGrid
from .models import BoxSquare, GameScore, QuarterScores, Team
from .pool_structure import (
    ByQuarter,
    CustomPayout,
    CustomPeriods,
    EqualSplit,
    FinalOnly,
    FirstScoreChange,
    FixedAmount,
    HalftimeAndFinal,
    HalftimeOnly,
    PayoutStyle,
    Percentage,
    PerScoreChange,
    PoolStructure,
    PoolType,
)
from .schemas import (
    BoxGridSchema,
    BoxSquareSchema,
    ByQuarterSchema,
    CustomPayoutSchema,
    CustomPeriodsSchema,
    EqualSplitSchema,
    FinalOnlySchema,
    FirstScoreChangeSchema,
    FixedAmountSchema,
    GameScoreSchema,
    HalftimeAndFinalSchema,
    HalftimeOnlySchema,
    PercentageSchema,
    PerScoreChangeSchema,
    PoolStructureSchema,
    QuarterScoresSchema,
    TeamSchema,
)
from .utils import load_json, save_json

logger = logging.getLogger('boxpool.storage')


# Teams and scores


def team_to_schema(team: Team) -> TeamSchema:
    return TeamSchema(
        id=team.id,
        name=team.name,
        abbreviation=team.abbreviation,
        primary_color=team.primary_color,
        secondary_color=team.secondary_color,
        logo_url=team.logo_url,
    )


def team_from_schema(schema: TeamSchema) -> Team:
    return Team(
        id=schema.id,
        name=schema.name,
        abbreviation=schema.abbreviation,
        primary_color=schema.primary_color,
        secondary_color=schema.secondary_color,
        logo_url=schema.logo_url,
    )


def game_score_to_schema(score: GameScore) -> GameScoreSchema:
    return GameScoreSchema(
        home_team=team_to_schema(score.home_team),
        away_team=team_to_schema(score.away_team),
        home_score=score.home_score,
        away_score=score.away_score,
        quarter=score.quarter,
        time_remaining=score.time_remaining,
        is_game_active=score.is_game_active,
        is_game_over=score.is_game_over,
        quarter_scores=QuarterScoresSchema(**vars(score.quarter_scores)),
        score_changes=[tuple(change) for change in score.score_changes],
    )


def game_score_from_schema(schema: GameScoreSchema) -> GameScore:
    return GameScore(
        home_team=team_from_schema(schema.home_team),
        away_team=team_from_schema(schema.away_team),
        home_score=schema.home_score,
        away_score=schema.away_score,
        quarter=schema.quarter,
        time_remaining=schema.time_remaining,
        is_game_active=schema.is_game_active,
        is_game_over=schema.is_game_over,
        quarter_scores=QuarterScores(**schema.quarter_scores.model_dump()),
        score_changes=[tuple(change) for change in schema.score_changes],
    )


def game_score_from_dict(data: dict[str, Any]) -> GameScore:
    """Build a GameScore from a score-source payload (validated)."""
    return game_score_from_schema(GameScoreSchema.model_validate(data))


def load_game_score(path: Path | str) -> GameScore:
    """Load a score snapshot file."""
    return game_score_from_schema(load_json(path, schema=GameScoreSchema))


# Pool structure


def pool_type_to_schema(pool_type: PoolType):
    if isinstance(pool_type, ByQuarter):
        return ByQuarterSchema(quarters=list(pool_type.quarters))
    if isinstance(pool_type, HalftimeOnly):
        return HalftimeOnlySchema()
    if isinstance(pool_type, FinalOnly):
        return FinalOnlySchema()
    if isinstance(pool_type, FirstScoreChange):
        return FirstScoreChangeSchema()
    if isinstance(pool_type, HalftimeAndFinal):
        return HalftimeAndFinalSchema()
    if isinstance(pool_type, CustomPeriods):
        return CustomPeriodsSchema(period_labels=list(pool_type.period_labels))
    if isinstance(pool_type, PerScoreChange):
        return PerScoreChangeSchema(
            amount_per_change=pool_type.amount_per_change,
            max_score_changes=pool_type.max_score_changes,
        )
    raise TypeError(f'Unknown pool type: {pool_type!r}')


def pool_type_from_schema(schema) -> PoolType:
    if isinstance(schema, ByQuarterSchema):
        return ByQuarter(tuple(schema.quarters))
    if isinstance(schema, HalftimeOnlySchema):
        return HalftimeOnly()
    if isinstance(schema, FinalOnlySchema):
        return FinalOnly()
    if isinstance(schema, FirstScoreChangeSchema):
        return FirstScoreChange()
    if isinstance(schema, HalftimeAndFinalSchema):
        return HalftimeAndFinal()
    if isinstance(schema, CustomPeriodsSchema):
        return CustomPeriods(tuple(schema.period_labels))
    if isinstance(schema, PerScoreChangeSchema):
        return PerScoreChange(schema.amount_per_change, schema.max_score_changes)
    raise TypeError(f'Unknown pool type schema: {schema!r}')


def payout_style_to_schema(style: PayoutStyle):
    if isinstance(style, FixedAmount):
        return FixedAmountSchema(amounts=list(style.amounts))
    if isinstance(style, Percentage):
        return PercentageSchema(percents=list(style.percents))
    if isinstance(style, EqualSplit):
        return EqualSplitSchema()
    if isinstance(style, CustomPayout):
        return CustomPayoutSchema(descriptions=list(style.descriptions))
    raise TypeError(f'Unknown payout style: {style!r}')


def payout_style_from_schema(schema) -> PayoutStyle:
    if isinstance(schema, FixedAmountSchema):
        return FixedAmount(tuple(schema.amounts))
    if isinstance(schema, PercentageSchema):
        return Percentage(tuple(schema.percents))
    if isinstance(schema, EqualSplitSchema):
        return EqualSplit()
    if isinstance(schema, CustomPayoutSchema):
        return CustomPayout(tuple(schema.descriptions))
    raise TypeError(f'Unknown payout style schema: {schema!r}')


def pool_structure_to_schema(structure: PoolStructure) -> PoolStructureSchema:
    return PoolStructureSchema(
        pool_type=pool_type_to_schema(structure.pool_type),
        payout_style=payout_style_to_schema(structure.payout_style),
        total_pool_amount=structure.total_pool_amount,
        currency_code=structure.currency_code,
        custom_payout_description=structure.custom_payout_description,
        readable_rules_summary=structure.readable_rules_summary,
    )


def pool_structure_from_schema(schema: PoolStructureSchema) -> PoolStructure:
    return PoolStructure(
        pool_type=pool_type_from_schema(schema.pool_type),
        payout_style=payout_style_from_schema(schema.payout_style),
        total_pool_amount=schema.total_pool_amount,
        currency_code=schema.currency_code,
        custom_payout_description=schema.custom_payout_description,
        readable_rules_summary=schema.readable_rules_summary,
    )


def pool_structure_from_dict(data: dict[str, Any]) -> PoolStructure:
    """Build a PoolStructure from a rules-parser payload (validated)."""
    return pool_structure_from_schema(PoolStructureSchema.model_validate(data))


# Grids


def grid_to_schema(grid: BoxGrid) -> BoxGridSchema:
    return BoxGridSchema(
        id=grid.id,
        name=grid.name,
        home_team=team_to_schema(grid.home_team),
        away_team=team_to_schema(grid.away_team),
        home_numbers=list(grid.home_numbers),
        away_numbers=list(grid.away_numbers),
        squares=[[BoxSquareSchema(**vars(sq)) for sq in row] for row in grid.squares],
        created_at=grid.created_at,
        last_modified=grid.last_modified,
        current_score=game_score_to_schema(grid.current_score) if grid.current_score else None,
        pool_structure=pool_structure_to_schema(grid.pool_structure) if grid.pool_structure else None,
        owner_labels=list(grid.owner_labels) if grid.owner_labels is not None else None,
        shared_code=grid.shared_code,
    )


def grid_from_schema(schema: BoxGridSchema) -> BoxGrid:
    """Rebuild a grid; raises GridIntegrityError if the layout is malformed."""
    return BoxGrid(
        id=schema.id,
        name=schema.name,
        home_team=team_from_schema(schema.home_team),
        away_team=team_from_schema(schema.away_team),
        home_numbers=list(schema.home_numbers),
        away_numbers=list(schema.away_numbers),
        squares=[[BoxSquare(**sq.model_dump()) for sq in row] for row in schema.squares],
        created_at=schema.created_at,
        last_modified=schema.last_modified,
        current_score=game_score_from_schema(schema.current_score) if schema.current_score else None,
        pool_structure=pool_structure_from_schema(schema.pool_structure) if schema.pool_structure else None,
        owner_labels=list(schema.owner_labels) if schema.owner_labels is not None else None,
        shared_code=schema.shared_code,
    )


def grid_to_dict(grid: BoxGrid) -> dict[str, Any]:
    return grid_to_schema(grid).model_dump(mode='json')


def grid_from_dict(data: dict[str, Any]) -> BoxGrid:
    return grid_from_schema(BoxGridSchema.model_validate(data))


def save_grid(path: Path | str, grid: BoxGrid) -> None:
    """Write a pool to disk."""
    save_json(path, grid_to_schema(grid))
    logger.info(f'Saved pool "{grid.name}" to {path}')


def load_grid(path: Path | str) -> BoxGrid:
    """
    Load a pool from disk.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If the file doesn't match the pool schema
        GridIntegrityError: If squares don't sit at their matrix positions
    """
    grid = grid_from_schema(load_json(path, schema=BoxGridSchema))
    logger.debug(f'Loaded pool "{grid.name}" ({grid.filled_count}/100 squares filled)')
    return grid
