"""Pydantic schemas for saved pools, score snapshots, and configuration."""

from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, field_validator


class TeamSchema(BaseModel):
    """Team identity."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    abbreviation: str = Field(..., min_length=1, max_length=10)
    primary_color: str = Field(default='#000000', pattern=r'^#[0-9A-Fa-f]{6}$')
    secondary_color: str = Field(default='#FFFFFF', pattern=r'^#[0-9A-Fa-f]{6}$')
    logo_url: str | None = None

    class Config:
        extra = 'ignore'


class QuarterScoresSchema(BaseModel):
    """End-of-quarter cumulative scores."""

    q1_home: int | None = Field(None, ge=0)
    q1_away: int | None = Field(None, ge=0)
    q2_home: int | None = Field(None, ge=0)
    q2_away: int | None = Field(None, ge=0)
    q3_home: int | None = Field(None, ge=0)
    q3_away: int | None = Field(None, ge=0)
    q4_home: int | None = Field(None, ge=0)
    q4_away: int | None = Field(None, ge=0)

    class Config:
        extra = 'forbid'


class GameScoreSchema(BaseModel):
    """Score snapshot from the score source."""

    home_team: TeamSchema
    away_team: TeamSchema
    home_score: int = Field(0, ge=0)
    away_score: int = Field(0, ge=0)
    quarter: int = Field(0, ge=0)
    time_remaining: str = '15:00'
    is_game_active: bool = False
    is_game_over: bool = False
    quarter_scores: QuarterScoresSchema = Field(default_factory=QuarterScoresSchema)
    score_changes: list[tuple[int, int]] = Field(default_factory=list)

    class Config:
        extra = 'ignore'


class BoxSquareSchema(BaseModel):
    """One grid cell."""

    id: str = Field(..., min_length=1)
    player_name: str = ''
    row: int = Field(..., ge=0, le=9)
    column: int = Field(..., ge=0, le=9)
    is_winner: bool = False
    quarter_wins: list[int] = Field(default_factory=list)
    period_wins: list[str] = Field(default_factory=list)

    class Config:
        extra = 'forbid'


# Pool types, tagged by `kind`


class ByQuarterSchema(BaseModel):
    kind: Literal['by_quarter'] = 'by_quarter'
    quarters: list[int] = Field(default_factory=lambda: [1, 2, 3, 4])

    @field_validator('quarters')
    @classmethod
    def validate_quarters(cls, v):
        """Ensure quarters are 1-4."""
        for quarter in v:
            if quarter not in (1, 2, 3, 4):
                raise ValueError(f'Invalid quarter: {quarter}')
        return v


class HalftimeOnlySchema(BaseModel):
    kind: Literal['halftime_only'] = 'halftime_only'


class FinalOnlySchema(BaseModel):
    kind: Literal['final_only'] = 'final_only'


class FirstScoreChangeSchema(BaseModel):
    kind: Literal['first_score_change'] = 'first_score_change'


class HalftimeAndFinalSchema(BaseModel):
    kind: Literal['halftime_and_final'] = 'halftime_and_final'


class CustomPeriodsSchema(BaseModel):
    kind: Literal['custom'] = 'custom'
    period_labels: list[str] = Field(default_factory=list)


class PerScoreChangeSchema(BaseModel):
    kind: Literal['per_score_change'] = 'per_score_change'
    amount_per_change: float = Field(..., ge=0)
    max_score_changes: int | None = Field(None, ge=0)  # 0 = uncapped


PoolTypeSchema = Annotated[
    Union[
        ByQuarterSchema,
        HalftimeOnlySchema,
        FinalOnlySchema,
        FirstScoreChangeSchema,
        HalftimeAndFinalSchema,
        CustomPeriodsSchema,
        PerScoreChangeSchema,
    ],
    Field(discriminator='kind'),
]


# Payout styles, tagged by `kind`


class FixedAmountSchema(BaseModel):
    kind: Literal['fixed_amount'] = 'fixed_amount'
    amounts: list[float] = Field(default_factory=list)


class PercentageSchema(BaseModel):
    kind: Literal['percentage'] = 'percentage'
    percents: list[float] = Field(default_factory=list)


class EqualSplitSchema(BaseModel):
    kind: Literal['equal_split'] = 'equal_split'


class CustomPayoutSchema(BaseModel):
    kind: Literal['custom'] = 'custom'
    descriptions: list[str] = Field(default_factory=list)


PayoutStyleSchema = Annotated[
    Union[FixedAmountSchema, PercentageSchema, EqualSplitSchema, CustomPayoutSchema],
    Field(discriminator='kind'),
]


class PoolStructureSchema(BaseModel):
    """How a pool pays out."""

    pool_type: PoolTypeSchema = Field(default_factory=ByQuarterSchema)
    payout_style: PayoutStyleSchema = Field(default_factory=EqualSplitSchema)
    total_pool_amount: float | None = None
    currency_code: str = Field(default='USD', min_length=1, max_length=8)
    custom_payout_description: str | None = None
    readable_rules_summary: str | None = None

    class Config:
        extra = 'forbid'


class BoxGridSchema(BaseModel):
    """
    Saved pool file.

    `pool_structure`, `owner_labels` and `shared_code` were added after the
    first release; files without them load with those fields absent.
    """

    id: str = Field(..., min_length=1)
    name: str
    home_team: TeamSchema
    away_team: TeamSchema
    home_numbers: list[int] = Field(..., min_length=10, max_length=10)
    away_numbers: list[int] = Field(..., min_length=10, max_length=10)
    squares: list[list[BoxSquareSchema]]
    created_at: datetime
    last_modified: datetime
    current_score: GameScoreSchema | None = None
    pool_structure: PoolStructureSchema | None = None
    owner_labels: list[str] | None = None
    shared_code: str | None = None

    @field_validator('home_numbers', 'away_numbers')
    @classmethod
    def validate_permutation(cls, v):
        """Ensure header digits are a permutation of 0-9."""
        if sorted(v) != list(range(10)):
            raise ValueError(f'Header digits must be a permutation of 0-9, got {v}')
        return v

    @field_validator('squares')
    @classmethod
    def validate_shape(cls, v):
        """Ensure the square matrix is 10x10."""
        if len(v) != 10 or any(len(row) != 10 for row in v):
            raise ValueError('Square matrix must be 10x10')
        return v

    class Config:
        extra = 'ignore'


class PoolConfig(BaseModel):
    """Application defaults for new pools and the CLI."""

    default_pool_name: str = Field(default='Super Bowl Box', min_length=1)
    default_currency: str = Field(default='USD', pattern=r'^[A-Z]{3}$')
    default_home_team: str = Field(default='KC', min_length=2, max_length=3)
    default_away_team: str = Field(default='PHI', min_length=2, max_length=3)
    owner_name: str = ''
    log_dir: str = 'logs'

    class Config:
        extra = 'forbid'
