"""Pool structure: which periods pay out and how the pot is split."""

import logging
import math
import re
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from .constants import CURRENCY_SYMBOLS, DEFAULT_CURRENCY, DEFAULT_MAX_SCORE_CHANGES

logger = logging.getLogger('boxpool.pool_structure')


# Pool types (which moments can win)


@dataclass(frozen=True)
class ByQuarter:
    """End of the listed quarters (last digit of the score at each quarter end)."""
    quarters: Tuple[int, ...] = (1, 2, 3, 4)


@dataclass(frozen=True)
class HalftimeOnly:
    pass


@dataclass(frozen=True)
class FinalOnly:
    pass


@dataclass(frozen=True)
class FirstScoreChange:
    """First time the score moves off 0-0."""


@dataclass(frozen=True)
class HalftimeAndFinal:
    pass


@dataclass(frozen=True)
class CustomPeriods:
    period_labels: Tuple[str, ...] = ()


@dataclass(frozen=True)
class PerScoreChange:
    """Every score change pays a fixed amount, up to a cap; the rest goes to the final."""
    amount_per_change: float
    max_score_changes: Optional[int] = None


PoolType = Union[
    ByQuarter, HalftimeOnly, FinalOnly, FirstScoreChange,
    HalftimeAndFinal, CustomPeriods, PerScoreChange,
]


# Payout styles (how the pot is split)


@dataclass(frozen=True)
class FixedAmount:
    amounts: Tuple[float, ...] = ()


@dataclass(frozen=True)
class Percentage:
    percents: Tuple[float, ...] = ()


@dataclass(frozen=True)
class EqualSplit:
    pass


@dataclass(frozen=True)
class CustomPayout:
    descriptions: Tuple[str, ...] = ()


PayoutStyle = Union[FixedAmount, Percentage, EqualSplit, CustomPayout]


# Periods (single winning moments)


@dataclass(frozen=True)
class QuarterPeriod:
    number: int

    @property
    def id(self) -> str:
        return f'Q{self.number}'

    @property
    def label(self) -> str:
        return f'Q{self.number}'


@dataclass(frozen=True)
class HalftimePeriod:
    id = 'Halftime'
    label = 'Halftime'


@dataclass(frozen=True)
class FinalPeriod:
    id = 'Final'
    label = 'Final'


@dataclass(frozen=True)
class FirstScorePeriod:
    id = 'FirstScore'
    label = 'First Score'


@dataclass(frozen=True)
class CustomPeriod:
    id: str
    label: str


@dataclass(frozen=True)
class ScoreChangePeriod:
    number: int

    @property
    def id(self) -> str:
        return f'ScoreChange{self.number}'

    @property
    def label(self) -> str:
        return f'Score Change {self.number}'


PoolPeriod = Union[
    QuarterPeriod, HalftimePeriod, FinalPeriod, FirstScorePeriod,
    CustomPeriod, ScoreChangePeriod,
]


def _join_labels(labels: list[str]) -> str:
    if len(labels) <= 1:
        return ''.join(labels)
    if len(labels) == 2:
        return f'{labels[0]} and {labels[1]}'
    return ', '.join(labels[:-1]) + f' and {labels[-1]}'


def _pad(values: list, count: int, filler) -> list:
    if len(values) < count:
        logger.warning(f'Payout list has {len(values)} entries for {count} periods; padding')
        return values + [filler] * (count - len(values))
    return values[:count]


@dataclass
class PoolStructure:
    """
    Defines when and how a pool pays out.

    Free-text rules (`custom_payout_description`) and the parsed summary
    (`readable_rules_summary`) come from the rules parser and are only
    stored and shown verbatim.
    """
    pool_type: PoolType = field(default_factory=ByQuarter)
    payout_style: PayoutStyle = field(default_factory=EqualSplit)
    total_pool_amount: Optional[float] = None
    currency_code: str = DEFAULT_CURRENCY
    custom_payout_description: Optional[str] = None
    readable_rules_summary: Optional[str] = None

    @property
    def score_change_count(self) -> int:
        """Number of paid score changes for a PerScoreChange pool (0 otherwise)."""
        if not isinstance(self.pool_type, PerScoreChange):
            return 0
        cap = self.pool_type.max_score_changes
        return cap if cap is not None and cap > 0 else DEFAULT_MAX_SCORE_CHANGES

    @property
    def periods(self) -> list[PoolPeriod]:
        """Periods that can win in this pool, in payout order."""
        pool_type = self.pool_type
        if isinstance(pool_type, ByQuarter):
            return [QuarterPeriod(q) for q in sorted(pool_type.quarters)]
        if isinstance(pool_type, HalftimeOnly):
            return [HalftimePeriod()]
        if isinstance(pool_type, FinalOnly):
            return [FinalPeriod()]
        if isinstance(pool_type, FirstScoreChange):
            return [FirstScorePeriod()]
        if isinstance(pool_type, HalftimeAndFinal):
            return [HalftimePeriod(), FinalPeriod()]
        if isinstance(pool_type, CustomPeriods):
            return [CustomPeriod(str(i), label) for i, label in enumerate(pool_type.period_labels)]
        if isinstance(pool_type, PerScoreChange):
            changes: list[PoolPeriod] = [
                ScoreChangePeriod(n) for n in range(1, self.score_change_count + 1)
            ]
            return changes + [FinalPeriod()]
        raise TypeError(f'Unknown pool type: {pool_type!r}')

    @property
    def period_labels(self) -> list[str]:
        return [period.label for period in self.periods]

    @property
    def _splits_per_score_change(self) -> bool:
        return isinstance(self.pool_type, PerScoreChange) and isinstance(self.payout_style, EqualSplit)

    @property
    def payout_descriptions(self) -> list[str]:
        """Payout text per period; short lists are padded rather than rejected."""
        count = len(self.periods)
        style = self.payout_style

        if self._splits_per_score_change:
            per_change = self.format_currency(self.pool_type.amount_per_change)
            final_amount = self.amount_per_period(count - 1)
            final_text = self.format_currency(final_amount) if final_amount is not None else 'Remainder'
            return [per_change] * (count - 1) + [final_text]

        if isinstance(style, FixedAmount):
            return _pad([self.format_currency(a) for a in style.amounts], count, self.format_currency(0))
        if isinstance(style, Percentage):
            return _pad([f'{int(p)}%' for p in style.percents], count, '0%')
        if isinstance(style, EqualSplit):
            pct = 100 // count if count > 0 else 0
            return [f'{pct}%'] * count
        if isinstance(style, CustomPayout):
            return _pad(list(style.descriptions), count, '')
        raise TypeError(f'Unknown payout style: {style!r}')

    def amount_per_period(self, index: int) -> Optional[float]:
        """
        Concrete payout for one period, or None when it cannot be resolved.

        Requires a known, non-negative pool total. Custom text payouts are
        never resolved to a number.
        """
        total = self.total_pool_amount
        count = len(self.periods)
        if total is None or total < 0 or index < 0 or index >= count:
            return None

        if self._splits_per_score_change:
            amount = self.pool_type.amount_per_change
            if index < count - 1:
                return amount
            return max(total - amount * self.score_change_count, 0.0)

        style = self.payout_style
        if isinstance(style, FixedAmount):
            if index >= len(style.amounts):
                return None
            return style.amounts[index]
        if isinstance(style, Percentage):
            if index >= len(style.percents) or style.percents[index] <= 0:
                return None
            return total * (style.percents[index] / 100.0)
        if isinstance(style, EqualSplit):
            return total / count
        if isinstance(style, CustomPayout):
            return None
        raise TypeError(f'Unknown payout style: {style!r}')

    def format_currency(self, value: float) -> str:
        """Whole-unit currency display, e.g. 25 -> '$25', 10000 -> '$10,000'."""
        code = (self.currency_code or '').upper()
        if not math.isfinite(value) or not re.fullmatch(r'[A-Z]{3}', code):
            return f'${int(value) if math.isfinite(value) else 0}'
        amount = f'{value:,.0f}'
        if amount == '-0':
            amount = '0'
        symbol = CURRENCY_SYMBOLS.get(code)
        if symbol is None:
            return f'{code} {amount}'
        if amount.startswith('-'):
            return f'-{symbol}{amount[1:]}'
        return f'{symbol}{amount}'

    @property
    def pool_type_label(self) -> str:
        pool_type = self.pool_type
        if isinstance(pool_type, ByQuarter):
            return 'By Quarter'
        if isinstance(pool_type, HalftimeOnly):
            return 'Halftime Only'
        if isinstance(pool_type, FinalOnly):
            return 'Final Score Only'
        if isinstance(pool_type, FirstScoreChange):
            return 'First Score'
        if isinstance(pool_type, HalftimeAndFinal):
            return 'Halftime & Final'
        if isinstance(pool_type, CustomPeriods):
            return 'Custom Periods'
        if isinstance(pool_type, PerScoreChange):
            return 'Per Score Change'
        raise TypeError(f'Unknown pool type: {pool_type!r}')

    def _pool_type_sentence(self) -> str:
        pool_type = self.pool_type
        if isinstance(pool_type, ByQuarter):
            if sorted(pool_type.quarters) == [1, 2, 3, 4]:
                return 'Winners are paid at the end of each quarter.'
            return f'Winners are paid at the end of {_join_labels(self.period_labels)}.'
        if isinstance(pool_type, HalftimeOnly):
            return 'One winner, paid on the halftime score.'
        if isinstance(pool_type, FinalOnly):
            return 'One winner, paid on the final score.'
        if isinstance(pool_type, FirstScoreChange):
            return 'One winner: the square matching the first score of the game.'
        if isinstance(pool_type, HalftimeAndFinal):
            return 'Two winners: the halftime score and the final score.'
        if isinstance(pool_type, CustomPeriods):
            if not pool_type.period_labels:
                return 'No payout periods have been set.'
            return f'Winners are paid for {_join_labels(self.period_labels)}.'
        if isinstance(pool_type, PerScoreChange):
            amount = self.format_currency(pool_type.amount_per_change)
            if pool_type.max_score_changes:
                return (
                    f'Every score change pays {amount}, up to {pool_type.max_score_changes} '
                    'score changes; the remainder goes to the final score.'
                )
            return f'Every score change pays {amount}; the remainder goes to the final score.'
        raise TypeError(f'Unknown pool type: {pool_type!r}')

    def _payout_style_sentence(self) -> str:
        style = self.payout_style
        total = self.total_pool_amount
        total_text = self.format_currency(total) if total is not None else None

        if self._splits_per_score_change:
            return f'Total pool: {total_text}.' if total_text else ''
        if isinstance(style, FixedAmount):
            pairs = zip(self.period_labels, self.payout_descriptions)
            return 'Payouts: ' + ', '.join(f'{label} {desc}' for label, desc in pairs) + '.'
        if isinstance(style, Percentage):
            pairs = zip(self.period_labels, self.payout_descriptions)
            text = 'Payouts: ' + ', '.join(f'{label} {desc}' for label, desc in pairs)
            return text + (f' of the {total_text} pool.' if total_text else ' of the pool.')
        if isinstance(style, EqualSplit):
            count = len(self.periods)
            if count == 0:
                return ''
            if count == 1:
                return f'The winner takes the full {total_text} pool.' if total_text else ''
            if total_text:
                share = self.format_currency(total / count)
                return f'The {total_text} pool is split evenly: {share} per period.'
            return f'The pool is split evenly across {count} periods.'
        if isinstance(style, CustomPayout):
            pairs = [
                f'{label}: {desc}'
                for label, desc in zip(self.period_labels, self.payout_descriptions)
                if desc
            ]
            return '; '.join(pairs) + '.' if pairs else ''
        raise TypeError(f'Unknown payout style: {style!r}')

    @property
    def professional_payout_summary(self) -> str:
        """Plain-English description of the structure for display."""
        sentences = [self._pool_type_sentence(), self._payout_style_sentence()]
        return ' '.join(s for s in sentences if s)

    @property
    def display_summary(self) -> str:
        """Parsed rules summary when available, otherwise the generated summary."""
        if self.readable_rules_summary and self.readable_rules_summary.strip():
            return self.readable_rules_summary.strip()
        return self.professional_payout_summary


STANDARD_QUARTERLY = PoolStructure(
    pool_type=ByQuarter((1, 2, 3, 4)),
    payout_style=EqualSplit(),
    total_pool_amount=None,
    currency_code=DEFAULT_CURRENCY,
)

_QUARTER_SPORTS = {'nfl', 'nba', 'ncaaf', 'ncaab', 'wnba', 'cfl'}
_CUSTOM_SPORT_PERIODS = {
    'nhl': ('Period 1', 'Period 2', 'Period 3', 'Final'),
    'mlb': ('3rd Inning', '6th Inning', '9th Inning', 'Final'),
    'mls': ('Halftime', 'Final'),
}


def default_for_sport(sport: str) -> PoolStructure:
    """
    Suggested structure when creating a pool for a given league.

    Unknown leagues fall back to the standard quarterly structure.
    """
    key = sport.strip().lower()
    if key in _CUSTOM_SPORT_PERIODS:
        return PoolStructure(pool_type=CustomPeriods(_CUSTOM_SPORT_PERIODS[key]))
    if key not in _QUARTER_SPORTS:
        logger.debug(f'No default structure for sport {sport!r}; using quarterly')
    return PoolStructure(pool_type=ByQuarter((1, 2, 3, 4)))
