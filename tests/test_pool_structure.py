"""Unit tests for pool structures, periods, and payouts."""

import pytest

from boxpool.pool_structure import (
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


class TestPeriods:
    """Tests for the periods each pool type pays on."""

    def test_standard_quarterly(self):
        assert STANDARD_QUARTERLY.periods == [QuarterPeriod(q) for q in (1, 2, 3, 4)]
        assert STANDARD_QUARTERLY.period_labels == ['Q1', 'Q2', 'Q3', 'Q4']

    def test_selected_quarters_sorted(self):
        structure = PoolStructure(pool_type=ByQuarter((4, 2)))
        assert structure.periods == [QuarterPeriod(2), QuarterPeriod(4)]

    def test_single_period_types(self):
        assert PoolStructure(pool_type=HalftimeOnly()).periods == [HalftimePeriod()]
        assert PoolStructure(pool_type=FinalOnly()).periods == [FinalPeriod()]
        assert PoolStructure(pool_type=FirstScoreChange()).periods == [FirstScorePeriod()]

    def test_halftime_and_final(self):
        structure = PoolStructure(pool_type=HalftimeAndFinal())
        assert [p.id for p in structure.periods] == ['Halftime', 'Final']

    def test_custom_periods_use_index_ids(self):
        structure = PoolStructure(pool_type=CustomPeriods(('3rd Inning', 'Final')))
        assert structure.periods == [CustomPeriod('0', '3rd Inning'), CustomPeriod('1', 'Final')]

    def test_per_score_change_capped(self):
        """Test N score change periods followed by the final."""
        structure = PoolStructure(pool_type=PerScoreChange(400, max_score_changes=10))
        periods = structure.periods
        assert len(periods) == 11
        assert periods[0] == ScoreChangePeriod(1)
        assert periods[0].id == 'ScoreChange1'
        assert periods[0].label == 'Score Change 1'
        assert periods[-1] == FinalPeriod()

    def test_per_score_change_default_cap(self):
        structure = PoolStructure(pool_type=PerScoreChange(100))
        assert structure.score_change_count == 25
        assert len(structure.periods) == 26

    def test_first_score_label(self):
        assert FirstScorePeriod().id == 'FirstScore'
        assert FirstScorePeriod().label == 'First Score'


class TestAmountPerPeriod:
    """Tests for concrete payout amounts."""

    def test_equal_split_by_quarter(self):
        structure = PoolStructure(total_pool_amount=100)
        assert [structure.amount_per_period(i) for i in range(4)] == [25.0] * 4

    def test_out_of_range_index(self):
        structure = PoolStructure(total_pool_amount=100)
        assert structure.amount_per_period(4) is None
        assert structure.amount_per_period(-1) is None

    def test_no_total(self):
        assert STANDARD_QUARTERLY.amount_per_period(0) is None

    def test_negative_total(self):
        assert PoolStructure(total_pool_amount=-10).amount_per_period(0) is None

    def test_fixed_amounts(self):
        structure = PoolStructure(payout_style=FixedAmount((10, 20)), total_pool_amount=100)
        assert structure.amount_per_period(0) == 10
        assert structure.amount_per_period(1) == 20
        assert structure.amount_per_period(2) is None

    def test_percentages(self):
        structure = PoolStructure(
            payout_style=Percentage((10, 20, 30, 40)), total_pool_amount=200,
        )
        assert structure.amount_per_period(0) == pytest.approx(20.0)
        assert structure.amount_per_period(3) == pytest.approx(80.0)

    def test_zero_percentage_is_unresolved(self):
        structure = PoolStructure(payout_style=Percentage((100, 0)), total_pool_amount=200)
        assert structure.amount_per_period(1) is None

    def test_custom_payout_never_numeric(self):
        structure = PoolStructure(
            pool_type=HalftimeAndFinal(),
            payout_style=CustomPayout(('Dinner', 'Tickets')),
            total_pool_amount=100,
        )
        assert structure.amount_per_period(0) is None

    def test_per_score_change_final_gets_remainder(self):
        structure = PoolStructure(
            pool_type=PerScoreChange(400, max_score_changes=20), total_pool_amount=10000,
        )
        assert structure.amount_per_period(0) == 400
        assert structure.amount_per_period(19) == 400
        assert structure.amount_per_period(20) == 2000

    def test_per_score_change_remainder_not_negative(self):
        structure = PoolStructure(
            pool_type=PerScoreChange(500, max_score_changes=25), total_pool_amount=1000,
        )
        assert structure.amount_per_period(25) == 0.0


class TestPayoutDescriptions:
    """Tests for per-period payout text."""

    def test_equal_split_percentages(self):
        structure = PoolStructure(pool_type=CustomPeriods(('A', 'B', 'C')))
        assert structure.payout_descriptions == ['33%', '33%', '33%']

    def test_fixed_amounts_padded(self):
        structure = PoolStructure(payout_style=FixedAmount((10, 20)))
        assert structure.payout_descriptions == ['$10', '$20', '$0', '$0']

    def test_percentages_padded(self):
        structure = PoolStructure(payout_style=Percentage((50, 50)))
        assert structure.payout_descriptions == ['50%', '50%', '0%', '0%']

    def test_custom_descriptions_padded(self):
        structure = PoolStructure(
            pool_type=HalftimeAndFinal(), payout_style=CustomPayout(('Dinner',)),
        )
        assert structure.payout_descriptions == ['Dinner', '']

    def test_padding_logs_warning(self, caplog):
        structure = PoolStructure(payout_style=FixedAmount((10,)))
        with caplog.at_level('WARNING', logger='boxpool.pool_structure'):
            structure.payout_descriptions
        assert 'padding' in caplog.text

    def test_per_score_change(self):
        structure = PoolStructure(
            pool_type=PerScoreChange(400, max_score_changes=20), total_pool_amount=10000,
        )
        descriptions = structure.payout_descriptions
        assert len(descriptions) == 21
        assert descriptions[0] == '$400'
        assert descriptions[-1] == '$2,000'

    def test_per_score_change_without_total(self):
        structure = PoolStructure(pool_type=PerScoreChange(400, max_score_changes=2))
        assert structure.payout_descriptions == ['$400', '$400', 'Remainder']


class TestFormatCurrency:
    """Tests for currency display."""

    def test_usd(self):
        structure = PoolStructure()
        assert structure.format_currency(25) == '$25'
        assert structure.format_currency(10000) == '$10,000'

    def test_whole_units(self):
        assert PoolStructure().format_currency(25.4) == '$25'

    def test_known_symbol(self):
        assert PoolStructure(currency_code='EUR').format_currency(25) == '€25'
        assert PoolStructure(currency_code='gbp').format_currency(25) == '£25'

    def test_unknown_code(self):
        assert PoolStructure(currency_code='CHF').format_currency(25) == 'CHF 25'

    def test_invalid_code_falls_back(self):
        assert PoolStructure(currency_code='dollars').format_currency(25) == '$25'
        assert PoolStructure(currency_code='').format_currency(7) == '$7'

    def test_non_finite(self):
        assert PoolStructure().format_currency(float('nan')) == '$0'

    def test_negative(self):
        assert PoolStructure().format_currency(-5) == '-$5'


class TestSummaries:
    """Tests for the plain-English structure summary."""

    def test_standard_quarterly(self):
        structure = PoolStructure(total_pool_amount=100)
        assert structure.professional_payout_summary == (
            'Winners are paid at the end of each quarter. '
            'The $100 pool is split evenly: $25 per period.'
        )

    def test_selected_quarters_fixed(self):
        structure = PoolStructure(
            pool_type=ByQuarter((2, 4)), payout_style=FixedAmount((50, 150)), total_pool_amount=200,
        )
        assert structure.professional_payout_summary == (
            'Winners are paid at the end of Q2 and Q4. Payouts: Q2 $50, Q4 $150.'
        )

    def test_percentages(self):
        structure = PoolStructure(
            payout_style=Percentage((10, 20, 30, 40)), total_pool_amount=200,
        )
        assert structure.professional_payout_summary.endswith(
            'Payouts: Q1 10%, Q2 20%, Q3 30%, Q4 40% of the $200 pool.'
        )

    def test_per_score_change(self):
        structure = PoolStructure(
            pool_type=PerScoreChange(400, max_score_changes=25), total_pool_amount=10000,
        )
        assert structure.professional_payout_summary == (
            'Every score change pays $400, up to 25 score changes; the remainder goes to '
            'the final score. Total pool: $10,000.'
        )

    def test_custom_without_periods(self):
        structure = PoolStructure(pool_type=CustomPeriods(()), total_pool_amount=100)
        assert structure.professional_payout_summary == 'No payout periods have been set.'

    def test_final_only_without_total(self):
        structure = PoolStructure(pool_type=FinalOnly())
        assert structure.professional_payout_summary == 'One winner, paid on the final score.'

    def test_display_summary_prefers_parsed_rules(self):
        structure = PoolStructure(readable_rules_summary='  $5 a box, quarters pay $125  ')
        assert structure.display_summary == '$5 a box, quarters pay $125'

    def test_display_summary_falls_back(self):
        structure = PoolStructure(readable_rules_summary='   ')
        assert structure.display_summary == structure.professional_payout_summary

    def test_pool_type_labels(self):
        assert STANDARD_QUARTERLY.pool_type_label == 'By Quarter'
        assert PoolStructure(pool_type=HalftimeAndFinal()).pool_type_label == 'Halftime & Final'
        assert PoolStructure(pool_type=PerScoreChange(1)).pool_type_label == 'Per Score Change'


class TestDefaultForSport:
    """Tests for suggested structures per league."""

    def test_nfl_quarterly(self):
        assert default_for_sport('NFL').pool_type == ByQuarter((1, 2, 3, 4))

    def test_mlb_innings(self):
        structure = default_for_sport('mlb')
        assert structure.period_labels == ['3rd Inning', '6th Inning', '9th Inning', 'Final']

    def test_unknown_sport(self):
        structure = default_for_sport('curling')
        assert structure.pool_type == ByQuarter((1, 2, 3, 4))
        assert isinstance(structure.payout_style, EqualSplit)
