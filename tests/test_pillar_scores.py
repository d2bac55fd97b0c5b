"""
Tests for the six-pillar wealth health scoring.
"""

from decimal import Decimal
from itertools import product

import pytest

from wealth_engine.models.aggregator import RecordTotals, aggregate_records
from wealth_engine.models.pillar_scores import (
    calculate_cash_flow_pillar,
    calculate_debt_pillar,
    calculate_liquidity_pillar,
    calculate_protection_pillar,
    calculate_score_breakdown,
    debt_status,
    liquidity_status,
    percent_of_max_status,
    protection_status,
    score_cash_flow,
    score_debt,
    score_investment,
    score_liquidity,
    score_net_worth,
    score_protection,
)
from wealth_engine.models.records import Asset, Expense, Income, Liability


def D(value):
    return Decimal(str(value))


class TestNetWorthScore:
    """Test the net worth pillar ladder."""

    def test_no_points_without_positive_net_worth(self):
        assert score_net_worth(D(0), D(1000)) == 0
        assert score_net_worth(D(-500), D(1000)) == 0
        assert score_net_worth(D(500), D(0)) == 0

    def test_single_million_asset_scores_21(self):
        # 10 base + 10 ratio (capped) + 1 per million
        assert score_net_worth(D(1000000), D(1000000)) == 21

    def test_ratio_points_truncate(self):
        # ratio 0.49 -> 9.8 -> 9 ratio points
        assert score_net_worth(D(490000), D(1000000)) == 19

    def test_absolute_points_capped_at_five(self):
        assert score_net_worth(D(9000000), D(9000000)) == 25

    def test_total_capped_at_25(self):
        assert score_net_worth(D(50000000), D(50000000)) == 25


class TestCashFlowScore:
    """Test the savings rate ladder."""

    @pytest.mark.parametrize(
        "savings_rate,expected",
        [
            ("-5", 0),
            ("0", 0),
            ("0.01", 5),
            ("9.99", 5),
            ("10", 12),
            ("19.99", 12),
            ("20", 16),
            ("29.99", 16),
            ("30", 20),
            ("75", 20),
        ],
    )
    def test_ladder(self, savings_rate, expected):
        assert score_cash_flow(D(savings_rate)) == expected

    def test_savings_rate_boundary_from_cash_flows(self):
        at_boundary = aggregate_records(
            [], [], [Income(amount=100000)], [Expense(amount=70000)], []
        )
        below_boundary = aggregate_records(
            [], [], [Income(amount=100000)], [Expense(amount=70010)], []
        )

        pillar = calculate_cash_flow_pillar(at_boundary)
        assert pillar.savings_rate == D("30.00")
        assert pillar.score == 20
        assert pillar.monthly_surplus == D(30000)

        pillar = calculate_cash_flow_pillar(below_boundary)
        assert pillar.savings_rate == D("29.99")
        assert pillar.score == 16

    def test_no_income_means_zero_savings_rate(self):
        pillar = calculate_cash_flow_pillar(RecordTotals(monthly_expenses=D(5000)))

        assert pillar.savings_rate == D(0)
        assert pillar.score == 0
        assert pillar.status == "Poor"


class TestDebtScore:
    """Test debt penalties and the DTI-driven status."""

    def test_no_penalties(self):
        assert score_debt(D("19.99"), D("0.29")) == 15

    def test_moderate_penalties(self):
        assert score_debt(D(20), D("0.3")) == 10

    def test_high_penalties(self):
        assert score_debt(D(30), D("0.5")) == 3

    def test_zero_assets_treated_as_fully_leveraged(self):
        totals = RecordTotals(
            total_liabilities=D(1000), monthly_income=D(10000)
        )

        pillar = calculate_debt_pillar(totals)

        assert pillar.debt_ratio == D(1)
        assert pillar.score == 10

    def test_no_assets_or_liabilities_scores_zero(self):
        pillar = calculate_debt_pillar(RecordTotals())

        assert pillar.score == 0

    def test_income_only_household_scores_zero(self):
        # Income without any assets or liabilities still has no debt position
        pillar = calculate_debt_pillar(RecordTotals(monthly_income=D(10000)))

        assert pillar.debt_ratio == D(1)
        assert pillar.score == 0
        assert pillar.status == "Excellent"

    def test_status_follows_dti_not_points(self):
        totals = RecordTotals(
            total_assets=D(100),
            total_liabilities=D(90),
            monthly_income=D(10000),
            total_monthly_burden=D(500),
        )

        pillar = calculate_debt_pillar(totals)

        # Heavy debt ratio costs points, but DTI of 5% is still Excellent
        assert pillar.debt_to_income_ratio == D("5.00")
        assert pillar.score == 10
        assert pillar.status == "Excellent"

    @pytest.mark.parametrize(
        "dti,expected",
        [("19.99", "Excellent"), ("20", "Good"), ("30", "Fair"), ("40", "Critical")],
    )
    def test_debt_status_bands(self, dti, expected):
        assert debt_status(D(dti)) == expected


class TestLiquidityScore:
    """Test emergency fund months ladder."""

    @pytest.mark.parametrize(
        "months,expected",
        [("0", 0), ("0.9", 0), ("1", 4), ("3", 8), ("6", 12), ("11.9", 12), ("12", 15)],
    )
    def test_ladder(self, months, expected):
        assert score_liquidity(D(months)) == expected

    @pytest.mark.parametrize(
        "months,expected",
        [("0.9", "Critical"), ("1", "Fair"), ("3", "Good"), ("6", "Excellent")],
    )
    def test_status_bands(self, months, expected):
        assert liquidity_status(D(months)) == expected

    def test_months_rounded_to_one_decimal(self):
        totals = RecordTotals(liquid_assets=D(95), monthly_expenses=D(100))

        pillar = calculate_liquidity_pillar(totals)

        assert pillar.emergency_fund_months == D("1.0")
        assert pillar.score == 4

    def test_no_expenses_means_zero_months(self):
        pillar = calculate_liquidity_pillar(RecordTotals(liquid_assets=D(50000)))

        assert pillar.emergency_fund_months == D(0)
        assert pillar.score == 0
        assert pillar.status == "Critical"


class TestInvestmentScore:
    @pytest.mark.parametrize(
        "ratio,expected",
        [("4.99", 0), ("5", 4), ("15", 8), ("30", 12), ("49.99", 12), ("50", 15)],
    )
    def test_ladder(self, ratio, expected):
        assert score_investment(D(ratio)) == expected


class TestProtectionScore:
    """Test coverage ratio points plus essential policy bonuses."""

    @pytest.mark.parametrize(
        "ratio,expected",
        [("0.9", 0), ("1", 1), ("2", 2), ("5", 4), ("10", 6)],
    )
    def test_coverage_points(self, ratio, expected):
        assert score_protection(D(ratio), False, False) == expected

    def test_policy_bonuses(self):
        assert score_protection(D(0), True, False) == 2
        assert score_protection(D(0), True, True) == 4

    def test_capped_at_ten(self):
        assert score_protection(D(25), True, True) == 10

    def test_status_uses_protection_bands(self):
        assert protection_status(8) == "Excellent"
        assert protection_status(6) == "Good"
        assert protection_status(4) == "Fair"
        assert protection_status(3) == "Critical"

    def test_coverage_ratio_against_annual_expenses(self):
        totals = RecordTotals(
            total_coverage=D(1200000),
            monthly_expenses=D(20000),
            has_life_insurance=True,
        )

        pillar = calculate_protection_pillar(totals)

        assert pillar.coverage_ratio == D("5.0")
        assert pillar.score == 6
        assert pillar.status == "Good"


class TestPercentOfMaxStatus:
    @pytest.mark.parametrize(
        "score,max_score,expected",
        [
            (20, 25, "Excellent"),
            (12, 15, "Excellent"),
            (12, 20, "Good"),
            (10, 25, "Fair"),
            (8, 15, "Fair"),
            (4, 15, "Poor"),
            (0, 20, "Poor"),
        ],
    )
    def test_bands(self, score, max_score, expected):
        assert percent_of_max_status(score, max_score) == expected


class TestScoreBreakdown:
    """Test the combined breakdown."""

    def test_sample_household_breakdown(self, sample_household):
        breakdown = calculate_score_breakdown(aggregate_records(*sample_household))

        assert breakdown.net_worth.score == 23
        assert breakdown.net_worth.status == "Excellent"
        assert breakdown.cash_flow.score == 20
        assert breakdown.cash_flow.savings_rate == D("48.57")
        assert breakdown.debt.score == 15
        assert breakdown.debt.debt_to_income_ratio == D("14.29")
        assert breakdown.debt.debt_ratio == D("0.21")
        assert breakdown.liquidity.score == 12
        assert breakdown.liquidity.emergency_fund_months == D("6.7")
        assert breakdown.liquidity.status == "Excellent"
        assert breakdown.investment.score == 15
        assert breakdown.investment.investment_ratio == D("88")
        assert breakdown.protection.score == 10
        assert breakdown.protection.coverage_ratio == D("10.2")
        assert breakdown.total_score == 95

    def test_single_asset_net_worth_score(self):
        asset = Asset(current_value=1000000)

        breakdown = calculate_score_breakdown(
            aggregate_records([asset], [], [], [], [])
        )

        assert breakdown.net_worth.score == 21

    def test_scores_stay_within_bounds(self):
        values = [D(0), D(1), D(50000), D(2500000)]
        for assets, liabilities, income, expenses in product(values, repeat=4):
            totals = aggregate_records(
                [Asset(current_value=assets, is_liquid=True, is_investment=True)],
                [Liability(remaining_amount=liabilities, monthly_payment=liabilities)],
                [Income(amount=income)],
                [Expense(amount=expenses)],
                [],
            )
            breakdown = calculate_score_breakdown(totals)

            for pillar in (
                breakdown.net_worth,
                breakdown.cash_flow,
                breakdown.debt,
                breakdown.liquidity,
                breakdown.investment,
                breakdown.protection,
            ):
                assert 0 <= pillar.score <= pillar.max_score
            assert 0 <= breakdown.total_score <= 100
