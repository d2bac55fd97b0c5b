"""
Six-pillar wealth health scoring.

The overall wealth health score (0-100) is the sum of six independent pillars:

1. Net Worth Growth (25 points)
2. Cash Flow Health (20 points)
3. Debt Health (15 points)
4. Liquidity (15 points)
5. Investment Efficiency (15 points)
6. Protection & Risk Coverage (10 points)

Each pillar maps a ratio or amount onto a threshold ladder. Ladders are checked
from the highest threshold down, so a value sitting exactly on a threshold
lands in the upper bracket.

Net worth, cash flow and investment statuses are a percentage of the pillar's
maximum. Debt, liquidity and protection statuses use their own bands, and their
lowest band is "Critical" rather than "Poor".
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .aggregator import ZERO, RecordTotals

PillarStatus = Literal["Excellent", "Good", "Fair", "Poor", "Critical"]

NET_WORTH_MAX = 25
CASH_FLOW_MAX = 20
DEBT_MAX = 15
LIQUIDITY_MAX = 15
INVESTMENT_MAX = 15
PROTECTION_MAX = 10

MILLION = Decimal("1000000")
HUNDRED = Decimal("100")

RATIO_PRECISION = Decimal("0.0001")
MONTHS_PRECISION = Decimal("0.1")


def _divide(numerator: Decimal, denominator: Decimal, precision: Decimal) -> Decimal:
    """Divide and round half-up to the given precision."""
    return (numerator / denominator).quantize(precision, rounding=ROUND_HALF_UP)


class PillarScore(BaseModel):
    """Score and status label for a single pillar."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(..., ge=0, description="Points earned")
    max_score: int = Field(..., gt=0, description="Maximum points for the pillar")
    status: PillarStatus = Field(..., description="Qualitative status label")


class NetWorthPillar(PillarScore):
    net_worth_value: Decimal = Field(default=ZERO)


class CashFlowPillar(PillarScore):
    savings_rate: Decimal = Field(default=ZERO, description="Percentage of income saved")
    monthly_surplus: Decimal = Field(default=ZERO)


class DebtPillar(PillarScore):
    debt_to_income_ratio: Decimal = Field(
        default=ZERO, description="Monthly burden as a percentage of income"
    )
    debt_ratio: Decimal = Field(default=ZERO, description="Liabilities / assets")


class LiquidityPillar(PillarScore):
    emergency_fund_months: Decimal = Field(
        default=ZERO, description="Months of expenses covered by liquid assets"
    )
    liquid_assets: Decimal = Field(default=ZERO)


class InvestmentPillar(PillarScore):
    investment_ratio: Decimal = Field(
        default=ZERO, description="Investments as a percentage of assets"
    )
    total_investments: Decimal = Field(default=ZERO)


class ProtectionPillar(PillarScore):
    coverage_ratio: Decimal = Field(
        default=ZERO, description="Coverage in years of annual expenses"
    )
    has_health_insurance: bool = Field(default=False)
    has_life_insurance: bool = Field(default=False)


class ScoreBreakdown(BaseModel):
    """Detailed breakdown of the six pillars of wealth health."""

    model_config = ConfigDict(frozen=True)

    net_worth: NetWorthPillar
    cash_flow: CashFlowPillar
    debt: DebtPillar
    liquidity: LiquidityPillar
    investment: InvestmentPillar
    protection: ProtectionPillar

    @property
    def total_score(self) -> int:
        """Overall wealth health score (0-100)."""
        return (
            self.net_worth.score
            + self.cash_flow.score
            + self.debt.score
            + self.liquidity.score
            + self.investment.score
            + self.protection.score
        )


# Point ladders


def score_net_worth(net_worth: Decimal, total_assets: Decimal) -> int:
    """Net worth points (0-25).

    Positive net worth starts at 10 points, plus up to 10 points for the net
    worth to assets ratio and one point per million of net worth (max 5).
    """
    if net_worth <= 0 or total_assets == 0:
        return 0

    ratio = _divide(net_worth, total_assets, RATIO_PRECISION)
    ratio_points = min(10, int(ratio * 20))
    absolute_points = min(5, int(net_worth / MILLION))

    return min(NET_WORTH_MAX, 10 + ratio_points + absolute_points)


def score_cash_flow(savings_rate: Decimal) -> int:
    """Cash flow points (0-20) from the savings rate percentage."""
    if savings_rate <= 0:
        return 0
    if savings_rate < 10:
        return 5
    if savings_rate < 20:
        return 12
    if savings_rate < 30:
        return 16
    return CASH_FLOW_MAX


def score_debt(debt_to_income_ratio: Decimal, debt_ratio: Decimal) -> int:
    """Debt points (0-15): penalties for high DTI and high debt-to-assets."""
    score = DEBT_MAX

    if debt_to_income_ratio >= 30:
        score -= 7
    elif debt_to_income_ratio >= 20:
        score -= 3

    if debt_ratio >= Decimal("0.5"):
        score -= 5
    elif debt_ratio >= Decimal("0.3"):
        score -= 2

    return max(0, score)


def score_liquidity(emergency_months: Decimal) -> int:
    """Liquidity points (0-15) from months of expenses held in liquid assets."""
    if emergency_months >= 12:
        return LIQUIDITY_MAX
    if emergency_months >= 6:
        return 12
    if emergency_months >= 3:
        return 8
    if emergency_months >= 1:
        return 4
    return 0


def score_investment(investment_ratio: Decimal) -> int:
    """Investment points (0-15) from the investment share of assets."""
    if investment_ratio >= 50:
        return INVESTMENT_MAX
    if investment_ratio >= 30:
        return 12
    if investment_ratio >= 15:
        return 8
    if investment_ratio >= 5:
        return 4
    return 0


def score_protection(
    coverage_ratio: Decimal, has_health_insurance: bool, has_life_insurance: bool
) -> int:
    """Protection points (0-10): coverage years plus essential policies."""
    score = 0

    if coverage_ratio >= 10:
        score += 6
    elif coverage_ratio >= 5:
        score += 4
    elif coverage_ratio >= 2:
        score += 2
    elif coverage_ratio >= 1:
        score += 1

    if has_health_insurance:
        score += 2
    if has_life_insurance:
        score += 2

    return min(PROTECTION_MAX, score)


# Status bands


def percent_of_max_status(score: int, max_score: int) -> PillarStatus:
    """Status from the share of the pillar's maximum points."""
    percentage = score * 100
    if percentage >= 80 * max_score:
        return "Excellent"
    if percentage >= 60 * max_score:
        return "Good"
    if percentage >= 40 * max_score:
        return "Fair"
    return "Poor"


def debt_status(debt_to_income_ratio: Decimal) -> PillarStatus:
    """Status from the debt-to-income percentage, not from the points."""
    if debt_to_income_ratio < 20:
        return "Excellent"
    if debt_to_income_ratio < 30:
        return "Good"
    if debt_to_income_ratio < 40:
        return "Fair"
    return "Critical"


def liquidity_status(emergency_months: Decimal) -> PillarStatus:
    if emergency_months >= 6:
        return "Excellent"
    if emergency_months >= 3:
        return "Good"
    if emergency_months >= 1:
        return "Fair"
    return "Critical"


def protection_status(score: int) -> PillarStatus:
    if score >= 8:
        return "Excellent"
    if score >= 6:
        return "Good"
    if score >= 4:
        return "Fair"
    return "Critical"


# Pillars


def calculate_net_worth_pillar(totals: RecordTotals) -> NetWorthPillar:
    score = score_net_worth(totals.net_worth, totals.total_assets)
    return NetWorthPillar(
        score=score,
        max_score=NET_WORTH_MAX,
        status=percent_of_max_status(score, NET_WORTH_MAX),
        net_worth_value=totals.net_worth,
    )


def calculate_cash_flow_pillar(totals: RecordTotals) -> CashFlowPillar:
    monthly_surplus = totals.monthly_income - totals.monthly_expenses
    if totals.monthly_income > 0:
        savings_rate = (
            _divide(monthly_surplus, totals.monthly_income, RATIO_PRECISION) * HUNDRED
        )
    else:
        savings_rate = ZERO

    score = score_cash_flow(savings_rate)
    return CashFlowPillar(
        score=score,
        max_score=CASH_FLOW_MAX,
        status=percent_of_max_status(score, CASH_FLOW_MAX),
        savings_rate=savings_rate,
        monthly_surplus=monthly_surplus,
    )


def calculate_debt_pillar(totals: RecordTotals) -> DebtPillar:
    if totals.monthly_income > 0:
        debt_to_income_ratio = (
            _divide(totals.total_monthly_burden, totals.monthly_income, RATIO_PRECISION)
            * HUNDRED
        )
    else:
        debt_to_income_ratio = ZERO

    # No assets at all is treated as fully leveraged
    if totals.total_assets > 0:
        debt_ratio = _divide(
            totals.total_liabilities, totals.total_assets, RATIO_PRECISION
        )
    else:
        debt_ratio = Decimal("1")

    # A household with neither assets nor liabilities has no debt position to
    # score, even when it has income; the fully-leveraged fallback above would
    # otherwise award 10 points
    if totals.total_assets == 0 and totals.total_liabilities == 0:
        score = 0
    else:
        score = score_debt(debt_to_income_ratio, debt_ratio)

    return DebtPillar(
        score=score,
        max_score=DEBT_MAX,
        status=debt_status(debt_to_income_ratio),
        debt_to_income_ratio=debt_to_income_ratio,
        debt_ratio=debt_ratio,
    )


def calculate_liquidity_pillar(totals: RecordTotals) -> LiquidityPillar:
    if totals.monthly_expenses > 0:
        emergency_months = _divide(
            totals.liquid_assets, totals.monthly_expenses, MONTHS_PRECISION
        )
    else:
        emergency_months = ZERO

    return LiquidityPillar(
        score=score_liquidity(emergency_months),
        max_score=LIQUIDITY_MAX,
        status=liquidity_status(emergency_months),
        emergency_fund_months=emergency_months,
        liquid_assets=totals.liquid_assets,
    )


def calculate_investment_pillar(totals: RecordTotals) -> InvestmentPillar:
    if totals.total_assets > 0:
        investment_ratio = (
            _divide(totals.total_investments, totals.total_assets, RATIO_PRECISION)
            * HUNDRED
        )
    else:
        investment_ratio = ZERO

    score = score_investment(investment_ratio)
    return InvestmentPillar(
        score=score,
        max_score=INVESTMENT_MAX,
        status=percent_of_max_status(score, INVESTMENT_MAX),
        investment_ratio=investment_ratio,
        total_investments=totals.total_investments,
    )


def calculate_protection_pillar(totals: RecordTotals) -> ProtectionPillar:
    annual_expenses = totals.monthly_expenses * 12
    if annual_expenses > 0:
        coverage_ratio = _divide(
            totals.total_coverage, annual_expenses, MONTHS_PRECISION
        )
    else:
        coverage_ratio = ZERO

    score = score_protection(
        coverage_ratio, totals.has_health_insurance, totals.has_life_insurance
    )
    return ProtectionPillar(
        score=score,
        max_score=PROTECTION_MAX,
        status=protection_status(score),
        coverage_ratio=coverage_ratio,
        has_health_insurance=totals.has_health_insurance,
        has_life_insurance=totals.has_life_insurance,
    )


def calculate_score_breakdown(totals: RecordTotals) -> ScoreBreakdown:
    """Score all six pillars from the aggregated totals."""
    return ScoreBreakdown(
        net_worth=calculate_net_worth_pillar(totals),
        cash_flow=calculate_cash_flow_pillar(totals),
        debt=calculate_debt_pillar(totals),
        liquidity=calculate_liquidity_pillar(totals),
        investment=calculate_investment_pillar(totals),
        protection=calculate_protection_pillar(totals),
    )
