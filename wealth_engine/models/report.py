"""
Dashboard summary assembly.

Combines the record totals, the six-pillar score breakdown and the per-type
groupings into the dashboard summary shown on the family overview screen.
"""

from decimal import Decimal
from typing import Dict, List, Sequence

from pydantic import BaseModel, ConfigDict, Field

from .aggregator import ZERO, aggregate_records
from .pillar_scores import ScoreBreakdown, calculate_score_breakdown
from .records import Asset, Expense, Income, InsurancePolicy, Liability

FULLY_READY_COVERAGE = Decimal("5000000")

MOTIVATIONAL_MESSAGES = {
    "Excellent": "Outstanding! Your family's financial future looks bright and secure.",
    "Strong": "Great work! You're on the right path to financial wellness.",
    "Stable": "Good foundation. A few improvements can strengthen your financial health.",
    "Needs Attention": "Building momentum. Small steps today create big wins tomorrow.",
    "Critical": (
        "Every journey starts with a single step. "
        "Let's build your financial strength together."
    ),
}


class AssetSummary(BaseModel):
    """Assets of one type."""

    model_config = ConfigDict(frozen=True)

    asset_type: str
    count: int = Field(..., ge=0)
    total_value: Decimal


class LiabilitySummary(BaseModel):
    """Liabilities of one type."""

    model_config = ConfigDict(frozen=True)

    liability_type: str
    count: int = Field(..., ge=0)
    total_remaining: Decimal
    monthly_burden: Decimal


class MonthlyBurdenDetail(BaseModel):
    """A liability that carries a monthly payment."""

    model_config = ConfigDict(frozen=True)

    liability_name: str
    liability_type: str
    monthly_payment: Decimal
    remaining_amount: Decimal


class DashboardSummary(BaseModel):
    """Complete family financial health overview."""

    model_config = ConfigDict(frozen=True)

    # Overall metrics
    total_assets: Decimal
    total_liabilities: Decimal
    net_worth: Decimal

    # Protection & cash flow
    total_insurance_coverage: Decimal
    total_monthly_burden: Decimal
    monthly_income: Decimal
    monthly_expenses: Decimal

    # Health indicators
    wealth_health_score: int = Field(..., ge=0, le=100)
    wealth_health_label: str
    future_readiness_status: str
    motivational_message: str
    score_breakdown: ScoreBreakdown

    # Breakdown
    assets_by_type: List[AssetSummary] = Field(default_factory=list)
    liabilities_by_type: List[LiabilitySummary] = Field(default_factory=list)
    total_insurance_policies: int = Field(default=0, ge=0)
    monthly_burden_details: List[MonthlyBurdenDetail] = Field(default_factory=list)


def get_wealth_label(score: int) -> str:
    if score >= 80:
        return "Excellent"
    if score >= 60:
        return "Strong"
    if score >= 40:
        return "Stable"
    if score >= 20:
        return "Needs Attention"
    return "Critical"


def get_future_readiness(score: int, total_coverage: Decimal) -> str:
    """Readiness from the overall score and total insurance coverage."""
    if score >= 70 and total_coverage > FULLY_READY_COVERAGE:
        return "Fully Ready"
    if score >= 50:
        return "On Track"
    return "Needs Planning"


def get_motivational_message(score: int) -> str:
    return MOTIVATIONAL_MESSAGES[get_wealth_label(score)]


def summarize_assets(assets: Sequence[Asset]) -> List[AssetSummary]:
    """Group assets by type, in order of first appearance."""
    grouped: Dict[str, List[Asset]] = {}
    for asset in assets:
        grouped.setdefault(asset.asset_type, []).append(asset)

    return [
        AssetSummary(
            asset_type=asset_type,
            count=len(items),
            total_value=sum((a.current_value for a in items), ZERO),
        )
        for asset_type, items in grouped.items()
    ]


def summarize_liabilities(liabilities: Sequence[Liability]) -> List[LiabilitySummary]:
    """Group liabilities by type, in order of first appearance."""
    grouped: Dict[str, List[Liability]] = {}
    for liability in liabilities:
        grouped.setdefault(liability.liability_type, []).append(liability)

    return [
        LiabilitySummary(
            liability_type=liability_type,
            count=len(items),
            total_remaining=sum((item.remaining_amount for item in items), ZERO),
            monthly_burden=sum((item.monthly_burden for item in items), ZERO),
        )
        for liability_type, items in grouped.items()
    ]


def get_monthly_burden_details(
    liabilities: Sequence[Liability],
) -> List[MonthlyBurdenDetail]:
    """Liabilities carrying a nonzero monthly payment."""
    return [
        MonthlyBurdenDetail(
            liability_name=item.name,
            liability_type=item.liability_type,
            monthly_payment=item.monthly_burden,
            remaining_amount=item.remaining_amount,
        )
        for item in liabilities
        if item.monthly_burden > 0
    ]


def compute_dashboard_summary(
    assets: Sequence[Asset],
    liabilities: Sequence[Liability],
    incomes: Sequence[Income],
    expenses: Sequence[Expense],
    policies: Sequence[InsurancePolicy],
) -> DashboardSummary:
    """Compute the wealth health dashboard summary.

    Args:
        assets: Active assets
        liabilities: Active liabilities
        incomes: Active income sources
        expenses: Active expenses
        policies: Active insurance policies

    Returns:
        DashboardSummary with totals, six-pillar breakdown and groupings
    """
    totals = aggregate_records(assets, liabilities, incomes, expenses, policies)
    breakdown = calculate_score_breakdown(totals)
    score = breakdown.total_score

    return DashboardSummary(
        total_assets=totals.total_assets,
        total_liabilities=totals.total_liabilities,
        net_worth=totals.net_worth,
        total_insurance_coverage=totals.total_coverage,
        total_monthly_burden=totals.total_monthly_burden,
        monthly_income=totals.monthly_income,
        monthly_expenses=totals.monthly_expenses,
        wealth_health_score=score,
        wealth_health_label=get_wealth_label(score),
        future_readiness_status=get_future_readiness(score, totals.total_coverage),
        motivational_message=get_motivational_message(score),
        score_breakdown=breakdown,
        assets_by_type=summarize_assets(assets),
        liabilities_by_type=summarize_liabilities(liabilities),
        total_insurance_policies=totals.policy_count,
        monthly_burden_details=get_monthly_burden_details(liabilities),
    )
