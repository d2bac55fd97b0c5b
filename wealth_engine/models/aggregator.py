"""
Record aggregation for the wealth analytics engine.

Reduces the raw record collections into the scalar totals the pillar scores
are computed from. Every total is a plain sum; no ratio is formed here, so no
division guard is needed.
"""

from decimal import Decimal
from typing import Iterable, Sequence

from pydantic import BaseModel, ConfigDict, Field

from .records import (
    HEALTH_INSURANCE_TYPES,
    LIFE_INSURANCE_TYPES,
    Asset,
    Expense,
    Income,
    InsurancePolicy,
    Liability,
)

ZERO = Decimal("0")


class RecordTotals(BaseModel):
    """Scalar totals and filtered sums over the active records."""

    model_config = ConfigDict(frozen=True)

    total_assets: Decimal = Field(default=ZERO, description="Sum of asset values")
    total_liabilities: Decimal = Field(
        default=ZERO, description="Sum of remaining liability balances"
    )
    net_worth: Decimal = Field(
        default=ZERO, description="Assets minus liabilities (may be negative)"
    )
    total_coverage: Decimal = Field(
        default=ZERO, description="Sum of insurance coverage amounts"
    )
    total_monthly_burden: Decimal = Field(
        default=ZERO, description="Sum of liability monthly payments"
    )
    monthly_income: Decimal = Field(
        default=ZERO, description="Monthly-equivalent income"
    )
    monthly_expenses: Decimal = Field(
        default=ZERO, description="Monthly-equivalent expenses"
    )
    liquid_assets: Decimal = Field(default=ZERO, description="Sum of liquid assets")
    total_investments: Decimal = Field(
        default=ZERO, description="Sum of investment assets"
    )
    has_health_insurance: bool = Field(default=False)
    has_life_insurance: bool = Field(default=False)
    policy_count: int = Field(default=0, ge=0)


def _sum(values: Iterable[Decimal]) -> Decimal:
    return sum(values, ZERO)


def aggregate_records(
    assets: Sequence[Asset],
    liabilities: Sequence[Liability],
    incomes: Sequence[Income],
    expenses: Sequence[Expense],
    policies: Sequence[InsurancePolicy],
) -> RecordTotals:
    """Aggregate active records into totals.

    Args:
        assets: Active assets
        liabilities: Active liabilities
        incomes: Active income sources
        expenses: Active expenses
        policies: Active insurance policies

    Returns:
        RecordTotals with every sum defaulting to zero for empty input
    """
    total_assets = _sum(asset.current_value for asset in assets)
    total_liabilities = _sum(item.remaining_amount for item in liabilities)

    return RecordTotals(
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        net_worth=total_assets - total_liabilities,
        total_coverage=_sum(policy.coverage_amount for policy in policies),
        total_monthly_burden=_sum(item.monthly_burden for item in liabilities),
        monthly_income=_sum(income.monthly_amount() for income in incomes),
        monthly_expenses=_sum(expense.monthly_amount() for expense in expenses),
        liquid_assets=_sum(a.current_value for a in assets if a.is_liquid),
        total_investments=_sum(a.current_value for a in assets if a.is_investment),
        has_health_insurance=any(
            p.policy_type in HEALTH_INSURANCE_TYPES for p in policies
        ),
        has_life_insurance=any(p.policy_type in LIFE_INSURANCE_TYPES for p in policies),
        policy_count=len(policies),
    )
