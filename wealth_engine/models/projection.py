"""
Future benefit projections.

Projects the value of the household's assets under compound growth together
with insurance maturity payouts at five-year horizons over the next 30 years.
"""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Dict, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from .aggregator import ZERO
from .records import CENTS, Asset, InsurancePolicy

PROJECTION_HORIZONS = range(5, 31, 5)

GROWTH_PRECISION = Decimal("0.0001")

# Significant digits for compounding; 30 years at the largest storable rate
# stays well inside this
COMPOUNDING_DIGITS = 80

MILESTONES: Dict[int, str] = {
    40: "Prime years - Peak earnings",
    45: "Mid-career growth phase",
    50: "Pre-retirement planning",
    55: "Retirement preparation",
    60: "Retirement begins",
    65: "Golden years",
}

PROJECTION_SUMMARY = (
    "Your family's financial future is secure with growing assets "
    "and maturity benefits."
)


class YearlyProjection(BaseModel):
    """Projected values at a single future horizon."""

    model_config = ConfigDict(frozen=True)

    year: int = Field(..., description="Calendar year of the projection")
    age: int = Field(..., description="Age of the household head in that year")
    asset_value: Decimal = Field(..., description="Compounded asset value")
    insurance_maturity: Decimal = Field(
        ..., description="Maturity benefits paid out in that year"
    )
    total_value: Decimal = Field(..., description="Asset value plus maturities")
    milestone: str = Field(default="", description="Life milestone for the age")


class ProjectionReport(BaseModel):
    """Year-wise future benefit projections."""

    model_config = ConfigDict(frozen=True)

    projections: List[YearlyProjection] = Field(default_factory=list)
    total_future_benefits: Decimal = Field(
        default=ZERO, description="Peak total value across all horizons"
    )
    summary: str = Field(default=PROJECTION_SUMMARY)


def get_milestone(age: int) -> str:
    """Milestone label for an exact age, or an empty string."""
    return MILESTONES.get(age, "")


def project_asset_value(asset: Asset, years_ahead: int) -> Decimal:
    """Compound a single asset's value forward.

    Assets without a growth rate keep their current value.
    """
    if asset.yearly_growth_rate is None:
        return asset.current_value

    growth_rate = (asset.yearly_growth_rate / 100).quantize(
        GROWTH_PRECISION, rounding=ROUND_HALF_UP
    )
    return asset.current_value * (1 + growth_rate) ** years_ahead


def calculate_asset_value(assets: Sequence[Asset], years_ahead: int) -> Decimal:
    """Total projected asset value, rounded to cents."""
    with localcontext() as ctx:
        ctx.prec = COMPOUNDING_DIGITS
        total = sum((project_asset_value(a, years_ahead) for a in assets), ZERO)
        return total.quantize(CENTS, rounding=ROUND_HALF_UP)


def calculate_insurance_maturity(
    policies: Sequence[InsurancePolicy], target_year: int
) -> Decimal:
    """Sum of maturity benefits for policies maturing exactly in target_year."""
    return sum(
        (p.benefit_on_maturity for p in policies if p.maturity_year == target_year),
        ZERO,
    )


def compute_projections(
    assets: Sequence[Asset],
    policies: Sequence[InsurancePolicy],
    current_age: int,
    current_year: Optional[int] = None,
) -> ProjectionReport:
    """Project future benefits at 5, 10, ..., 30 years ahead.

    Args:
        assets: Active assets
        policies: Active insurance policies
        current_age: Current age of the household head
        current_year: Base calendar year (defaults to the current year)

    Returns:
        ProjectionReport with six yearly points and the peak total value
    """
    if current_year is None:
        current_year = date.today().year

    projections = []
    for years_ahead in PROJECTION_HORIZONS:
        target_year = current_year + years_ahead
        target_age = current_age + years_ahead

        asset_value = calculate_asset_value(assets, years_ahead)
        insurance_maturity = calculate_insurance_maturity(policies, target_year)

        projections.append(
            YearlyProjection(
                year=target_year,
                age=target_age,
                asset_value=asset_value,
                insurance_maturity=insurance_maturity,
                total_value=asset_value + insurance_maturity,
                milestone=get_milestone(target_age),
            )
        )

    # The peak may land mid-sequence when a large policy matures early
    total_future_benefits = max(
        (point.total_value for point in projections), default=ZERO
    )

    return ProjectionReport(
        projections=projections,
        total_future_benefits=total_future_benefits,
        summary=PROJECTION_SUMMARY,
    )
