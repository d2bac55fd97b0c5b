"""
Pydantic models for the household financial records consumed by the engine.

These records are supplied by the persistence layer already filtered to active
rows. Monetary values are exact decimals in a single normalized currency unit;
percentages are plain decimals (8.0 means 8%).
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

CENTS = Decimal("0.01")

Frequency = Literal["MONTHLY", "QUARTERLY", "YEARLY", "ONE_TIME"]

AssetType = Literal[
    "LAND",
    "HOUSE",
    "VEHICLE",
    "FIXED_DEPOSIT",
    "SAVINGS",
    "SHARES",
    "EPF",
    "RETIREMENT_FUND",
    "GOLD",
    "CASH",
    "BANK_DEPOSIT",
    "INSURANCE_INVESTMENT",
    "OTHER",
]

LiabilityType = Literal[
    "HOME_LOAN",
    "VEHICLE_LOAN",
    "PERSONAL_LOAN",
    "EDUCATION_LOAN",
    "CREDIT_CARD",
    "OTHER",
]

InsuranceType = Literal[
    "LIFE", "HEALTH", "MEDICAL", "EDUCATION", "VEHICLE", "HOME", "OTHER"
]

# Policy types that count as health cover for the protection pillar
HEALTH_INSURANCE_TYPES = frozenset({"HEALTH", "MEDICAL"})
LIFE_INSURANCE_TYPES = frozenset({"LIFE"})


class Asset(BaseModel):
    """A family-owned asset (land, deposits, shares, retirement funds, ...)."""

    model_config = ConfigDict(from_attributes=True)

    name: str = Field(default="", description="Asset name")
    asset_type: AssetType = Field(default="OTHER", description="Asset category")
    current_value: Decimal = Field(..., ge=0, description="Current market value")
    is_liquid: bool = Field(
        default=False, description="Convertible to cash within a few months"
    )
    is_investment: bool = Field(
        default=False, description="Generates returns or appreciates"
    )
    yearly_growth_rate: Optional[Decimal] = Field(
        default=None, description="Annual appreciation percentage (None = no growth)"
    )


class Liability(BaseModel):
    """An outstanding financial obligation."""

    model_config = ConfigDict(from_attributes=True)

    name: str = Field(default="", description="Liability name")
    liability_type: LiabilityType = Field(
        default="OTHER", description="Liability category"
    )
    remaining_amount: Decimal = Field(..., ge=0, description="Outstanding balance")
    monthly_payment: Optional[Decimal] = Field(
        default=None, ge=0, description="Monthly installment (None = no payment)"
    )
    interest_rate: Optional[Decimal] = Field(
        default=None, description="Annual interest rate percentage"
    )

    @property
    def monthly_burden(self) -> Decimal:
        """Monthly payment with a missing value treated as zero."""
        return self.monthly_payment if self.monthly_payment is not None else Decimal("0")


class RecurringAmount(BaseModel):
    """Base class for amounts that recur on a billing frequency."""

    model_config = ConfigDict(from_attributes=True)

    name: str = Field(default="", description="Source name")
    amount: Decimal = Field(..., ge=0, description="Amount per period")
    frequency: Frequency = Field(default="MONTHLY", description="Billing frequency")

    def monthly_amount(self) -> Decimal:
        """Get the monthly-equivalent amount.

        One-time amounts never contribute to recurring cash flow.
        """
        if self.frequency == "MONTHLY":
            return self.amount
        if self.frequency == "QUARTERLY":
            return (self.amount / 3).quantize(CENTS, rounding=ROUND_HALF_UP)
        if self.frequency == "YEARLY":
            return (self.amount / 12).quantize(CENTS, rounding=ROUND_HALF_UP)
        return Decimal("0")


class Income(RecurringAmount):
    """A household income source."""


class Expense(RecurringAmount):
    """A household expense."""

    category: str = Field(default="OTHER", description="Expense category")
    is_need: bool = Field(default=True, description="Need (True) or want (False)")


class InsurancePolicy(BaseModel):
    """An insurance policy providing protection or a future maturity benefit."""

    model_config = ConfigDict(from_attributes=True)

    policy_name: str = Field(default="", description="Policy name")
    policy_type: InsuranceType = Field(default="OTHER", description="Policy category")
    coverage_amount: Decimal = Field(..., ge=0, description="Sum assured")
    maturity_year: Optional[int] = Field(
        default=None, description="Calendar year the policy matures"
    )
    maturity_benefit: Optional[Decimal] = Field(
        default=None, ge=0, description="Payout on maturity"
    )

    @property
    def benefit_on_maturity(self) -> Decimal:
        return (
            self.maturity_benefit if self.maturity_benefit is not None else Decimal("0")
        )
