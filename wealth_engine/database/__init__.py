"""Database models and configuration for household financial records."""

from .base import Base, get_engine, get_session
from .models import AssetRow, ExpenseRow, IncomeRow, InsurancePolicyRow, LiabilityRow

__all__ = [
    "Base",
    "get_engine",
    "get_session",
    "AssetRow",
    "LiabilityRow",
    "IncomeRow",
    "ExpenseRow",
    "InsurancePolicyRow",
]
