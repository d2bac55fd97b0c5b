"""Wealth analytics engine: scoring and projection of household finances."""

from .records import (
    Asset,
    Expense,
    Income,
    InsurancePolicy,
    Liability,
)
from .aggregator import RecordTotals, aggregate_records
from .pillar_scores import (
    CashFlowPillar,
    DebtPillar,
    InvestmentPillar,
    LiquidityPillar,
    NetWorthPillar,
    PillarScore,
    ProtectionPillar,
    ScoreBreakdown,
    calculate_score_breakdown,
)
from .projection import ProjectionReport, YearlyProjection, compute_projections
from .report import (
    AssetSummary,
    DashboardSummary,
    LiabilitySummary,
    MonthlyBurdenDetail,
    compute_dashboard_summary,
)

__all__ = [
    "Asset",
    "Liability",
    "Income",
    "Expense",
    "InsurancePolicy",
    "RecordTotals",
    "aggregate_records",
    "PillarScore",
    "NetWorthPillar",
    "CashFlowPillar",
    "DebtPillar",
    "LiquidityPillar",
    "InvestmentPillar",
    "ProtectionPillar",
    "ScoreBreakdown",
    "calculate_score_breakdown",
    "YearlyProjection",
    "ProjectionReport",
    "compute_projections",
    "AssetSummary",
    "LiabilitySummary",
    "MonthlyBurdenDetail",
    "DashboardSummary",
    "compute_dashboard_summary",
]
