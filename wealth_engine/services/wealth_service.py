"""
Wealth analytics service.

Reads the active household records from the database and feeds them to the
wealth engine. The service never writes: every report is computed fresh from
the current rows.
"""

import logging
from typing import Any, List, Optional, Sequence, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session

from wealth_engine.database.models import (
    AssetRow,
    ExpenseRow,
    IncomeRow,
    InsurancePolicyRow,
    LiabilityRow,
)
from wealth_engine.models import (
    Asset,
    DashboardSummary,
    Expense,
    Income,
    InsurancePolicy,
    Liability,
    ProjectionReport,
    compute_dashboard_summary,
    compute_projections,
)

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def validate_rows(model: Type[RecordT], rows: Sequence[Any]) -> List[RecordT]:
    """Convert ORM rows into record models, skipping rows that fail validation.

    A malformed row is logged and left out so the remaining records still
    produce a report.
    """
    records = []
    for row in rows:
        try:
            records.append(model.model_validate(row))
        except ValidationError as e:
            logger.warning(
                f"Skipping malformed {row!r}: {e.error_count()} validation error(s)"
            )
    return records


class WealthAnalyticsService:
    """Service producing dashboard summaries and future projections."""

    def __init__(self, session: Session) -> None:
        """Initialize the service.

        Args:
            session: Database session used for read-only queries
        """
        self.session = session

    def get_active_assets(self) -> List[Asset]:
        rows = (
            self.session.query(AssetRow)
            .filter(AssetRow.active.is_(True))
            .order_by(AssetRow.id)
            .all()
        )
        return validate_rows(Asset, rows)

    def get_active_liabilities(self) -> List[Liability]:
        rows = (
            self.session.query(LiabilityRow)
            .filter(LiabilityRow.active.is_(True))
            .order_by(LiabilityRow.id)
            .all()
        )
        return validate_rows(Liability, rows)

    def get_active_incomes(self) -> List[Income]:
        rows = (
            self.session.query(IncomeRow)
            .filter(IncomeRow.active.is_(True))
            .order_by(IncomeRow.id)
            .all()
        )
        return validate_rows(Income, rows)

    def get_active_expenses(self) -> List[Expense]:
        rows = (
            self.session.query(ExpenseRow)
            .filter(ExpenseRow.active.is_(True))
            .order_by(ExpenseRow.id)
            .all()
        )
        return validate_rows(Expense, rows)

    def get_active_policies(self) -> List[InsurancePolicy]:
        rows = (
            self.session.query(InsurancePolicyRow)
            .filter(InsurancePolicyRow.active.is_(True))
            .order_by(InsurancePolicyRow.id)
            .all()
        )
        return validate_rows(InsurancePolicy, rows)

    def load_records(
        self,
    ) -> Tuple[
        List[Asset], List[Liability], List[Income], List[Expense], List[InsurancePolicy]
    ]:
        """Load every active record collection."""
        assets = self.get_active_assets()
        liabilities = self.get_active_liabilities()
        incomes = self.get_active_incomes()
        expenses = self.get_active_expenses()
        policies = self.get_active_policies()

        logger.debug(
            f"Loaded {len(assets)} assets, {len(liabilities)} liabilities, "
            f"{len(incomes)} incomes, {len(expenses)} expenses, "
            f"{len(policies)} policies"
        )
        return assets, liabilities, incomes, expenses, policies

    def get_dashboard_summary(self) -> DashboardSummary:
        """Compute the dashboard summary from the active records."""
        try:
            summary = compute_dashboard_summary(*self.load_records())
        except Exception as e:
            logger.error(f"Dashboard summary failed: {str(e)}")
            raise

        logger.info(
            f"Computed dashboard summary: score {summary.wealth_health_score} "
            f"({summary.wealth_health_label})"
        )
        return summary

    def get_future_projections(
        self, current_age: int, current_year: Optional[int] = None
    ) -> ProjectionReport:
        """Compute future benefit projections from active assets and policies.

        Args:
            current_age: Current age of the household head
            current_year: Base calendar year (defaults to the current year)

        Returns:
            ProjectionReport with six five-year horizons
        """
        try:
            report = compute_projections(
                self.get_active_assets(),
                self.get_active_policies(),
                current_age,
                current_year=current_year,
            )
        except Exception as e:
            logger.error(f"Future projection failed: {str(e)}")
            raise

        logger.info(
            f"Computed future projections for age {current_age}: "
            f"peak total {report.total_future_benefits}"
        )
        return report
