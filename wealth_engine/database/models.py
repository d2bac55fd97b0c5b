"""
SQLAlchemy database models for household financial records.

Rows are soft-deleted through the ``active`` flag; only active rows are ever
handed to the wealth engine.
"""

from sqlalchemy import (
    Boolean, CheckConstraint, Column, Index, Integer, Numeric, String, Text
)

from .base import Base


class AssetRow(Base):
    """A family-owned asset."""

    __tablename__ = 'assets'

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    asset_type = Column(String(50), nullable=False, default='OTHER')
    current_value = Column(Numeric(15, 2), nullable=False)
    yearly_growth_rate = Column(Numeric(5, 2))  # Annual appreciation percentage
    is_liquid = Column(Boolean, nullable=False, default=False)
    is_investment = Column(Boolean, nullable=False, default=False)
    description = Column(Text)
    active = Column(Boolean, nullable=False, default=True)

    __table_args__ = (
        CheckConstraint("current_value >= 0", name='ck_asset_value_non_negative'),
        Index('idx_assets_active_type', 'active', 'asset_type'),
    )

    def __repr__(self):
        return f"<AssetRow(id={self.id}, name='{self.name}', type='{self.asset_type}')>"


class LiabilityRow(Base):
    """A loan or other financial obligation."""

    __tablename__ = 'liabilities'

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    liability_type = Column(String(50), nullable=False, default='OTHER')
    remaining_amount = Column(Numeric(15, 2), nullable=False)
    monthly_payment = Column(Numeric(15, 2))
    interest_rate = Column(Numeric(5, 2))
    description = Column(Text)
    active = Column(Boolean, nullable=False, default=True)

    __table_args__ = (
        CheckConstraint("remaining_amount >= 0", name='ck_liability_remaining_non_negative'),
        CheckConstraint("monthly_payment >= 0", name='ck_liability_payment_non_negative'),
        Index('idx_liabilities_active_type', 'active', 'liability_type'),
    )

    def __repr__(self):
        return f"<LiabilityRow(id={self.id}, name='{self.name}', type='{self.liability_type}')>"


class IncomeRow(Base):
    """A recurring or one-time income source."""

    __tablename__ = 'incomes'

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    amount = Column(Numeric(15, 2), nullable=False)
    frequency = Column(String(20), nullable=False, default='MONTHLY')
    active = Column(Boolean, nullable=False, default=True)

    __table_args__ = (
        CheckConstraint("amount >= 0", name='ck_income_amount_non_negative'),
        CheckConstraint("frequency IN ('MONTHLY', 'QUARTERLY', 'YEARLY', 'ONE_TIME')", name='ck_income_frequency'),
    )

    def __repr__(self):
        return f"<IncomeRow(id={self.id}, name='{self.name}', amount={self.amount})>"


class ExpenseRow(Base):
    """A recurring or one-time household expense."""

    __tablename__ = 'expenses'

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    amount = Column(Numeric(15, 2), nullable=False)
    category = Column(String(50), nullable=False, default='OTHER')
    frequency = Column(String(20), nullable=False, default='MONTHLY')
    is_need = Column(Boolean, nullable=False, default=True)  # Need vs want
    active = Column(Boolean, nullable=False, default=True)

    __table_args__ = (
        CheckConstraint("amount >= 0", name='ck_expense_amount_non_negative'),
        CheckConstraint("frequency IN ('MONTHLY', 'QUARTERLY', 'YEARLY', 'ONE_TIME')", name='ck_expense_frequency'),
    )

    def __repr__(self):
        return f"<ExpenseRow(id={self.id}, name='{self.name}', amount={self.amount})>"


class InsurancePolicyRow(Base):
    """An insurance policy providing protection or a maturity benefit."""

    __tablename__ = 'insurance'

    id = Column(Integer, primary_key=True, index=True)
    policy_name = Column(String(255), nullable=False)
    policy_type = Column(String(50), nullable=False, default='OTHER')
    provider = Column(String(255))
    coverage_amount = Column(Numeric(15, 2), nullable=False)
    maturity_year = Column(Integer)
    maturity_benefit = Column(Numeric(15, 2))
    beneficiary = Column(String(255))
    active = Column(Boolean, nullable=False, default=True)

    __table_args__ = (
        CheckConstraint("coverage_amount >= 0", name='ck_insurance_coverage_non_negative'),
        CheckConstraint("maturity_benefit >= 0", name='ck_insurance_benefit_non_negative'),
        Index('idx_insurance_active_maturity', 'active', 'maturity_year'),
    )

    def __repr__(self):
        return f"<InsurancePolicyRow(id={self.id}, name='{self.policy_name}', type='{self.policy_type}')>"
