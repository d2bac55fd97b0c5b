"""
Pytest configuration and shared fixtures for the wealth engine tests.
"""

import pytest

from wealth_engine.config import reset_global_settings
from wealth_engine.database.base import (
    create_tables,
    drop_tables,
    get_session,
    reset_engine,
)
from wealth_engine.models import Asset, Expense, Income, InsurancePolicy, Liability


@pytest.fixture(autouse=True)
def test_environment(monkeypatch, tmp_path):
    """Point settings at a throwaway SQLite database for every test."""
    monkeypatch.setenv("SECRET_KEY", "test-secret-key-123")
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setenv("DB_URL", f"sqlite:///{tmp_path / 'wealth_test.db'}")
    reset_global_settings()
    reset_engine()
    yield
    reset_engine()
    reset_global_settings()


@pytest.fixture(scope="function")
def db_session():
    """Create a database session with fresh tables."""
    create_tables()
    session = get_session()
    try:
        yield session
    finally:
        session.close()
        drop_tables()


@pytest.fixture
def sample_assets():
    """Savings, shares and land worth 5,000,000 in total."""
    return [
        Asset(name="Savings", asset_type="SAVINGS", current_value=600000, is_liquid=True),
        Asset(
            name="Shares",
            asset_type="SHARES",
            current_value=1400000,
            is_investment=True,
            yearly_growth_rate=10,
        ),
        Asset(
            name="Land",
            asset_type="LAND",
            current_value=3000000,
            is_investment=True,
            yearly_growth_rate=5,
        ),
    ]


@pytest.fixture
def sample_liabilities():
    return [
        Liability(
            name="Home loan",
            liability_type="HOME_LOAN",
            remaining_amount=1000000,
            monthly_payment=25000,
        ),
        Liability(name="Card", liability_type="CREDIT_CARD", remaining_amount=50000),
    ]


@pytest.fixture
def sample_incomes():
    """175,000 per month once the yearly bonus is spread out."""
    return [
        Income(name="Salary", amount=150000, frequency="MONTHLY"),
        Income(name="Bonus", amount=300000, frequency="YEARLY"),
        Income(name="Inheritance", amount=500000, frequency="ONE_TIME"),
    ]


@pytest.fixture
def sample_expenses():
    """90,000 per month."""
    return [
        Expense(name="Household", amount=80000, frequency="MONTHLY", category="FOOD"),
        Expense(
            name="Premiums", amount=30000, frequency="QUARTERLY", category="INSURANCE"
        ),
    ]


@pytest.fixture
def sample_policies():
    return [
        InsurancePolicy(
            policy_name="Term life",
            policy_type="LIFE",
            coverage_amount=10000000,
            maturity_year=2040,
            maturity_benefit=2000000,
        ),
        InsurancePolicy(
            policy_name="Family medical",
            policy_type="MEDICAL",
            coverage_amount=1000000,
        ),
    ]


@pytest.fixture
def sample_household(
    sample_assets, sample_liabilities, sample_incomes, sample_expenses, sample_policies
):
    """All five record collections for a well-provisioned household."""
    return (
        sample_assets,
        sample_liabilities,
        sample_incomes,
        sample_expenses,
        sample_policies,
    )
