"""Shared test fixtures for mortgage_calc."""

import pytest

from mortgage_calc.data_models import InvestmentInputs, LoanParameters


@pytest.fixture
def base_loan():
    """$500k at 6.5% over 30 years, no offset, no property value."""
    return LoanParameters(loan_amount=500_000, annual_interest_rate_pct=6.5, term_years=30)


@pytest.fixture
def investment_inputs():
    return InvestmentInputs(
        property_price=600_000,
        deposit=120_000,
        weekly_rental_income=450,
        weekly_expenses=200,
        annual_interest_rate_pct=6.5,
        term_years=30,
        marginal_tax_rate_pct=37,
    )


@pytest.fixture
def client():
    from mortgage_calc_web.app import create_app
    from mortgage_calc_web.config import TestingConfig

    app = create_app(TestingConfig)
    with app.test_client() as test_client:
        yield test_client
