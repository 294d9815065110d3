"""Negative gearing analysis for an investment property.

The analysis is a single-year, closed-form approximation: interest is
charged on the full loan for the year (no principal reduction), rent and
expenses are weekly figures multiplied by 52 and capital growth uses the
fixed ``CAPITAL_GROWTH_RATE``.
"""

from __future__ import annotations

from decimal import Decimal

from .data_models import (
    GEARING_NEGATIVE,
    GEARING_NEUTRAL,
    GEARING_POSITIVE,
    InvestmentAnalysis,
    InvestmentInputs,
)
from .tables import CAPITAL_GROWTH_RATE, WEEKS_PER_YEAR


def _classify(cash_flow: Decimal) -> str:
    if cash_flow < 0:
        return GEARING_NEGATIVE
    if cash_flow > 0:
        return GEARING_POSITIVE
    return GEARING_NEUTRAL


def analyze_investment(inputs: InvestmentInputs) -> InvestmentAnalysis:
    """Return cash flow, tax benefit, growth and ROI for one year.

    A negative cash flow is a deductible loss, so the tax benefit is the
    loss times the marginal tax rate. Positive or zero cash flow earns no
    tax benefit. ROI is the net return as a percentage of the deposit.
    """
    loan_amount = inputs.property_price - inputs.deposit
    annual_interest = loan_amount * inputs.annual_interest_rate_pct / Decimal(100)
    annual_rental_income = inputs.weekly_rental_income * WEEKS_PER_YEAR
    annual_expenses = inputs.weekly_expenses * WEEKS_PER_YEAR

    cash_flow = annual_rental_income - (annual_expenses + annual_interest)
    if cash_flow < 0:
        tax_benefit = abs(cash_flow) * inputs.marginal_tax_rate_pct / Decimal(100)
    else:
        tax_benefit = Decimal("0")
    capital_growth = inputs.property_price * CAPITAL_GROWTH_RATE
    net_return = cash_flow + tax_benefit + capital_growth

    return InvestmentAnalysis(
        loan_amount=loan_amount,
        annual_rental_income=annual_rental_income,
        annual_expenses=annual_expenses,
        annual_interest=annual_interest,
        annual_cash_flow=cash_flow,
        annual_tax_benefit=tax_benefit,
        annual_capital_growth=capital_growth,
        net_annual_return=net_return,
        return_on_investment_pct=net_return / inputs.deposit * Decimal(100),
        gearing=_classify(cash_flow),
    )
