"""Data models for the mortgage calculator.

This module defines dataclasses representing the inputs and results used by
the calculator: loan parameters, schedule entries, summaries, strategy
scenarios and property-investment figures. All of them are frozen, so a
result handed to a caller can never be changed by a later calculation.

Money values are stored as ``Decimal``. Inputs may be given as ``int``,
``float``, ``str`` or ``Decimal`` and are normalized on construction;
invalid inputs raise ``InvalidInputError`` before any calculation runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from .exceptions import InvalidInputError
from .tables import MAX_TERM_YEARS
from .utils import to_decimal

GEARING_NEGATIVE = "negative"
GEARING_NEUTRAL = "neutral"
GEARING_POSITIVE = "positive"


def _set(obj, name: str, value) -> None:
    object.__setattr__(obj, name, value)


def _check_term(term: int) -> None:
    if term <= 0:
        raise InvalidInputError("Loan term must be positive")
    if term > MAX_TERM_YEARS:
        raise InvalidInputError(f"Loan term cannot exceed {MAX_TERM_YEARS} years")


def _require_int(value, name: str) -> int:
    if isinstance(value, bool):
        raise InvalidInputError(f"{name} must be a whole number of years")
    if isinstance(value, int):
        return value
    number = to_decimal(value, name)
    if number != number.to_integral_value():
        raise InvalidInputError(f"{name} must be a whole number of years, got {value}")
    return int(number)


@dataclass(frozen=True)
class LoanParameters:
    """Inputs describing a home loan.

    Attributes
    ----------
    loan_amount: Decimal
        The amount borrowed. Must be positive.
    annual_interest_rate_pct: Decimal
        Nominal annual interest rate in percent (``6.5`` means 6.5 %).
    term_years: int
        Loan term in whole years.
    property_value: Decimal, optional
        Purchase price of the property, used for LMI and stamp duty. When
        given it must be at least the loan amount.
    offset_balance: Decimal
        Money held in a linked offset account. It reduces the balance on
        which interest is charged but not the amount owed.
    """

    loan_amount: Decimal
    annual_interest_rate_pct: Decimal
    term_years: int
    property_value: Optional[Decimal] = None
    offset_balance: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        loan_amount = to_decimal(self.loan_amount, "loan_amount")
        rate = to_decimal(self.annual_interest_rate_pct, "annual_interest_rate_pct")
        term = _require_int(self.term_years, "term_years")
        offset = to_decimal(self.offset_balance, "offset_balance")
        if loan_amount <= 0:
            raise InvalidInputError("Loan amount must be positive")
        if rate < 0:
            raise InvalidInputError("Interest rate cannot be negative")
        _check_term(term)
        if offset < 0:
            raise InvalidInputError("Offset balance cannot be negative")
        _set(self, "loan_amount", loan_amount)
        _set(self, "annual_interest_rate_pct", rate)
        _set(self, "term_years", term)
        _set(self, "offset_balance", offset)
        if self.property_value is not None:
            property_value = to_decimal(self.property_value, "property_value")
            if property_value < loan_amount:
                raise InvalidInputError("Property value cannot be less than the loan amount")
            _set(self, "property_value", property_value)

    @property
    def effective_offset(self) -> Decimal:
        """Offset balance capped at the loan amount."""
        return min(self.offset_balance, self.loan_amount)


@dataclass(frozen=True)
class PaymentScheduleEntry:
    """One period of an amortization schedule.

    ``payment_amount`` is the cash actually paid in the period, so it always
    equals ``principal_portion + interest_portion``. On the final period it
    can be smaller than the regular payment.
    """

    period_index: int
    payment_amount: Decimal
    principal_portion: Decimal
    interest_portion: Decimal
    remaining_balance: Decimal
    extra_payment_applied: Decimal


@dataclass(frozen=True)
class AmortizationSummary:
    """Aggregate figures for a monthly repayment schedule."""

    monthly_payment: Decimal
    total_interest: Decimal
    total_payment: Decimal
    first_month_interest: Decimal
    first_month_principal: Decimal
    lmi_amount: Decimal
    stamp_duty: Decimal
    payments_made: int
    payoff_time_years: Decimal


@dataclass(frozen=True)
class OffsetBenefits:
    """Interest saved by holding money in an offset account."""

    monthly_interest_savings: Decimal
    annual_interest_savings: Decimal
    effective_interest_rate_pct: Decimal
    # Offset savings are not taxable income, so they match a tax-free return.
    tax_free_equivalent: Decimal


@dataclass(frozen=True)
class BalancePoint:
    period_index: int
    balance: Decimal
    cumulative_interest: Decimal
    cumulative_principal: Decimal


@dataclass(frozen=True)
class ComparisonScenario:
    """Result of simulating one payoff strategy.

    Attributes
    ----------
    name: str
        Display label, e.g. ``"Extra $100/month"``.
    periods_per_year: int
        Payment cadence used for the simulation.
    periodic_payment: Decimal
        Amount paid each period, including any extra repayment.
    total_interest: Decimal
        Interest paid over the whole simulated schedule.
    payoff_time_years: Decimal
        Schedule length divided by ``periods_per_year``.
    interest_savings_vs_baseline: Decimal
        Baseline interest minus this scenario's interest. Zero for the
        baseline itself and negative when the strategy costs more.
    """

    name: str
    periods_per_year: int
    periodic_payment: Decimal
    total_interest: Decimal
    payoff_time_years: Decimal
    interest_savings_vs_baseline: Decimal


@dataclass(frozen=True)
class InvestmentInputs:
    """Inputs for a rental property (negative gearing) analysis.

    Rental income and expenses are weekly figures; they are annualized by
    the analyzer.
    """

    property_price: Decimal
    deposit: Decimal
    weekly_rental_income: Decimal
    weekly_expenses: Decimal
    annual_interest_rate_pct: Decimal
    term_years: int
    marginal_tax_rate_pct: Decimal

    def __post_init__(self) -> None:
        for name in (
            "property_price",
            "deposit",
            "weekly_rental_income",
            "weekly_expenses",
            "annual_interest_rate_pct",
            "marginal_tax_rate_pct",
        ):
            _set(self, name, to_decimal(getattr(self, name), name))
        _set(self, "term_years", _require_int(self.term_years, "term_years"))
        if self.property_price <= 0:
            raise InvalidInputError("Property price must be positive")
        if self.deposit <= 0:
            raise InvalidInputError("Deposit must be positive")
        if self.deposit > self.property_price:
            raise InvalidInputError("Deposit cannot exceed the property price")
        if self.weekly_rental_income < 0 or self.weekly_expenses < 0:
            raise InvalidInputError("Rental income and expenses cannot be negative")
        if self.annual_interest_rate_pct < 0:
            raise InvalidInputError("Interest rate cannot be negative")
        _check_term(self.term_years)
        if not 0 <= self.marginal_tax_rate_pct <= 100:
            raise InvalidInputError("Marginal tax rate must be between 0 and 100")


@dataclass(frozen=True)
class InvestmentAnalysis:
    loan_amount: Decimal
    annual_rental_income: Decimal
    annual_expenses: Decimal
    annual_interest: Decimal
    annual_cash_flow: Decimal
    annual_tax_benefit: Decimal
    annual_capital_growth: Decimal
    net_annual_return: Decimal
    return_on_investment_pct: Decimal
    gearing: str  # "negative", "neutral" or "positive"
