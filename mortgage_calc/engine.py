"""Core calculation engine for the mortgage calculator.

This module implements the financial logic required to build amortization
schedules for principal-and-interest loans. It supports an offset account
(which lowers the balance interest is charged on), a constant extra
repayment each period and monthly, fortnightly or weekly cadences. Results
are returned as lists of ``PaymentScheduleEntry`` objects and summarized in
an ``AmortizationSummary``.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import List

from .costs import estimate_lmi, estimate_stamp_duty
from .data_models import (
    AmortizationSummary,
    BalancePoint,
    LoanParameters,
    OffsetBenefits,
    PaymentScheduleEntry,
)
from .exceptions import InvalidInputError
from .rates import payment_divisor, to_period_count, to_periodic_rate
from .tables import BALANCE_EPSILON, MAX_TERM_YEARS, MONTHS_PER_YEAR
from .utils import Number, to_decimal

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def monthly_payment(principal: Number, annual_rate_pct: Number, years: int) -> Decimal:
    """Return the annuity (equal installment) monthly payment for a loan.

    The formula is:

        payment = P * (i * (1 + i)^n) / ((1 + i)^n - 1)

    where ``P`` is the principal, ``i`` is the monthly interest rate and
    ``n`` is the number of payments. When the interest rate is zero, the
    payment simplifies to ``P / n``.
    """
    principal = to_decimal(principal, "principal")
    rate_pct = to_decimal(annual_rate_pct, "annual_rate_pct")
    if principal <= 0:
        raise InvalidInputError("Principal must be positive")
    if rate_pct < 0:
        raise InvalidInputError("Interest rate cannot be negative")
    if isinstance(years, bool) or not isinstance(years, int) or years <= 0:
        raise InvalidInputError("Term must be a positive whole number of years")
    if years > MAX_TERM_YEARS:
        raise InvalidInputError(f"Term cannot exceed {MAX_TERM_YEARS} years")

    rate_per_month = to_periodic_rate(rate_pct, MONTHS_PER_YEAR)
    term = to_period_count(years, MONTHS_PER_YEAR)
    if rate_per_month == 0:
        return principal / Decimal(term)
    factor = (1 + rate_per_month) ** term
    return principal * (rate_per_month * factor) / (factor - 1)


def generate_schedule(
    params: LoanParameters,
    extra_payment: Number = 0,
    periods_per_year: int = MONTHS_PER_YEAR,
) -> List[PaymentScheduleEntry]:
    """Simulate the loan period by period until it is repaid.

    Parameters
    ----------
    params: LoanParameters
        The loan to simulate. The offset balance is subtracted from the
        outstanding balance before interest is charged each period and is
        assumed to stay constant for the life of the loan.
    extra_payment: Number
        Additional principal repaid every period on top of the regular
        payment.
    periods_per_year: int
        12 (monthly), 26 (fortnightly) or 52 (weekly). Non-monthly payments
        are the monthly payment split evenly (weekly is monthly / 4) and the
        periodic rate is the annual rate divided by ``periods_per_year``.

    Returns
    -------
    List[PaymentScheduleEntry]
        One entry per period, at most ``term_years * periods_per_year``. Any
        balance left when the term runs out is dropped.
    """
    extra = to_decimal(extra_payment, "extra_payment")
    if extra < 0:
        raise InvalidInputError("Extra payment cannot be negative")
    divisor = payment_divisor(periods_per_year)

    base_payment = (
        monthly_payment(params.loan_amount, params.annual_interest_rate_pct, params.term_years)
        / Decimal(divisor)
    )
    rate_per_period = to_periodic_rate(params.annual_interest_rate_pct, periods_per_year)
    max_periods = to_period_count(params.term_years, periods_per_year)
    offset = params.offset_balance

    schedule: List[PaymentScheduleEntry] = []
    balance = params.loan_amount
    period = 0
    while balance > BALANCE_EPSILON and period < max_periods:
        period += 1
        effective_balance = max(ZERO, balance - offset)
        interest_payment = effective_balance * rate_per_period
        principal_payment = min(base_payment - interest_payment + extra, balance)
        if principal_payment < 0:
            principal_payment = ZERO
        balance -= principal_payment

        schedule.append(
            PaymentScheduleEntry(
                period_index=period,
                payment_amount=principal_payment + interest_payment,
                principal_portion=principal_payment,
                interest_portion=interest_payment,
                remaining_balance=max(ZERO, balance),
                extra_payment_applied=min(extra, principal_payment),
            )
        )

    logger.debug(
        "Simulated %d periods (%d per year, extra %s, offset %s)",
        len(schedule),
        periods_per_year,
        extra,
        offset,
    )
    return schedule


def total_interest(schedule: List[PaymentScheduleEntry]) -> Decimal:
    return sum((entry.interest_portion for entry in schedule), ZERO)


def mortgage_summary(params: LoanParameters) -> AmortizationSummary:
    """Compute the headline figures for a monthly repayment loan.

    Total interest comes from a full schedule run so that the offset balance
    is accounted for. LMI and stamp duty are only estimated when the
    property value is known.
    """
    payment = monthly_payment(params.loan_amount, params.annual_interest_rate_pct, params.term_years)
    schedule = generate_schedule(params)
    interest = total_interest(schedule)

    rate_per_month = to_periodic_rate(params.annual_interest_rate_pct, MONTHS_PER_YEAR)
    effective_balance = max(ZERO, params.loan_amount - params.offset_balance)
    first_month_interest = effective_balance * rate_per_month

    if params.property_value:
        lmi_amount = estimate_lmi(params.loan_amount, params.property_value)
        stamp_duty = estimate_stamp_duty(params.property_value)
    else:
        lmi_amount = ZERO
        stamp_duty = ZERO

    return AmortizationSummary(
        monthly_payment=payment,
        total_interest=interest,
        total_payment=params.loan_amount + interest,
        first_month_interest=first_month_interest,
        first_month_principal=payment - first_month_interest,
        lmi_amount=lmi_amount,
        stamp_duty=stamp_duty,
        payments_made=len(schedule),
        payoff_time_years=Decimal(len(schedule)) / Decimal(MONTHS_PER_YEAR),
    )


def offset_benefits(params: LoanParameters) -> OffsetBenefits:
    """Estimate what the offset balance saves at the current rate."""
    offset = params.effective_offset
    rate = params.annual_interest_rate_pct
    annual_savings = offset * rate / Decimal(100)
    return OffsetBenefits(
        monthly_interest_savings=annual_savings / Decimal(MONTHS_PER_YEAR),
        annual_interest_savings=annual_savings,
        effective_interest_rate_pct=rate * (1 - offset / params.loan_amount),
        tax_free_equivalent=annual_savings,
    )


def chart_data(params: LoanParameters, extra_payment: Number = 0, step: int = 1) -> List[BalancePoint]:
    """Return running totals of interest and principal for plotting.

    Every ``step``-th period is kept (``step=12`` gives one point per year)
    and the final period is always included so the totals are complete.
    """
    if step <= 0:
        raise InvalidInputError("step must be positive")
    schedule = generate_schedule(params, extra_payment)
    points: List[BalancePoint] = []
    cumulative_interest = ZERO
    cumulative_principal = ZERO
    for entry in schedule:
        cumulative_interest += entry.interest_portion
        cumulative_principal += entry.principal_portion
        if entry.period_index % step == 0 or entry.period_index == len(schedule):
            points.append(
                BalancePoint(
                    period_index=entry.period_index,
                    balance=entry.remaining_balance,
                    cumulative_interest=cumulative_interest,
                    cumulative_principal=cumulative_principal,
                )
            )
    return points
