"""Output helpers for the mortgage calculator.

This module provides simple functions to render schedules, summaries,
strategy comparisons and investment figures in a tabular text format. We
rely only on built-in printing and string formatting so the same helpers
work from the CLI and from tests capturing stdout.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Optional

from .data_models import (
    AmortizationSummary,
    ComparisonScenario,
    InvestmentAnalysis,
    OffsetBenefits,
    PaymentScheduleEntry,
)


def _money(value: Decimal) -> str:
    return f"{value:,.2f}"


def print_summary(summary: AmortizationSummary) -> None:
    """Print the amortization summary in a human-readable format."""
    print("Summary")
    print("-" * 72)
    print(f"Monthly payment      : {_money(summary.monthly_payment)}")
    print(f"Total interest       : {_money(summary.total_interest)}")
    print(f"Total payment        : {_money(summary.total_payment)}")
    print(f"First month interest : {_money(summary.first_month_interest)}")
    print(f"First month principal: {_money(summary.first_month_principal)}")
    print(f"Payments made        : {summary.payments_made}")
    print(f"Payoff time (years)  : {summary.payoff_time_years:.2f}")
    # Purchase costs are only known when a property value was supplied.
    if summary.lmi_amount:
        print(f"LMI (estimate)       : {_money(summary.lmi_amount)}")
    if summary.stamp_duty:
        print(f"Stamp duty (estimate): {_money(summary.stamp_duty)}")
    print("-" * 72)


def print_offset_benefits(benefits: OffsetBenefits) -> None:
    print("Offset account")
    print("-" * 72)
    print(f"Monthly interest saved : {_money(benefits.monthly_interest_savings)}")
    print(f"Annual interest saved  : {_money(benefits.annual_interest_savings)}")
    print(f"Effective rate         : {benefits.effective_interest_rate_pct:.2f}%")
    print(f"Tax-free equivalent    : {_money(benefits.tax_free_equivalent)}")
    print("-" * 72)


def print_schedule(schedule: Iterable[PaymentScheduleEntry], show_extra: bool = False) -> None:
    """Print the amortization schedule as a simple table.

    Parameters
    ----------
    schedule: Iterable[PaymentScheduleEntry]
        The schedule entries to print.
    show_extra: bool
        Whether to include the ``Extra`` column. It is hidden by default
        because most schedules have no extra repayment.
    """
    headers = ["Period", "Payment", "Principal", "Interest"]
    if show_extra:
        headers.append("Extra")
    headers.append("Balance")
    print("\t".join(headers))
    for entry in schedule:
        row = [
            str(entry.period_index),
            f"{entry.payment_amount:.2f}",
            f"{entry.principal_portion:.2f}",
            f"{entry.interest_portion:.2f}",
        ]
        if show_extra:
            row.append(f"{entry.extra_payment_applied:.2f}")
        row.append(f"{entry.remaining_balance:.2f}")
        print("\t".join(row))


def print_strategies(scenarios: Iterable[ComparisonScenario]) -> None:
    """Print payoff strategies side by side.

    A positive saving means the strategy pays less interest than the
    minimum-payment baseline.
    """
    print("Payoff strategies")
    print("=" * 72)
    print(f"{'Strategy':20s} {'Payment':>12s} {'Interest':>15s} {'Years':>7s} {'Saving':>14s}")
    for s in scenarios:
        print(
            f"{s.name:20s} {s.periodic_payment:12,.2f} {s.total_interest:15,.2f} "
            f"{s.payoff_time_years:7.2f} {s.interest_savings_vs_baseline:14,.2f}"
        )
    print("=" * 72)


def print_costs(lvr: Optional[Decimal], lmi: Decimal, stamp_duty: Decimal) -> None:
    print("Purchase costs")
    print("-" * 72)
    if lvr is not None:
        print(f"LVR                  : {lvr:.2f}%")
    print(f"LMI (estimate)       : {_money(lmi)}")
    print(f"Stamp duty (estimate): {_money(stamp_duty)}")
    print(f"Total upfront costs  : {_money(lmi + stamp_duty)}")
    print("-" * 72)


def print_investment(analysis: InvestmentAnalysis) -> None:
    """Print the annual figures of a property investment analysis."""
    print("Investment analysis (annual)")
    print("-" * 72)
    print(f"Loan amount        : {_money(analysis.loan_amount)}")
    print(f"Rental income      : {_money(analysis.annual_rental_income)}")
    print(f"Expenses           : {_money(analysis.annual_expenses)}")
    print(f"Interest           : {_money(analysis.annual_interest)}")
    print(f"Cash flow          : {_money(analysis.annual_cash_flow)} ({analysis.gearing}ly geared)")
    print(f"Tax benefit        : {_money(analysis.annual_tax_benefit)}")
    print(f"Capital growth     : {_money(analysis.annual_capital_growth)}")
    print(f"Net return         : {_money(analysis.net_annual_return)}")
    print(f"Return on deposit  : {analysis.return_on_investment_pct:.2f}%")
    print("-" * 72)
