"""Command-line interface for the mortgage calculator.

This module uses the ``click`` library to implement a multi-command
interface. Users can compute full amortization schedules, view summaries,
compare payoff strategies, estimate purchase costs or analyze an investment
property. Schedules and summaries can be printed to the terminal or
exported to JSON/CSV files.
"""

from __future__ import annotations

import csv
import json
import logging
import os
from dataclasses import asdict
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Optional

import click

from .costs import estimate_lmi, estimate_stamp_duty, loan_to_value_ratio
from .data_models import InvestmentInputs, LoanParameters, PaymentScheduleEntry
from .engine import generate_schedule, mortgage_summary, offset_benefits
from .exceptions import InvalidInputError
from .formatter import (
    print_costs,
    print_investment,
    print_offset_benefits,
    print_schedule,
    print_strategies,
    print_summary,
)
from .investment import analyze_investment
from .strategies import compare_strategies
from .tables import FREQUENCIES
from .utils import parse_amount, to_jsonable

MAX_PRINTED_ROWS = 120


def _amount(value: Optional[str], name: str) -> Optional[Decimal]:
    if value is None:
        return None
    try:
        return parse_amount(value)
    except InvalidInputError as exc:
        raise click.BadParameter(str(exc), param_hint=name)


def build_loan_parameters(
    principal: str,
    rate: float,
    term: int,
    offset: Optional[str] = None,
    property_value: Optional[str] = None,
) -> LoanParameters:
    """Turn raw option values into validated ``LoanParameters``."""
    try:
        return LoanParameters(
            loan_amount=_amount(principal, "--principal"),
            annual_interest_rate_pct=rate,
            term_years=term,
            property_value=_amount(property_value, "--property-value"),
            offset_balance=_amount(offset, "--offset") or Decimal("0"),
        )
    except InvalidInputError as exc:
        raise click.UsageError(str(exc))


def export_to_json(path: Path, schedule: List[PaymentScheduleEntry], summary: Dict[str, Any]) -> None:
    """Export schedule and summary to a JSON file."""
    data = {
        "summary": to_jsonable(summary),
        "schedule": [to_jsonable(asdict(e)) for e in schedule],
    }
    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def export_to_csv(path: Path, schedule: List[PaymentScheduleEntry]) -> None:
    """Export schedule to a CSV file."""
    header = [
        "Period",
        "Payment",
        "Principal",
        "Interest",
        "Extra_Payment",
        "Remaining_Balance",
    ]
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(header)
        for e in schedule:
            writer.writerow(
                [
                    e.period_index,
                    f"{e.payment_amount:.2f}",
                    f"{e.principal_portion:.2f}",
                    f"{e.interest_portion:.2f}",
                    f"{e.extra_payment_applied:.2f}",
                    f"{e.remaining_balance:.2f}",
                ]
            )


def configure_logging(verbose: bool) -> None:
    level_name = "DEBUG" if verbose else os.environ.get("MORTGAGE_CALC_LOG_LEVEL", "WARNING")
    level = getattr(logging, level_name.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def loan_options(func):
    """Attach the options shared by every loan command."""
    decorators = [
        click.option("--principal", "-p", "principal", required=True, help="Loan amount (accepts 500k, 1.2m)"),
        click.option("--rate", "-r", "rate", required=True, type=float, help="Annual interest rate (percent)"),
        click.option("--term", "-t", "term", required=True, type=int, help="Loan term in years"),
        click.option("--offset", "offset", help="Offset account balance"),
        click.option("--property-value", "property_value", help="Property value, for LMI and stamp duty"),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """A command-line mortgage calculator for what-if scenarios."""
    configure_logging(verbose)


@cli.command()
@loan_options
@click.option("--extra", "extra", default="0", help="Extra repayment every period")
@click.option(
    "--frequency",
    "frequency",
    type=click.Choice(sorted(FREQUENCIES)),
    default="monthly",
    help="Repayment frequency",
)
@click.option("--output", "output", type=str, help="Output file path (.json or .csv)")
def schedule(
    principal: str,
    rate: float,
    term: int,
    offset: Optional[str],
    property_value: Optional[str],
    extra: str,
    frequency: str,
    output: Optional[str],
) -> None:
    """Compute and print the full amortization schedule."""
    params = build_loan_parameters(principal, rate, term, offset, property_value)
    extra_amount = _amount(extra, "--extra")
    try:
        schedule_entries = generate_schedule(params, extra_amount, FREQUENCIES[frequency])
    except InvalidInputError as exc:
        raise click.UsageError(str(exc))
    if output:
        path = Path(output)
        if path.suffix.lower() == ".json":
            export_to_json(path, schedule_entries, asdict(mortgage_summary(params)))
            click.echo(f"Schedule exported to {path}")
        elif path.suffix.lower() == ".csv":
            export_to_csv(path, schedule_entries)
            click.echo(f"Schedule exported to {path}")
        else:
            raise click.BadParameter("Unsupported output format; use .json or .csv")
    else:
        print_summary(mortgage_summary(params))
        # Limit schedule length printed to avoid flooding the terminal
        if len(schedule_entries) > MAX_PRINTED_ROWS:
            click.echo(
                f"Schedule has {len(schedule_entries)} rows; showing first {MAX_PRINTED_ROWS} rows."
            )
            print_schedule(schedule_entries[:MAX_PRINTED_ROWS], show_extra=extra_amount > 0)
        else:
            print_schedule(schedule_entries, show_extra=extra_amount > 0)


@cli.command()
@loan_options
@click.option("--output", "output", type=str, help="Output file path (.json)")
def summary(
    principal: str,
    rate: float,
    term: int,
    offset: Optional[str],
    property_value: Optional[str],
    output: Optional[str],
) -> None:
    """Compute and print only the summary metrics for a loan."""
    params = build_loan_parameters(principal, rate, term, offset, property_value)
    summary_data = mortgage_summary(params)
    if output:
        path = Path(output)
        if path.suffix.lower() != ".json":
            raise click.BadParameter("Summary export must use .json extension")
        payload = {"summary": asdict(summary_data)}
        if params.offset_balance > 0:
            payload["offset_benefits"] = asdict(offset_benefits(params))
        with path.open("w", encoding="utf-8") as f:
            json.dump(to_jsonable(payload), f, indent=2)
        click.echo(f"Summary exported to {path}")
    else:
        print_summary(summary_data)
        if params.offset_balance > 0:
            print_offset_benefits(offset_benefits(params))


@cli.command()
@loan_options
def compare(
    principal: str,
    rate: float,
    term: int,
    offset: Optional[str],
    property_value: Optional[str],
) -> None:
    """Compare payoff strategies for the same loan.

    Example:

        mortgage-calc compare -p 500k -r 6.5 -t 30
    """
    params = build_loan_parameters(principal, rate, term, offset, property_value)
    print_strategies(compare_strategies(params))


@cli.command()
@click.option("--principal", "-p", "principal", required=True, help="Loan amount")
@click.option("--property-value", "property_value", required=True, help="Property value")
def costs(principal: str, property_value: str) -> None:
    """Estimate LMI and stamp duty for a purchase."""
    loan_amount = _amount(principal, "--principal")
    value = _amount(property_value, "--property-value")
    if loan_amount <= 0:
        raise click.BadParameter("Loan amount must be positive", param_hint="--principal")
    if value <= 0:
        raise click.BadParameter("Property value must be positive", param_hint="--property-value")
    print_costs(
        loan_to_value_ratio(loan_amount, value),
        estimate_lmi(loan_amount, value),
        estimate_stamp_duty(value),
    )


@cli.command()
@click.option("--price", "price", required=True, help="Property price")
@click.option("--deposit", "deposit", required=True, help="Deposit amount")
@click.option("--rent", "rent", required=True, help="Weekly rental income")
@click.option("--expenses", "expenses", default="0", help="Weekly expenses (rates, insurance, management)")
@click.option("--rate", "-r", "rate", required=True, type=float, help="Annual interest rate (percent)")
@click.option("--term", "-t", "term", default=30, type=int, help="Loan term in years")
@click.option("--tax-rate", "tax_rate", required=True, type=float, help="Marginal tax rate (percent)")
def invest(
    price: str,
    deposit: str,
    rent: str,
    expenses: str,
    rate: float,
    term: int,
    tax_rate: float,
) -> None:
    """Analyze cash flow and negative gearing for an investment property."""
    try:
        inputs = InvestmentInputs(
            property_price=_amount(price, "--price"),
            deposit=_amount(deposit, "--deposit"),
            weekly_rental_income=_amount(rent, "--rent"),
            weekly_expenses=_amount(expenses, "--expenses"),
            annual_interest_rate_pct=rate,
            term_years=term,
            marginal_tax_rate_pct=tax_rate,
        )
    except InvalidInputError as exc:
        raise click.UsageError(str(exc))
    print_investment(analyze_investment(inputs))


if __name__ == "__main__":
    cli()
