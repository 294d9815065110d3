"""Side-by-side comparison of common mortgage payoff strategies."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import List

from .data_models import ComparisonScenario, LoanParameters
from .engine import generate_schedule, monthly_payment, total_interest
from .rates import payment_divisor
from .tables import BASELINE_STRATEGY, PAYOFF_STRATEGIES, PayoffStrategy

logger = logging.getLogger(__name__)


def _run_strategy(
    params: LoanParameters,
    strategy: PayoffStrategy,
    base_monthly_payment: Decimal,
    baseline_interest: Decimal,
) -> ComparisonScenario:
    schedule = generate_schedule(params, strategy.extra_payment, strategy.periods_per_year)
    interest = total_interest(schedule)
    periodic_payment = base_monthly_payment / Decimal(payment_divisor(strategy.periods_per_year))
    scenario = ComparisonScenario(
        name=strategy.name,
        periods_per_year=strategy.periods_per_year,
        periodic_payment=periodic_payment + strategy.extra_payment,
        total_interest=interest,
        payoff_time_years=Decimal(len(schedule)) / Decimal(strategy.periods_per_year),
        interest_savings_vs_baseline=baseline_interest - interest,
    )
    logger.debug(
        "%s: %d periods, interest %.2f, saving %.2f",
        strategy.name,
        len(schedule),
        interest,
        scenario.interest_savings_vs_baseline,
    )
    return scenario


def compare_strategies(params: LoanParameters) -> List[ComparisonScenario]:
    """Simulate the baseline and each payoff strategy for the same loan.

    The result always starts with the "Minimum Payment" baseline followed
    by weekly payments, an extra $100/month and an extra $500/month, in
    that order. Each strategy is simulated from the same loan
    parameters.
    """
    base_payment = monthly_payment(params.loan_amount, params.annual_interest_rate_pct, params.term_years)
    baseline_schedule = generate_schedule(params, BASELINE_STRATEGY.extra_payment, BASELINE_STRATEGY.periods_per_year)
    baseline_interest = total_interest(baseline_schedule)

    scenarios = [
        ComparisonScenario(
            name=BASELINE_STRATEGY.name,
            periods_per_year=BASELINE_STRATEGY.periods_per_year,
            periodic_payment=base_payment,
            total_interest=baseline_interest,
            payoff_time_years=Decimal(len(baseline_schedule)) / Decimal(BASELINE_STRATEGY.periods_per_year),
            interest_savings_vs_baseline=Decimal("0"),
        )
    ]
    for strategy in PAYOFF_STRATEGIES:
        scenarios.append(_run_strategy(params, strategy, base_payment, baseline_interest))
    return scenarios
