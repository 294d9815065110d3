"""Tests for mortgage_calc.engine."""

import math
from decimal import Decimal

import pytest

from mortgage_calc.data_models import LoanParameters
from mortgage_calc.engine import (
    chart_data,
    generate_schedule,
    monthly_payment,
    mortgage_summary,
    offset_benefits,
    total_interest,
)
from mortgage_calc.exceptions import InvalidInputError


class TestMonthlyPayment:
    def test_standard_mortgage(self):
        # $500k, 6.5%, 30 years -> ~$3,160/mo
        payment = monthly_payment(500_000, 6.5, 30)
        assert float(payment) == pytest.approx(3_160.34, abs=0.01)

    def test_zero_rate_is_straight_line(self):
        assert monthly_payment(360_000, 0, 30) == Decimal(360_000) / Decimal(360)
        assert monthly_payment(100_000, 0, 30) == Decimal(100_000) / Decimal(360)

    @pytest.mark.parametrize("principal", [1, 10_000, 750_000, 10**9])
    @pytest.mark.parametrize("rate", [0, 0.5, 6.5, 18])
    @pytest.mark.parametrize("years", [1, 15, 30, 50])
    def test_always_positive(self, principal, rate, years):
        payment = monthly_payment(principal, rate, years)
        assert payment > 0
        # Payments over the term cover at least the principal.
        assert payment * years * 12 >= Decimal(principal) - Decimal("0.000001")

    def test_fifty_year_billion_dollar_loan(self):
        payment = monthly_payment(10**9, 7, 50)
        assert payment.is_finite()
        assert float(payment) == pytest.approx(6_017_000, rel=0.01)

    def test_higher_rate_means_higher_payment(self):
        assert monthly_payment(500_000, 8, 30) > monthly_payment(500_000, 4, 30)

    @pytest.mark.parametrize(
        "principal,rate,years",
        [(500_000, 6.5, 0), (500_000, 6.5, -5), (0, 6.5, 30), (-1, 6.5, 30), (500_000, -1, 30)],
    )
    def test_invalid_inputs(self, principal, rate, years):
        with pytest.raises(InvalidInputError):
            monthly_payment(principal, rate, years)

    def test_term_above_cap_rejected(self):
        with pytest.raises(InvalidInputError, match="cannot exceed 100 years"):
            monthly_payment(500_000, 6.5, 5000)


class TestGenerateSchedule:
    def test_concrete_total_interest(self, base_loan):
        schedule = generate_schedule(base_loan)
        assert len(schedule) == 360
        assert float(total_interest(schedule)) == pytest.approx(637_600, rel=0.01)

    def test_terminates_within_term_and_clears_balance(self, base_loan):
        schedule = generate_schedule(base_loan)
        assert len(schedule) <= 30 * 12
        assert schedule[-1].remaining_balance <= Decimal("0.01")

    def test_periods_are_sequential(self, base_loan):
        schedule = generate_schedule(base_loan)
        assert [e.period_index for e in schedule] == list(range(1, len(schedule) + 1))

    def test_balance_is_non_increasing(self, base_loan):
        schedule = generate_schedule(base_loan, extra_payment=250)
        for previous, current in zip(schedule, schedule[1:]):
            assert current.remaining_balance <= previous.remaining_balance

    def test_payment_splits_into_principal_and_interest(self, base_loan):
        schedule = generate_schedule(base_loan)
        for entry in schedule:
            assert entry.payment_amount == entry.principal_portion + entry.interest_portion
            assert entry.interest_portion >= 0
        principal_paid = sum(e.principal_portion for e in schedule)
        paid = sum(e.payment_amount for e in schedule)
        assert float(principal_paid) == pytest.approx(500_000, abs=0.01)
        assert float(paid) == pytest.approx(float(500_000 + total_interest(schedule)), abs=0.01)

    def test_first_entry(self, base_loan):
        first = generate_schedule(base_loan)[0]
        assert float(first.interest_portion) == pytest.approx(2_708.33, abs=0.01)
        assert float(first.principal_portion) == pytest.approx(452.01, abs=0.01)
        assert first.extra_payment_applied == 0

    def test_zero_rate_schedule(self):
        params = LoanParameters(loan_amount=120_000, annual_interest_rate_pct=0, term_years=10)
        schedule = generate_schedule(params)
        assert len(schedule) == 120
        assert total_interest(schedule) == 0
        assert schedule[-1].remaining_balance <= Decimal("0.01")

    def test_offset_never_increases_interest(self, base_loan):
        interests = []
        for offset in (0, 10_000, 50_000, 200_000, 499_999):
            params = LoanParameters(
                loan_amount=base_loan.loan_amount,
                annual_interest_rate_pct=base_loan.annual_interest_rate_pct,
                term_years=base_loan.term_years,
                offset_balance=offset,
            )
            interests.append(total_interest(generate_schedule(params)))
        assert interests == sorted(interests, reverse=True)

    @pytest.mark.parametrize("offset", [500_000, 750_000])
    def test_full_offset_means_no_interest(self, base_loan, offset):
        params = LoanParameters(
            loan_amount=500_000, annual_interest_rate_pct=6.5, term_years=30, offset_balance=offset
        )
        schedule = generate_schedule(params)
        base = monthly_payment(500_000, 6.5, 30)
        assert total_interest(schedule) == 0
        assert len(schedule) == math.ceil(Decimal(500_000) / base)
        assert schedule[-1].remaining_balance <= Decimal("0.01")

    def test_extra_payment_shortens_loan(self, base_loan):
        baseline = generate_schedule(base_loan)
        faster = generate_schedule(base_loan, extra_payment=500)
        assert len(faster) < len(baseline)
        assert total_interest(faster) < total_interest(baseline)
        assert all(e.extra_payment_applied == 500 for e in faster[:-1])
        assert faster[-1].extra_payment_applied <= 500

    def test_weekly_cadence(self, base_loan):
        weekly = generate_schedule(base_loan, periods_per_year=52)
        monthly = generate_schedule(base_loan)
        assert len(weekly) <= 30 * 52
        # Weekly payments of a quarter of the monthly amount add up to
        # thirteen monthly payments a year.
        assert len(weekly) / 52 < len(monthly) / 12
        assert total_interest(weekly) < total_interest(monthly)
        assert float(weekly[0].interest_portion) == pytest.approx(625.0, abs=0.01)

    def test_negative_extra_payment_rejected(self, base_loan):
        with pytest.raises(InvalidInputError):
            generate_schedule(base_loan, extra_payment=-1)

    def test_unsupported_cadence_rejected(self, base_loan):
        with pytest.raises(InvalidInputError):
            generate_schedule(base_loan, periods_per_year=4)

    def test_idempotent(self, base_loan):
        assert generate_schedule(base_loan, 100, 52) == generate_schedule(base_loan, 100, 52)

    @pytest.mark.parametrize("years", [1, 30, 100])
    def test_term_ends_with_zero_balance(self, years):
        params = LoanParameters(loan_amount=750_000, annual_interest_rate_pct=18, term_years=years)
        schedule = generate_schedule(params, periods_per_year=52)
        assert len(schedule) <= years * 52
        assert schedule[-1].remaining_balance == 0


class TestMortgageSummary:
    def test_concrete_scenario(self, base_loan):
        summary = mortgage_summary(base_loan)
        assert float(summary.monthly_payment) == pytest.approx(3_160.34, abs=0.01)
        assert float(summary.total_interest) == pytest.approx(637_600, rel=0.01)
        assert summary.total_payment == base_loan.loan_amount + summary.total_interest
        assert summary.payments_made == 360
        assert summary.payoff_time_years == 30
        assert summary.lmi_amount == 0
        assert summary.stamp_duty == 0

    def test_first_month_split(self, base_loan):
        summary = mortgage_summary(base_loan)
        assert float(summary.first_month_interest + summary.first_month_principal) == pytest.approx(
            float(summary.monthly_payment)
        )
        assert float(summary.first_month_interest) == pytest.approx(2_708.33, abs=0.01)

    def test_first_month_interest_uses_offset(self):
        params = LoanParameters(
            loan_amount=500_000, annual_interest_rate_pct=6, term_years=30, offset_balance=100_000
        )
        summary = mortgage_summary(params)
        assert summary.first_month_interest == Decimal("2000")

    def test_purchase_costs_with_property_value(self):
        params = LoanParameters(
            loan_amount=500_000, annual_interest_rate_pct=6.5, term_years=30, property_value=600_000
        )
        summary = mortgage_summary(params)
        # LVR 83.3% -> 0.5% of the loan
        assert summary.lmi_amount == Decimal("2500")
        assert summary.stamp_duty == Decimal("22207.5")

    def test_idempotent(self, base_loan):
        assert mortgage_summary(base_loan) == mortgage_summary(base_loan)


class TestOffsetBenefits:
    def test_savings(self):
        params = LoanParameters(
            loan_amount=500_000, annual_interest_rate_pct=6.5, term_years=30, offset_balance=50_000
        )
        benefits = offset_benefits(params)
        assert benefits.annual_interest_savings == Decimal("3250")
        assert float(benefits.monthly_interest_savings) == pytest.approx(270.83, abs=0.01)
        assert benefits.effective_interest_rate_pct == Decimal("5.85")
        assert benefits.tax_free_equivalent == benefits.annual_interest_savings

    def test_offset_above_loan_is_capped(self):
        params = LoanParameters(
            loan_amount=100_000, annual_interest_rate_pct=5, term_years=30, offset_balance=250_000
        )
        benefits = offset_benefits(params)
        assert benefits.annual_interest_savings == Decimal("5000")
        assert benefits.effective_interest_rate_pct == 0

    def test_no_offset(self, base_loan):
        benefits = offset_benefits(base_loan)
        assert benefits.annual_interest_savings == 0
        assert benefits.effective_interest_rate_pct == base_loan.annual_interest_rate_pct


class TestChartData:
    def test_yearly_points(self, base_loan):
        points = chart_data(base_loan, step=12)
        assert len(points) == 30
        assert [p.period_index for p in points][:3] == [12, 24, 36]
        last = points[-1]
        assert last.period_index == 360
        assert last.cumulative_interest == total_interest(generate_schedule(base_loan))
        assert float(last.cumulative_principal) == pytest.approx(500_000, abs=0.01)

    def test_final_period_always_included(self, base_loan):
        points = chart_data(base_loan, step=7)
        assert points[-1].period_index == 360
        assert len(points) == 360 // 7 + 1

    def test_cumulative_totals_grow(self, base_loan):
        points = chart_data(base_loan, extra_payment=200)
        for previous, current in zip(points, points[1:]):
            assert current.cumulative_interest >= previous.cumulative_interest
            assert current.cumulative_principal > previous.cumulative_principal
            assert current.balance <= previous.balance

    def test_invalid_step(self, base_loan):
        with pytest.raises(InvalidInputError):
            chart_data(base_loan, step=0)
