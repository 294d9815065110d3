"""Tests for mortgage_calc.investment."""

from decimal import Decimal

from mortgage_calc.data_models import GEARING_NEGATIVE, GEARING_NEUTRAL, GEARING_POSITIVE, InvestmentInputs
from mortgage_calc.investment import analyze_investment


class TestAnalyzeInvestment:
    def test_negatively_geared_property(self, investment_inputs):
        analysis = analyze_investment(investment_inputs)
        # Rent 450 * 52 = 23,400; expenses 200 * 52 = 10,400; interest 480,000 * 6.5% = 31,200
        assert analysis.loan_amount == Decimal("480000")
        assert analysis.annual_rental_income == Decimal("23400")
        assert analysis.annual_expenses == Decimal("10400")
        assert analysis.annual_interest == Decimal("31200")
        assert analysis.annual_cash_flow == Decimal("-18200")
        assert analysis.annual_tax_benefit == Decimal("6734")
        assert analysis.annual_capital_growth == Decimal("18000")
        assert analysis.net_annual_return == Decimal("6534")
        assert analysis.return_on_investment_pct == Decimal("5.445")
        assert analysis.gearing == GEARING_NEGATIVE

    def test_positively_geared_property_has_no_tax_benefit(self):
        inputs = InvestmentInputs(
            property_price=500_000,
            deposit=400_000,
            weekly_rental_income=1_000,
            weekly_expenses=100,
            annual_interest_rate_pct=5,
            term_years=30,
            marginal_tax_rate_pct=45,
        )
        analysis = analyze_investment(inputs)
        assert analysis.annual_cash_flow == Decimal("41800")
        assert analysis.annual_tax_benefit == 0
        assert analysis.gearing == GEARING_POSITIVE
        assert analysis.net_annual_return == Decimal("56800")

    def test_neutral_gearing(self):
        inputs = InvestmentInputs(
            property_price=400_000,
            deposit=400_000,
            weekly_rental_income=300,
            weekly_expenses=300,
            annual_interest_rate_pct=6,
            term_years=30,
            marginal_tax_rate_pct=30,
        )
        analysis = analyze_investment(inputs)
        assert analysis.loan_amount == 0
        assert analysis.annual_cash_flow == 0
        assert analysis.annual_tax_benefit == 0
        assert analysis.gearing == GEARING_NEUTRAL
        assert analysis.return_on_investment_pct == Decimal("3")

    def test_higher_tax_rate_means_bigger_benefit(self, investment_inputs):
        low = analyze_investment(investment_inputs)
        high = analyze_investment(
            InvestmentInputs(
                property_price=600_000,
                deposit=120_000,
                weekly_rental_income=450,
                weekly_expenses=200,
                annual_interest_rate_pct=6.5,
                term_years=30,
                marginal_tax_rate_pct=45,
            )
        )
        assert high.annual_tax_benefit > low.annual_tax_benefit

    def test_idempotent(self, investment_inputs):
        assert analyze_investment(investment_inputs) == analyze_investment(investment_inputs)
