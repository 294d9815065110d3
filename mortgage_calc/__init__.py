"""Mortgage and property investment calculator engine."""

from .costs import estimate_lmi, estimate_stamp_duty, loan_to_value_ratio
from .data_models import (
    AmortizationSummary,
    BalancePoint,
    ComparisonScenario,
    InvestmentAnalysis,
    InvestmentInputs,
    LoanParameters,
    OffsetBenefits,
    PaymentScheduleEntry,
)
from .engine import chart_data, generate_schedule, monthly_payment, mortgage_summary, offset_benefits
from .exceptions import InvalidInputError
from .investment import analyze_investment
from .strategies import compare_strategies

__version__ = "0.1.0"

__all__ = [
    "AmortizationSummary",
    "BalancePoint",
    "ComparisonScenario",
    "InvalidInputError",
    "InvestmentAnalysis",
    "InvestmentInputs",
    "LoanParameters",
    "OffsetBenefits",
    "PaymentScheduleEntry",
    "analyze_investment",
    "chart_data",
    "compare_strategies",
    "estimate_lmi",
    "estimate_stamp_duty",
    "generate_schedule",
    "loan_to_value_ratio",
    "monthly_payment",
    "mortgage_summary",
    "offset_benefits",
]
