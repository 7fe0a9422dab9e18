"""
WealthDash analyzers — pure computation over entity snapshots.

None of these functions mutate their inputs or keep state between calls.
"""

from wealthdash.analyzers.budget import (
    BudgetAnalysis,
    BudgetBook,
    BudgetSummary,
    analyze_budgets,
    summarize_budgets,
    upsert_budget,
)
from wealthdash.analyzers.cashflow import (
    DEFAULT_TAX_RATE,
    PaymentBreakdown,
    deductible_expense_total,
    estimate_tax,
    search_transactions,
    spend_by_payment_method,
    total_expense,
    total_income,
)
from wealthdash.analyzers.currency import (
    CURRENCIES,
    CurrencyConverter,
    CurrencyMeta,
    convert_amount,
    format_amount,
    format_converted,
    get_currency_meta,
    supported_currencies,
)
from wealthdash.analyzers.sip import (
    SipDeduction,
    active_sips,
    monthly_sip_commitment,
    upcoming_deductions,
)
from wealthdash.analyzers.trends import (
    PricePoint,
    TimeRange,
    TrendPoint,
    net_worth_trend,
    price_history,
)
from wealthdash.analyzers.valuation import (
    DEFAULT_NET_WORTH_BASELINE,
    AllocationSlice,
    HoldingGain,
    PortfolioSummary,
    Valuation,
    allocation_by_holding,
    allocation_by_type,
    compute_valuation,
    holding_gain,
    summarize_portfolio,
)

__all__ = [
    "CURRENCIES",
    "DEFAULT_NET_WORTH_BASELINE",
    "DEFAULT_TAX_RATE",
    "AllocationSlice",
    "BudgetAnalysis",
    "BudgetBook",
    "BudgetSummary",
    "CurrencyConverter",
    "CurrencyMeta",
    "HoldingGain",
    "PaymentBreakdown",
    "PortfolioSummary",
    "PricePoint",
    "SipDeduction",
    "TimeRange",
    "TrendPoint",
    "Valuation",
    "active_sips",
    "allocation_by_holding",
    "allocation_by_type",
    "analyze_budgets",
    "compute_valuation",
    "convert_amount",
    "deductible_expense_total",
    "estimate_tax",
    "format_amount",
    "format_converted",
    "get_currency_meta",
    "holding_gain",
    "monthly_sip_commitment",
    "net_worth_trend",
    "price_history",
    "search_transactions",
    "spend_by_payment_method",
    "summarize_budgets",
    "summarize_portfolio",
    "supported_currencies",
    "total_expense",
    "total_income",
    "upcoming_deductions",
    "upsert_budget",
]
