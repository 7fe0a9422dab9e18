"""
WealthDash — Main orchestrator.

The Dashboard composes the budget, valuation, cash-flow and currency
calculators over one snapshot and returns every derived figure the
dashboard views need in a single record.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from wealthdash.analyzers.budget import BudgetAnalysis, BudgetSummary, analyze_budgets, summarize_budgets
from wealthdash.analyzers.cashflow import (
    PaymentBreakdown,
    deductible_expense_total,
    estimate_tax,
    spend_by_payment_method,
    total_expense,
    total_income,
)
from wealthdash.analyzers.currency import CurrencyConverter
from wealthdash.analyzers.sip import SipDeduction, monthly_sip_commitment, upcoming_deductions
from wealthdash.analyzers.trends import TrendPoint, net_worth_trend
from wealthdash.analyzers.valuation import (
    AllocationSlice,
    PortfolioSummary,
    Valuation,
    allocation_by_holding,
    compute_valuation,
    summarize_portfolio,
)
from wealthdash.config import WealthDashConfig
from wealthdash.models.snapshot import FinancialSnapshot

logger = logging.getLogger("wealthdash")


@dataclass(frozen=True)
class DashboardSummary:
    """Every derived dashboard figure. USD unless the field name says display."""

    as_of: datetime
    currency: str
    total_income: float
    total_expense: float
    valuation: Valuation
    budgets: list[BudgetAnalysis]
    budget_summary: BudgetSummary
    portfolio: PortfolioSummary  # in the display currency
    allocation: list[AllocationSlice]  # in the display currency
    payment_breakdown: list[PaymentBreakdown]
    net_worth_trend: list[TrendPoint]
    display_net_worth: float
    display_portfolio_value: float
    estimated_tax: float
    deductible_expenses: float
    display_sip_commitment: float
    upcoming_sips: list[SipDeduction]  # in the display currency


@dataclass
class Dashboard:
    """Top-level entry point.

    Usage::

        from wealthdash import Dashboard

        dashboard = Dashboard.from_config("wealthdash.yaml", display_currency="INR")
        summary = dashboard.summarize(snapshot, now=datetime(2024, 5, 31))
        print(summary.display_net_worth)
    """

    config: WealthDashConfig = field(default_factory=WealthDashConfig)

    @classmethod
    def from_config(cls, config_path: str | None = None, **overrides: Any) -> Dashboard:
        """Create a Dashboard from a config file or keyword arguments."""
        return cls(config=WealthDashConfig.load(config_path, **overrides))

    @property
    def converter(self) -> CurrencyConverter:
        return CurrencyConverter(self.config.display_currency)

    def summarize(self, snapshot: FinancialSnapshot, now: datetime | None = None) -> DashboardSummary:
        """Compute the full dashboard for ``snapshot``.

        Args:
            snapshot: Entity collections to read. Not modified.
            now: Moment that decides the budget month. Defaults to the
                current local time.
        """
        now = now or datetime.now()
        converter = self.converter
        code = converter.code

        income = total_income(snapshot.transactions)
        expense = total_expense(snapshot.transactions)
        valuation = compute_valuation(
            snapshot.accounts,
            snapshot.investments,
            income,
            expense,
            baseline=self.config.net_worth_baseline,
        )
        if not valuation.has_connected_data:
            logger.debug("No linked accounts or holdings; using fallback net worth")

        budgets = analyze_budgets(snapshot.budgets, snapshot.transactions, now)
        budget_summary = summarize_budgets(budgets)

        summary = DashboardSummary(
            as_of=now,
            currency=code,
            total_income=income,
            total_expense=expense,
            valuation=valuation,
            budgets=budgets,
            budget_summary=budget_summary,
            portfolio=summarize_portfolio(snapshot.investments, code),
            allocation=allocation_by_holding(snapshot.investments, code),
            payment_breakdown=spend_by_payment_method(snapshot.transactions),
            net_worth_trend=net_worth_trend(valuation.net_worth),
            display_net_worth=converter.convert(valuation.net_worth),
            display_portfolio_value=converter.convert(valuation.portfolio_value),
            estimated_tax=estimate_tax(snapshot.transactions),
            deductible_expenses=deductible_expense_total(snapshot.transactions),
            display_sip_commitment=monthly_sip_commitment(snapshot.sips, code),
            upcoming_sips=upcoming_deductions(snapshot.sips, code),
        )
        logger.info(
            "Dashboard computed: net worth $%.2f, %d budgets (%d over)",
            valuation.net_worth,
            budget_summary.budget_count,
            budget_summary.over_budget_count,
        )
        return summary
