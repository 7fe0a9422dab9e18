"""
Budget Analyzer — current-month spend against monthly category budgets.

Categories are free text. A transaction counts against a budget when its
category equals the budget's category after trimming and lower-casing,
so "food", "Food" and " FOOD " all share one budget.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Iterable, Sequence

from wealthdash.exceptions import ValidationError
from wealthdash.models.financial import Budget, BudgetPeriod, Transaction, TransactionType

logger = logging.getLogger("wealthdash.analyzers.budget")


def normalize_category(category: str) -> str:
    """Key used for case-insensitive category matching."""
    return category.strip().lower()


@dataclass(frozen=True)
class BudgetAnalysis:
    """A budget together with its spend for the analyzed month."""

    budget: Budget
    spent: float
    percentage: float  # clamped to [0, 100]
    is_over: bool

    @property
    def category(self) -> str:
        return self.budget.category

    @property
    def limit(self) -> float:
        return self.budget.limit

    @property
    def remaining(self) -> float:
        return max(self.budget.limit - self.spent, 0.0)

    @property
    def over_by(self) -> float:
        """How far spend exceeds the limit (0 when within budget)."""
        return max(self.spent - self.budget.limit, 0.0)


@dataclass(frozen=True)
class BudgetSummary:
    """Totals across all analyzed budgets."""

    total_budgeted: float = 0.0
    total_spent: float = 0.0
    over_budget_count: int = 0
    budget_count: int = 0

    @property
    def overall_percentage(self) -> float:
        if self.total_budgeted <= 0:
            return 0.0
        return self.total_spent / self.total_budgeted * 100


def _in_month(txn_date: date, now: date | datetime) -> bool:
    return txn_date.year == now.year and txn_date.month == now.month


def monthly_expenses(transactions: Iterable[Transaction], now: date | datetime) -> list[Transaction]:
    """Expense transactions dated in ``now``'s calendar month."""
    expenses = []
    for txn in transactions:
        if txn.amount < 0:
            raise ValidationError(f"Transaction {txn.id!r} has a negative amount ({txn.amount})")
        if txn.type == TransactionType.EXPENSE and _in_month(txn.date, now):
            expenses.append(txn)
    return expenses


def analyze_budgets(
    budgets: Sequence[Budget],
    transactions: Iterable[Transaction],
    now: date | datetime,
) -> list[BudgetAnalysis]:
    """
    Map every budget to its spend in the calendar month containing ``now``.

    Only EXPENSE transactions count. ``percentage`` is clamped to 100 while
    ``is_over`` compares the raw spend to the limit. A budget whose limit is
    zero or negative is reported as fully used and over. Results are sorted
    by percentage, highest first; ties keep input order.

    Args:
        budgets: Budgets to evaluate.
        transactions: All known transactions; filtering happens here.
        now: Any date or datetime inside the month to analyze.

    Returns:
        One BudgetAnalysis per budget.
    """
    spent_by_category: dict[str, float] = {}
    for txn in monthly_expenses(transactions, now):
        key = normalize_category(txn.category)
        spent_by_category[key] = spent_by_category.get(key, 0.0) + txn.amount

    results = []
    for budget in budgets:
        spent = spent_by_category.get(normalize_category(budget.category), 0.0)
        if budget.limit <= 0:
            percentage, is_over = 100.0, True
        else:
            percentage = min(spent / budget.limit * 100, 100.0)
            is_over = spent > budget.limit
        results.append(BudgetAnalysis(budget=budget, spent=spent, percentage=percentage, is_over=is_over))

    # sorted() is stable, so equal percentages keep their input order
    return sorted(results, key=lambda a: a.percentage, reverse=True)


def summarize_budgets(analyses: Sequence[BudgetAnalysis]) -> BudgetSummary:
    """Aggregate totals over a list of analyses."""
    return BudgetSummary(
        total_budgeted=sum(a.limit for a in analyses),
        total_spent=sum(a.spent for a in analyses),
        over_budget_count=sum(1 for a in analyses if a.is_over),
        budget_count=len(analyses),
    )


def upsert_budget(
    budgets: Sequence[Budget],
    category: str,
    limit: float,
    budget_id: str | None = None,
) -> list[Budget]:
    """
    Create or update the budget for ``category``.

    If a budget already exists for the category (case-insensitive) its limit
    is replaced and its id and original spelling are kept. Otherwise a new
    monthly budget is appended. The input sequence is not modified.

    Raises:
        ValidationError: Empty category or a non-positive limit.
    """
    if not category or not category.strip():
        raise ValidationError("Budget category must not be empty")
    if limit <= 0:
        raise ValidationError(f"Budget limit must be positive, got {limit}")

    key = normalize_category(category)
    updated = list(budgets)
    for idx, existing in enumerate(updated):
        if normalize_category(existing.category) == key:
            updated[idx] = existing.model_copy(update={"limit": float(limit)})
            return updated

    updated.append(Budget(
        id=budget_id or uuid.uuid4().hex,
        category=category.strip(),
        limit=float(limit),
        period=BudgetPeriod.MONTHLY,
    ))
    return updated


@dataclass
class BudgetBook:
    """
    In-memory collection of budgets, one per category.

    Example usage:
        book = BudgetBook()
        book.upsert("Food", 500)
        book.upsert("food", 600)      # updates, does not duplicate

        for row in book.analyze(transactions, now=date.today()):
            print(f"{row.category}: {row.percentage:.0f}% used")
    """

    budgets: list[Budget] = field(default_factory=list)

    def upsert(self, category: str, limit: float, budget_id: str | None = None) -> Budget:
        """Create or update a budget and return the stored record."""
        existed = self.get(category) is not None
        self.budgets = upsert_budget(self.budgets, category, limit, budget_id)
        budget = self.get(category)
        assert budget is not None
        if existed:
            logger.info("Updated budget %s: limit $%.2f", budget.category, budget.limit)
        else:
            logger.info("Created budget %s: limit $%.2f", budget.category, budget.limit)
        return budget

    def get(self, category: str) -> Budget | None:
        key = normalize_category(category)
        for budget in self.budgets:
            if normalize_category(budget.category) == key:
                return budget
        return None

    def remove(self, category: str) -> bool:
        """Drop the budget for a category. Returns False if there was none."""
        key = normalize_category(category)
        before = len(self.budgets)
        self.budgets = [b for b in self.budgets if normalize_category(b.category) != key]
        removed = len(self.budgets) < before
        if removed:
            logger.info("Removed budget %s", category)
        return removed

    def analyze(self, transactions: Iterable[Transaction], now: date | datetime) -> list[BudgetAnalysis]:
        return analyze_budgets(self.budgets, transactions, now)

    def summary(self, transactions: Iterable[Transaction], now: date | datetime) -> BudgetSummary:
        return summarize_budgets(self.analyze(transactions, now))

    def export(self) -> list[dict[str, Any]]:
        """Budgets as JSON-ready dicts."""
        return [b.model_dump(mode="json") for b in self.budgets]

    def __len__(self) -> int:
        return len(self.budgets)
