"""
Valuation & Net Worth — account totals, portfolio value, holding gains.

Everything is aggregated in USD. Display conversion, where offered, is
applied to the finished totals via the currency module.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable, Sequence

from wealthdash.analyzers.currency import BASE_CURRENCY, convert_amount
from wealthdash.exceptions import ValidationError
from wealthdash.models.financial import AccountType, AssetClass, BankAccount, Investment

# Assumed starting net worth for a user with no linked accounts or holdings.
DEFAULT_NET_WORTH_BASELINE = 45_000.0

ASSET_ACCOUNT_TYPES = frozenset({AccountType.CHECKING, AccountType.SAVINGS, AccountType.INVESTMENT})
LIABILITY_ACCOUNT_TYPES = frozenset({AccountType.CREDIT_CARD})


@dataclass(frozen=True)
class Valuation:
    """Balance-sheet view of one snapshot, in USD."""

    asset_total: float
    liability_total: float
    portfolio_value: float
    net_worth: float
    has_connected_data: bool


@dataclass(frozen=True)
class HoldingGain:
    gain: float
    gain_percent: float


@dataclass(frozen=True)
class PortfolioSummary:
    """Portfolio totals, expressed in ``currency``."""

    total_value: float
    total_cost: float
    total_gain: float
    gain_percent: float
    currency: str = BASE_CURRENCY


@dataclass(frozen=True)
class AllocationSlice:
    """One slice of an allocation chart."""

    label: str
    value: float
    share: float  # percent of the total, 0-100


def _validate_investment(inv: Investment) -> None:
    if inv.shares < 0:
        raise ValidationError(f"Holding {inv.symbol!r} has negative shares ({inv.shares})")
    if inv.current_price < 0:
        raise ValidationError(f"Holding {inv.symbol!r} has a negative price ({inv.current_price})")
    if inv.avg_cost < 0:
        raise ValidationError(f"Holding {inv.symbol!r} has a negative average cost ({inv.avg_cost})")


def _validate_account(account: BankAccount) -> None:
    if account.balance < 0:
        raise ValidationError(
            f"Account {account.id!r} has a negative balance ({account.balance}); "
            "balances are magnitudes, the account type carries the sign"
        )


def account_totals(accounts: Iterable[BankAccount]) -> tuple[float, float]:
    """Return ``(asset_total, liability_total)`` for a set of accounts."""
    assets = 0.0
    liabilities = 0.0
    for account in accounts:
        _validate_account(account)
        if account.type in LIABILITY_ACCOUNT_TYPES:
            liabilities += account.balance
        elif account.type in ASSET_ACCOUNT_TYPES:
            assets += account.balance
    return assets, liabilities


def portfolio_value(investments: Iterable[Investment]) -> float:
    """Sum of ``shares * current_price`` over all holdings."""
    total = 0.0
    for inv in investments:
        _validate_investment(inv)
        total += inv.shares * inv.current_price
    return total


def compute_valuation(
    accounts: Sequence[BankAccount],
    investments: Sequence[Investment],
    total_income: float,
    total_expense: float,
    baseline: float = DEFAULT_NET_WORTH_BASELINE,
) -> Valuation:
    """
    Compute asset, liability and portfolio totals plus net worth.

    With at least one account or holding ("connected data") net worth is
    ``assets + portfolio - liabilities``. Without any, it falls back to
    ``total_income - total_expense + baseline``.

    Args:
        accounts: Linked bank accounts.
        investments: Portfolio holdings.
        total_income: Income to date, used only by the fallback.
        total_expense: Expenses to date, used only by the fallback.
        baseline: Starting net worth assumed by the fallback.

    Raises:
        ValidationError: A negative balance, share count, price or total.
    """
    if total_income < 0 or total_expense < 0:
        raise ValidationError(
            f"Income and expense totals must be non-negative (got {total_income}, {total_expense})"
        )

    assets, liabilities = account_totals(accounts)
    value = portfolio_value(investments)
    connected = bool(accounts) or bool(investments)

    if connected:
        net_worth = assets + value - liabilities
    else:
        net_worth = total_income - total_expense + baseline

    return Valuation(
        asset_total=assets,
        liability_total=liabilities,
        portfolio_value=value,
        net_worth=net_worth,
        has_connected_data=connected,
    )


def holding_gain(investment: Investment) -> HoldingGain:
    """Unrealized gain of one holding. ``gain_percent`` is 0 when avg cost is 0."""
    _validate_investment(investment)
    diff = investment.current_price - investment.avg_cost
    gain_percent = diff / investment.avg_cost * 100 if investment.avg_cost else 0.0
    return HoldingGain(gain=investment.shares * diff, gain_percent=gain_percent)


def summarize_portfolio(
    investments: Sequence[Investment],
    currency_code: str = BASE_CURRENCY,
) -> PortfolioSummary:
    """Portfolio value, cost and gain, converted to ``currency_code`` after aggregation."""
    total_value = portfolio_value(investments)
    total_cost = sum(inv.shares * inv.avg_cost for inv in investments)
    total_gain = total_value - total_cost
    gain_percent = total_gain / total_cost * 100 if total_cost > 0 else 0.0

    return PortfolioSummary(
        total_value=convert_amount(total_value, currency_code),
        total_cost=convert_amount(total_cost, currency_code),
        total_gain=convert_amount(total_gain, currency_code),
        gain_percent=gain_percent,
        currency=currency_code.strip().upper(),
    )


def _slices(values: dict[str, float], currency_code: str) -> list[AllocationSlice]:
    total = sum(values.values())
    return [
        AllocationSlice(
            label=label,
            value=convert_amount(value, currency_code),
            share=value / total * 100 if total > 0 else 0.0,
        )
        for label, value in values.items()
    ]


def allocation_by_holding(
    investments: Sequence[Investment],
    currency_code: str = BASE_CURRENCY,
) -> list[AllocationSlice]:
    """One slice per holding, labelled by symbol, in portfolio order."""
    values: dict[str, float] = {}
    for inv in investments:
        _validate_investment(inv)
        values[inv.symbol] = values.get(inv.symbol, 0.0) + inv.market_value
    return _slices(values, currency_code)


def allocation_by_type(
    investments: Sequence[Investment],
    currency_code: str = BASE_CURRENCY,
) -> list[AllocationSlice]:
    """One slice per asset class present, largest first."""
    values: dict[AssetClass, float] = defaultdict(float)
    for inv in investments:
        _validate_investment(inv)
        values[inv.type] += inv.market_value
    ordered = dict(sorted(((k.value, v) for k, v in values.items()), key=lambda kv: kv[1], reverse=True))
    return _slices(ordered, currency_code)
