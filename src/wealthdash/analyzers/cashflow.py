"""
Cash-flow statistics — income/expense totals and spend by payment method.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from wealthdash.exceptions import ValidationError
from wealthdash.models.financial import PaymentMethod, Transaction, TransactionType

# Display order for the payment-method breakdown
PAYMENT_METHOD_ORDER = (
    PaymentMethod.UPI,
    PaymentMethod.CARD,
    PaymentMethod.CASH,
    PaymentMethod.BANK,
    PaymentMethod.MOBILE_WALLET,
)

_PAYMENT_LABELS = {PaymentMethod.MOBILE_WALLET: "WALLET"}

# Flat rate applied to all income for the rough tax estimate
DEFAULT_TAX_RATE = 0.24


@dataclass(frozen=True)
class PaymentBreakdown:
    method: PaymentMethod
    label: str
    total: float


def _check_amount(txn: Transaction) -> None:
    if txn.amount < 0:
        raise ValidationError(f"Transaction {txn.id!r} has a negative amount ({txn.amount})")


def _sum(transactions: Iterable[Transaction], kind: TransactionType) -> float:
    total = 0.0
    for txn in transactions:
        _check_amount(txn)
        if txn.type == kind:
            total += txn.amount
    return total


def total_income(transactions: Iterable[Transaction]) -> float:
    return _sum(transactions, TransactionType.INCOME)


def total_expense(transactions: Iterable[Transaction]) -> float:
    return _sum(transactions, TransactionType.EXPENSE)


def spend_by_payment_method(transactions: Sequence[Transaction]) -> list[PaymentBreakdown]:
    """Expense totals per payment method; methods with no spend are omitted."""
    totals = {method: 0.0 for method in PAYMENT_METHOD_ORDER}
    for txn in transactions:
        _check_amount(txn)
        if txn.is_expense:
            totals[txn.payment_method] += txn.amount

    return [
        PaymentBreakdown(method=method, label=_PAYMENT_LABELS.get(method, method.value), total=total)
        for method, total in totals.items()
        if total > 0
    ]


def estimate_tax(transactions: Iterable[Transaction], rate: float = DEFAULT_TAX_RATE) -> float:
    """
    Rough tax due: every INCOME amount is taxable at one flat ``rate``.

    Deductions are not subtracted; see :func:`deductible_expense_total`.

    Raises:
        ValidationError: ``rate`` outside [0, 1] or a negative amount.
    """
    if not 0 <= rate <= 1:
        raise ValidationError(f"Tax rate must be between 0 and 1, got {rate}")
    return total_income(transactions) * rate


def deductible_expense_total(transactions: Iterable[Transaction]) -> float:
    """Sum of expenses flagged ``is_tax_deductible``."""
    total = 0.0
    for txn in transactions:
        _check_amount(txn)
        if txn.is_expense and txn.is_tax_deductible:
            total += txn.amount
    return total


def search_transactions(transactions: Sequence[Transaction], query: str) -> list[Transaction]:
    """
    Case-insensitive substring search over description, category and amount.

    The query is used as typed, surrounding spaces included. An empty
    query matches everything.
    """
    needle = query.lower()
    if not needle:
        return list(transactions)
    return [
        txn for txn in transactions
        if needle in txn.description.lower()
        or needle in txn.category.lower()
        or needle in _amount_text(txn.amount)
    ]


def _amount_text(amount: float) -> str:
    # 1200.0 -> "1200", 12.5 -> "12.5"
    amount = float(amount)
    return str(int(amount)) if amount.is_integer() else repr(amount)
