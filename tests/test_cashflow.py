"""Tests for cash-flow statistics."""

from datetime import date

import pytest

from wealthdash.analyzers.cashflow import (
    DEFAULT_TAX_RATE,
    deductible_expense_total,
    estimate_tax,
    search_transactions,
    spend_by_payment_method,
    total_expense,
    total_income,
)
from wealthdash.exceptions import ValidationError
from wealthdash.models.financial import PaymentMethod, Transaction, TransactionType


def _txn(txn_id: str, amount: float, kind: TransactionType, method: PaymentMethod = PaymentMethod.CARD,
         description: str = "", category: str = "General") -> Transaction:
    return Transaction(
        id=txn_id,
        date=date(2025, 1, 10),
        description=description,
        amount=amount,
        type=kind,
        category=category,
        payment_method=method,
    )


@pytest.fixture
def transactions() -> list[Transaction]:
    return [
        _txn("1", 3500, TransactionType.INCOME, PaymentMethod.BANK, "Web Design Project", "Freelance"),
        _txn("2", 54.99, TransactionType.EXPENSE, PaymentMethod.CARD, "Adobe Creative Cloud", "Software"),
        _txn("3", 124.5, TransactionType.EXPENSE, PaymentMethod.UPI, "Client Dinner", "Meals"),
        _txn("4", 12.5, TransactionType.EXPENSE, PaymentMethod.CASH, "Coffee Run", "Food"),
        _txn("5", 30, TransactionType.EXPENSE, PaymentMethod.MOBILE_WALLET, "Taxi", "Transport"),
    ]


class TestTotals:
    def test_income(self, transactions: list[Transaction]) -> None:
        assert total_income(transactions) == 3500

    def test_expense(self, transactions: list[Transaction]) -> None:
        assert total_expense(transactions) == pytest.approx(54.99 + 124.5 + 12.5 + 30)

    def test_empty(self) -> None:
        assert total_income([]) == 0.0
        assert total_expense([]) == 0.0

    def test_negative_amount_rejected(self) -> None:
        bad = Transaction.model_construct(
            id="x", date=date(2025, 1, 1), description="", amount=-1.0,
            type=TransactionType.INCOME, category="",
        )
        with pytest.raises(ValidationError):
            total_income([bad])


class TestPaymentBreakdown:
    def test_order_labels_and_zero_buckets(self, transactions: list[Transaction]) -> None:
        rows = spend_by_payment_method(transactions)

        assert [r.label for r in rows] == ["UPI", "CARD", "CASH", "WALLET"]
        assert rows[0].total == 124.5
        assert rows[-1].method == PaymentMethod.MOBILE_WALLET

    def test_income_is_ignored(self) -> None:
        rows = spend_by_payment_method([_txn("1", 100, TransactionType.INCOME, PaymentMethod.BANK)])
        assert rows == []

    def test_negative_amount_rejected(self) -> None:
        bad = Transaction.model_construct(
            id="x", date=date(2025, 1, 10), description="Refund", amount=-5.0,
            type=TransactionType.EXPENSE, category="General", payment_method=PaymentMethod.CARD,
        )
        with pytest.raises(ValidationError):
            spend_by_payment_method([bad])


class TestSearch:
    def test_matches_description(self, transactions: list[Transaction]) -> None:
        assert [t.id for t in search_transactions(transactions, "adobe")] == ["2"]

    def test_matches_category(self, transactions: list[Transaction]) -> None:
        assert [t.id for t in search_transactions(transactions, "MEALS")] == ["3"]

    def test_matches_amount(self, transactions: list[Transaction]) -> None:
        assert [t.id for t in search_transactions(transactions, "3500")] == ["1"]
        assert [t.id for t in search_transactions(transactions, "12.5")] == ["4"]

    def test_empty_query_returns_all(self, transactions: list[Transaction]) -> None:
        assert len(search_transactions(transactions, "")) == len(transactions)

    def test_query_is_not_trimmed(self, transactions: list[Transaction]) -> None:
        assert [t.id for t in search_transactions(transactions, " run")] == ["4"]
        assert search_transactions(transactions, "  ") == []


class TestTaxEstimate:
    def test_flat_rate_on_income(self, transactions: list[Transaction]) -> None:
        assert DEFAULT_TAX_RATE == 0.24
        assert estimate_tax(transactions) == pytest.approx(3500 * 0.24)

    def test_custom_rate(self, transactions: list[Transaction]) -> None:
        assert estimate_tax(transactions, rate=0.1) == pytest.approx(350)
        assert estimate_tax(transactions, rate=0) == 0

    def test_no_income(self) -> None:
        assert estimate_tax([_txn("1", 80, TransactionType.EXPENSE)]) == 0

    @pytest.mark.parametrize("rate", [-0.1, 1.5])
    def test_rate_out_of_range(self, transactions: list[Transaction], rate: float) -> None:
        with pytest.raises(ValidationError):
            estimate_tax(transactions, rate=rate)

    def test_deductible_expenses_only(self, transactions: list[Transaction]) -> None:
        flagged = [
            t.model_copy(update={"is_tax_deductible": True}) for t in transactions if t.id in ("1", "2")
        ]
        # the income record is flagged too but is not an expense
        assert deductible_expense_total(transactions + flagged) == pytest.approx(54.99)
        assert deductible_expense_total(transactions) == 0
