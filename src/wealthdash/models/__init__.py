"""Entity records shared by every calculator."""

from wealthdash.models.financial import (
    AccountType,
    AssetClass,
    BankAccount,
    Budget,
    BudgetPeriod,
    Investment,
    PaymentMethod,
    Recurrence,
    RecurrenceFrequency,
    Sip,
    SipAssetType,
    SipFrequency,
    Transaction,
    TransactionType,
)
from wealthdash.models.snapshot import FinancialSnapshot

__all__ = [
    "AccountType",
    "AssetClass",
    "BankAccount",
    "Budget",
    "BudgetPeriod",
    "FinancialSnapshot",
    "Investment",
    "PaymentMethod",
    "Recurrence",
    "RecurrenceFrequency",
    "Sip",
    "SipAssetType",
    "SipFrequency",
    "Transaction",
    "TransactionType",
]
