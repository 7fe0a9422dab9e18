"""
Financial data models — transactions, budgets, holdings, bank accounts.

All records are frozen: editing a record means building a replacement
with the same ``id`` (``model_copy(update=...)``).
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TransactionType(str, Enum):
    """Direction of a transaction."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class PaymentMethod(str, Enum):
    """How a transaction was paid."""

    CASH = "CASH"
    CARD = "CARD"
    UPI = "UPI"
    BANK = "BANK"
    MOBILE_WALLET = "MOBILE_WALLET"


class RecurrenceFrequency(str, Enum):
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"


class SipFrequency(str, Enum):
    """How often a systematic investment plan buys."""

    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"


class SipAssetType(str, Enum):
    STOCK = "STOCK"
    CRYPTO = "CRYPTO"
    ETF = "ETF"
    MUTUAL_FUND = "MUTUAL_FUND"
    GOLD = "GOLD"
    SILVER = "SILVER"


class BudgetPeriod(str, Enum):
    """Budget periods. Only monthly budgets exist today."""

    MONTHLY = "MONTHLY"


class AssetClass(str, Enum):
    """Kind of investment holding."""

    STOCK = "STOCK"
    CRYPTO = "CRYPTO"
    ETF = "ETF"
    REAL_ESTATE = "REAL_ESTATE"
    GOLD = "GOLD"
    SILVER = "SILVER"


class AccountType(str, Enum):
    """Bank account types. Balances are magnitudes; the type gives the sign."""

    CHECKING = "CHECKING"
    SAVINGS = "SAVINGS"
    CREDIT_CARD = "CREDIT_CARD"
    INVESTMENT = "INVESTMENT"

    @property
    def is_liability(self) -> bool:
        return self is AccountType.CREDIT_CARD


class Recurrence(BaseModel):
    """Repeat rule attached to a transaction."""

    model_config = ConfigDict(frozen=True)

    frequency: RecurrenceFrequency
    end_date: date | None = None


class Transaction(BaseModel):
    """A single income or expense entry."""

    model_config = ConfigDict(frozen=True)

    id: str
    date: date
    description: str = ""
    amount: float = Field(ge=0.0, description="Magnitude in USD; direction comes from ``type``")
    type: TransactionType
    category: str = ""
    payment_method: PaymentMethod = PaymentMethod.CARD
    recurrence: Recurrence | None = None
    upi_id: str | None = None
    is_tax_deductible: bool = False

    @property
    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE

    @property
    def is_income(self) -> bool:
        return self.type == TransactionType.INCOME


class Budget(BaseModel):
    """A monthly spending goal for one free-text category."""

    model_config = ConfigDict(frozen=True)

    id: str
    category: str = Field(min_length=1)
    limit: float = Field(gt=0.0, description="Monthly limit in USD")
    period: BudgetPeriod = BudgetPeriod.MONTHLY


class Investment(BaseModel):
    """A portfolio holding. Prices and cost basis are in USD."""

    model_config = ConfigDict(frozen=True)

    id: str
    symbol: str
    name: str = ""
    shares: float = Field(ge=0.0)
    avg_cost: float = Field(ge=0.0)
    current_price: float = Field(ge=0.0)
    type: AssetClass = AssetClass.STOCK

    @property
    def market_value(self) -> float:
        return self.shares * self.current_price

    @property
    def cost_basis(self) -> float:
        return self.shares * self.avg_cost

    @property
    def unrealized_gain(self) -> float:
        return self.shares * (self.current_price - self.avg_cost)


class BankAccount(BaseModel):
    """A linked bank account."""

    model_config = ConfigDict(frozen=True)

    id: str
    bank_name: str
    account_number: str = Field(description="Masked, usually the last 4 digits")
    type: AccountType
    balance: float = Field(ge=0.0)
    last_synced: datetime | None = None


class Sip(BaseModel):
    """A systematic investment plan: a fixed USD amount invested on a schedule."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    amount: float = Field(ge=0.0, description="USD invested per installment")
    frequency: SipFrequency = SipFrequency.MONTHLY
    next_date: date
    start_date: date | None = None
    active: bool = True
    type: SipAssetType = SipAssetType.ETF
