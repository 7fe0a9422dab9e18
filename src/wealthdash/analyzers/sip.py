"""
Systematic Investment Plans — recurring buys and what they commit per month.

Amounts are USD on the records; conversion happens after summing.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Sequence

from wealthdash.analyzers.currency import BASE_CURRENCY, convert_amount
from wealthdash.exceptions import ValidationError
from wealthdash.models.financial import Sip, SipFrequency


@dataclass(frozen=True)
class SipDeduction:
    """An upcoming installment, in the display currency."""

    name: str
    amount: float
    next_date: date


def _check(sip: Sip) -> None:
    if sip.amount < 0:
        raise ValidationError(f"SIP {sip.id!r} has a negative amount ({sip.amount})")


def active_sips(sips: Iterable[Sip]) -> list[Sip]:
    """Plans that are not paused, in input order."""
    result = []
    for sip in sips:
        _check(sip)
        if sip.active:
            result.append(sip)
    return result


def monthly_sip_commitment(sips: Sequence[Sip], currency_code: str = BASE_CURRENCY) -> float:
    """
    Total of active MONTHLY plans, converted to ``currency_code``.

    Daily and weekly plans are not annualised into the figure; only
    plans that bill monthly count.
    """
    total = sum(s.amount for s in active_sips(sips) if s.frequency == SipFrequency.MONTHLY)
    return convert_amount(total, currency_code)


def upcoming_deductions(
    sips: Sequence[Sip],
    currency_code: str = BASE_CURRENCY,
    limit: int = 3,
) -> list[SipDeduction]:
    """The first ``limit`` active plans with their installment in ``currency_code``."""
    return [
        SipDeduction(name=s.name, amount=convert_amount(s.amount, currency_code), next_date=s.next_date)
        for s in active_sips(sips)[:limit]
    ]
