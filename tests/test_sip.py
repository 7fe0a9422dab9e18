"""Tests for systematic investment plans."""

from datetime import date

import pytest

from wealthdash.analyzers.sip import active_sips, monthly_sip_commitment, upcoming_deductions
from wealthdash.exceptions import ConfigurationError, ValidationError
from wealthdash.models.financial import Sip, SipFrequency


def _sip(sip_id: str, amount: float, frequency: SipFrequency = SipFrequency.MONTHLY,
         active: bool = True, name: str = "") -> Sip:
    return Sip(
        id=sip_id,
        name=name or f"Plan {sip_id}",
        amount=amount,
        frequency=frequency,
        next_date=date(2023, 11, 15),
        active=active,
    )


@pytest.fixture
def sips() -> list[Sip]:
    return [
        _sip("1", 500, name="Vanguard S&P 500"),
        _sip("2", 50, SipFrequency.WEEKLY, name="Bitcoin DCA"),
        _sip("3", 200, active=False, name="Paused Gold"),
        _sip("4", 10, SipFrequency.DAILY),
        _sip("5", 75),
    ]


class TestMonthlyCommitment:
    def test_only_active_monthly_plans(self, sips: list[Sip]) -> None:
        assert monthly_sip_commitment(sips) == 575

    def test_converted_after_summing(self, sips: list[Sip]) -> None:
        assert monthly_sip_commitment(sips, "INR") == pytest.approx(575 * 83.5)

    def test_empty(self) -> None:
        assert monthly_sip_commitment([], "EUR") == 0.0

    def test_unknown_currency(self, sips: list[Sip]) -> None:
        with pytest.raises(ConfigurationError):
            monthly_sip_commitment(sips, "XYZ")

    def test_negative_amount_rejected(self) -> None:
        bad = Sip.model_construct(id="x", name="Bad", amount=-5.0, frequency=SipFrequency.MONTHLY,
                                  next_date=date(2023, 11, 15), active=True)
        with pytest.raises(ValidationError):
            monthly_sip_commitment([bad])


class TestUpcomingDeductions:
    def test_first_three_active_plans(self, sips: list[Sip]) -> None:
        rows = upcoming_deductions(sips)
        assert [r.name for r in rows] == ["Vanguard S&P 500", "Bitcoin DCA", "Plan 4"]
        assert rows[0].next_date == date(2023, 11, 15)

    def test_amounts_in_display_currency(self, sips: list[Sip]) -> None:
        rows = upcoming_deductions(sips, "GBP")
        assert rows[0].amount == pytest.approx(500 * 0.79)
        assert rows[1].amount == pytest.approx(50 * 0.79)

    def test_custom_limit(self, sips: list[Sip]) -> None:
        assert len(upcoming_deductions(sips, limit=10)) == 4

    def test_active_sips_keeps_order(self, sips: list[Sip]) -> None:
        assert [s.id for s in active_sips(sips)] == ["1", "2", "4", "5"]
