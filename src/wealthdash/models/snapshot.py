"""
Financial snapshot — the unit of data the calculators consume.

A snapshot is a plain bundle of entity collections. It can be read from
and written to JSON (or read from YAML); dates are ISO-8601 strings and
enums are their string tags.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from wealthdash.models.financial import BankAccount, Budget, Investment, Sip, Transaction

logger = logging.getLogger("wealthdash.models.snapshot")


class FinancialSnapshot(BaseModel):
    """Everything the dashboard knows about one user at one moment."""

    transactions: list[Transaction] = Field(default_factory=list)
    budgets: list[Budget] = Field(default_factory=list)
    investments: list[Investment] = Field(default_factory=list)
    accounts: list[BankAccount] = Field(default_factory=list)
    sips: list[Sip] = Field(default_factory=list)

    @property
    def has_connected_data(self) -> bool:
        """True once at least one bank account or holding is linked."""
        return bool(self.accounts) or bool(self.investments)

    @classmethod
    def load(cls, path: str | Path) -> FinancialSnapshot:
        """Read a snapshot from a ``.json``, ``.yaml`` or ``.yml`` file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Snapshot file not found: {path}")

        with open(path, encoding="utf-8") as f:
            if path.suffix.lower() in (".yaml", ".yml"):
                data = yaml.safe_load(f) or {}
            else:
                data = json.load(f)

        snapshot = cls.model_validate(data)
        logger.info(
            "Loaded snapshot from %s: %d transactions, %d budgets, %d holdings, %d accounts, %d SIPs",
            path,
            len(snapshot.transactions),
            len(snapshot.budgets),
            len(snapshot.investments),
            len(snapshot.accounts),
            len(snapshot.sips),
        )
        return snapshot

    @classmethod
    def from_json(cls, text: str) -> FinancialSnapshot:
        return cls.model_validate_json(text)

    def to_json(self, indent: int = 2) -> str:
        return self.model_dump_json(indent=indent)

    def save(self, path: str | Path) -> Path:
        """Write the snapshot as JSON."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json() + "\n", encoding="utf-8")
        return path
