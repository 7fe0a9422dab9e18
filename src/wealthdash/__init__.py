"""
WealthDash — personal-finance aggregation engine.

Budgets, net worth, portfolio valuation and display-currency conversion
computed from plain in-memory snapshots.
"""

__version__ = "0.1.0"
__all__ = ["Dashboard"]

from wealthdash.dashboard import Dashboard  # noqa: E402
