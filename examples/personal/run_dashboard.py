"""
Example: Summarize a personal-finance snapshot.

Run:
    python examples/personal/run_dashboard.py
    python examples/personal/run_dashboard.py INR

Or via CLI:
    wealthdash summary --data examples/personal/snapshot.json --month 2023-11
"""

import sys
from datetime import datetime
from pathlib import Path

from wealthdash import Dashboard
from wealthdash.models import FinancialSnapshot

# Get the directory where this script lives
SCRIPT_DIR = Path(__file__).parent.resolve()
SNAPSHOT_PATH = SCRIPT_DIR / "snapshot.json"


def main() -> None:
    currency = sys.argv[1] if len(sys.argv) > 1 else "USD"

    snapshot = FinancialSnapshot.load(SNAPSHOT_PATH)
    dashboard = Dashboard.from_config(display_currency=currency)
    # The sample data is from November 2023
    summary = dashboard.summarize(snapshot, now=datetime(2023, 11, 15))
    fmt = dashboard.converter.format

    print(f"Net worth:        {fmt(summary.valuation.net_worth)}")
    print(f"Portfolio value:  {fmt(summary.valuation.portfolio_value)}")
    print(f"Portfolio gain:   {summary.portfolio.gain_percent:+.2f}%")
    print(f"Monthly SIPs:     {dashboard.converter.format_converted(summary.display_sip_commitment)}")
    print(f"Estimated tax:    {fmt(summary.estimated_tax)}")
    print()
    print("Budgets this month:")
    for row in summary.budgets:
        flag = "  OVER" if row.is_over else ""
        print(f"  {row.category:10} {row.spent:8.2f} / {row.limit:8.2f}  {row.percentage:5.1f}%{flag}")


if __name__ == "__main__":
    main()
