"""Row builders shared by the history table and the exports."""

from __future__ import annotations
from typing import Any, Dict, List, Sequence

import pandas as pd

from tyres.models import Transaction

EXPORT_COLUMNS = [
    ("date", "Date"),
    ("numTyres", "Tyres"),
    ("purchasePrice", "Purchase Price / Tyre"),
    ("salePrice", "Sale Price / Tyre"),
    ("kmRun", "KM Run"),
    ("generatorCost", "Generator Cost"),
    ("totalPurchase", "Total Purchase"),
    ("totalSale", "Total Sale"),
    ("totalLabour", "Total Labour"),
    ("totalFuel", "Total Fuel"),
    ("profitLoss", "P/L"),
]


def history_rows(transactions: Sequence[Transaction]) -> List[Dict[str, Any]]:
    """Date / Tyres / P/L rows in display order (newest first)."""
    return [
        {"Date": t.date, "Tyres": t.numTyres, "P/L": t.profitLoss}
        for t in transactions
    ]


def history_frame(transactions: Sequence[Transaction]) -> pd.DataFrame:
    """Full-detail frame with one row per transaction, newest first."""
    records = [t.to_dict() for t in transactions]
    df = pd.DataFrame(records, columns=["id"] + [field for field, _ in EXPORT_COLUMNS])
    return df.rename(columns=dict(EXPORT_COLUMNS)).rename(columns={"id": "ID"})
