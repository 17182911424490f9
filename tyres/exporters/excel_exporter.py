"""Excel export functionality."""

from __future__ import annotations
from io import BytesIO
from datetime import datetime
from typing import Sequence
import streamlit as st

from tyres.models import Transaction
from .rows import history_frame


def build_workbook(transactions: Sequence[Transaction]) -> bytes:
    """Serialize history to .xlsx bytes (one sheet, newest first)."""
    import pandas as pd

    buf = BytesIO()
    with pd.ExcelWriter(buf, engine="xlsxwriter") as xw:
        df = history_frame(transactions)
        df.to_excel(xw, index=False, sheet_name="History")
        ws = xw.sheets["History"]
        ws.set_column(0, 0, 26)
        ws.set_column(1, len(df.columns) - 1, 16)
    return buf.getvalue()


def export_to_excel(transactions: Sequence[Transaction]) -> None:
    """Render Excel download button."""
    if not transactions:
        return

    calc_id = datetime.now().strftime("%Y%m%d-%H%M%S")
    st.download_button(
        "Download Excel",
        data=build_workbook(transactions),
        file_name=f"tyre_pnl_{calc_id}.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        use_container_width=True,
    )
