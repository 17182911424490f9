"""Transaction history table."""

from __future__ import annotations
from typing import Sequence

import pandas as pd
import streamlit as st

from tyres.exporters import export_to_excel, export_to_print, history_rows
from tyres.models import Transaction
from tyres.formatting import format_currency, profit_class

EMPTY_STATE = "No transactions saved yet."

_CELL_STYLES = {
    "profit": "color: #1e8e3e; font-weight: 600",
    "loss": "color: #d93025; font-weight: 600",
}


def _pl_style(value: float) -> str:
    return _CELL_STYLES[profit_class(value)]


def history_styler(transactions: Sequence[Transaction]):
    """Date / Tyres / P/L table with P/L coloured by sign."""
    df = pd.DataFrame(history_rows(transactions), columns=["Date", "Tyres", "P/L"])
    return (
        df.style
        .format(format_currency, subset=["P/L"])
        .map(_pl_style, subset=["P/L"])
    )


def history_table(transactions: Sequence[Transaction]) -> None:
    """Render the history section, newest first."""
    st.subheader("Transaction History")

    if not transactions:
        st.caption(EMPTY_STATE)
        return

    st.dataframe(
        history_styler(transactions),
        hide_index=True,
        use_container_width=True,
    )

    c1, c2 = st.columns(2)
    with c1:
        export_to_excel(transactions)
    with c2:
        export_to_print(transactions)
