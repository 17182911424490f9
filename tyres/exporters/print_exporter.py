"""Print/HTML export functionality."""

from __future__ import annotations
from datetime import datetime
from html import escape
from typing import Sequence
import streamlit as st
import streamlit.components.v1 as components

from tyres.models import Transaction
from tyres.formatting import format_currency, profit_class


def export_to_print(transactions: Sequence[Transaction]) -> None:
    """Render print button with HTML popup."""
    if not transactions:
        return
    if st.button("Print", use_container_width=True):
        html = generate_print_html(transactions)
        components.html(html, height=0)
        st.toast("Opening print dialog…", icon="🖨️")


def generate_print_html(transactions: Sequence[Transaction]) -> str:
    """Generate HTML for printing."""
    rows_html = "".join(
        f"<tr><td>{escape(t.date)}</td>"
        f"<td style='text-align:right'>{t.numTyres}</td>"
        f"<td style='text-align:right'>{format_currency(t.totalPurchase)}</td>"
        f"<td style='text-align:right'>{format_currency(t.totalSale)}</td>"
        f"<td style='text-align:right' class='{profit_class(t.profitLoss)}'>{format_currency(t.profitLoss)}</td></tr>"
        for t in transactions
    )
    
    return f"""
    <html>
      <head>
        <meta charset="utf-8" />
        <title>Tyre P&amp;L — Transaction History</title>
        <style>
          body {{ font-family: Arial, sans-serif; padding: 18px; }}
          h1 {{ font-size: 18px; margin: 0 0 6px; }}
          .meta {{ color:#666; font-size: 12px; margin-bottom: 10px; }}
          table {{ width:100%; border-collapse:collapse; }}
          th, td {{ border:1px solid #ddd; padding:6px 8px; font-size:12px; }}
          th {{ background:#f5f5f5; text-align:left; }}
          .profit {{ color:#1e8e3e; }}
          .loss {{ color:#d93025; }}
          @media print {{ @page {{ size: A4 portrait; margin: 12mm; }} }}
        </style>
      </head>
      <body>
        <h1>Profit &amp; Loss Calculator</h1>
        <div class="meta">Transaction History • {datetime.now().strftime('%Y-%m-%d %H:%M')}</div>
        <table>
          <thead><tr><th>Date</th><th>Tyres</th><th>Total Purchase</th><th>Total Sale</th><th>P/L</th></tr></thead>
          <tbody>{rows_html}</tbody>
        </table>
        <script>window.onload = () => window.print();</script>
      </body>
    </html>
    """
