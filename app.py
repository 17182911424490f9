"""
Streamlit entrypoint for the tyre Profit & Loss Calculator.
- Single screen: input form, live results, saved transaction history
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Add project root to Python path FIRST
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import streamlit as st

from services.config import get_log_level
from tyres.ui import calculator_view

# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------
logging.basicConfig(
    level=getattr(logging, get_log_level(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# -----------------------------------------------------------------------------
# Page setup
# -----------------------------------------------------------------------------
st.set_page_config(page_title="Profit & Loss Calculator", layout="wide")

calculator_view()
