"""
Application configuration.
Fixed business constants plus the deployment settings read from the
environment or Streamlit secrets.
"""

from __future__ import annotations
import os
from pathlib import Path
from typing import Optional

from .utils import get_data_dir


# ============================================================================
# Business constants
# ============================================================================
LABOUR_RATE_PER_TYRE = 25
FUEL_RATE_PER_KM = 6.666

# ============================================================================
# Locale / currency
# ============================================================================
LOCALE = "en-IN"
CURRENCY = "INR"
CURRENCY_SYMBOL = "₹"

# ============================================================================
# Storage
# ============================================================================
STORAGE_KEY = "pnl-transactions"
DEFAULT_STORAGE_FILENAME = "local_storage.json"


def get_setting(name: str) -> Optional[str]:
    """Get setting from environment or Streamlit secrets."""
    value = os.environ.get(name)
    if value:
        return value
    try:
        import streamlit as st
        return st.secrets.get(name)
    except Exception:
        return None


def get_storage_path() -> Path:
    """Get local store file path from PNL_STORAGE_PATH or fallback."""
    configured = get_setting("PNL_STORAGE_PATH")
    if configured:
        return Path(configured).expanduser().resolve()

    # Default: project_root/data/local_storage.json
    return (get_data_dir() / DEFAULT_STORAGE_FILENAME).resolve()


def get_log_level() -> str:
    """Get log level name from PNL_LOG_LEVEL (default INFO)."""
    return (get_setting("PNL_LOG_LEVEL") or "INFO").upper()
