"""
Calculator View
===============

Input form, live results panel and saved history for the tyre P&L
calculator.

Session keys:
- pnl_state: CalculatorState for this browser session
- pnl_<field>: text input widgets, one per raw input field
- pnl_flash: message left by the save callback for the next render
"""

from __future__ import annotations
from typing import Optional

import streamlit as st

from services.config import get_storage_path
from services.repositories import TransactionRepository
from services.storage import LocalStorage
from tyres.calculators import ProfitResults
from tyres.state import INPUT_FIELDS, CalculatorState
from tyres.formatting import format_currency, profit_class
from .history import history_table

STATE_KEY = "pnl_state"
FLASH_KEY = "pnl_flash"

# field -> (label, placeholder)
FIELD_LABELS = {
    "num_tyres": ("Number of Tyres", "e.g., 10"),
    "purchase_price": ("Purchase Price per Tyre", "e.g., 4500.50"),
    "sale_price": ("Sale Price per Tyre", "e.g., 5200.75"),
    "km_run": ("KM Run", "e.g., 150.5"),
    "generator_cost": ("Generator Cost (Optional)", "e.g., 300"),
}

_MARKDOWN_COLOURS = {"profit": "green", "loss": "red"}


def _widget_key(field: str) -> str:
    return f"pnl_{field}"


def _get_state() -> CalculatorState:
    """Create the session's state on first render and load history once."""
    state: Optional[CalculatorState] = st.session_state.get(STATE_KEY)
    if state is None:
        repository = TransactionRepository(LocalStorage(get_storage_path()))
        state = CalculatorState(repository)
        st.session_state[STATE_KEY] = state
    state.on_mount()
    return state


# ============================================================================
# CALLBACKS
# ============================================================================

def _handle_change(field: str) -> None:
    state: CalculatorState = st.session_state[STATE_KEY]
    state.on_change(field, st.session_state.get(_widget_key(field), ""))


def _handle_save() -> None:
    state: CalculatorState = st.session_state[STATE_KEY]
    outcome = state.on_save()

    if not outcome.ok:
        st.session_state[FLASH_KEY] = ("warning", outcome.warning)
        return

    for field in INPUT_FIELDS:
        st.session_state[_widget_key(field)] = ""

    if outcome.persisted:
        st.session_state[FLASH_KEY] = ("success", "Transaction saved.")
    else:
        st.session_state[FLASH_KEY] = (
            "info",
            "Transaction saved for this session, but it could not be written to local storage.",
        )


# ============================================================================
# RENDERING
# ============================================================================

def _render_flash() -> None:
    flash = st.session_state.pop(FLASH_KEY, None)
    if not flash:
        return
    kind, message = flash
    if kind == "warning":
        st.warning(message)
    elif kind == "success":
        st.toast(message, icon="✅")
    else:
        st.info(message)


def _render_form(state: CalculatorState) -> None:
    st.subheader("New Calculation")

    for field in INPUT_FIELDS:
        label, placeholder = FIELD_LABELS[field]
        key = _widget_key(field)
        st.session_state.setdefault(key, getattr(state.inputs, field))
        st.text_input(
            label,
            key=key,
            placeholder=placeholder,
            on_change=_handle_change,
            args=(field,),
        )

    st.button(
        "Save Transaction",
        key="pnl_save",
        type="primary",
        on_click=_handle_save,
        use_container_width=True,
    )


def _render_results(results: ProfitResults) -> None:
    st.subheader("Current Results")

    st.metric("Total Purchase", format_currency(results.total_purchase))
    st.metric("Total Sale", format_currency(results.total_sale))
    st.metric("Total Labour", format_currency(results.total_labour))
    st.metric("Total Fuel", format_currency(results.total_fuel))

    st.markdown("---")
    colour = _MARKDOWN_COLOURS[profit_class(results.profit_loss)]
    st.markdown("**Profit / Loss**")
    st.markdown(f"### :{colour}[{format_currency(results.profit_loss)}]")


def calculator_view() -> None:
    """Render the whole calculator: form, results and history."""
    state = _get_state()

    st.title("Profit & Loss Calculator")
    _render_flash()

    form_col, results_col = st.columns(2)
    with form_col:
        _render_form(state)
    with results_col:
        _render_results(state.results)

    st.markdown("---")
    history_table(state.transactions)
