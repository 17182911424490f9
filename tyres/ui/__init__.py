"""UI components for the tyre P&L calculator."""

from .calculator_view import calculator_view
from .history import history_table

__all__ = ["calculator_view", "history_table"]
