"""Export modules for transaction history."""

from .excel_exporter import build_workbook, export_to_excel
from .print_exporter import export_to_print, generate_print_html
from .rows import history_frame, history_rows

__all__ = [
    "build_workbook",
    "export_to_excel",
    "export_to_print",
    "generate_print_html",
    "history_frame",
    "history_rows",
]
