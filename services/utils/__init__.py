"""Utility functions."""

from .id_generator import generate_transaction_id, format_display_date
from .path_utils import get_project_root, get_data_dir

__all__ = ["generate_transaction_id", "format_display_date", "get_project_root", "get_data_dir"]
