"""Storage layer for local persistence."""

from .local_storage import LocalStorage

__all__ = ["LocalStorage"]
