"""Repository layer - persistence adapters over storage."""

from .transaction_repository import TransactionRepository

__all__ = ["TransactionRepository"]
