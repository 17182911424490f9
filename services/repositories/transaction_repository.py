"""Transaction repository - loads and saves the saved-calculation history."""

from __future__ import annotations
import json
import logging
from typing import List, Sequence

from services.config import STORAGE_KEY
from services.storage import LocalStorage
from tyres.models import Transaction

logger = logging.getLogger(__name__)


class TransactionRepository:
    """Persists the full transaction history under one storage key."""

    def __init__(self, storage: LocalStorage, key: str = STORAGE_KEY):
        self.storage = storage
        self.key = key

    def load(self) -> List[Transaction]:
        """
        Load saved history, newest first.

        Returns:
            List of transactions; empty when nothing is stored or the
            stored payload cannot be read.
        """
        try:
            raw = self.storage.get_item(self.key)
        except OSError as e:
            logger.error("Failed to load transactions from local store: %s", e)
            return []

        if not raw:
            return []

        try:
            payload = json.loads(raw)
            if not isinstance(payload, list):
                raise TypeError(f"expected a list, got {type(payload).__name__}")
            return [Transaction.from_dict(item) for item in payload]
        except (ValueError, TypeError, KeyError, OverflowError, RecursionError) as e:
            logger.error("Failed to load transactions from local store: %s", e)
            return []

    def save(self, transactions: Sequence[Transaction]) -> bool:
        """
        Overwrite stored history with the full sequence.

        Returns:
            True on success, False if the write failed (already logged)
        """
        try:
            body = json.dumps([t.to_dict() for t in transactions], ensure_ascii=False)
            self.storage.set_item(self.key, body)
        except (OSError, TypeError, ValueError):
            logger.exception("Failed to save transactions to local store")
            return False

        logger.debug("Saved %d transactions under %r", len(transactions), self.key)
        return True
