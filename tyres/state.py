"""
Calculator application state.

Owns the in-progress form inputs (memory only) and the saved history, and
exposes the three lifecycle entry points the view calls:

- on_mount(): load history from the repository once
- on_change(field, value): update one raw input
- on_save(): snapshot the current calculation into history
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from services.repositories import TransactionRepository
from tyres.calculators import ProfitResults, RawInputs, derive, parse_inputs
from tyres.models import Transaction

logger = logging.getLogger(__name__)

INPUT_FIELDS = RawInputs._fields
ZERO_TYRES_WARNING = "Number of tyres must be greater than 0 to save."


@dataclass(frozen=True)
class SaveOutcome:
    ok: bool
    transaction: Optional[Transaction] = None
    warning: Optional[str] = None
    persisted: bool = True


class CalculatorState:
    """State behind one calculator view."""

    def __init__(self, repository: TransactionRepository):
        self.repository = repository
        self.inputs = RawInputs()
        self.transactions: List[Transaction] = []
        self.mounted = False

    @property
    def results(self) -> ProfitResults:
        return derive(self.inputs)

    def on_mount(self) -> None:
        """Load history once; later calls are no-ops."""
        if self.mounted:
            return
        self.transactions = self.repository.load()
        self.mounted = True
        logger.info("Loaded %d saved transactions", len(self.transactions))

    def on_change(self, field: str, value: str) -> None:
        if field not in INPUT_FIELDS:
            raise KeyError(f"Unknown input field: {field}")
        self.inputs = self.inputs._replace(**{field: "" if value is None else str(value)})

    def on_save(self, now: Optional[datetime] = None) -> SaveOutcome:
        """
        Save the current calculation.

        Requires a tyre count above zero; otherwise nothing changes and the
        outcome carries the warning to show.
        """
        parsed = parse_inputs(self.inputs)
        if parsed.num_tyres <= 0:
            return SaveOutcome(ok=False, warning=ZERO_TYRES_WARNING)

        transaction = Transaction.create(parsed, self.results, now=now)
        self.transactions = [transaction] + self.transactions
        self.inputs = RawInputs()

        persisted = self.repository.save(self.transactions)
        return SaveOutcome(ok=True, transaction=transaction, persisted=persisted)
