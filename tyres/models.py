"""Transaction record - one saved profit/loss calculation."""

from __future__ import annotations
import math
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, Optional

from services.utils import format_display_date, generate_transaction_id

if TYPE_CHECKING:
    from tyres.calculators import ParsedInputs, ProfitResults


_NUMBER_FIELDS = (
    "purchasePrice",
    "salePrice",
    "kmRun",
    "totalPurchase",
    "totalSale",
    "totalLabour",
    "totalFuel",
    "profitLoss",
)


def _number(data: Dict[str, Any], name: str) -> float:
    value = data[name]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}")
    try:
        number = float(value)
    except OverflowError:
        raise ValueError(f"{name} is out of range") from None
    if not math.isfinite(number):
        raise ValueError(f"{name} must be finite, got {number}")
    return number


@dataclass(frozen=True)
class Transaction:
    id: str
    date: str
    numTyres: int
    purchasePrice: float
    salePrice: float
    kmRun: float
    generatorCost: float
    totalPurchase: float
    totalSale: float
    totalLabour: float
    totalFuel: float
    profitLoss: float

    @staticmethod
    def create(
        inputs: "ParsedInputs",
        results: "ProfitResults",
        now: Optional[datetime] = None,
    ) -> "Transaction":
        """Snapshot parsed inputs and their derived totals, stamped with now."""
        return Transaction(
            id=generate_transaction_id(now),
            date=format_display_date(now),
            numTyres=int(inputs.num_tyres),
            purchasePrice=inputs.purchase_price,
            salePrice=inputs.sale_price,
            kmRun=inputs.km_run,
            generatorCost=inputs.generator_cost,
            totalPurchase=results.total_purchase,
            totalSale=results.total_sale,
            totalLabour=results.total_labour,
            totalFuel=results.total_fuel,
            profitLoss=results.profit_loss,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Transaction":
        """
        Rebuild a transaction from its stored form.

        Raises:
            TypeError / ValueError / KeyError: payload has an incompatible shape
        """
        if not isinstance(data, dict):
            raise TypeError(f"transaction must be an object, got {type(data).__name__}")

        for name in ("id", "date"):
            if not isinstance(data[name], str):
                raise TypeError(f"{name} must be a string")

        num_tyres = _number(data, "numTyres")
        if not num_tyres.is_integer():
            raise ValueError(f"numTyres must be a whole number, got {num_tyres}")

        generator_cost = data.get("generatorCost")
        numbers = {name: _number(data, name) for name in _NUMBER_FIELDS}

        return Transaction(
            id=data["id"],
            date=data["date"],
            numTyres=int(num_tyres),
            generatorCost=_number(data, "generatorCost") if generator_cost is not None else 0.0,
            **numbers,
        )
