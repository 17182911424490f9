"""Profit and Loss calculator - Pure calculation logic."""

from __future__ import annotations
import math
from functools import lru_cache
from typing import NamedTuple

from services.config import FUEL_RATE_PER_KM, LABOUR_RATE_PER_TYRE
from .parsing import parse_decimal, parse_int


class RawInputs(NamedTuple):
    """The five form fields exactly as typed."""

    num_tyres: str = ""
    purchase_price: str = ""
    sale_price: str = ""
    km_run: str = ""
    generator_cost: str = ""


class ParsedInputs(NamedTuple):
    num_tyres: int
    purchase_price: float
    sale_price: float
    km_run: float
    generator_cost: float


class ProfitResults(NamedTuple):
    total_purchase: float
    total_sale: float
    total_labour: float
    total_fuel: float
    profit_loss: float


def _finite(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def parse_inputs(raw: RawInputs) -> ParsedInputs:
    """Parse every raw field; never raises."""
    return ParsedInputs(
        num_tyres=parse_int(raw.num_tyres),
        purchase_price=parse_decimal(raw.purchase_price),
        sale_price=parse_decimal(raw.sale_price),
        km_run=parse_decimal(raw.km_run),
        generator_cost=parse_decimal(raw.generator_cost),
    )


class ProfitCalculator:
    """Handles tyre batch P&L calculations."""

    @staticmethod
    def calculate(
        num_tyres: int,
        purchase_price: float,
        sale_price: float,
        km_run: float,
        generator_cost: float = 0.0,
    ) -> ProfitResults:
        """
        Calculate the five derived totals.

        Labour is charged per tyre and fuel per km at the fixed rates;
        generator cost is a flat extra. Totals that overflow a float read as 0.
        """
        tyres = float(num_tyres)
        total_purchase = tyres * float(purchase_price)
        total_sale = tyres * float(sale_price)
        total_labour = tyres * LABOUR_RATE_PER_TYRE
        total_fuel = float(km_run) * FUEL_RATE_PER_KM
        profit_loss = (total_sale - total_purchase) - (total_labour + total_fuel + float(generator_cost))

        return ProfitResults(*(_finite(v) for v in (
            total_purchase,
            total_sale,
            total_labour,
            total_fuel,
            profit_loss,
        )))


@lru_cache(maxsize=128)
def derive(raw: RawInputs) -> ProfitResults:
    """Derived totals for a raw input tuple (memoized on the tuple)."""
    return ProfitCalculator.calculate(*parse_inputs(raw))
