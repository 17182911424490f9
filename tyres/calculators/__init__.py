"""Calculator modules for tyre P&L computations."""

from .parsing import parse_decimal, parse_int
from .profit_calculator import (
    ParsedInputs,
    ProfitCalculator,
    ProfitResults,
    RawInputs,
    derive,
    parse_inputs,
)

__all__ = [
    "parse_decimal",
    "parse_int",
    "ParsedInputs",
    "ProfitCalculator",
    "ProfitResults",
    "RawInputs",
    "derive",
    "parse_inputs",
]
