"""Transaction snapshots and their stored form."""

from __future__ import annotations
from datetime import datetime, timezone

import pytest

from tyres.calculators import derive, parse_inputs
from tyres.formatting import profit_class
from tyres.models import Transaction

from .conftest import EXAMPLE_INPUTS


def _example(now):
    return Transaction.create(parse_inputs(EXAMPLE_INPUTS), derive(EXAMPLE_INPUTS), now=now)


def test_create_stamps_id_and_date(fixed_now):
    t = _example(fixed_now)

    assert t.id == "2026-01-05T09:05:03.123Z"
    assert t.date == "5/1/2026"


def test_create_id_is_utc_for_aware_timestamps():
    moment = datetime(2026, 10, 19, 23, 30, tzinfo=timezone.utc)
    t = Transaction.create(parse_inputs(EXAMPLE_INPUTS), derive(EXAMPLE_INPUTS), now=moment)
    assert t.id == "2026-10-19T23:30:00.000Z"


def test_create_copies_inputs_and_totals(fixed_now):
    t = _example(fixed_now)
    results = derive(EXAMPLE_INPUTS)

    assert t.numTyres == 10
    assert t.purchasePrice == 4500.5
    assert t.salePrice == 5200.75
    assert t.kmRun == 150.5
    assert t.generatorCost == 300.0
    assert (t.totalPurchase, t.totalSale, t.totalLabour, t.totalFuel, t.profitLoss) == tuple(results)
    assert profit_class(t.profitLoss) == "profit"


def test_transaction_is_immutable(fixed_now):
    t = _example(fixed_now)
    with pytest.raises(AttributeError):
        t.numTyres = 3


def test_dict_uses_stored_field_names(fixed_now):
    data = _example(fixed_now).to_dict()
    assert list(data) == [
        "id", "date", "numTyres", "purchasePrice", "salePrice", "kmRun",
        "generatorCost", "totalPurchase", "totalSale", "totalLabour",
        "totalFuel", "profitLoss",
    ]


def test_from_dict_restores_transaction(fixed_now):
    t = _example(fixed_now)
    assert Transaction.from_dict(t.to_dict()) == t


def test_from_dict_defaults_missing_generator_cost(fixed_now):
    data = _example(fixed_now).to_dict()
    del data["generatorCost"]
    assert Transaction.from_dict(data).generatorCost == 0.0


@pytest.mark.parametrize(
    "change",
    [
        {"numTyres": "10"},
        {"numTyres": 2.5},
        {"profitLoss": None},
        {"id": 17},
        {"totalSale": True},
    ],
)
def test_from_dict_rejects_incompatible_fields(fixed_now, change):
    data = {**_example(fixed_now).to_dict(), **change}
    with pytest.raises((TypeError, ValueError)):
        Transaction.from_dict(data)


def test_from_dict_rejects_missing_fields(fixed_now):
    data = _example(fixed_now).to_dict()
    del data["totalFuel"]
    with pytest.raises(KeyError):
        Transaction.from_dict(data)


@pytest.mark.parametrize("field", ["numTyres", "profitLoss", "totalFuel"])
@pytest.mark.parametrize("value", [float("inf"), float("nan"), 10 ** 400])
def test_from_dict_rejects_non_finite_numbers(fixed_now, field, value):
    data = {**_example(fixed_now).to_dict(), field: value}
    with pytest.raises(ValueError):
        Transaction.from_dict(data)
