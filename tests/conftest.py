"""Shared fixtures for the calculator tests."""

from __future__ import annotations
from datetime import datetime

import pytest

from services.repositories import TransactionRepository
from services.storage import LocalStorage
from tyres.calculators import RawInputs
from tyres.state import CalculatorState


EXAMPLE_INPUTS = RawInputs(
    num_tyres="10",
    purchase_price="4500.50",
    sale_price="5200.75",
    km_run="150.5",
    generator_cost="300",
)


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(tmp_path / "data" / "local_storage.json")


@pytest.fixture
def repository(storage):
    return TransactionRepository(storage)


@pytest.fixture
def state(repository):
    s = CalculatorState(repository)
    s.on_mount()
    return s


@pytest.fixture
def fixed_now():
    return datetime(2026, 1, 5, 9, 5, 3, 123456)


def fill(state: CalculatorState, raw: RawInputs = EXAMPLE_INPUTS) -> None:
    for field, value in raw._asdict().items():
        state.on_change(field, value)
