"""Calculator state: lifecycle entry points and the save action."""

from __future__ import annotations

import pytest

from tyres.calculators import RawInputs, derive
from tyres.state import ZERO_TYRES_WARNING, CalculatorState

from .conftest import EXAMPLE_INPUTS, fill


def test_initial_state_is_empty(state):
    assert state.inputs == RawInputs()
    assert state.transactions == []
    assert state.results == (0.0, 0.0, 0.0, 0.0, 0.0)


def test_on_change_recomputes_results(state):
    fill(state)
    assert state.results == derive(EXAMPLE_INPUTS)

    state.on_change("generator_cost", "")
    assert state.results.profit_loss == pytest.approx(derive(EXAMPLE_INPUTS).profit_loss + 300)


def test_on_change_rejects_unknown_field(state):
    with pytest.raises(KeyError):
        state.on_change("discount", "5")


@pytest.mark.parametrize("tyres", ["", "0", "abc", "-4"])
def test_save_without_tyres_changes_nothing(state, repository, tyres):
    fill(state, EXAMPLE_INPUTS._replace(num_tyres=tyres))
    before = state.inputs

    outcome = state.on_save()

    assert not outcome.ok
    assert outcome.warning == ZERO_TYRES_WARNING
    assert state.transactions == []
    assert state.inputs == before
    assert repository.load() == []


def test_save_prepends_resets_and_persists(state, repository, fixed_now):
    fill(state)
    outcome = state.on_save(now=fixed_now)

    assert outcome.ok and outcome.persisted
    saved = outcome.transaction
    assert state.transactions == [saved]
    assert state.inputs == RawInputs()
    assert repository.load() == [saved]

    expected = derive(EXAMPLE_INPUTS)
    assert saved.totalPurchase == expected.total_purchase
    assert saved.totalSale == expected.total_sale
    assert saved.totalLabour == expected.total_labour
    assert saved.totalFuel == expected.total_fuel
    assert saved.profitLoss == expected.profit_loss


def test_newest_transaction_comes_first(state, repository):
    fill(state, EXAMPLE_INPUTS._replace(num_tyres="2"))
    first = state.on_save().transaction
    fill(state, EXAMPLE_INPUTS._replace(num_tyres="5"))
    second = state.on_save().transaction

    assert state.transactions == [second, first]
    assert [t.numTyres for t in repository.load()] == [5, 2]


def test_save_keeps_memory_state_when_write_fails(state, repository, monkeypatch):
    monkeypatch.setattr(repository, "save", lambda transactions: False)
    fill(state)

    outcome = state.on_save()

    assert outcome.ok
    assert not outcome.persisted
    assert state.transactions == [outcome.transaction]


def test_mount_loads_history_once(repository, monkeypatch):
    fresh = CalculatorState(repository)
    fill(fresh)
    fresh.on_mount()
    fresh.on_save()

    calls = []
    reopened = CalculatorState(repository)
    monkeypatch.setattr(repository, "load", lambda: calls.append(1) or [])
    reopened.on_mount()
    reopened.on_mount()

    assert calls == [1]


def test_history_survives_restart(repository):
    first = CalculatorState(repository)
    first.on_mount()
    fill(first)
    saved = first.on_save().transaction

    second = CalculatorState(repository)
    second.on_mount()
    assert second.transactions == [saved]
