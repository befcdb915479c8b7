"""Tests the counter reducer."""
from __future__ import annotations

import pytest
from typing import List, NamedTuple
from tally import (
    Action,
    ActionType,
    CounterState,
    add,
    counter_reducer,
    create_store,
    reset,
    subtract,
)


class LabeledCount(NamedTuple):
    """Counter state with an extra field."""

    count: int
    label: str


def test_default_state() -> None:
    result = counter_reducer(None, Action(type="UNKNOWN"))
    assert result == CounterState(count=0)


@pytest.mark.parametrize(
    ("action", "expected"),
    [
        (add(), 6),
        (subtract(), 4),
        (reset(), 0),
        (Action(type=ActionType.ADD, payload=100), 6),
    ],
)
def test_transitions(action: Action, expected: int) -> None:
    result = counter_reducer(CounterState(count=5), action)
    assert result == CounterState(count=expected)


def test_unknown_action_returns_same_state() -> None:
    state = CounterState(count=3)
    assert counter_reducer(state, Action(type="MULTIPLY")) is state


def test_subtract_goes_negative() -> None:
    state = counter_reducer(None, subtract())
    state = counter_reducer(state, subtract())
    assert state.count == -2


@pytest.mark.parametrize("action", [add(), subtract(), reset()])
def test_other_fields_preserved(action: Action) -> None:
    state = LabeledCount(count=7, label="visitors")

    result = counter_reducer(state, action)  # type: ignore[arg-type]

    assert isinstance(result, LabeledCount)
    assert result.label == "visitors"


def test_reset_from_any_count() -> None:
    for count in (-10, 0, 1, 999):
        assert counter_reducer(CounterState(count), reset()).count == 0


def test_net_count() -> None:
    actions = [add(), add(), subtract(), add(), subtract(), subtract(), subtract()]
    store = create_store(counter_reducer, CounterState(count=10))

    for action in actions:
        store.dispatch(action)

    expected = 10 + sum(1 if a == add() else -1 for a in actions)
    assert store.get_state().count == expected


def test_tally_scenario() -> None:
    store = create_store(counter_reducer, CounterState(count=0))
    seen: List[int] = []
    store.subscribe(lambda state: seen.append(state.count))

    assert store.get_state().count == 0

    store.dispatch(add())
    store.dispatch(add())
    assert store.get_state().count == 2

    store.dispatch(subtract())
    assert store.get_state().count == 1

    store.dispatch(reset())
    assert store.get_state().count == 0

    assert seen == [1, 2, 1, 0]
