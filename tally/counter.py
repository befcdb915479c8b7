"""Counter state and reducer."""
from __future__ import annotations
from typing import NamedTuple, Optional

from .actions import Action, ActionType


class CounterState(NamedTuple):
    """State of a tally counter."""

    count: int = 0


def counter_reducer(state: Optional[CounterState], action: Action) -> CounterState:
    """Compute the next counter state.

    Works with any NamedTuple state that has a ``count`` field; other fields
    are carried over untouched. Unknown actions return ``state`` itself.
    ``count`` is not clamped and may go negative.
    """
    if state is None:
        state = CounterState()

    if action.type == ActionType.ADD:
        return state._replace(count=state.count + 1)

    if action.type == ActionType.SUBTRACT:
        return state._replace(count=state.count - 1)

    if action.type == ActionType.RESET:
        return state._replace(count=0)

    return state
