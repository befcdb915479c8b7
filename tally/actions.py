"""Tally actions."""
from __future__ import annotations
import enum
from typing import Any, NamedTuple


class ActionType(str, enum.Enum):
    """Kinds of action understood by the counter reducer.

    Props:
        ADD: Increment the count by one.
        SUBTRACT: Decrement the count by one.
        RESET: Set the count back to zero.
    """

    ADD = "ADD"
    SUBTRACT = "SUBTRACT"
    RESET = "RESET"


class _StoreActionType(str, enum.Enum):
    INIT = "@@INIT"


class Action(NamedTuple):
    """A request to transition the store's state."""

    type: Any
    payload: Any = None


# dispatched once by every store on construction
_INIT_ACTION = Action(type=_StoreActionType.INIT)


def add() -> Action:
    """Create an ADD action."""
    return Action(type=ActionType.ADD)


def subtract() -> Action:
    """Create a SUBTRACT action."""
    return Action(type=ActionType.SUBTRACT)


def reset() -> Action:
    """Create a RESET action."""
    return Action(type=ActionType.RESET)
