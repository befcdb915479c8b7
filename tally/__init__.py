"""Tally - a minimal unidirectional state store for Python."""
from .actions import Action, ActionType, add, reset, subtract
from .counter import CounterState, counter_reducer
from .store import (
    Listener,
    Reducer,
    Store,
    Subscription,
    SubscriptionStrategy,
    Unsubscribe,
    combine_reducers,
    create_store,
)

__all__ = [
    "Action",
    "ActionType",
    "CounterState",
    "Listener",
    "Reducer",
    "Store",
    "Subscription",
    "SubscriptionStrategy",
    "Unsubscribe",
    "add",
    "combine_reducers",
    "counter_reducer",
    "create_store",
    "reset",
    "subtract",
]
