"""Tally stores."""
from __future__ import annotations
import collections
import contextlib
import enum
import logging
from anyio import Event
from typing import (
    Any,
    AsyncIterator,
    Callable,
    Deque,
    Dict,
    Generator,
    Generic,
    List,
    Optional,
    TypeVar,
)

from .actions import _INIT_ACTION

ActionT = TypeVar("ActionT")
StateT = TypeVar("StateT")

Reducer = Callable[[Optional[StateT], ActionT], StateT]
Listener = Callable[[StateT], None]
Unsubscribe = Callable[[], None]

_logger = logging.getLogger(__name__)


class SubscriptionStrategy(str, enum.Enum):
    """Message strategy to use for an async subscription.

    Props:
        LATEST: Receive the latest state. Guarantees that the store's state
            will match the state in the notification, but may miss transitions.
        EVERY: Receive every state change. Guarantees that you will be notified
            of every state transition, but the store's state may have
            transitioned again by the time the notification is handled.
    """

    LATEST = "latest"
    EVERY = "every"


class Subscription(AsyncIterator[StateT]):
    """An asynchronous iterator of state changes."""

    def __init__(self, strategy: SubscriptionStrategy) -> None:
        self._notification_event = Event()
        self._queue: Deque[StateT] = collections.deque(
            maxlen=1 if strategy == SubscriptionStrategy.LATEST else None
        )

    def _notify(self, next_state: StateT) -> None:
        self._queue.append(next_state)
        self._notification_event.set()

    async def __anext__(self) -> StateT:
        while len(self._queue) == 0:
            await self._notification_event.wait()
            self._notification_event = Event()

        return self._queue.popleft()

    def __aiter__(self) -> AsyncIterator[StateT]:
        return self


class Store(Generic[StateT, ActionT]):
    """A state store.

    The store dispatches a reserved initialization action as soon as it is
    created, so a reducer that supplies its own default state can populate
    the store even when no initial state is given.

    Args:
        reducer: Pure function computing the next state from the current
            state (``None`` if there is none yet) and an action.
        initial_state: Initial state to use in the store.
    """

    state: StateT

    def __init__(
        self,
        reducer: Reducer[StateT, ActionT],
        initial_state: Optional[StateT] = None,
    ) -> None:
        self._reducer = reducer
        self._listeners: List[Listener[StateT]] = []
        self._set_state(initial_state)  # type: ignore[arg-type]
        self.dispatch(_INIT_ACTION)  # type: ignore[arg-type]

        if self.state is None:
            raise TypeError("Initial state must be provided")

    def get_state(self) -> StateT:
        """Get the current state."""
        return self.state

    def dispatch(self, action: ActionT) -> ActionT:
        """Dispatch an action into the store.

        The reducer runs first; the state is only replaced if it returns.
        Every listener registered when the notification pass starts is then
        called with the new state, in subscription order.

        Returns:
            The dispatched action, unchanged.
        """
        next_state = self._reducer(self.state, action)
        self._set_state(next_state)
        _logger.debug("Dispatched %r to %d listener(s)", action, len(self._listeners))

        for listener in list(self._listeners):
            listener(next_state)

        return action

    def subscribe(self, listener: Listener[StateT]) -> Unsubscribe:
        """Register a listener to be called with the new state after each dispatch.

        Subscribing the same listener twice registers it twice.

        Returns:
            A function that removes the first registration of this exact
            listener, by identity. It does nothing if none is left.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            for index, registered in enumerate(self._listeners):
                if registered is listener:
                    del self._listeners[index]
                    _logger.debug("Removed listener %r", listener)
                    return

        return _unsubscribe

    @contextlib.contextmanager
    def subscription(
        self,
        strategy: SubscriptionStrategy = SubscriptionStrategy.LATEST,
    ) -> Generator[Subscription[StateT], None, None]:
        """Create an async subscription to receive notifications of state changes.

        Args:
            strategy: whether to receive the latest state change (default)
                or every state change.

        Returns:
            A context manager wrapping a subscription.
        """
        sub: Subscription[StateT] = Subscription(strategy=strategy)
        unsubscribe = self.subscribe(sub._notify)
        try:
            yield sub
        finally:
            unsubscribe()

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "state":
            raise TypeError("Cannot overwrite state attribute.")
        super().__setattr__(name, value)

    def _set_state(self, value: StateT) -> None:
        super().__setattr__("state", value)


def create_store(
    reducer: Reducer[StateT, ActionT],
    initial_state: Optional[StateT] = None,
) -> Store[StateT, ActionT]:
    """Create a store from a reducer and an optional initial state."""
    return Store(reducer, initial_state)


def combine_reducers(
    combine_states: Callable[..., StateT],
    **reducers: Reducer[Any, ActionT],
) -> Reducer[StateT, ActionT]:
    '''Combine several reducers into one that manages a composite state.

    Args:
        combine_states: A class or factory function that will return
            the computed state when passed the substates by name.
        **reducers: Sub-reducers, by substate name.

    Example:
        ```python
        class AppState(NamedTuple):
            left: CounterState
            right: CounterState


        store = create_store(
            combine_reducers(AppState, left=counter_reducer, right=counter_reducer)
        )
        ```
    '''

    def _combined(state: Optional[StateT], action: ActionT) -> StateT:
        previous: Dict[str, Any] = {}
        substates: Dict[str, Any] = {}

        for name, sub_reducer in reducers.items():
            if state is not None:
                try:
                    previous[name] = getattr(state, name)
                except AttributeError as e:
                    raise TypeError(str(e)) from e
            else:
                previous[name] = None

            substates[name] = sub_reducer(previous[name], action)

        if state is not None and all(
            substates[name] is previous[name] for name in reducers
        ):
            return state

        return combine_states(**substates)

    return _combined
