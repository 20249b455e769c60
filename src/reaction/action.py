"""Action — a callable that fans its arguments out to subscribers."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any

from reaction.errors import InvalidListenerError, ListenerNotFoundError

logger = logging.getLogger(__name__)

Listener = Callable[..., Any]


class Subscription:
    """Handle returned by ``Action.subscribe``. Identifies one subscriber entry."""

    __slots__ = ("action", "listener", "active")

    def __init__(self, action: Action, listener: Listener) -> None:
        self.action = action
        self.listener = listener
        self.active = True

    def unsubscribe(self) -> None:
        """Remove this entry from its action. Idempotent."""
        self.action.unsubscribe(self)

    def __repr__(self) -> str:
        state = "active" if self.active else "removed"
        return f"<Subscription {self.listener!r} on {self.action!r} ({state})>"


class Action:
    """Dispatch point for one category of event.

    Calling the action invokes every subscriber synchronously, in
    subscription order, with exactly the positional arguments given.

    Dispatch semantics:

    - The subscriber sequence is snapshotted when a dispatch begins.
      Listeners added during the dispatch are first called on the next one;
      listeners removed during the dispatch still receive the current one.
    - A listener may call the action again. The nested dispatch takes its
      own snapshot and runs to completion before the outer one resumes.
    - An exception raised by a listener propagates to the caller unchanged
      and the remaining listeners of that dispatch are not called.

    Actions compare by identity.
    """

    def __init__(self, name: str | None = None) -> None:
        self.name = name
        self._lock = threading.Lock()
        self._subscriptions: list[Subscription] = []

    # --- Subscriptions ---

    def subscribe(self, listener: Listener) -> Subscription:
        """Append a listener. The same listener may be subscribed more than once."""
        if not callable(listener):
            raise InvalidListenerError(f"Listener must be callable, got {type(listener).__name__}")
        subscription = Subscription(self, listener)
        with self._lock:
            self._subscriptions.append(subscription)
        return subscription

    def unsubscribe(self, target: Subscription | Listener) -> None:
        """Remove one subscriber entry.

        ``target`` is either a handle from ``subscribe`` or the listener
        itself. A handle removes exactly its own entry and is a no-op once
        already removed. A listener removes its earliest remaining entry.
        Raises ListenerNotFoundError for a handle issued by another action,
        or for a listener with no remaining entry.
        """
        if isinstance(target, Subscription):
            self._remove_subscription(target)
        else:
            self._remove_listener(target)

    def _remove_subscription(self, subscription: Subscription) -> None:
        if subscription.action is not self:
            raise ListenerNotFoundError(f"{subscription!r} was not issued by {self!r}")
        with self._lock:
            if not subscription.active:
                return
            self._subscriptions.remove(subscription)
            subscription.active = False

    def _remove_listener(self, listener: object) -> None:
        with self._lock:
            for subscription in self._subscriptions:
                if subscription.listener == listener:
                    self._subscriptions.remove(subscription)
                    subscription.active = False
                    return
        raise ListenerNotFoundError(f"{listener!r} is not subscribed to {self!r}")

    @property
    def listeners(self) -> tuple[Listener, ...]:
        """Currently subscribed listeners, in subscription order."""
        with self._lock:
            return tuple(subscription.listener for subscription in self._subscriptions)

    def has_listener(self, listener: object) -> bool:
        return listener in self.listeners

    def __len__(self) -> int:
        with self._lock:
            return len(self._subscriptions)

    def __bool__(self) -> bool:
        # Actions are always truthy, even with no subscribers.
        return True

    # --- Dispatch ---

    def invoke(self, *args: Any) -> None:
        """Call every current listener with ``args``."""
        with self._lock:
            snapshot = [subscription.listener for subscription in self._subscriptions]
        logger.debug("Dispatching %r to %d listener(s)", self, len(snapshot))
        for listener in snapshot:
            listener(*args)

    def __call__(self, *args: Any) -> None:
        self.invoke(*args)

    def __repr__(self) -> str:
        label = self.name or hex(id(self))
        return f"<Action {label}>"
