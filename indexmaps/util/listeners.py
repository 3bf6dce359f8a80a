"""
Listener List
=============

Ordered, synchronous listener storage shared by maps and collections.

Unlike a set, the list keeps subscription order and allows the same callback
to be attached more than once; each attachment is called once per
notification. Notification iterates over a snapshot, so listeners may
subscribe or unsubscribe while being notified without affecting the current
round.
"""

from typing import Any, Callable, List, Tuple

Listener = Callable[[Any], None]


class ListenerList:
    """Callbacks invoked in attachment order with a single argument."""

    __slots__ = ("_listeners",)

    def __init__(self) -> None:
        self._listeners: List[Listener] = []

    def add(self, callback: Listener) -> None:
        self._listeners.append(callback)

    def remove(self, callback: Listener) -> int:
        """Detach every attachment of ``callback``; return how many were removed."""
        before = len(self._listeners)
        self._listeners = [cb for cb in self._listeners if cb != callback]
        return before - len(self._listeners)

    def clear(self) -> None:
        self._listeners = []

    def snapshot(self) -> Tuple[Listener, ...]:
        return tuple(self._listeners)

    def notify_all(self, value: Any) -> None:
        for listener in self.snapshot():
            listener(value)

    def __contains__(self, callback: object) -> bool:
        return callback in self._listeners

    def __len__(self) -> int:
        return len(self._listeners)

    def __bool__(self) -> bool:
        return bool(self._listeners)
