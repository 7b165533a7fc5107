"""Plain listener list for views that render store state."""

from __future__ import annotations

import contextlib
from collections.abc import Callable

Listener = Callable[[], None]


class ChangeNotifier:
    """Holds zero-argument listeners and calls them on :meth:`notify_listeners`.

    Notification is synchronous and in registration order. An exception
    from a listener propagates to whoever triggered the change.
    """

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    @property
    def has_listeners(self) -> bool:
        return bool(self._listeners)

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        """Remove one registration of *listener*; unknown listeners are ignored."""
        with contextlib.suppress(ValueError):
            self._listeners.remove(listener)

    def notify_listeners(self) -> None:
        # Copy: a listener may unregister itself.
        for listener in list(self._listeners):
            listener()

    def dispose(self) -> None:
        self._listeners.clear()
