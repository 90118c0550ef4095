"""Scoped registration of global dismiss listeners."""

from __future__ import annotations

import logging
from contextlib import ExitStack
from typing import Callable

logger = logging.getLogger(__name__)

# Registers the global listeners and returns the function that removes them.
Subscriber = Callable[[], Callable[[], None]]


def _no_subscription() -> Callable[[], None]:
    return lambda: None


class DismissListenerScope:
    """Holds the outside-click and Escape listeners of one open flyout.

    The listeners are acquired when the flyout opens and released on every
    exit path. Acquiring an already held scope is a no-op, so repeated
    open requests never stack duplicate listeners.

    Usable as a context manager:

        with scope:
            ...  # listeners registered
        # listeners released
    """

    def __init__(self, subscribe: Subscriber | None = None) -> None:
        """Initialize the scope.

        Args:
            subscribe: Callable registering the global listeners and returning
                their remover. Defaults to a subscription that does nothing.
        """
        self._subscribe = subscribe or _no_subscription
        self._stack: ExitStack | None = None

    @property
    def active(self) -> bool:
        """True while the listeners are registered."""
        return self._stack is not None

    def acquire(self) -> None:
        """Register the listeners unless they already are."""
        if self._stack is not None:
            return
        stack = ExitStack()
        stack.callback(self._subscribe())
        self._stack = stack
        logger.debug("Dismiss listeners acquired")

    def release(self) -> None:
        """Unregister the listeners; safe to call when not held."""
        stack, self._stack = self._stack, None
        if stack is None:
            return
        stack.close()
        logger.debug("Dismiss listeners released")

    def __enter__(self) -> DismissListenerScope:
        self.acquire()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()
