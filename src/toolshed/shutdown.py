"""Owned shutdown sequence for process entry points.

A `ShutdownSequence` collects cleanup callbacks and runs them in reverse order
of registration before the process exits. It is an explicit object created and
held by the entry point rather than module-level state.

Example:
    shutdown = ShutdownSequence()
    cancel = shutdown.push(lambda: print("closing"))
    ...
    shutdown.exit(0)
"""

import itertools
import logging
import threading
from collections.abc import Callable
from typing import NoReturn

import click

logger = logging.getLogger(__name__)


class ShutdownSequence:
    """Thread-safe registry of callbacks to run before the process exits."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ids = itertools.count()
        self._callbacks: dict[int, Callable[[], object]] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._callbacks)

    def push(self, callback: Callable[[], object] | None) -> Callable[[], None]:
        """Register `callback` to run on shutdown.

        Returns:
            A function that removes the callback again. Calling it more than
            once, or after the sequence has run, is a no-op. A ``None``
            callback is not registered and gets a no-op cancel function.
        """
        if callback is None:
            return lambda: None

        with self._lock:
            callback_id = next(self._ids)
            self._callbacks[callback_id] = callback

        def cancel() -> None:
            with self._lock:
                self._callbacks.pop(callback_id, None)

        return cancel

    def run(self) -> None:
        """Run all registered callbacks, most recently registered first.

        Callbacks are removed before they run, so each runs at most once even
        if `run` is called again. They are invoked outside the lock and may
        therefore push or cancel other callbacks.
        """
        with self._lock:
            callbacks = list(self._callbacks.values())
            self._callbacks.clear()

        logger.debug("Running %d shutdown callback(s)", len(callbacks))
        for callback in reversed(callbacks):
            callback()

    def exit(self, code: int = 0) -> NoReturn:
        """Run the registered callbacks, then exit with `code`."""
        self.run()
        raise SystemExit(code)

    def fail(self, message: str, *args: object) -> NoReturn:
        """Write `message` to stderr and exit with code 1.

        When `args` are given, `message` is a ``%``-style format string.
        """
        if args:
            message = message % args
        click.echo(message, err=True)
        self.exit(1)
