"""Cooperative cancellation for long-running searches."""

import threading

from ..domain.exceptions import SearchCancelledError


class CancellationToken:
    """Thread-safe flag polled by the search engine.

    The engine checks the token at stage boundaries and periodically inside
    the annealing loops; it never interrupts a thread.
    """

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise SearchCancelledError()
