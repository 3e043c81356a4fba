"""Runs cashiers concurrently, one thread each."""

from __future__ import annotations

import threading
from types import TracebackType


class Bank:
    """Starts a thread per assigned cashier and joins them on request.

    Used as a context manager, it waits for all cashiers on exit.
    """

    def __init__(self) -> None:
        self._threads: list[threading.Thread] = []

    def __enter__(self) -> Bank:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.wait_all()

    def assign(self, cashier, account, statistics) -> None:
        """Start the cashier working on the account in a new thread."""
        thread = threading.Thread(target=cashier.work, args=(account, statistics))
        thread.start()
        self._threads.append(thread)

    def wait_all(self) -> None:
        """Join every running cashier thread and forget them."""
        for thread in self._threads:
            thread.join()
        self._threads.clear()