"""Transaction statistics with and without locking."""

from __future__ import annotations

import threading


class UnsafeBankStatistics:
    """Counts transactions and sums their amounts without synchronisation."""

    def __init__(self) -> None:
        self._count = 0
        self._total = 0.0

    @property
    def total_transactions(self) -> int:
        return self._count

    @property
    def total_amount(self) -> float:
        return self._total

    def record_transaction(self, amount: float) -> None:
        self._count += 1
        self._total += amount


class SafeBankStatistics:
    """Counts transactions and sums their amounts under a lock."""

    def __init__(self) -> None:
        self._count = 0
        self._total = 0.0
        self._lock = threading.Lock()

    @property
    def total_transactions(self) -> int:
        with self._lock:
            return self._count

    @property
    def total_amount(self) -> float:
        with self._lock:
            return self._total

    def record_transaction(self, amount: float) -> None:
        with self._lock:
            self._count += 1
            self._total += amount