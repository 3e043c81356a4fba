"""Bank accounts with and without locking."""

from __future__ import annotations

import threading

INITIAL_BALANCE = 1000.0


class UnsafeBankAccount:
    """Account whose operations are not protected against concurrent use."""

    def __init__(self, balance: float = INITIAL_BALANCE) -> None:
        self._balance = float(balance)

    @property
    def balance(self) -> float:
        return self._balance

    def deposit(self, amount: float) -> None:
        self._balance += amount

    def withdraw(self, amount: float) -> bool:
        """Take the amount out if the balance covers it; report success."""
        if self._balance >= amount:
            self._balance -= amount
            return True
        return False


class SafeBankAccount:
    """Account whose every operation holds a lock."""

    def __init__(self, balance: float = INITIAL_BALANCE) -> None:
        self._balance = float(balance)
        self._lock = threading.Lock()

    @property
    def balance(self) -> float:
        with self._lock:
            return self._balance

    def deposit(self, amount: float) -> None:
        with self._lock:
            self._balance += amount

    def withdraw(self, amount: float) -> bool:
        """Take the amount out if the balance covers it; report success."""
        with self._lock:
            if self._balance >= amount:
                self._balance -= amount
                return True
            return False