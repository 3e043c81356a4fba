"""A cashier that runs a fixed series of deposits and withdrawals."""

from __future__ import annotations

import random

from .logger import Logger

REFERENCE_AMOUNT = 100.0
DEPOSIT_RANGE = (50.0, 500.0)
WITHDRAW_RANGE = (10.0, 200.0)
ROUNDS = 50


class Cashier:
    """Serves one account: each round deposits, then withdraws, and logs both.

    In reference mode every amount is ``REFERENCE_AMOUNT``; otherwise deposits
    and withdrawals are drawn uniformly from their ranges.
    """

    def __init__(
        self,
        logger: Logger,
        reference: bool = False,
        *,
        rng: random.Random | None = None,
        rounds: int = ROUNDS,
    ) -> None:
        self._logger = logger
        self._reference = reference
        self._rng = rng
        self._rounds = rounds

    def _amount(self, rng: random.Random, bounds: tuple[float, float]) -> float:
        return REFERENCE_AMOUNT if self._reference else rng.uniform(*bounds)

    def work(self, account, statistics) -> None:
        """Run all rounds against the account, recording each transaction."""
        rng = self._rng if self._rng is not None else random.Random()
        for i in range(self._rounds):
            amount = self._amount(rng, DEPOSIT_RANGE)
            account.deposit(amount)
            statistics.record_transaction(amount)
            self._logger.write(
                f"{i:03d} deposite: {amount:.2f}, balance: {account.balance:.2f}\n"
            )

            amount = self._amount(rng, WITHDRAW_RANGE)
            success = account.withdraw(amount)
            statistics.record_transaction(amount)
            self._logger.write(
                f"    withdraw: {amount:.2f}, success: {str(success).lower()}, "
                f"balance: {account.balance:.2f}\n\n"
            )
        self._logger.flush()