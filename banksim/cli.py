"""Command-line bank simulation: cashiers sharing one account."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import NamedTuple, Sequence

from .accounts import SafeBankAccount, UnsafeBankAccount
from .bank import Bank
from .cashier import Cashier
from .logger import Logger
from .statistics import SafeBankStatistics, UnsafeBankStatistics

REFERENCE_FLAG = "--ref"
UNSAFE_FLAG = "--unsafe"
DEFAULT_LOG_DIR = "build"
DEFAULT_CASHIERS = 5


class Simulation(NamedTuple):
    initial_balance: float
    account: SafeBankAccount | UnsafeBankAccount
    statistics: SafeBankStatistics | UnsafeBankStatistics


def is_reference_mode(argv: Sequence[str]) -> bool:
    """Whether the reference flag is among the arguments (program name excluded)."""
    return REFERENCE_FLAG in argv


def run_simulation(
    safe: bool = True,
    reference: bool = False,
    log_dir: str | Path = DEFAULT_LOG_DIR,
    cashiers: int = DEFAULT_CASHIERS,
) -> Simulation:
    """Let the cashiers work on one shared account and return the outcome."""
    if cashiers < 0:
        raise ValueError(f"number of cashiers must not be negative: {cashiers}")
    account = SafeBankAccount() if safe else UnsafeBankAccount()
    statistics = SafeBankStatistics() if safe else UnsafeBankStatistics()
    initial_balance = account.balance

    mode = "safe" if safe else "unsafe"
    directory = Path(log_dir)
    directory.mkdir(parents=True, exist_ok=True)

    with Bank() as bank:
        for number in range(1, cashiers + 1):
            logger = Logger(directory / f"cachier-{mode}-{number}.log")
            bank.assign(Cashier(logger, reference), account, statistics)

    return Simulation(initial_balance, account, statistics)


def format_report(safe: bool, initial_balance: float, account, statistics) -> str:
    """The summary printed after a simulation."""
    title, adverb = ("Safe", "safely") if safe else ("Unsafe", "unsafely")
    return (
        f"=== Bank Simulation Results ({title}) ===\n"
        f"Initial balance: {initial_balance:.2f}\n"
        f"Final balance: {account.balance:.2f}\n"
        f"Total transactions: {statistics.total_transactions}\n"
        f"Total transaction amount: {statistics.total_amount:.2f}\n"
        f"All cashiers completed work {adverb}!"
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    safe = UNSAFE_FLAG not in args
    result = run_simulation(safe, is_reference_mode(args), DEFAULT_LOG_DIR, DEFAULT_CASHIERS)
    print(format_report(safe, *result))
    return 0


if __name__ == "__main__":
    sys.exit(main())