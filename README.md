# banksim

A small simulation of a bank in which several cashiers work on one shared
account at the same time, each in its own thread. It shows what happens to
shared state with and without synchronisation.

Each cashier makes 50 rounds. In each round it deposits a random amount
between 50 and 500, then tries to withdraw a random amount between 10 and
200. A withdrawal succeeds only if the balance covers it. Every deposit and
every withdrawal attempt is recorded in the shared statistics. The account
starts at 1000.00.

Two variants are provided:

- **safe**: `SafeBankAccount` and `SafeBankStatistics` hold a lock for every
  operation.
- **unsafe**: `UnsafeBankAccount` and `UnsafeBankStatistics` do no locking at
  all, so concurrent updates may be lost.

## Installation

```
pip install .
```

## Command line

```
banksim
```

runs the safe variant with five cashiers and prints a report such as:

```
=== Bank Simulation Results (Safe) ===
Initial balance: 1000.00
Final balance: ...
Total transactions: 500
Total transaction amount: ...
All cashiers completed work safely!
```

Two arguments are recognised; anything else is ignored:

- `--ref` uses a fixed amount of 100 for every deposit and withdrawal instead
  of random amounts, which makes the expected figures easy to check by hand.
- `--unsafe` runs the unsynchronised variant instead of the safe one.

```
banksim --ref
banksim --unsafe --ref
```

Each cashier writes a log of its work to `build/cachier-safe-1.log`,
`build/cachier-safe-2.log`, … (or the `unsafe` equivalents). The `build`
directory is created in the current directory if it does not exist. A log
file is written in one go when its cashier finishes.

## Library use

```python
from banksim.accounts import SafeBankAccount
from banksim.statistics import SafeBankStatistics
from banksim.cashier import Cashier
from banksim.bank import Bank
from banksim.logger import Logger

account = SafeBankAccount()
statistics = SafeBankStatistics()
with Bank() as bank:
    for n in range(1, 4):
        bank.assign(Cashier(Logger(f"cashier-{n}.log"), reference=True), account, statistics)

print(account.balance, statistics.total_transactions, statistics.total_amount)
```

- `Bank.assign(cashier, account, statistics)` starts the cashier in a new
  thread. `Bank.wait_all()` joins them all. Leaving a `with Bank()` block
  does the same.
- `Cashier(logger, reference=False, *, rng=None, rounds=50)` takes an optional
  `random.Random` for reproducible amounts and a number of rounds.
- `Logger(path)` collects text through `write` and writes it to `path` on
  `flush`. After that it ignores further writes. `take()` moves its contents
  into a new logger.
- `banksim.cli.run_simulation(safe, reference, log_dir, cashiers)` runs a whole
  simulation and returns the initial balance, the account and the statistics.
  `banksim.cli.format_report(safe, initial_balance, account, statistics)`
  builds the report shown above.

## Limitations

The command line has no `--help`. The number of cashiers (five) and the log
directory (`build`) are fixed there. To change them, call
`run_simulation` directly.

## Tests

```
pip install .[test]
pytest
```