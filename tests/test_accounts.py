import threading

from banksim.accounts import INITIAL_BALANCE, SafeBankAccount, UnsafeBankAccount


def test_initial_balance():
    assert SafeBankAccount().balance == INITIAL_BALANCE == 1000.0
    assert UnsafeBankAccount().balance == INITIAL_BALANCE == 1000.0


def test_deposit_adds():
    for account in (SafeBankAccount(), UnsafeBankAccount()):
        account.deposit(250.0)
        assert account.balance == INITIAL_BALANCE + 250.0


def test_withdraw_within_balance():
    for account in (SafeBankAccount(), UnsafeBankAccount()):
        assert account.withdraw(400.0) is True
        assert account.balance == INITIAL_BALANCE - 400.0


def test_withdraw_whole_balance():
    for account in (SafeBankAccount(balance=75.0), UnsafeBankAccount(balance=75.0)):
        assert account.withdraw(75.0) is True
        assert account.balance == 0.0


def test_withdraw_over_balance_fails():
    for account in (SafeBankAccount(balance=10.0), UnsafeBankAccount(balance=10.0)):
        assert account.withdraw(10.5) is False
        assert account.balance == 10.0


def test_safe_account_concurrent_updates():
    account = SafeBankAccount()
    threads_count, per_thread = 8, 2000

    def worker():
        for _ in range(per_thread):
            account.deposit(2.0)
            account.withdraw(1.0)

    threads = [threading.Thread(target=worker) for _ in range(threads_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert account.balance == INITIAL_BALANCE + threads_count * per_thread