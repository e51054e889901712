import pytest

from minibank.account import Account
from minibank.storage import (
    AccountNotFoundError,
    load_accounts,
    load_transactions,
    update_account,
)
from minibank.transaction import Transaction


def test_missing_accounts_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_accounts(tmp_path / "accounts.txt")


def test_missing_transactions_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_transactions(tmp_path / "transactions.txt")


def test_load_accounts_reads_appended_records(tmp_path):
    path = tmp_path / "accounts.txt"
    accounts = [Account(1, "alice", 10.0, False), Account(2, "bob", 3.5, True)]
    for account in accounts:
        account.append_to_file(path)
    assert load_accounts(path) == accounts


def test_blank_lines_are_skipped(tmp_path):
    path = tmp_path / "accounts.txt"
    path.write_text("1,alice,10,0\n\n2,bob,3.5,1\n", encoding="utf-8")
    assert [acc.number for acc in load_accounts(path)] == [1, 2]


def test_update_account_persists_change(tmp_path):
    path = tmp_path / "accounts.txt"
    Account(1, "alice", 10.0, False).append_to_file(path)
    Account(2, "bob", 3.5, False).append_to_file(path)
    changed = Account(2, "bob", 3.5, False)
    changed.freeze()
    update_account(changed, path)
    assert load_accounts(path) == [Account(1, "alice", 10.0, False), changed]


def test_update_unknown_account_raises(tmp_path):
    path = tmp_path / "accounts.txt"
    Account(1, "alice", 10.0, False).append_to_file(path)
    with pytest.raises(AccountNotFoundError):
        update_account(Account(9, "zed", 1.0, False), path)
    assert load_accounts(path) == [Account(1, "alice", 10.0, False)]


def test_update_without_file_raises(tmp_path):
    with pytest.raises(AccountNotFoundError):
        update_account(Account(1, "alice", 1.0, False), tmp_path / "accounts.txt")


def test_load_transactions_round_trip(tmp_path):
    path = tmp_path / "transactions.txt"
    items = [
        Transaction(0, 1, 5.0, "1700000000", "Deposit"),
        Transaction(1, 0, 2.0, "1700000005", "Withdraw"),
    ]
    for item in items:
        item.append_to_file(path)
    assert load_transactions(path) == items