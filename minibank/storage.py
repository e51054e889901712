"""Loading and rewriting the account and transaction files."""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import TypeVar

from minibank.account import Account
from minibank.transaction import Transaction

T = TypeVar("T")


class AccountNotFoundError(LookupError):
    """Raised when an account to update is not present in the file."""


def _load_records(
    path: str | os.PathLike[str], parse: Callable[[str], T]
) -> list[T]:
    with open(path, encoding="utf-8") as handle:
        return [parse(line) for line in handle if line.strip()]


def load_accounts(path: str | os.PathLike[str]) -> list[Account]:
    """Read every account in ``path``; raises FileNotFoundError if absent."""
    return _load_records(path, Account.from_record)


def load_transactions(path: str | os.PathLike[str]) -> list[Transaction]:
    """Read every transaction in ``path``; raises FileNotFoundError if absent."""
    return _load_records(path, Transaction.from_record)


def update_account(updated: Account, path: str | os.PathLike[str]) -> None:
    """Replace the first stored account with ``updated``'s number and rewrite the file."""
    try:
        accounts = load_accounts(path)
    except FileNotFoundError:
        accounts = []

    index = next(
        (i for i, acc in enumerate(accounts) if acc.number == updated.number),
        None,
    )
    if index is None:
        raise AccountNotFoundError(updated.number)
    accounts[index] = updated

    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(acc.to_record() + "\n" for acc in accounts)