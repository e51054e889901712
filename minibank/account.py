"""Bank accounts and their one-line text records."""

from __future__ import annotations

import os
from dataclasses import dataclass


class AccountError(Exception):
    """Base class for refused account operations."""


class AccountFrozenError(AccountError):
    """Raised when an operation is attempted on a frozen account."""


class InsufficientFundsError(AccountError):
    """Raised when a withdrawal exceeds the available balance."""


def format_amount(value: float) -> str:
    """Render a money amount with six significant digits, as stored on disk."""
    return format(value, "g")


@dataclass
class Account:
    """A single bank account."""

    number: int
    holder: str
    balance: float
    frozen: bool = False

    def balance_report(self) -> str:
        """Describe the current balance, or that the account is frozen."""
        if self.frozen:
            return f"Account for {self.holder} is frozen."
        return f"{self.holder} has ${format_amount(self.balance)}"

    def deposit(self, amount: float) -> str:
        """Add ``amount`` to the balance and return a confirmation."""
        if self.frozen:
            raise AccountFrozenError(
                f"Account for {self.holder} is frozen. Deposit denied."
            )
        self.balance += amount
        return f"{format_amount(amount)} deposited into account for {self.holder}"

    def withdraw(self, amount: float) -> str:
        """Take ``amount`` from the balance and return a confirmation."""
        if amount > self.balance:
            raise InsufficientFundsError(
                f"Warning! {self.holder} doesn't have enough money!"
            )
        if self.frozen:
            raise AccountFrozenError(
                f"Account for {self.holder} is frozen. Withdrawal denied."
            )
        self.balance -= amount
        return f"{format_amount(amount)} withdrawn from {self.holder}"

    def freeze(self) -> str:
        """Freeze the account."""
        self.frozen = True
        return f"Account for {self.holder} is now frozen."

    def unfreeze(self) -> str:
        """Unfreeze the account."""
        self.frozen = False
        return f"Account for {self.holder} is now unfrozen."

    def to_record(self) -> str:
        """Serialise as ``number,holder,balance,frozen`` without a newline."""
        return (
            f"{self.number},{self.holder},"
            f"{format_amount(self.balance)},{int(self.frozen)}"
        )

    @classmethod
    def from_record(cls, line: str) -> Account:
        """Parse a record written by :meth:`to_record`."""
        fields = line.rstrip("\r\n").split(",")
        fields += [""] * (4 - len(fields))
        number, holder, balance, frozen = fields[:4]
        return cls(int(number), holder, float(balance), int(frozen) != 0)

    def details(self) -> str:
        """Full multi-line description of the account."""
        status = "Frozen" if self.frozen else "Active"
        return "\n".join(
            [
                f"Account Number: {self.number}",
                f"Account Holder Name: {self.holder}",
                f"Balance: ${format_amount(self.balance)}",
                f"Account Status: {status}",
            ]
        )

    def append_to_file(self, path: str | os.PathLike[str]) -> str:
        """Append this account's record to ``path`` and return a confirmation."""
        with open(path, "a", encoding="utf-8") as handle:
            handle.write(self.to_record() + "\n")
        return f"Account information saved for {self.holder}"