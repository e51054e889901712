"""Interactive menu-driven bank shell."""

from __future__ import annotations

import argparse
import os
import sys
import time
from collections import deque
from collections.abc import Callable
from typing import TextIO

from minibank.account import Account, AccountError
from minibank.storage import (
    AccountNotFoundError,
    load_accounts,
    load_transactions,
    update_account,
)
from minibank.transaction import Transaction

_SEPARATOR = "------------------------"

_MAIN_MENU = (
    "\tWelcome to the Bank Program!\n"
    "\t==========================\n"
    "1. Create Account\n"
    "2. View Accounts\n"
    "3. Manage Account\n"
    "4. View Transactions\n"
    "5. Exit"
)

_MANAGE_MENU = (
    "1. Deposit\n"
    "2. Withdraw\n"
    "3. Transfer Money\n"
    "4. Freeze Account\n"
    "5. Unfreeze Account\n"
    "6. Print Account Details\n"
    "7. Back to Main Menu"
)


def _parse_flag(token: str) -> bool:
    if token not in ("0", "1"):
        raise ValueError(f"expected 0 or 1, got {token!r}")
    return token == "1"


class BankShell:
    """Reads whitespace-separated answers and drives the account files."""

    def __init__(
        self,
        accounts_path: str | os.PathLike[str] = "accounts.txt",
        transactions_path: str | os.PathLike[str] = "transactions.txt",
        input_func: Callable[[], str] = input,
        output: TextIO | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.accounts_path = accounts_path
        self.transactions_path = transactions_path
        self._input = input_func
        self._output = output if output is not None else sys.stdout
        self._clock = clock
        self._pending: deque[str] = deque()

    def _say(self, text: str) -> None:
        print(text, file=self._output)

    def _ask(self, prompt: str) -> str:
        self._output.write(prompt)
        self._output.flush()
        while not self._pending:
            self._pending.extend(self._input().split())
        return self._pending.popleft()

    def _timestamp(self) -> str:
        return str(int(self._clock()))

    def _record(self, from_id: int, to_id: int, amount: float, kind: str) -> None:
        Transaction(from_id, to_id, amount, self._timestamp(), kind).append_to_file(
            self.transactions_path
        )

    def _load(self) -> list[Account]:
        try:
            accounts = load_accounts(self.accounts_path)
        except FileNotFoundError:
            self._say("No existing accounts found.")
            return []
        self._say(f"Loaded {len(accounts)} accounts from file.")
        return accounts

    def _save(self, account: Account) -> None:
        try:
            update_account(account, self.accounts_path)
        except AccountNotFoundError:
            self._say("Account not found.")
        else:
            self._say("Account updated successfully.")

    def _attempt(self, operation: Callable[[float], str], amount: float) -> None:
        try:
            self._say(operation(amount))
        except AccountError as error:
            self._say(str(error))

    def run(self) -> None:
        """Show the main menu until the user exits or input runs out."""
        actions = {
            "1": self.create_account,
            "2": self.view_accounts,
            "3": self.manage_account,
            "4": self.view_transactions,
        }
        try:
            while True:
                self._say(_MAIN_MENU)
                choice = self._ask("Please select an option: ")
                if choice == "5":
                    self._say("Exiting the program. Goodbye!")
                    return
                action = actions.get(choice)
                if action is None:
                    self._say("Invalid option. Please try again.")
                    continue
                try:
                    action()
                except ValueError:
                    self._pending.clear()
                    self._say("Invalid input. Please try again.")
        except EOFError:
            return

    def create_account(self) -> None:
        """Ask for the new account's details and append it to the file."""
        number = int(self._ask("Enter Account ID: "))
        holder = self._ask("Enter Account Holder Name: ")
        balance = float(self._ask("Enter Initial Balance: "))
        frozen = _parse_flag(
            self._ask("Is the account frozen? (1 for Yes, 0 for No): ")
        )
        account = Account(number, holder, balance, frozen)
        self._say("Account created successfully!")
        self._say(account.append_to_file(self.accounts_path))

    def view_accounts(self) -> None:
        """Print every stored account."""
        for account in self._load():
            self._say(_SEPARATOR)
            self._say(account.details())
            self._say(_SEPARATOR)

    def manage_account(self) -> None:
        """Find an account by id and run one operation on it."""
        search_id = int(self._ask("Find Account by ID: "))
        accounts = self._load()
        found = False
        for account in accounts:
            if account.number != search_id:
                continue
            found = True
            self._say(_MANAGE_MENU)
            choice = self._ask("Select an option: ")
            if choice == "1":
                amount = float(self._ask("Enter deposit amount: "))
                self._attempt(account.deposit, amount)
                self._save(account)
                self._record(0, account.number, amount, "Deposit")
            elif choice == "2":
                amount = float(self._ask("Enter withdrawal amount: "))
                self._attempt(account.withdraw, amount)
                self._save(account)
                self._record(account.number, 0, amount, "Withdraw")
            elif choice == "3":
                self._transfer(account, accounts)
            elif choice == "4":
                self._say(account.freeze())
                self._save(account)
            elif choice == "5":
                self._say(account.unfreeze())
                self._save(account)
            elif choice == "6":
                self._say(account.details())
            elif choice == "7":
                break
        if not found:
            self._say(f"Account with ID {search_id} not found.")

    def _transfer(self, account: Account, accounts: list[Account]) -> None:
        to_id = int(self._ask("Enter recipient Account ID: "))
        amount = float(self._ask("Enter transfer amount: "))
        recipient = next((acc for acc in accounts if acc.number == to_id), None)
        if recipient is None:
            self._say("Recipient account not found.")
            return
        self._attempt(account.withdraw, amount)
        self._attempt(recipient.deposit, amount)
        self._save(account)
        self._save(recipient)
        self._record(account.number, to_id, amount, "Transfer")
        self._say("Transfer successful.")

    def view_transactions(self) -> None:
        """Print every stored transaction."""
        try:
            transactions = load_transactions(self.transactions_path)
        except FileNotFoundError:
            self._say("No existing transactions found.")
            return
        self._say(f"Loaded {len(transactions)} transactions from file.")
        for transaction in transactions:
            self._say(_SEPARATOR)
            self._say(transaction.details())
            self._say(_SEPARATOR)


def main(argv: list[str] | None = None) -> int:
    """Start the interactive bank shell."""
    parser = argparse.ArgumentParser(description="Manage simple bank accounts.")
    parser.add_argument("--accounts", default="accounts.txt", help="accounts file")
    parser.add_argument(
        "--transactions", default="transactions.txt", help="transactions file"
    )
    args = parser.parse_args(argv)
    BankShell(args.accounts, args.transactions).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())