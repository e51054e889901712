# minibank

minibank is a small menu-driven bank ledger for the terminal. With it you can
create accounts and deposit, withdraw or transfer money. You can also freeze or
unfreeze accounts, and list every account and every recorded transaction.

All data lives in two plain text files:

- `accounts.txt`: one account per line, as `number,holder,balance,frozen`.
  The `frozen` field is `1` or `0`.
- `transactions.txt`: one transaction per line, as
  `from,to,amount,timestamp,type`. A deposit has `from` set to `0`, and a
  withdrawal has `to` set to `0`. The timestamp is a Unix time in whole seconds.
  The type is `Deposit`, `Withdraw` or `Transfer`.

Amounts are written with up to six significant digits.

## Installing

```
pip install .
```

## Running

```
minibank
```

By default the data files are `accounts.txt` and `transactions.txt` in the
current directory. You can choose other files with these options:

```
minibank --accounts my-accounts.txt --transactions my-transactions.txt
```

The main menu offers:

1. Create Account
2. View Accounts
3. Manage Account: deposit, withdraw, transfer, freeze, unfreeze, print details
4. View Transactions
5. Exit

Answers are read as whitespace-separated words, so an account holder's name is
a single word. If you give a number or a 0/1 flag that cannot be read, the shell
prints `Invalid input. Please try again.` and goes back to the main menu. The
shell stops when you choose Exit or when input ends.

The shell refuses these operations, prints a warning and leaves the balance
unchanged:

- a deposit into a frozen account
- a withdrawal larger than the balance
- a withdrawal from a frozen account

A refused deposit or withdrawal is still written to `transactions.txt`. In a
transfer, the withdrawal and the deposit are tried separately. One of them can
be refused while the other goes through.

## Using it from Python

```python
from minibank.account import Account, AccountError
from minibank.storage import load_accounts, update_account

acct = Account(1, "alice", 100.0, False)
print(acct.deposit(25))          # "25 deposited into account for alice"
acct.append_to_file("accounts.txt")

try:
    acct.withdraw(1000)
except AccountError as error:
    print(error)                 # "Warning! alice doesn't have enough money!"

acct.freeze()
update_account(acct, "accounts.txt")

for account in load_accounts("accounts.txt"):
    print(account.details())
```

- `minibank.account.Account` has `deposit`, `withdraw`, `freeze`, `unfreeze`,
  `balance_report`, `details`, `to_record`, `from_record` and `append_to_file`.
  A refused operation raises `AccountFrozenError` or `InsufficientFundsError`.
  Both are subclasses of `AccountError`.
- `minibank.transaction.Transaction` holds `from_id`, `to_id`, `amount`,
  `timestamp` and `kind`. It has `details`, `to_record`, `from_record` and
  `append_to_file`.
- `minibank.storage` provides `load_accounts`, `load_transactions` and
  `update_account`. Both loaders raise `FileNotFoundError` when the file is
  missing. `update_account` raises `AccountNotFoundError` when no stored account
  has that number.
- `minibank.cli.BankShell` runs the same menu as the command. You can pass it
  your own file paths, an input function, an output stream and a clock, and
  drive it from a script.

## What it does not do

minibank keeps no history beyond the two text files. It has no locking, so
running two shells on the same files at once can lose updates. It checks no
identity: anyone who can run the command can change any account. Nothing stops
two accounts from being created with the same number. Updates change only the
first account that has that number.