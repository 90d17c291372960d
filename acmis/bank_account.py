"""A cash account whose balance and history live in text files."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from acmis.ledger import (
    AccountError,
    BalanceStore,
    InsufficientFundsError,
    append_entry,
    format_bank_entry,
    format_timestamp,
    read_entries,
)

BALANCE_FILE = "balance_file.txt"
HISTORY_FILE = "bank_transaction_history.txt"
DEFAULT_BALANCE = 10000.00


class EmptyBalanceError(AccountError):
    """Raised when a withdrawal is attempted on an account with no cash."""


class BankAccount:
    """Deposits and withdrawals against the shared cash balance."""

    def __init__(
        self,
        directory: str | Path = ".",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.directory = Path(directory)
        self._clock = clock or datetime.now
        self._store = BalanceStore(self.directory / BALANCE_FILE, DEFAULT_BALANCE)
        self._history_path = self.directory / HISTORY_FILE
        self._store.read()

    def balance(self) -> float:
        """Return the current cash balance."""
        return self._store.read()

    def _record(self, kind: str, amount: float, balance: float) -> None:
        stamp = format_timestamp(self._clock())
        append_entry(self._history_path, format_bank_entry(kind, amount, stamp, balance))
        self._store.write(balance)

    def deposit(self, amount: float) -> float:
        """Add ``amount`` to the balance and return the new balance."""
        balance = self._store.read() + amount
        self._record("Deposit", amount, balance)
        return balance

    def withdraw(self, amount: float) -> float:
        """Take ``amount`` from the balance and return the new balance."""
        balance = self._store.read()
        if balance <= 0:
            raise EmptyBalanceError("The Account Balance is NILL, withdrawal denied!")
        if amount > balance:
            raise InsufficientFundsError(
                "Sorry! The Balance is insufficient! Withdrawal Denied!"
            )
        balance -= amount
        self._record("Withdrawal", amount, balance)
        return balance

    def history(self) -> list[str]:
        """Return the logged transactions, oldest first."""
        return read_entries(self._history_path)

    def history_report(self) -> str:
        """Return the transaction history under a column header."""
        header = f"{'Transaction':<30}{'Amount':<16}{'Timestamp':<23}{'Balance':>5}"
        return "\n".join([header, *self.history()])