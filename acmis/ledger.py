"""Balance storage and transaction-log helpers shared by the accounts."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

TIMESTAMP_FORMAT = "%d-%m-%Y %I:%M:%S"


class AccountError(Exception):
    """Raised when an account operation cannot be carried out."""


class InsufficientFundsError(AccountError):
    """Raised when an amount exceeds the available cash balance."""


def _format_number(value: float) -> str:
    """Render a number the way the text files store it."""
    return format(value, "g")


class BalanceStore:
    """The cash balance kept in a single text file."""

    def __init__(self, path: str | Path, default: float) -> None:
        self.path = Path(path)
        self.default = default

    def read(self) -> float:
        """Return the stored balance, creating the file with the default if empty."""
        try:
            text = self.path.read_text()
        except FileNotFoundError:
            text = ""
        if not text:
            self.write(self.default)
            text = self.path.read_text()
        fields = text.split()
        if not fields:
            raise AccountError(f"balance file {self.path} holds no value")
        try:
            return float(fields[0])
        except ValueError as exc:
            raise AccountError(f"balance file {self.path} is malformed") from exc

    def write(self, amount: float) -> None:
        """Replace the stored balance with ``amount``."""
        self.path.write_text(_format_number(amount))


def format_timestamp(moment: datetime) -> str:
    """Format a moment as day-month-year and 12-hour time."""
    return moment.strftime(TIMESTAMP_FORMAT)


def format_bank_entry(kind: str, amount: float, timestamp: str, balance: float) -> str:
    """Build one line of the bank transaction log."""
    return (
        f"{kind:<30}"
        "$"
        f"{_format_number(amount):<15}"
        f"{timestamp:>15}"
        f"{'$':>5}"
        f"{_format_number(balance)}"
    )


def append_entry(path: str | Path, entry: str) -> None:
    """Append ``entry`` to a log file, each entry starting on a new line."""
    with open(path, "a") as log:
        log.write("\n" + entry)


def read_entries(path: str | Path) -> list[str]:
    """Return the non-blank lines of a log file, or an empty list if absent."""
    try:
        with open(path) as log:
            return [line.rstrip("\n") for line in log if line.strip()]
    except FileNotFoundError:
        return []