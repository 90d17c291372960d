"""A stock portfolio account that trades against the shared cash balance."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
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
from acmis.market import Market, UnknownSymbolError
from acmis.portfolio import Portfolio

BALANCE_FILE = "balance_file.txt"
BANK_HISTORY_FILE = "bank_transaction_history.txt"
STOCK_HISTORY_FILE = "stock_transaction_history.txt"
PORTFOLIO_FILE = "portfolio_file.txt"
PORTFOLIO_VALUE_FILE = "port_value.txt"
DEFAULT_BALANCE = 500.00


class PriceLimitError(AccountError):
    """Raised when the market price is outside the limit the trader set."""


class ShareCountError(AccountError):
    """Raised when a share count is not positive or exceeds the shares held."""


class EmptyPortfolioError(AccountError):
    """Raised when an operation needs holdings and the portfolio has none."""


def _number(value: float) -> str:
    return format(value, "g")


def format_stock_entry(
    kind: str, symbol: str, shares: int, price: float, total: float, timestamp: str
) -> str:
    """Build one line of the stock transaction log."""
    return (
        f"{kind:<7}"
        f"{symbol:<14}"
        f"{shares!s:<7}"
        f"{_number(price):<14}"
        f"{_number(total):<10}"
        f"{timestamp:<15}"
    )


@dataclass(frozen=True)
class Trade:
    """The outcome of a completed purchase or sale."""

    kind: str
    symbol: str
    shares: int
    price: float
    total: float
    balance: float
    timestamp: str


class StockAccount:
    """Buys and sells shares, keeping holdings and logs in text files."""

    def __init__(
        self,
        directory: str | Path = ".",
        market: Market | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.directory = Path(directory)
        self.market = market if market is not None else Market.from_directory(self.directory)
        self._clock = clock or datetime.now
        self._store = BalanceStore(self.directory / BALANCE_FILE, DEFAULT_BALANCE)
        self._bank_history = self.directory / BANK_HISTORY_FILE
        self._stock_history = self.directory / STOCK_HISTORY_FILE
        self._portfolio_path = self.directory / PORTFOLIO_FILE
        self._values_path = self.directory / PORTFOLIO_VALUE_FILE

        cash = self._store.read()
        self.portfolio = Portfolio.load(self._portfolio_path)
        self.portfolio.reprice(self.market)
        self._value = cash + self.portfolio.stock_value()
        self.value_history: list[float] = []
        self.load_portfolio_values()

    def balance(self) -> float:
        """Return the current cash balance."""
        return self._store.read()

    def quote(self, symbol: str) -> float:
        """Return the price of ``symbol`` from a randomly chosen price table."""
        return self.market.quote(symbol)

    def _price_from_market(self, symbol: str) -> float:
        table = self.market.pick_table()
        try:
            return table[symbol]
        except KeyError:
            raise UnknownSymbolError(f"Symbol not found: {symbol}") from None

    def _log(self, kind: str, bank_kind: str, symbol: str, shares: int,
             price: float, total: float, balance: float) -> Trade:
        stamp = format_timestamp(self._clock())
        self._store.write(balance)
        append_entry(self._bank_history, format_bank_entry(bank_kind, total, stamp, balance))
        append_entry(
            self._stock_history,
            format_stock_entry(kind, symbol, shares, price, total, stamp),
        )
        return Trade(kind, symbol, shares, price, total, balance, stamp)

    def buy(self, symbol: str, shares: int, max_price: float) -> Trade:
        """Buy ``shares`` of ``symbol`` if its price is at most ``max_price``."""
        cash = self._store.read()
        if symbol not in self.market:
            raise UnknownSymbolError(f"Symbol Not found in the database: {symbol}")
        if shares <= 0:
            raise ShareCountError("The number of shares must be positive")
        price = self._price_from_market(symbol)
        if max_price < price:
            raise PriceLimitError(
                "The maximum limit entered is less than current Share value! Can't buy stock!"
            )
        total = shares * price
        if total > cash:
            raise InsufficientFundsError("Insufficient Cash Balance!")
        cash -= total
        trade = self._log("Buy", "Debited to Stock Account.", symbol, shares, price, total, cash)
        self.portfolio.add(symbol, shares, price)
        return trade

    def sell(self, symbol: str, shares: int, min_price: float) -> Trade:
        """Sell ``shares`` of ``symbol`` if its price is at least ``min_price``."""
        cash = self._store.read()
        holding = self.portfolio.get(symbol)
        if holding is None:
            raise UnknownSymbolError(f"Symbol not found in portfolio: {symbol}")
        if shares <= 0 or shares > holding.shares:
            raise ShareCountError("The number of shares is out of range!")
        price = self._price_from_market(symbol)
        if min_price > price:
            raise PriceLimitError(
                "Minimum limit entered is greater than current Share value! Can't sell shares."
            )
        total = shares * price
        cash += total
        self.portfolio.remove_shares(symbol, shares)
        return self._log("Sell", "Credited from Stock Account.", symbol, shares, price, total, cash)

    def sort(self) -> None:
        """Revalue the holdings and order them by value, largest first."""
        if not self.portfolio:
            raise EmptyPortfolioError("List is Empty! Can't Sort!")
        self.portfolio.reprice(self.market)
        self.portfolio.sort_by_value()

    def portfolio_report(self) -> str:
        """Revalue and sort the holdings and return them as a table with totals."""
        cash = self._store.read()
        if not self.portfolio:
            self._value = cash
            raise EmptyPortfolioError("No shares are available in portfolio! Please Buy some!")
        self.sort()
        stock = self.portfolio.stock_value()
        self._value = cash + stock
        self.value_history.append(self._value)
        lines = [
            f"{'Symbol':<15}{'Shares':<15}{'Price/Share($)':<15}{'Total Value($)':<15}"
        ]
        lines.extend(
            f"{h.symbol:<15}{h.shares!s:<15}{_number(h.current_price):<15}{_number(h.value):<15}"
            for h in self.portfolio
        )
        lines.append("")
        lines.append(f"The Cash Balance is  : ${_number(cash)}")
        lines.append(f"The Stock Balance is : ${_number(stock)}")
        lines.append(f"The Total Portfolio value is : ${_number(self._value)}")
        return "\n".join(lines)

    def portfolio_value(self) -> float:
        """Return the last computed portfolio value, or the cash if nothing is held."""
        if not self.portfolio:
            return self._store.read()
        return self._value

    def save_portfolio(self) -> None:
        """Write the holdings to the portfolio file."""
        self.portfolio.save(self._portfolio_path)

    def save_portfolio_value(self) -> float:
        """Append the portfolio value with a timestamp to the value log and return it."""
        value = self.portfolio_value()
        self._value = value
        stamp = format_timestamp(self._clock())
        with open(self._values_path, "a") as log:
            log.write(f"{_number(value)}  {stamp}\n")
        return value

    def load_portfolio_values(self) -> list[tuple[float, str]]:
        """Read the logged portfolio values as (value, timestamp) pairs.

        The values are also appended to ``value_history``.
        """
        records: list[tuple[float, str]] = []
        try:
            with open(self._values_path) as log:
                for line in log:
                    fields = line.split()
                    if len(fields) < 2:
                        continue
                    try:
                        value = float(fields[0])
                    except ValueError as exc:
                        raise ValueError(
                            f"malformed portfolio value in line: {line.strip()!r}"
                        ) from exc
                    records.append((value, " ".join(fields[1:3])))
        except FileNotFoundError:
            return []
        self.value_history.extend(value for value, _ in records)
        return records

    def history(self) -> list[str]:
        """Return the logged stock transactions, oldest first."""
        return read_entries(self._stock_history)

    def history_report(self) -> str:
        """Return the stock transaction history under a column header."""
        header = (
            f"{'Transaction':<7}{'Symbol':<14}{'Shares':<7}"
            f"{'Price per Share($)':<14}{'Value($)':<10}{'Timestamp':<15}"
        )
        return "\n".join([header, *self.history()])