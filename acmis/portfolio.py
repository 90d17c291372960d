"""The holdings of a stock account, kept in purchase order."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from acmis.market import Market, UnknownSymbolError


@dataclass
class Holding:
    """Shares of one stock, with the price paid and the latest valuation."""

    symbol: str
    shares: int
    price: float = 0.0
    current_price: float = 0.0
    value: float = 0.0

    def revalue(self, price: float) -> None:
        """Set the current price per share and recompute the holding's value."""
        self.current_price = price
        self.value = self.shares * price


class Portfolio:
    """An ordered collection of holdings, at most one per symbol."""

    def __init__(self, holdings: Iterable[Holding] = ()) -> None:
        self._holdings: list[Holding] = []
        for holding in holdings:
            if holding.symbol in self:
                raise ValueError(f"duplicate holding: {holding.symbol}")
            self._holdings.append(holding)

    def __iter__(self) -> Iterator[Holding]:
        return iter(self._holdings)

    def __len__(self) -> int:
        return len(self._holdings)

    def __contains__(self, symbol: object) -> bool:
        return any(holding.symbol == symbol for holding in self._holdings)

    def get(self, symbol: str) -> Holding | None:
        """Return the holding for ``symbol``, or None if there is none."""
        return next((h for h in self._holdings if h.symbol == symbol), None)

    def add(self, symbol: str, shares: int, price: float) -> Holding:
        """Add shares of ``symbol``, merging into an existing holding."""
        holding = self.get(symbol)
        if holding is not None:
            holding.shares += shares
            return holding
        holding = Holding(symbol, shares, price)
        self._holdings.append(holding)
        return holding

    def remove_shares(self, symbol: str, shares: int) -> int:
        """Take ``shares`` away from ``symbol`` and return how many remain.

        A holding left with no shares is dropped from the portfolio.
        """
        holding = self.get(symbol)
        if holding is None:
            raise UnknownSymbolError(f"Symbol not found in portfolio: {symbol}")
        if shares > holding.shares:
            raise ValueError("The number of shares is out of range")
        holding.shares -= shares
        if holding.shares == 0:
            self._holdings.remove(holding)
        return holding.shares

    def reprice(self, market: Market) -> None:
        """Revalue every holding, each from a table the market picks at random."""
        for holding in self._holdings:
            table = market.pick_table()
            if holding.symbol in table:
                holding.revalue(table[holding.symbol])

    def sort_by_value(self) -> bool:
        """Order holdings by value, largest first; False if there is nothing to sort."""
        if not self._holdings:
            return False
        self._holdings.sort(key=lambda holding: holding.value, reverse=True)
        return True

    def stock_value(self) -> float:
        """Return the combined value of all holdings."""
        return sum(holding.value for holding in self._holdings)

    def save(self, path: str | Path) -> None:
        """Write one ``symbol<TAB>shares`` line per holding."""
        with open(path, "w") as target:
            for holding in self._holdings:
                target.write(f"{holding.symbol}\t{holding.shares}\n")

    @classmethod
    def load(cls, path: str | Path) -> Portfolio:
        """Read a saved portfolio; holdings come back ordered by symbol.

        A missing file gives an empty portfolio; the first line for a symbol wins.
        """
        entries: dict[str, int] = {}
        try:
            with open(path) as source:
                for line in source:
                    fields = line.split()
                    if not fields:
                        continue
                    if len(fields) < 2:
                        raise ValueError(f"portfolio line has no share count: {line.strip()!r}")
                    try:
                        count = int(fields[1])
                    except ValueError as exc:
                        raise ValueError(
                            f"malformed share count in line: {line.strip()!r}"
                        ) from exc
                    entries.setdefault(fields[0], count)
        except FileNotFoundError:
            return cls()
        return cls(Holding(symbol, entries[symbol]) for symbol in sorted(entries))