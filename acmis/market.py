"""Share prices read from two quote tables, one picked at random per lookup."""

from __future__ import annotations

import random
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Protocol

from acmis.ledger import AccountError

FIRST_PRICE_FILE = "Result_1.txt"
SECOND_PRICE_FILE = "Result_2.txt"


class UnknownSymbolError(AccountError):
    """Raised when a stock symbol is not listed where it is looked up."""


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def parse_prices(lines: Iterable[str]) -> dict[str, float]:
    """Parse ``SYMBOL PRICE`` lines into a table; the first entry for a symbol wins.

    Blank lines are ignored. A line whose price is missing or not a number
    raises ValueError.
    """
    table: dict[str, float] = {}
    for line in lines:
        fields = line.split()
        if not fields:
            continue
        if len(fields) < 2:
            raise ValueError(f"price line has no price: {line.strip()!r}")
        symbol, price_text = fields[0], fields[1]
        try:
            price = float(price_text)
        except ValueError as exc:
            raise ValueError(f"malformed price in line: {line.strip()!r}") from exc
        table.setdefault(symbol, price)
    return table


def load_prices(path: str | Path) -> dict[str, float]:
    """Read a price table from ``path``; a missing file gives an empty table."""
    try:
        with open(path) as source:
            return parse_prices(source)
    except FileNotFoundError:
        return {}


class Market:
    """Two price tables; each lookup draws one of them at random."""

    def __init__(
        self,
        first: Mapping[str, float],
        second: Mapping[str, float],
        rng: _RandomSource | None = None,
    ) -> None:
        self.first = dict(first)
        self.second = dict(second)
        self._rng = rng if rng is not None else random.Random()

    @classmethod
    def from_directory(
        cls, directory: str | Path = ".", rng: _RandomSource | None = None
    ) -> Market:
        """Build a market from the two price files held in ``directory``."""
        base = Path(directory)
        return cls(
            load_prices(base / FIRST_PRICE_FILE),
            load_prices(base / SECOND_PRICE_FILE),
            rng,
        )

    def __contains__(self, symbol: object) -> bool:
        """A symbol is listed on the market when the first table holds it."""
        return symbol in self.first

    def pick_table(self) -> dict[str, float]:
        """Return one of the two tables, chosen at random."""
        return self.first if self._rng.randrange(2) == 0 else self.second

    def quote(self, symbol: str) -> float:
        """Return the price of ``symbol`` from a randomly chosen table."""
        table = self.pick_table()
        try:
            return table[symbol]
        except KeyError:
            raise UnknownSymbolError(f"Symbol not found: {symbol}") from None

    def prices(self, symbol: str) -> tuple[float, float]:
        """Return the price of ``symbol`` in the first and in the second table."""
        try:
            return self.first[symbol], self.second[symbol]
        except KeyError:
            raise UnknownSymbolError(f"Symbol not found: {symbol}") from None