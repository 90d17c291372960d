# acmis

A small personal account manager for the terminal. It keeps a cash account
and a stock portfolio in plain text files, and prices shares from two quote
tables. It also ships a little tool for sets of integers.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## The account manager

```
acmis
acmis --directory path/to/data
```

`--directory` names the directory that holds the data and price files; it
defaults to the current directory.

The main menu offers:

1. **Stock portfolio account**
   1. look up a symbol's price;
   2. show the portfolio, revalued and sorted by value (largest first), with
      the cash balance, the stock value and the total;
   3. buy shares, giving the most you will pay per share;
   4. sell shares, giving the least you will accept per share;
   5. (does nothing; see below);
   6. view the stock transaction history;
   7. sort the holdings by value;
   8. go back.
2. **Bank account**: view the cash balance, deposit, withdraw, print the
   transaction history, go back.
3. **Quit**: writes the portfolio to its file and appends the current total
   portfolio value, with a timestamp, to the value log.

The menus read whitespace-separated answers from standard input; the program
also stops when the input runs out.

### Prices

Prices come from `Result_1.txt` and `Result_2.txt` in the data directory.
Each line holds a symbol and a price:

```
AAPL 150.25
MSFT 98.10
```

Each time a price is needed, one of the two tables is chosen at random, which
simulates a moving market. A symbol can be bought only if it is listed in
`Result_1.txt`. A missing price file counts as an empty table.

### Data files

| File | Contents |
| --- | --- |
| `balance_file.txt` | the current cash balance, shared by both accounts |
| `bank_transaction_history.txt` | deposits, withdrawals, and stock debits and credits |
| `stock_transaction_history.txt` | buys and sells |
| `portfolio_file.txt` | one `SYMBOL<TAB>SHARES` line per holding |
| `port_value.txt` | a total portfolio value and a timestamp per line |

When the balance file is missing or empty, the account manager starts it at
10000. Timestamps are written as `day-month-year hour:minute:second` on a
12-hour clock.

### What it does not do

- Menu choice 5 ("View the Graph for the Portfolio Value Variation") draws
  nothing. The logged values are read into `StockAccount.value_history` and
  returned by `StockAccount.load_portfolio_values()`, but no chart is made.
- Prices are never fetched from a real market; only the two text tables are
  used.
- The holdings are written to `portfolio_file.txt` only when you choose
  Quit. If the input ends first, trades already change the balance and the
  logs, but the portfolio file is not updated.

## Integer sets

```
acmis-sets
```

Reads two sets of integers from 0 to 100 from standard input, each ended by
`-1`. Numbers outside the range are reported as `Invalid Element` and
skipped. It then prints both sets, their union and their intersection.

## Using it as a library

```python
from acmis.integer_set import IntegerSet

a = IntegerSet([1, 5, 9])
b = IntegerSet([5, 9, 42])
print(a.union(b))         # { 1 5 9 42 }
print(a.intersection(b))  # { 5 9 }
```

`IntegerSet.add` raises `ValueError` for a number outside 0..100.

The accounts:

- `acmis.bank_account.BankAccount(directory, clock)` has `balance()`,
  `deposit(amount)`, `withdraw(amount)`, `history()` and `history_report()`.
  On its own it starts a new balance file at 10000.
- `acmis.stock_account.StockAccount(directory, market, clock)` has
  `balance()`, `quote(symbol)`, `buy(symbol, shares, max_price)`,
  `sell(symbol, shares, min_price)`, `sort()`, `portfolio_report()`,
  `portfolio_value()`, `save_portfolio()`, `save_portfolio_value()`,
  `load_portfolio_values()`, `history()` and `history_report()`. `buy` and
  `sell` return a `Trade`. On its own it starts a new balance file at 500.
- `acmis.market.Market(first, second, rng)` holds the two price tables;
  `Market.from_directory(directory, rng)` loads them from the price files.
- `acmis.portfolio.Portfolio` holds `Holding` objects in order, at most one
  per symbol.
- `acmis.cli.Session(directory, stdin, stdout, rng, clock)` runs the menus
  over any text streams.

`clock` is a function returning a `datetime`, and `rng` any object with a
`randrange(stop)` method, so both can be fixed for testing.

Failed operations raise exceptions derived from
`acmis.ledger.AccountError`: `InsufficientFundsError`, `EmptyBalanceError`,
`UnknownSymbolError`, `PriceLimitError`, `ShareCountError` and
`EmptyPortfolioError`.