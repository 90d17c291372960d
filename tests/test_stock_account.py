from datetime import datetime
from itertools import cycle

import pytest

from acmis.ledger import InsufficientFundsError, read_entries
from acmis.market import Market, UnknownSymbolError
from acmis.stock_account import (
    EmptyPortfolioError,
    PriceLimitError,
    ShareCountError,
    StockAccount,
    Trade,
    format_stock_entry,
)

STAMP = "01-02-2018 03:04:05"


def fixed_clock():
    return datetime(2018, 2, 1, 15, 4, 5)


class Choices:
    def __init__(self, *choices):
        self._choices = cycle(choices)

    def randrange(self, stop):
        return next(self._choices)


FIRST = {"AAA": 20.0, "BBB": 5.0, "CCC": 100.0}
SECOND = {"AAA": 25.0, "BBB": 4.0, "CCC": 90.0}


def make_account(directory, *choices):
    market = Market(FIRST, SECOND, Choices(*(choices or (0,))))
    return StockAccount(directory, market, fixed_clock)


def test_format_stock_entry_columns():
    entry = format_stock_entry("Buy", "AAA", 10, 20.5, 205.0, STAMP)
    assert entry[0:7].rstrip() == "Buy"
    assert entry[7:21].rstrip() == "AAA"
    assert entry[21:28].rstrip() == "10"
    assert entry[28:42].rstrip() == "20.5"
    assert entry[42:52].rstrip() == "205"
    assert entry[52:] == STAMP


def test_new_account_has_default_balance(tmp_path):
    account = make_account(tmp_path)
    assert account.balance() == 500.0
    assert len(account.portfolio) == 0


def test_buy_debits_balance_and_records_holding(tmp_path):
    account = make_account(tmp_path, 0)
    trade = account.buy("AAA", 5, 30.0)
    assert isinstance(trade, Trade)
    assert trade.price == FIRST["AAA"]
    assert trade.total == trade.shares * trade.price
    assert account.balance() == 500.0 - trade.total
    assert trade.balance == account.balance()
    assert trade.timestamp == STAMP
    assert account.portfolio.get("AAA").shares == 5


def test_buy_uses_second_table_when_drawn(tmp_path):
    account = make_account(tmp_path, 1)
    trade = account.buy("AAA", 2, 30.0)
    assert trade.price == SECOND["AAA"]


def test_buy_twice_merges_holding(tmp_path):
    account = make_account(tmp_path, 0)
    account.buy("BBB", 3, 10.0)
    account.buy("BBB", 4, 10.0)
    assert len(account.portfolio) == 1
    assert account.portfolio.get("BBB").shares == 7


def test_buy_unknown_symbol(tmp_path):
    account = make_account(tmp_path)
    with pytest.raises(UnknownSymbolError):
        account.buy("ZZZ", 1, 100.0)
    assert account.history() == []


def test_buy_above_limit_is_refused(tmp_path):
    account = make_account(tmp_path, 0)
    with pytest.raises(PriceLimitError):
        account.buy("AAA", 1, 10.0)
    assert account.balance() == 500.0
    assert "AAA" not in account.portfolio


def test_buy_with_insufficient_cash(tmp_path):
    account = make_account(tmp_path, 0)
    with pytest.raises(InsufficientFundsError):
        account.buy("CCC", 6, 200.0)
    assert account.balance() == 500.0


def test_buy_non_positive_shares(tmp_path):
    account = make_account(tmp_path, 0)
    with pytest.raises(ShareCountError):
        account.buy("AAA", 0, 100.0)


def test_buy_writes_logs(tmp_path):
    account = make_account(tmp_path, 0)
    account.buy("AAA", 2, 30.0)
    entries = account.history()
    assert len(entries) == 1
    assert entries[0].startswith("Buy")
    assert "AAA" in entries[0]
    bank = read_entries(tmp_path / "bank_transaction_history.txt")
    assert bank[0].startswith("Debited to Stock Account.")


def test_sell_credits_balance_and_drops_empty_holding(tmp_path):
    account = make_account(tmp_path, 0)
    bought = account.buy("AAA", 5, 30.0)
    sold = account.sell("AAA", 5, 10.0)
    assert sold.kind == "Sell"
    assert sold.total == sold.shares * sold.price
    assert account.balance() == bought.balance + sold.total
    assert "AAA" not in account.portfolio
    bank = read_entries(tmp_path / "bank_transaction_history.txt")
    assert bank[-1].startswith("Credited from Stock Account.")


def test_sell_part_keeps_remainder(tmp_path):
    account = make_account(tmp_path, 0)
    account.buy("BBB", 10, 10.0)
    account.sell("BBB", 4, 1.0)
    assert account.portfolio.get("BBB").shares == 6


def test_sell_symbol_not_held(tmp_path):
    account = make_account(tmp_path)
    with pytest.raises(UnknownSymbolError):
        account.sell("AAA", 1, 1.0)


def test_sell_too_many_shares(tmp_path):
    account = make_account(tmp_path, 0)
    account.buy("AAA", 2, 30.0)
    with pytest.raises(ShareCountError):
        account.sell("AAA", 3, 1.0)
    assert account.portfolio.get("AAA").shares == 2


def test_sell_below_limit_keeps_shares(tmp_path):
    account = make_account(tmp_path, 0)
    bought = account.buy("AAA", 2, 30.0)
    with pytest.raises(PriceLimitError):
        account.sell("AAA", 1, 50.0)
    assert account.portfolio.get("AAA").shares == 2
    assert account.balance() == bought.balance


def test_sort_empty_portfolio(tmp_path):
    account = make_account(tmp_path)
    with pytest.raises(EmptyPortfolioError):
        account.sort()


def test_sort_orders_by_value(tmp_path):
    account = make_account(tmp_path, 0)
    account.buy("BBB", 2, 10.0)
    account.buy("CCC", 3, 200.0)
    account.buy("AAA", 1, 30.0)
    account.sort()
    values = [holding.value for holding in account.portfolio]
    assert values == sorted(values, reverse=True)
    assert [h.symbol for h in account.portfolio][0] == "CCC"


def test_report_of_empty_portfolio(tmp_path):
    account = make_account(tmp_path)
    with pytest.raises(EmptyPortfolioError):
        account.portfolio_report()
    assert account.portfolio_value() == account.balance()


def test_report_lists_holdings_and_totals(tmp_path):
    account = make_account(tmp_path, 0)
    account.buy("AAA", 2, 30.0)
    account.buy("BBB", 3, 10.0)
    report = account.portfolio_report()
    lines = report.splitlines()
    assert lines[0].startswith("Symbol")
    assert any(line.startswith("AAA") for line in lines)
    assert any(line.startswith("BBB") for line in lines)
    assert "The Total Portfolio value is : $" in report
    total = account.balance() + account.portfolio.stock_value()
    assert account.portfolio_value() == pytest.approx(total)
    assert account.value_history[-1] == account.portfolio_value()


def test_portfolio_persists_across_accounts(tmp_path):
    account = make_account(tmp_path, 0)
    account.buy("CCC", 1, 200.0)
    account.buy("AAA", 4, 30.0)
    account.save_portfolio()
    reopened = make_account(tmp_path, 0)
    assert [(h.symbol, h.shares) for h in reopened.portfolio] == [("AAA", 4), ("CCC", 1)]
    assert reopened.balance() == account.balance()


def test_portfolio_value_round_trip(tmp_path):
    account = make_account(tmp_path)
    saved = account.save_portfolio_value()
    assert saved == account.balance()
    reopened = make_account(tmp_path)
    assert reopened.value_history == [saved]
    assert reopened.load_portfolio_values() == [(saved, STAMP)]


def test_load_portfolio_values_without_file(tmp_path):
    account = make_account(tmp_path)
    assert account.load_portfolio_values() == []
    assert account.value_history == []


def test_history_report_header(tmp_path):
    account = make_account(tmp_path, 0)
    account.buy("AAA", 1, 30.0)
    report = account.history_report().splitlines()
    assert report[0].startswith("Transaction")
    assert report[1:] == account.history()


def test_quote_uses_market(tmp_path):
    account = make_account(tmp_path, 1)
    assert account.quote("CCC") == SECOND["CCC"]
    with pytest.raises(UnknownSymbolError):
        account.quote("ZZZ")