"""Interactive menus for the bank and stock portfolio accounts."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator
from datetime import datetime
from pathlib import Path
from typing import TextIO

from acmis.bank_account import BankAccount
from acmis.ledger import AccountError
from acmis.market import Market
from acmis.stock_account import EmptyPortfolioError, StockAccount

RULE = "=" * 89

MAIN_MENU = (
    f"{RULE}\n"
    "\n   Choice # 1. Stock Portfolio Account"
    "\n    Choice # 2. Bank Account"
    "\n    Choice # 3. Quit\n"
    f"{RULE}\n"
    "Please enter your choice\n"
)

STOCK_MENU = (
    f"\n{RULE}\n"
    "\n\t\t\t\tSTOCK PORTFOLIO ACCOUNT\t\t\t\t\t\t"
    "\n Choice #1. Display the Stock Symbol's price"
    "\n Choice #2. Display the Current Portfolio"
    "\n Choice #3. Buy the Shares"
    "\n Choice #4. Sell the Shares"
    "\n Choice #5. View the Graph for the Portfolio Value Variation"
    "\n Choice #6. View the Transaction History"
    "\n Choice #7. Sort the Stock List"
    "\n Choice #8. Previous Menu\n"
    f"{RULE}\n"
    "\nPlease Enter Your Choice : "
)

BANK_MENU = (
    f"\n{RULE}\n"
    "\n\t\t\t\tBANK ACCOUNT\t\t\t\t"
    "\n Choice #1. View the Account Cash Balance"
    "\n Choice #2. Deposit Money"
    "\n Choice #3. Withdraw Money"
    "\n Choice #4. Print the History"
    "\n Choice #5. Previous Menu\n"
    f"{RULE}\n"
    "\nPlease Enter Your Choice : "
)


class _EndOfInput(Exception):
    """Raised internally when the input stream runs out."""


def _number(value: float) -> str:
    return format(value, "g")


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


class Session:
    """One run of the account management menus over text streams."""

    def __init__(
        self,
        directory: str | Path = ".",
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        rng=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.directory = Path(directory)
        self._out = stdout if stdout is not None else sys.stdout
        self._tokens = _tokens(stdin if stdin is not None else sys.stdin)
        self._exhausted = False
        # The bank account comes first so that a fresh balance file gets its default.
        self.bank = BankAccount(self.directory, clock)
        self.stocks = StockAccount(
            self.directory, Market.from_directory(self.directory, rng), clock
        )

    # -- input helpers -------------------------------------------------

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _next(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise _EndOfInput from None

    def _read_choice(self) -> int | None:
        token = self._next()
        try:
            return int(token)
        except ValueError:
            return None

    def _read_int(self) -> int | None:
        token = self._next()
        try:
            return int(token)
        except ValueError:
            self._write("\nERROR! Invalid number!\n")
            return None

    def _read_amount(self) -> float | None:
        token = self._next()
        try:
            return float(token)
        except ValueError:
            self._write("\nERROR! Invalid amount!\n")
            return None

    # -- menus ---------------------------------------------------------

    def run(self) -> None:
        """Show the main menu until the user quits or the input ends."""
        self._write(
            "\t\t\tWelcome To 'ACMIS' : The Personalized Account Management System\t\t\t\n"
        )
        self._write("\t\t\t\t\t\t\t\t\t\t MAIN MENU :\t\t\t     ")
        while not self._exhausted:
            self._write(MAIN_MENU)
            try:
                choice = self._read_choice()
            except _EndOfInput:
                self._exhausted = True
                return
            if choice == 1:
                self.stock_menu()
            elif choice == 2:
                self.bank_menu()
            elif choice == 3:
                self.stocks.save_portfolio()
                self.stocks.save_portfolio_value()
                self._write("\nSystem has been exited!")
                return
            else:
                self._write("\nERROR! Invalid choice!")

    def stock_menu(self) -> None:
        """Show the stock portfolio menu until the user goes back."""
        actions = {
            1: self._show_quote,
            2: self._show_portfolio,
            3: self._buy,
            4: self._sell,
            5: lambda: None,
            6: lambda: self._write("\n" + self.stocks.history_report() + "\n"),
            7: self._sort,
        }
        try:
            while True:
                self._write(STOCK_MENU)
                choice = self._read_choice()
                if choice == 8:
                    return
                action = actions.get(choice) if choice is not None else None
                if action is None:
                    self._write("\n")
                else:
                    action()
        except _EndOfInput:
            self._exhausted = True

    def bank_menu(self) -> None:
        """Show the bank account menu until the user goes back."""
        actions = {
            1: self._show_balance,
            2: self._deposit,
            3: self._withdraw,
            4: lambda: self._write("\n" + self.bank.history_report() + "\n"),
        }
        try:
            while True:
                self._write(BANK_MENU)
                choice = self._read_choice()
                if choice == 5:
                    return
                action = actions.get(choice) if choice is not None else None
                if action is None:
                    self._write("\n ERROR! Invalid choice!")
                else:
                    action()
        except _EndOfInput:
            self._exhausted = True

    # -- stock actions -------------------------------------------------

    def _show_quote(self) -> None:
        self._write("\nPlease Enter the Stock Symbol : ")
        symbol = self._next()
        try:
            price = self.stocks.quote(symbol)
        except AccountError:
            self._write("\nERROR! Symbol not found at database !\n")
            return
        self._write(f"{'Symbol':<10}{'Price/Share':<10}\n")
        self._write(f"{symbol:<10}{_number(price):<10}\n")

    def _show_portfolio(self) -> None:
        try:
            report = self.stocks.portfolio_report()
        except EmptyPortfolioError:
            self._write("\nERROR! No shares are available in portfolio! Please Buy some!\n")
            return
        self._write("\n" + report + "\n")

    def _buy(self) -> None:
        self._write("\nPlease Enter the stock symbol : ")
        symbol = self._next()
        if symbol not in self.stocks.market:
            self._write("\nERROR! Symbol Not found in the database!\n")
            return
        self._write("\nPlease Enter the Number of shares to buy : ")
        shares = self._read_int()
        if shares is None:
            return
        self._write("\nPlease Enter the maximum limit you're willing to pay per share : ")
        limit = self._read_amount()
        if limit is None:
            return
        try:
            trade = self.stocks.buy(symbol, shares, limit)
        except AccountError as error:
            self._write(f"\nERROR! {error}\n")
            return
        self._write(
            f"\nYou purchased {trade.shares} shares of {trade.symbol}"
            f" for a total of ${_number(trade.total)}"
        )

    def _sell(self) -> None:
        self._write("\nEnter the Symbol of stock to sell : ")
        symbol = self._next()
        if symbol not in self.stocks.portfolio:
            self._write("\nERROR! Symbol not found in portfolio!\n")
            return
        self._write("\nPlease Enter the no. of shares to sell : ")
        shares = self._read_int()
        if shares is None:
            return
        self._write("\nPlease Enter the mimimum limit willing to pay per share : ")
        limit = self._read_amount()
        if limit is None:
            return
        try:
            trade = self.stocks.sell(symbol, shares, limit)
        except AccountError as error:
            self._write(f"\nERROR! {error}\n")
            return
        self._write(
            f"\nYou sold {trade.shares} shares of {trade.symbol}"
            f" at rate of {_number(trade.price)} per share\n"
        )

    def _sort(self) -> None:
        try:
            self.stocks.sort()
        except EmptyPortfolioError:
            self._write("\nList is Empty! Can't Sort!\n")
            self._write("\nERROR! Empty list.\n")
            return
        self._write("\nSuccess! Stock list is now sorted!\n")

    # -- bank actions --------------------------------------------------

    def _show_balance(self) -> None:
        self._write(f"\nCurrent Cash Balance : {_number(self.bank.balance())}$\n")

    def _deposit(self) -> None:
        self._write("\nPlease Enter the Amount to Deposit ($) : ")
        amount = self._read_amount()
        if amount is None:
            return
        self.bank.deposit(amount)
        self._write(f"\nAmount ${_number(amount)} is Deposited to the Account\n")

    def _withdraw(self) -> None:
        self._write("\nEnter Amount to Withdraw ($): ")
        amount = self._read_amount()
        if amount is None:
            return
        try:
            self.bank.withdraw(amount)
        except AccountError as error:
            self._write(f"\n{error}\n")
            return
        self._write(f"\nAmount ${_number(amount)} is withdrwan from the Account\n")


def main(argv: list[str] | None = None) -> int:
    """Run the account management menus on standard input and output."""
    parser = argparse.ArgumentParser(
        description="Manage a bank account and a stock portfolio held in text files."
    )
    parser.add_argument(
        "--directory",
        default=".",
        help="directory holding the account and price files (default: current)",
    )
    args = parser.parse_args(argv)
    Session(args.directory, sys.stdin, sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())