"""Sets of integers drawn from the range 0 to 100."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

LOWEST = 0
HIGHEST = 100
TERMINATOR = -1


def is_valid_element(value: int) -> bool:
    """Return True if ``value`` may be stored in an :class:`IntegerSet`."""
    return LOWEST <= value <= HIGHEST


class IntegerSet:
    """A set of integers restricted to the range 0..100."""

    def __init__(self, elements: Iterable[int] = ()) -> None:
        self._members: set[int] = set()
        for element in elements:
            self.add(element)

    def add(self, value: int) -> None:
        """Add ``value``; raise ValueError if it lies outside 0..100."""
        if not is_valid_element(value):
            raise ValueError(f"invalid element: {value}")
        self._members.add(value)

    def union(self, other: IntegerSet) -> IntegerSet:
        """Return the elements found in either set."""
        return IntegerSet(self._members | other._members)

    def intersection(self, other: IntegerSet) -> IntegerSet:
        """Return the elements found in both sets."""
        return IntegerSet(self._members & other._members)

    def __contains__(self, value: object) -> bool:
        return value in self._members

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._members))

    def __len__(self) -> int:
        return len(self._members)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntegerSet):
            return NotImplemented
        return self._members == other._members

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "".join(["{ ", *(f"{value} " for value in self), "}"])

    def __repr__(self) -> str:
        return f"IntegerSet({sorted(self._members)!r})"


def read_set(lines: Iterable[str], output: TextIO) -> IntegerSet:
    """Read elements from ``lines`` until -1, prompting on ``output``.

    Each line may hold several whitespace-separated numbers; numbers
    following the terminator on the same line are discarded.  Input that
    ends before the terminator ends the entry as well.
    """
    result = IntegerSet()
    finished = False
    for line in lines:
        for token in line.split():
            output.write("Enter an element (-1 to end): ")
            number = int(token)
            if is_valid_element(number):
                result.add(number)
            elif number == TERMINATOR:
                finished = True
                break
            else:
                output.write("Invalid Element\n")
        if finished:
            break
    output.write("Entry complete\n")
    return result


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Read two sets from standard input and print their union and intersection."""
    parser = argparse.ArgumentParser(
        description="Read two integer sets and show their union and intersection."
    )
    parser.parse_args(argv)

    out = sys.stdout
    tokens = _tokens(sys.stdin)

    out.write("Enter set A:\n")
    first = read_set(tokens, out)
    out.write(f"\nSet A is : \n{first}\n")

    out.write("\nEnter set B:\n")
    second = read_set(tokens, out)
    out.write(f"\nSet B is : \n{second}\n")

    out.write(f"\nUnion of A and B is:\n{first.union(second)}\n")
    out.write(f"\nIntersection of A and B is:\n{first.intersection(second)}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())