"""Book sale records: reading, combining and summarising sales."""

from __future__ import annotations

import argparse
import dataclasses
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from itertools import groupby, islice
from operator import attrgetter


@dataclass
class BookSale:
    """Units of one book sold at one price."""

    name: str = ""
    units_sold: int = 0
    price: float = 0.0
    _revenue: float | None = field(default=None, init=False, repr=False, compare=False)

    def revenue(self) -> float:
        """Return units sold times price, computed once and cached."""
        if self._revenue is None:
            self._revenue = self.units_sold * self.price
        return self._revenue

    def combine(self, other: BookSale) -> BookSale:
        """Add the units of ``other`` to this sale and return this sale."""
        self.units_sold += other.units_sold
        self._revenue = None
        return self

    def __add__(self, other: BookSale) -> BookSale:
        if not isinstance(other, BookSale):
            return NotImplemented
        return dataclasses.replace(self).combine(other)

    def __str__(self) -> str:
        return (
            f"{self.units_sold}*{self.name}@${format(self.price, 'g')}"
            f" = ${format(self.revenue(), 'g')}"
        )


def read_sales(stream: Iterable[str]) -> Iterator[BookSale]:
    """Yield sales read as ``name units price`` triples of whitespace-separated tokens.

    Reading stops at the first incomplete or malformed triple.
    """
    tokens = (token for line in stream for token in line.split())
    while True:
        chunk = list(islice(tokens, 3))
        if len(chunk) < 3:
            return
        name, units, price = chunk
        try:
            sale = BookSale(name, int(units), float(price))
        except ValueError:
            return
        yield sale


def summarize(sales: Iterable[BookSale]) -> list[BookSale]:
    """Combine each run of consecutive sales of the same book into one sale."""
    summary = []
    for _, group in groupby(sales, key=attrgetter("name")):
        first, *rest = group
        total = dataclasses.replace(first)
        for sale in rest:
            total.combine(sale)
        summary.append(total)
    return summary


def main(argv: Sequence[str] | None = None) -> int:
    """Read sales from standard input and print one combined line per book run."""
    argparse.ArgumentParser(description="Summarise book sales.").parse_args(argv)
    summary = summarize(read_sales(sys.stdin))
    if not summary:
        print("No data?!", file=sys.stderr)
        return 0
    for sale in summary:
        print(sale)
    return 0


if __name__ == "__main__":
    sys.exit(main())