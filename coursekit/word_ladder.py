"""Shortest word ladders between two words of equal length."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

from coursekit.lexicon import LexiconError, load_lexicon

DEFAULT_LEXICON = "words.txt"
_WILDCARD = "#"


def words_of_length(lexicon: Iterable[str], length: int) -> set[str]:
    """Return the words of ``lexicon`` that have exactly ``length`` letters."""
    return {word for word in lexicon if len(word) == length}


def _templates(word: str) -> Iterable[str]:
    for i in range(len(word)):
        yield word[:i] + _WILDCARD + word[i + 1 :]


def build_adjacency(words: Iterable[str], length: int) -> dict[str, list[str]]:
    """Map each one-letter wildcard template to the words of ``length`` that match it.

    Words of any other length are ignored.
    """
    adjacency: dict[str, list[str]] = {}
    for word in words:
        if len(word) != length:
            continue
        for template in _templates(word):
            adjacency.setdefault(template, []).append(word)
    return adjacency


def find_ladders(start: str, end: str, lexicon: Iterable[str]) -> list[list[str]]:
    """Return every shortest ladder from ``start`` to ``end``, sorted.

    Each step changes exactly one letter and every intermediate word comes
    from ``lexicon``. An empty list means no ladder exists.
    """
    length = len(start)
    adjacency = build_adjacency(words_of_length(lexicon, length), length)
    visited: set[str] = set()
    frontier: list[list[str]] = [[start]]

    while frontier:
        ladders: list[list[str]] = []
        next_frontier: list[list[str]] = []
        for path in frontier:
            word = path[-1]
            visited.add(word)
            neighbours = dict.fromkeys(
                neighbour
                for template in _templates(word)
                for neighbour in adjacency.get(template, ())
            )
            for neighbour in neighbours:
                if neighbour == end:
                    ladders.append([*path, neighbour])
                elif neighbour not in visited:
                    next_frontier.append([*path, neighbour])
        if ladders:
            return sorted(ladders)
        frontier = next_frontier
    return []


def format_path(path: Sequence[str]) -> str:
    """Return the words of a ladder separated by spaces."""
    return " ".join(path)


def _prompt(text: str) -> str:
    try:
        return input(text)
    except EOFError:
        return ""


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for two words and print every shortest ladder between them."""
    parser = argparse.ArgumentParser(description="Find shortest word ladders.")
    parser.add_argument(
        "lexicon",
        nargs="?",
        default=DEFAULT_LEXICON,
        help="file of whitespace-separated words",
    )
    args = parser.parse_args(argv)

    start = _prompt("Enter start word (RETURN to quit):")
    if not start:
        return 0
    end = _prompt("Enter destination word:")
    if not end:
        return 0

    try:
        lexicon = load_lexicon(args.lexicon)
    except LexiconError as exc:
        print(exc)
        return 1

    ladders = find_ladders(start, end, lexicon)
    if ladders:
        print("Found Ladder: ", end="")
        for path in ladders:
            print(format_path(path))
    else:
        print("No ladder found.")
    return 0


if __name__ == "__main__":
    sys.exit(main())