"""Loading a lexicon of words from a whitespace-separated text file."""

from __future__ import annotations

import os


class LexiconError(Exception):
    """Raised when a lexicon file cannot be opened or read."""


def load_lexicon(path: str | os.PathLike[str]) -> set[str]:
    """Return the set of whitespace-separated words found in the file at ``path``."""
    try:
        handle = open(path, encoding="utf-8")
    except OSError as exc:
        raise LexiconError("Failed to open file") from exc
    with handle:
        try:
            text = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise LexiconError("I/O error while reading") from exc
    return set(text.split())