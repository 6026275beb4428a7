"""Splitting a sentence into runs between separator characters."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .strutil import decode_runes

SPECIAL_SEPARATORS = " \t\n\uff0c\u3002"


def make_separators(text: str | bytes = SPECIAL_SEPARATORS) -> frozenset[int]:
    """Code points of *text* as a separator set; duplicates raise ValueError."""
    seen: set[int] = set()
    for rune in decode_runes(text):
        if rune in seen:
            raise ValueError(f"separator {chr(rune)!r} already exists")
        seen.add(rune)
    return frozenset(seen)


DEFAULT_SEPARATORS = make_separators()


class PreFilter:
    """Iterates (start, end) rune spans: each separator alone, text runs between."""

    def __init__(
        self, sentence: str | bytes, symbols: Iterable[int] | None = None
    ) -> None:
        self.runes = decode_runes(sentence)
        self.text = "".join(map(chr, self.runes))
        self.symbols = DEFAULT_SEPARATORS if symbols is None else frozenset(symbols)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        start = 0
        for pos, rune in enumerate(self.runes):
            if rune in self.symbols:
                if start < pos:
                    yield start, pos
                yield pos, pos + 1
                start = pos + 1
        if start < len(self.runes):
            yield start, len(self.runes)