"""Keyword extraction by TF-IDF weighting and by TextRank over word graphs."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from operator import attrgetter
from typing import Protocol

from .strutil import split

DAMPING = 0.85

_ATOF_RE = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|inf(?:inity)?))",
    re.IGNORECASE,
)


class Segmenter(Protocol):
    """Anything that splits a sentence into consecutive words."""

    def cut(self, sentence: str) -> list[str]: ...


@dataclass
class Keyword:
    """A word, the byte offsets where it occurs and its score."""

    word: str
    offsets: list[int] = field(default_factory=list)
    weight: float = 0.0

    def __str__(self) -> str:
        offsets = ", ".join(str(offset) for offset in self.offsets)
        return (
            f'{{"word": "{self.word}", "offset": [{offsets}], '
            f'"weight": {self.weight:g}}}'
        )


def _atof(text: str) -> float:
    match = _ATOF_RE.match(text)
    return float(match.group(1)) if match else 0.0


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _byte_len(text: str | bytes) -> int:
    return len(text) if isinstance(text, bytes) else len(text.encode("utf-8"))


def _check_coverage(sentence: str | bytes, covered: int) -> None:
    if covered != _byte_len(sentence):
        raise ValueError("words illegal: segments do not cover the sentence")


def _top(keywords: list[Keyword], top_n: int) -> list[Keyword]:
    return sorted(keywords, key=attrgetter("weight"), reverse=True)[:top_n]


def load_idf(text: str) -> tuple[dict[str, float], float]:
    """Read ``word idf`` lines; return the table and the average idf.

    Empty and malformed lines are skipped but still count towards the
    average. Raises ValueError when there are no lines or the average is
    not positive.
    """
    idf: dict[str, float] = {}
    total = 0.0
    lines = _lines(text)
    for line in lines:
        if not line:
            continue
        fields = split(line, " ")
        if len(fields) != 2:
            continue
        value = _atof(fields[1])
        idf[fields[0]] = value
        total += value
    if not lines:
        raise ValueError("idf data is empty")
    average = total / len(lines)
    if not average > 0.0:
        raise ValueError("average idf must be positive")
    return idf, average


class _StopWordFilter:
    def __init__(self, stop_words: Iterable[str]) -> None:
        self.stop_words = frozenset(stop_words)
        if not self.stop_words:
            raise ValueError("stop word list is empty")

    def _skip(self, word: str) -> bool:
        return len(word) == 1 or word in self.stop_words


class KeywordExtractor(_StopWordFilter):
    """Ranks words by term frequency times inverse document frequency."""

    def __init__(
        self, segment: Segmenter, idf_text: str, stop_words: Iterable[str]
    ) -> None:
        self.segment = segment
        self.idf, self.idf_average = load_idf(idf_text)
        super().__init__(stop_words)

    def extract(self, sentence: str, top_n: int) -> list[Keyword]:
        """The *top_n* highest weighted keywords of *sentence*."""
        found: dict[str, Keyword] = {}
        offset = 0
        for word in self.segment.cut(sentence):
            start = offset
            offset += _byte_len(word)
            if self._skip(word):
                continue
            keyword = found.setdefault(word, Keyword(word))
            keyword.offsets.append(start)
            keyword.weight += 1.0
        _check_coverage(sentence, offset)
        keywords = [found[word] for word in sorted(found)]
        for keyword in keywords:
            keyword.weight *= self.idf.get(keyword.word, self.idf_average)
        return _top(keywords, top_n)


def _normalize(scores: dict[str, float]) -> dict[str, float]:
    if not scores:
        return {}
    low = min(scores.values()) / 10.0
    high = max(scores.values())
    return {word: (score - low) / (high - low) for word, score in scores.items()}


class WordGraph:
    """Undirected weighted co-occurrence graph scored with PageRank."""

    def __init__(self, d: float = DAMPING) -> None:
        self.d = d
        self._graph: dict[str, dict[str, float]] = {}

    def add_edge(self, start: str, end: str, weight: float) -> None:
        """Add *weight* to the edge between *start* and *end*, both ways."""
        forward = self._graph.setdefault(start, {})
        forward[end] = forward.get(end, 0.0) + weight
        backward = self._graph.setdefault(end, {})
        backward[start] = backward.get(start, 0.0) + weight

    def _scores(self, rank_time: int) -> dict[str, float]:
        if not self._graph:
            return {}
        nodes = sorted(self._graph)
        scores = {node: 1.0 / len(nodes) for node in nodes}
        out_sum = {node: sum(self._graph[node].values()) for node in nodes}
        for _ in range(rank_time):
            for node in nodes:
                total = sum(
                    weight / out_sum[end] * scores[end]
                    for end, weight in sorted(self._graph[node].items())
                )
                scores[node] = (1 - self.d) + self.d * total
        return scores

    def rank(self, rank_time: int = 10) -> dict[str, float]:
        """Normalised score of each node after *rank_time* iterations."""
        return _normalize(self._scores(rank_time))


class TextRankExtractor(_StopWordFilter):
    """Ranks words by TextRank over a sliding co-occurrence window."""

    def __init__(self, segment: Segmenter, stop_words: Iterable[str]) -> None:
        self.segment = segment
        super().__init__(stop_words)

    def extract(
        self, sentence: str, top_n: int, span: int = 5, rank_time: int = 10
    ) -> list[Keyword]:
        """The *top_n* highest ranked keywords of *sentence*."""
        words = self.segment.cut(sentence)
        graph = WordGraph()
        found: dict[str, Keyword] = {}
        offset = 0
        for pos, word in enumerate(words):
            start = offset
            offset += _byte_len(word)
            if self._skip(word):
                continue
            skipped = 0
            other = pos + 1
            while other < pos + span + skipped and other < len(words):
                if self._skip(words[other]):
                    skipped += 1
                else:
                    graph.add_edge(word, words[other], 1.0)
                other += 1
            found.setdefault(word, Keyword(word)).offsets.append(start)
        _check_coverage(sentence, offset)

        scores = graph._scores(rank_time)
        if scores:
            ranked = _normalize({word: scores.get(word, 0.0) for word in found})
            for word, keyword in found.items():
                keyword.weight = ranked[word]
        return _top([found[word] for word in sorted(found)], top_n)