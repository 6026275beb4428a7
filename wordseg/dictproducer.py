"""Building word-frequency dictionaries from English and Chinese corpora."""

from __future__ import annotations

import logging
import re
from collections import Counter
from collections.abc import Callable, Iterable, Iterator, MutableMapping, MutableSet
from os import PathLike
from typing import Protocol

from .ini import IniReader

logger = logging.getLogger(__name__)

UNKNOWN = "UNKNOWN"
CONFIG_SECTION = "user"

_CHINESE_RE = re.compile("[\u4e00-\u9fa5]+")
_WHITESPACE_RE = re.compile(r"[ \t\n\v\f\r]+")
_INT_RE = re.compile(r"[+-]?[0-9]+")
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)

Path = str | PathLike[str]
Cutter = Callable[[str], Iterable[str]]


class SortedSetStore(Protocol):
    """A store of scored members under keys, such as a Redis sorted set."""

    def zadd(self, key: str, member: str, score: int) -> object: ...


def is_chinese(word: str) -> bool:
    """Whether *word* is non-empty and made only of common CJK ideographs."""
    return _CHINESE_RE.fullmatch(word) is not None


def _read_lines(path: Path) -> Iterator[str]:
    with open(path, encoding="utf-8", newline="") as handle:
        for line in handle:
            yield line[:-1] if line.endswith("\n") else line


def read_stopwords(path: Path) -> set[str]:
    """Stop words of a file, one per line, with a trailing '\\r' removed.

    Raises OSError when the file cannot be opened.
    """
    stopwords: set[str] = set()
    for line in _read_lines(path):
        if line:
            stopwords.add(line[:-1] if line.endswith("\r") else line)
    return stopwords


def _clean_english_word(raw: str) -> str:
    lowered = raw.translate(_ASCII_LOWER)
    return "".join(ch for ch in lowered if ch.isascii() and ch.isalpha())


def _append_counts(path: Path, counts: MutableMapping[str, int]) -> None:
    with open(path, "a", encoding="utf-8", newline="") as handle:
        for word in sorted(counts):
            handle.write(f"{word} {counts[word]}\n")


class DictProducer:
    """Counts words of corpora and writes them to dictionary files or a store."""

    def __init__(
        self,
        en_corpus: Path,
        en_stops: Path,
        cn_corpus: Path,
        cn_stops: Path,
        dict_path: Path,
    ) -> None:
        self.en_corpus = en_corpus
        self.en_stops = en_stops
        self.cn_corpus = cn_corpus
        self.cn_stops = cn_stops
        self.dict_path = dict_path
        self._en_freq: Counter[str] = Counter()
        self._cn_freq: Counter[str] = Counter()

    @classmethod
    def from_config(cls, reader: IniReader) -> DictProducer:
        """Take the corpus and dictionary paths from the ``[user]`` section."""
        def setting(name: str) -> str:
            return reader.get(CONFIG_SECTION, name, UNKNOWN)

        return cls(
            setting("EnglishYuliao"),
            setting("EnglishStop"),
            setting("ChineseYuliao"),
            setting("ChineseStop"),
            setting("dict"),
        )

    @property
    def en_words(self) -> dict[str, int]:
        """English word counts gathered so far."""
        return dict(self._en_freq)

    @property
    def cn_words(self) -> dict[str, int]:
        """Chinese word counts currently held."""
        return dict(self._cn_freq)

    # English

    def _count_english(self) -> None:
        with open(self.en_corpus, encoding="utf-8", newline="") as corpus:
            stops = read_stopwords(self.en_stops)
            for line in corpus:
                for raw in _WHITESPACE_RE.split(line):
                    word = _clean_english_word(raw)
                    if word and word not in stops:
                        self._en_freq[word] += 1

    def build_en_dict(self, dict_path: Path) -> None:
        """Count the English corpus and append ``word count`` lines to *dict_path*.

        Counts accumulate over calls. Raises OSError when the corpus or the
        stop word file cannot be opened.
        """
        self._count_english()
        _append_counts(dict_path, self._en_freq)

    def load_dict_and_store(self, dict_path: Path, store: SortedSetStore) -> None:
        """Index each ``word freq`` line of *dict_path* under each of its letters."""
        for line in _read_lines(dict_path):
            fields = _WHITESPACE_RE.split(line.strip(" \t\n\v\f\r"))
            if len(fields) < 2:
                continue
            match = _INT_RE.match(fields[1])
            if match is None:
                continue
            word, freq = fields[0], int(match.group())
            for ch in sorted(set(word)):
                store.zadd(ch, word, freq)

    # Chinese

    def _load_cn_stopwords(self) -> set[str]:
        try:
            return read_stopwords(self.cn_stops)
        except OSError as error:
            logger.error("cannot open stop word file %s: %s", self.cn_stops, error)
            return set()

    def _clean_cn_freq(self) -> None:
        stopwords = self._load_cn_stopwords()
        for word in list(self._cn_freq):
            if not is_chinese(word) or word in stopwords:
                del self._cn_freq[word]

    def _cut_and_count(self, cn_corpus: Path, cut: Cutter) -> None:
        for line in _read_lines(cn_corpus):
            self._cn_freq.update(cut(line))
        self._clean_cn_freq()

    def build_cn_dict(self, cn_corpus: Path, dict_path: Path, cut: Cutter) -> None:
        """Segment *cn_corpus* with *cut*, keep Chinese non-stop words, append counts."""
        self._cut_and_count(cn_corpus, cut)
        _append_counts(dict_path, self._cn_freq)

    def build_cn_dict_from_string(
        self,
        text: str,
        idx: int,
        vocabulary: MutableSet[str],
        tf: MutableMapping[int, dict[str, int]],
        cut: Cutter,
    ) -> None:
        """Record term frequencies of *text* as document *idx* in *tf*.

        Every kept word is added to *vocabulary*; the held Chinese counts are
        cleared afterwards.
        """
        self._cn_freq.update(cut(text))
        self._clean_cn_freq()
        for word, freq in sorted(self._cn_freq.items()):
            tf.setdefault(idx, {})[word] = freq
            vocabulary.add(word)
        self._cn_freq.clear()

    def save_dict_to_store(self, store: SortedSetStore) -> None:
        """Index every held Chinese word under each of its characters."""
        for word, freq in sorted(self._cn_freq.items()):
            for ch in sorted(set(word)):
                store.zadd(ch, word, freq)