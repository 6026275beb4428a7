"""Word dictionary with log-probability weights and user-supplied words."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from .strutil import split

DICT_COLUMN_NUM = 3
UNKNOWN_TAG = ""

_ATOF_RE = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|inf(?:inity)?))",
    re.IGNORECASE,
)
_ATOI_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def _atof(text: str) -> float:
    match = _ATOF_RE.match(text)
    return float(match.group(1)) if match else 0.0


def _atoi(text: str) -> int:
    match = _ATOI_RE.match(text)
    return int(match.group(1)) if match else 0


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


class WeightOption(Enum):
    """Which static weight a user word without a frequency receives."""

    MIN = "min"
    MEDIAN = "median"
    MAX = "max"


@dataclass
class DictUnit:
    """A dictionary word with its log-probability weight and tag."""

    word: str
    weight: float
    tag: str = UNKNOWN_TAG


class DictTrie:
    """Dictionary of ``word freq tag`` lines plus optional user words."""

    def __init__(
        self,
        dict_text: str,
        user_dict_lines: Iterable[str] = (),
        weight_option: WeightOption = WeightOption.MEDIAN,
    ) -> None:
        units = [self._parse_dict_line(line) for line in _lines(dict_text)]
        self.freq_sum = sum(unit.weight for unit in units)
        if not self.freq_sum > 0.0:
            raise ValueError("dictionary frequencies must sum to a positive value")
        for unit in units:
            if not unit.weight > 0.0:
                raise ValueError(f"frequency of {unit.word!r} must be positive")
            unit.weight = math.log(unit.weight / self.freq_sum)

        ordered = sorted(unit.weight for unit in units)
        self._min_weight = ordered[0]
        self.max_weight = ordered[-1]
        self.median_weight = ordered[len(ordered) // 2]
        self.user_word_default_weight = {
            WeightOption.MIN: self._min_weight,
            WeightOption.MEDIAN: self.median_weight,
            WeightOption.MAX: self.max_weight,
        }[weight_option]

        self._units: dict[str, DictUnit] = {unit.word: unit for unit in units}
        self._single_chars: set[str] = set()
        self.load_user_dict(user_dict_lines)

    @staticmethod
    def _parse_dict_line(line: str) -> DictUnit:
        fields = split(line, " ")
        if len(fields) != DICT_COLUMN_NUM:
            raise ValueError(f"split result illegal, line: {line!r}")
        return DictUnit(fields[0], _atof(fields[1]), fields[2])

    def _weight_for_freq(self, freq: int) -> float:
        if freq > 0:
            return math.log(freq / self.freq_sum)
        return -math.inf if freq == 0 else math.nan

    def _user_unit(self, line: str) -> DictUnit | None:
        fields = split(line, " ")
        if len(fields) == 1:
            return DictUnit(fields[0], self.user_word_default_weight)
        if len(fields) == 2:
            return DictUnit(fields[0], self.user_word_default_weight, fields[1])
        if len(fields) == 3:
            weight = self._weight_for_freq(_atoi(fields[1]))
            return DictUnit(fields[0], weight, fields[2])
        return None

    def find(self, word: str) -> DictUnit | None:
        """The entry for *word*, or None."""
        return self._units.get(word)

    def __contains__(self, word: object) -> bool:
        return word in self._units

    def __len__(self) -> int:
        return len(self._units)

    def insert_user_word(
        self, word: str, freq: int = 0, tag: str = UNKNOWN_TAG
    ) -> DictUnit:
        """Add or replace *word*; a zero *freq* gives the default user weight."""
        weight = self._weight_for_freq(freq) if freq else self.user_word_default_weight
        unit = DictUnit(word, weight, tag)
        self._units[word] = unit
        return unit

    def delete_user_word(self, word: str) -> bool:
        """Remove *word*; return whether it was present."""
        return self._units.pop(word, None) is not None

    def load_user_dict(self, lines: Iterable[str]) -> None:
        """Add ``word``, ``word tag`` or ``word freq tag`` lines."""
        for raw in lines:
            line = raw.rstrip("\n")
            if not line:
                continue
            unit = self._user_unit(line)
            if unit is None:
                continue
            self._units[unit.word] = unit
            if len(unit.word) == 1:
                self._single_chars.add(unit.word)

    def is_user_dict_single_chinese_word(self, char: str) -> bool:
        """Whether *char* was given as a one-character user word."""
        return char in self._single_chars

    def min_weight(self) -> float:
        """Smallest weight among the static dictionary words."""
        return self._min_weight