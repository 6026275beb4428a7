"""Hidden Markov model for segmenting runs of characters into words."""

from __future__ import annotations

import re
from collections.abc import Iterator
from os import PathLike

from .prefilter import PreFilter, make_separators
from .strutil import decode_runes, split, trim

B, E, M, S = 0, 1, 2, 3
STATES = (B, E, M, S)
STATUS_SUM = len(STATES)
MIN_DOUBLE = -3.14e100

_ATOF_RE = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?))",
    re.IGNORECASE,
)


def _atof(text: str) -> float:
    match = _ATOF_RE.match(text)
    return float(match.group(1)) if match else 0.0


def _model_lines(text: str) -> Iterator[str]:
    for raw in text.split("\n"):
        line = trim(raw)
        if line and not line.startswith("#"):
            yield line


def _next_line(lines: Iterator[str]) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise ValueError("model data ended early") from None


def _prob_row(line: str) -> tuple[float, ...]:
    fields = split(line, " ")
    if len(fields) != STATUS_SUM:
        raise ValueError(f"expected {STATUS_SUM} probabilities: {line!r}")
    return tuple(_atof(field) for field in fields)


def _emit_row(line: str) -> dict[str, float]:
    probs: dict[str, float] = {}
    for item in split(line, ","):
        parts = split(item, ":")
        if len(parts) != 2:
            raise ValueError(f"emit probability illegal: {item!r}")
        runes = decode_runes(parts[0])
        if len(runes) != 1:
            raise ValueError(f"emit key must be one character: {parts[0]!r}")
        probs[chr(runes[0])] = _atof(parts[1])
    return probs


class HMMModel:
    """Start, transition and emission log-probabilities for states B, E, M, S."""

    def __init__(self, text: str) -> None:
        lines = _model_lines(text)
        self.start_prob = _prob_row(_next_line(lines))
        self.trans_prob = tuple(_prob_row(_next_line(lines)) for _ in STATES)
        self.emit_probs = [_emit_row(_next_line(lines)) for _ in STATES]

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> HMMModel:
        """Load a model file."""
        with open(path, encoding="utf-8") as handle:
            return cls(handle.read())

    def emit_prob(self, state: int, char: str, default: float) -> float:
        """Emission log-probability of *char* in *state*, or *default*."""
        return self.emit_probs[state].get(char, default)


def _is_letter(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z"


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _letters_end(text: str, start: int) -> int:
    if not _is_letter(text[start]):
        return start
    pos = start + 1
    while pos < len(text) and (_is_letter(text[pos]) or _is_digit(text[pos])):
        pos += 1
    return pos


def _numbers_end(text: str, start: int) -> int:
    if not _is_digit(text[start]):
        return start
    pos = start + 1
    while pos < len(text) and (_is_digit(text[pos]) or text[pos] == "."):
        pos += 1
    return pos


class HMMSegment:
    """Segments text with an HMM, keeping ASCII words and numbers whole."""

    def __init__(self, model: HMMModel) -> None:
        self.model = model
        self.symbols = make_separators()

    def cut(self, sentence: str | bytes) -> list[str]:
        """Split *sentence* into words."""
        pre = PreFilter(sentence, self.symbols)
        words: list[str] = []
        for start, end in pre:
            words.extend(self._cut_run(pre.text[start:end]))
        return words

    def _cut_run(self, text: str) -> list[str]:
        words: list[str] = []
        left = right = 0
        while right < len(text):
            if ord(text[right]) < 0x80:
                if left != right:
                    words.extend(self._internal_cut(text[left:right]))
                left = right
                right = _letters_end(text, left)
                if right == left:
                    right = _numbers_end(text, left)
                if right == left:
                    right = left + 1
                words.append(text[left:right])
                left = right
            else:
                right += 1
        if left != right:
            words.extend(self._internal_cut(text[left:right]))
        return words

    def _internal_cut(self, text: str) -> list[str]:
        words: list[str] = []
        left = 0
        for pos, state in enumerate(self.viterbi(text)):
            if state in (E, S):
                words.append(text[left:pos + 1])
                left = pos + 1
        return words

    def viterbi(self, text: str) -> list[int]:
        """Most likely state (B, E, M or S) for each character of *text*."""
        if not text:
            return []
        model = self.model
        weights = [
            model.start_prob[y] + model.emit_prob(y, text[0], MIN_DOUBLE)
            for y in STATES
        ]
        paths: list[list[int]] = [[-1] * STATUS_SUM]
        for ch in text[1:]:
            row: list[float] = []
            back: list[int] = []
            for y in STATES:
                emit = model.emit_prob(y, ch, MIN_DOUBLE)
                best, best_from = MIN_DOUBLE, E
                for pre in STATES:
                    candidate = weights[pre] + model.trans_prob[pre][y] + emit
                    if candidate > best:
                        best, best_from = candidate, pre
                row.append(best)
                back.append(best_from)
            weights = row
            paths.append(back)
        state = E if weights[E] >= weights[S] else S
        status: list[int] = []
        for back in reversed(paths):
            status.append(state)
            state = back[state]
        status.reverse()
        return status