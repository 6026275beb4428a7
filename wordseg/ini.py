"""INI file parsing and typed lookup of name/value pairs."""

from __future__ import annotations

import math
import re
import string
from dataclasses import dataclass, field
from os import PathLike

MAX_LINE = 200
MAX_SECTION = 50
MAX_NAME = 50
START_COMMENT_PREFIXES = ";#"
INLINE_COMMENT_PREFIXES = ";"

_WHITESPACE = " \t\n\v\f\r"
_BOM = "\ufeff"
# Lines are read in chunks of at most MAX_LINE - 1 characters, newline included.
_LINE_RE = re.compile(
    rf"[^\n]{{1,{MAX_LINE - 2}}}\n|[^\n]{{1,{MAX_LINE - 1}}}|\n"
)
_INT_RE = re.compile(
    r"[ \t\n\v\f\r]*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)"
)
_REAL_RE = re.compile(
    r"[ \t\n\v\f\r]*("
    r"[+-]?(?:"
    r"0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?[0-9]+)?"
    r"|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?"
    r"|inf(?:inity)?"
    r"|nan))",
    re.IGNORECASE,
)
_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TRUE = frozenset({"true", "yes", "on", "1"})
_FALSE = frozenset({"false", "no", "off", "0"})
_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)
_ULONG_MAX = 2**64 - 1


@dataclass(frozen=True)
class IniEntry:
    """One name/value pair found in a section."""

    section: str
    name: str
    value: str


@dataclass
class IniParseResult:
    """Pairs in file order and the line of the first error, 0 if none."""

    entries: list[IniEntry] = field(default_factory=list)
    error_line: int = 0


def _find_chars_or_comment(s: str, chars: str) -> int:
    was_space = False
    for pos, ch in enumerate(s):
        if ch in chars or (was_space and ch in INLINE_COMMENT_PREFIXES):
            return pos
        was_space = ch in _WHITESPACE
    return len(s)


def _strip_inline_comment(s: str) -> str:
    return s[:_find_chars_or_comment(s, "")]


def parse_ini(text: str) -> IniParseResult:
    """Parse INI *text*, continuing past errors.

    Supports [section] headers, name=value and name:value pairs, comments
    starting with ';' or '#', inline ';' comments after whitespace, and
    indented continuation lines that repeat the previous name.
    """
    result = IniParseResult()
    section = ""
    prev_name = ""
    for lineno, match in enumerate(_LINE_RE.finditer(text), start=1):
        line = match.group()
        body = line[1:] if lineno == 1 and line.startswith(_BOM) else line
        left = body.lstrip(_WHITESPACE)
        indented = len(left) < len(line)
        stripped = left.rstrip(_WHITESPACE)

        if not stripped or stripped[0] in START_COMMENT_PREFIXES:
            continue
        if prev_name and indented:
            value = _strip_inline_comment(stripped).rstrip(_WHITESPACE)
            result.entries.append(IniEntry(section, prev_name, value))
        elif stripped[0] == "[":
            end = _find_chars_or_comment(stripped[1:], "]") + 1
            if end < len(stripped) and stripped[end] == "]":
                section = stripped[1:end][:MAX_SECTION - 1]
                prev_name = ""
            elif not result.error_line:
                result.error_line = lineno
        else:
            end = _find_chars_or_comment(stripped, "=:")
            if end < len(stripped):
                name = stripped[:end].rstrip(_WHITESPACE)
                value = _strip_inline_comment(stripped[end + 1:]).strip(_WHITESPACE)
                prev_name = name[:MAX_NAME - 1]
                result.entries.append(IniEntry(section, name, value))
            elif not result.error_line:
                result.error_line = lineno
    return result


def _parse_long(value: str) -> tuple[bool, int]:
    match = _INT_RE.match(value)
    if match is None:
        return False, 0
    sign, digits = match.groups()
    if digits[:2] in ("0x", "0X"):
        magnitude = int(digits[2:], 16)
    elif digits.startswith("0"):
        magnitude = int(digits, 8)
    else:
        magnitude = int(digits)
    return True, -magnitude if sign == "-" else magnitude


class IniReader:
    """Name/value pairs of an INI document, looked up case-insensitively."""

    def __init__(self, text: str) -> None:
        result = parse_ini(text)
        self._error = result.error_line
        self._values: dict[tuple[str, str], str] = {}
        for entry in result.entries:
            key = self._make_key(entry.section, entry.name)
            if key in self._values:
                self._values[key] += "\n" + entry.value
            else:
                self._values[key] = entry.value

    @classmethod
    def from_file(cls, filename: str | PathLike[str]) -> IniReader:
        """Read and parse the file; OSError propagates if it cannot be opened."""
        with open(filename, encoding="utf-8", newline="") as handle:
            return cls(handle.read())

    @staticmethod
    def _make_key(section: str, name: str) -> tuple[str, str]:
        return section.translate(_LOWER), name.translate(_LOWER)

    def parse_error(self) -> int:
        """Line number of the first parse error, or 0 when there was none."""
        return self._error

    def get(self, section: str, name: str, default: str) -> str:
        """Raw value, or *default* if absent."""
        return self._values.get(self._make_key(section, name), default)

    def get_string(self, section: str, name: str, default: str) -> str:
        """Value, or *default* if absent or empty."""
        return self.get(section, name, "") or default

    def get_integer(self, section: str, name: str, default: int) -> int:
        """Leading decimal, octal or hex integer of the value, else *default*."""
        ok, number = _parse_long(self.get(section, name, ""))
        if not ok:
            return default
        return min(max(number, _LONG_MIN), _LONG_MAX)

    def get_unsigned(self, section: str, name: str, default: int) -> int:
        """Leading unsigned integer of the value, else *default*.

        A leading minus sign wraps around modulo 2**64.
        """
        ok, number = _parse_long(self.get(section, name, ""))
        if not ok:
            return default
        if abs(number) > _ULONG_MAX:
            return _ULONG_MAX
        return number % (_ULONG_MAX + 1)

    def get_real(self, section: str, name: str, default: float) -> float:
        """Leading floating-point number of the value, else *default*."""
        match = _REAL_RE.match(self.get(section, name, ""))
        if match is None:
            return default
        token = match.group(1)
        if "x" in token.lower():
            sign = -1.0 if token.startswith("-") else 1.0
            return sign * float.fromhex(token.lstrip("+-"))
        number = float(token)
        return number if not math.isnan(number) else math.nan

    def get_boolean(self, section: str, name: str, default: bool) -> bool:
        """True for true/yes/on/1, False for false/no/off/0, else *default*."""
        value = self.get(section, name, "").translate(_LOWER)
        if value in _TRUE:
            return True
        if value in _FALSE:
            return False
        return default

    def has_section(self, section: str) -> bool:
        """Whether *section* holds at least one name/value pair."""
        wanted = section.translate(_LOWER)
        return any(key_section == wanted for key_section, _ in self._values)

    def has_value(self, section: str, name: str) -> bool:
        """Whether a value exists for *name* in *section*."""
        return self._make_key(section, name) in self._values