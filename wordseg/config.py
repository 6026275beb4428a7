"""Key=value configuration files and a small command-line argument view."""

from __future__ import annotations

import re
from collections.abc import Sequence
from os import PathLike

from .strutil import split, trim

_ATOI_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def _atoi(text: str) -> int:
    match = _ATOI_RE.match(text)
    return int(match.group(1)) if match else 0


class Config:
    """Settings read from ``key = value`` lines; '#' starts a comment line."""

    def __init__(self, text: str) -> None:
        self._values: dict[str, str] = {}
        for lineno, raw in enumerate(text.split("\n"), start=1):
            line = trim(raw)
            if not line or line.startswith("#"):
                continue
            fields = split(line, "=")
            if len(fields) != 2:
                raise ValueError(f"line {lineno} [{line}] illegal")
            key, value = trim(fields[0]), trim(fields[1])
            if key in self._values:
                raise ValueError(f"key [{key}] already exists")
            self._values[key] = value

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> Config:
        """Read settings from a file."""
        with open(path, encoding="utf-8") as handle:
            return cls(handle.read())

    def get(self, key: str, default: str) -> str:
        """Value of *key*, or *default* when it is absent."""
        return self._values.get(key, default)

    def get_int(self, key: str, default: int) -> int:
        """Leading integer of the value, *default* when the key is absent."""
        value = self.get(key, "")
        if value == "":
            return default
        return _atoi(value)

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __bool__(self) -> bool:
        return bool(self._values)

    def __repr__(self) -> str:
        return f"Config({self._values!r})"


class ArgvContext:
    """Positional arguments, ``-key value`` options and bare ``-flag`` switches."""

    def __init__(self, argv: Sequence[str]) -> None:
        self._args: list[str] = []
        self._options: dict[str, str] = {}
        self._flags: set[str] = set()
        items = list(argv)
        pos = 0
        while pos < len(items):
            item = items[pos]
            if item.startswith("-"):
                if pos + 1 < len(items) and not items[pos + 1].startswith("-"):
                    self._options[item] = items[pos + 1]
                    pos += 1
                else:
                    self._flags.add(item)
            else:
                self._args.append(item)
            pos += 1

    def __getitem__(self, key: int | str) -> str:
        """Positional argument by index or option value by name; "" if absent."""
        if isinstance(key, int):
            if 0 <= key < len(self._args):
                return self._args[key]
            return ""
        return self._options.get(key, "")

    def has_key(self, key: str) -> bool:
        """Whether *key* was given as an option or a flag."""
        return key in self._options or key in self._flags

    def __repr__(self) -> str:
        return f"ArgvContext({self._args!r}, {self._options!r}, {sorted(self._flags)!r})"