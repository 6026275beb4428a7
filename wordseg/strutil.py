"""String helpers: splitting, trimming, UTF-8 rune coding and joining."""

from __future__ import annotations

import re
from collections.abc import Iterable

WHITESPACE = " \t\n\v\f\r"


def split(src: str, pattern: str, maxsplit: int | None = None) -> list[str]:
    """Split *src* at every character that occurs in *pattern*.

    An empty input gives no fields and a trailing separator gives no empty
    final field. With *maxsplit*, at most that many splits are made and the
    rest of the string becomes the last field.
    """
    if not src:
        return []
    if not pattern:
        return [src]
    separator = re.compile("[" + re.escape(pattern) + "]")
    fields: list[str] = []
    start = 0
    while start < len(src):
        found = None
        if maxsplit is None or len(fields) < maxsplit:
            found = separator.search(src, start)
        if found is None:
            fields.append(src[start:])
            break
        fields.append(src[start:found.start()])
        start = found.start() + 1
    return fields


def ltrim(s: str, chars: str = "") -> str:
    """Strip leading whitespace and any of *chars*."""
    return s.lstrip(WHITESPACE + chars)


def rtrim(s: str, chars: str = "") -> str:
    """Strip trailing whitespace and any of *chars*."""
    return s.rstrip(WHITESPACE + chars)


def trim(s: str, chars: str = "") -> str:
    """Strip whitespace and any of *chars* from both ends."""
    return ltrim(rtrim(s, chars), chars)


def decode_runes(data: bytes | str) -> list[int]:
    """Decode UTF-8 *data* into a list of code points.

    Decoding is lenient about continuation bytes but raises ValueError when a
    lead byte is invalid or a sequence is cut short.
    """
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    runes: list[int] = []
    size = len(raw)
    pos = 0
    while pos < size:
        lead = raw[pos]
        if lead < 0x80:
            width, value = 1, lead
        elif lead <= 0xDF and pos + 1 < size:
            width, value = 2, lead & 0x1F
        elif lead <= 0xEF and pos + 2 < size:
            width, value = 3, lead & 0x0F
        elif lead <= 0xF7 and pos + 3 < size:
            width, value = 4, lead & 0x07
        else:
            raise ValueError(f"invalid UTF-8 sequence at byte {pos}")
        for byte in raw[pos + 1:pos + width]:
            value = (value << 6) | (byte & 0x3F)
        runes.append(value)
        pos += width
    return runes


def encode_runes(runes: Iterable[int]) -> bytes:
    """Encode code points as UTF-8 bytes."""
    out = bytearray()
    for rune in runes:
        if rune <= 0x7F:
            out.append(rune)
        elif rune <= 0x7FF:
            out += bytes((((rune >> 6) & 0x1F) | 0xC0, (rune & 0x3F) | 0x80))
        elif rune <= 0xFFFF:
            out += bytes((
                ((rune >> 12) & 0x0F) | 0xE0,
                ((rune >> 6) & 0x3F) | 0x80,
                (rune & 0x3F) | 0x80,
            ))
        else:
            out += bytes((
                ((rune >> 18) & 0x03) | 0xF0,
                ((rune >> 12) & 0x3F) | 0x80,
                ((rune >> 6) & 0x3F) | 0x80,
                (rune & 0x3F) | 0x80,
            ))
    return bytes(out)


def join(items: Iterable[object], connector: str) -> str:
    """Join the string forms of *items* with *connector*."""
    return connector.join(str(item) for item in items)


def path_join(path1: str, path2: str) -> str:
    """Join two path parts with a single slash."""
    if path1.endswith("/"):
        return path1 + path2
    return path1 + "/" + path2