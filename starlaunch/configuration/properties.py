"""Reader for the Java ``.properties`` text format.

Supported syntax:

    # comment            ! also a comment
    key=value            key: value            key value
    multi.line=first \\
        second           (continuation; leading whitespace is dropped)
    escaped\\ key=tab\\there \\u00e9

Files are ISO-8859-1 encoded; non-Latin characters use ``\\uXXXX`` escapes.
"""

import re
import string
from typing import Dict, Iterator

_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_NEWLINE = re.compile(r"\r\n|\r|\n")


def _logical_lines(text: str) -> Iterator[str]:
    pending = None
    for raw in _NEWLINE.split(text):
        line = raw.lstrip(_WHITESPACE)
        if pending is None and (not line or line[0] in "#!"):
            continue
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            pending = (pending or "") + line[:-1]
            continue
        yield (pending or "") + line
        pending = None
    if pending is not None:
        yield pending


def _unescape(value: str) -> str:
    if "\\" not in value:
        return value
    out = []
    i = 0
    while i < len(value):
        ch = value[i]
        i += 1
        if ch != "\\":
            out.append(ch)
            continue
        if i >= len(value):
            break
        ch = value[i]
        if ch == "u":
            digits = value[i + 1 : i + 5]
            if len(digits) != 4 or any(c not in string.hexdigits for c in digits):
                raise ValueError(f"Malformed \\uxxxx encoding: {value!r}")
            out.append(chr(int(digits, 16)))
            i += 5
        else:
            out.append(_ESCAPES.get(ch, ch))
            i += 1
    return "".join(out)


def _split_entry(line: str) -> tuple[str, str]:
    end = 0
    escaped = False
    while end < len(line):
        ch = line[end]
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch in _SEPARATORS or ch in _WHITESPACE:
            break
        end += 1

    start = end
    while start < len(line) and line[start] in _WHITESPACE:
        start += 1
    if start < len(line) and line[start] in _SEPARATORS:
        start += 1
    while start < len(line) and line[start] in _WHITESPACE:
        start += 1
    return line[:end], line[start:]


def parse_properties(text: str) -> Dict[str, str]:
    """Parse properties text into a dict; later duplicates win."""
    entries: Dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split_entry(line)
        entries[_unescape(key)] = _unescape(value)
    return entries


def load_properties(data: bytes) -> Dict[str, str]:
    return parse_properties(data.decode("iso-8859-1"))


__all__ = ["parse_properties", "load_properties"]
