"""Small text helpers used when reading scene files."""

from __future__ import annotations

import os
import re

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_BLANK_CHARS = frozenset(" \t\n\v\f\r")


def split_words(text: str) -> list[str]:
    """Split on runs of spaces and tabs only; newlines stay in the words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def split_commas(text: str) -> list[str]:
    """Split on commas, rejecting a leading comma or two commas in a row."""
    if text.startswith(",") or ",," in text:
        raise ValueError(f"malformed comma list: {text!r}")
    return [part for part in text.split(",") if part]


def atoi(text: str) -> int:
    """Read a leading integer the way C's atoi does; 0 if there is none."""
    stripped = text.lstrip(" \t\n\v\f\r")
    match = re.match(r"[+-]?[0-9]*", stripped)
    number = match.group(0) if match else ""
    if number in ("", "+", "-"):
        return 0
    return int(number)


def trim(text: str, chars: str) -> str:
    """Remove any of ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def is_space(char: str) -> bool:
    """True for a space or a newline."""
    return char in (" ", "\n")


def is_blank(text: str) -> bool:
    """True if the text holds only ASCII whitespace."""
    return all(char in _BLANK_CHARS for char in text)


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Read a file and return its lines, each keeping its trailing newline."""
    with open(path, "rb") as handle:
        data = handle.read().decode("utf-8", errors="replace")
    pieces = data.split("\n")
    lines = [piece + "\n" for piece in pieces[:-1]]
    if pieces[-1]:
        lines.append(pieces[-1])
    return lines