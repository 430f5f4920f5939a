"""Loading of XPM images used as wall textures."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from raycube.colors import lookup_color
from raycube.textutil import atoi, split_words

TRANSPARENT = 0xFF000000

_NAME_LIMIT = 63
_QUOTED = re.compile(r'"([^"]*)"')
_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """The XPM data could not be read or is malformed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded XPM image: 0xAARRGGBB pixels stored row by row."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]


def words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return split_words(text)


def _find_unquoted(text: str, pattern: str) -> int:
    quoted = False
    for pos, char in enumerate(text):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(pattern, pos):
            return pos
    return -1


def _blank(text: str, start: int, stop: int) -> str:
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quoted strings with spaces.

    The result has the same length as ``text``; a line comment's
    closing newline is blanked as well.
    """
    while (begin := _find_unquoted(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        text = _blank(text, begin, len(text) if end == -1 else end + 2)
    while (begin := _find_unquoted(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        text = _blank(text, begin, len(text) if end == -1 else end + 1)
    return text


def _parse_hex(text: str) -> int:
    match = _HEX_PREFIX.match(text)
    if match is None or not match.group(2):
        return 0
    value = int(match.group(2), 16)
    return -value if match.group(1) == "-" else value


def text_to_rgb(name: str, end: str | None) -> int:
    """Turn an XPM colour value into 0xRRGGBB.

    ``#RRGGBB`` is read as hexadecimal. Otherwise ``name`` and ``end``
    (when given) are joined by a space and looked up as a colour name;
    ``None`` gives -1 and an unknown name gives 0.
    """
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if end is not None:
        name = f"{name} {end}"[:_NAME_LIMIT]
    value = lookup_color(name)
    return 0 if value is None else value


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _parse_header(line: str) -> tuple[int, int, int, int]:
    fields = words(line)
    if len(fields) < 4:
        raise XpmError(f"bad header: {line!r}")
    width, height, ncolors, cpp = (atoi(field) for field in fields[:4])
    if width <= 0 or height <= 0 or ncolors <= 0 or cpp <= 0:
        raise XpmError(f"bad header values: {line!r}")
    return width, height, ncolors, cpp


def _parse_color(line: str, cpp: int) -> int:
    fields = words(line[cpp:])
    try:
        index = fields.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line without 'c' key: {line!r}") from None
    if index >= len(fields):
        raise XpmError(f"colour line without value: {line!r}")
    end = fields[index + 1] if index + 1 < len(fields) else None
    return text_to_rgb(fields[index], end)


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode an image from its XPM strings: header, colours, then rows."""
    source = iter(lines)
    width, height, ncolors, cpp = _parse_header(_next_line(source, "header"))

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "colour definition")
        rgb = _parse_color(line, cpp)
        key = line[:cpp]
        if cpp <= 2:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    pixels: list[int] = []
    for _ in range(height):
        row = _next_line(source, "pixel row")
        if len(row) < width * cpp:
            raise XpmError(f"pixel row too short: {row!r}")
        for x in range(width):
            colour = palette.get(row[x * cpp:(x + 1) * cpp], 0)
            pixels.append(TRANSPARENT if colour == -1 else colour)
    return XpmImage(width, height, tuple(pixels))


def parse_xpm(text: str) -> XpmImage:
    """Decode an image from the text of an XPM file."""
    return parse_xpm_lines(_QUOTED.findall(strip_comments(text)))


def load_xpm(path: str | os.PathLike[str]) -> XpmImage:
    """Read and decode the XPM file at ``path``."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read {os.fspath(path)!r}: {exc}") from exc
    return parse_xpm(data.decode("latin-1"))