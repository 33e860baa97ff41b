"""Split changelog Markdown into a flat token sequence."""

from __future__ import annotations

import re
from typing import Iterator

from changelog_md.exceptions import ParseError
from changelog_md.schemas import (
    Heading,
    ListItem,
    Paragraph,
    ReferenceDefinition,
    Token,
)

_GROUP_SEPARATOR_RE = re.compile(r"\n(?:[ \t]*\n)+")
_HEADING_RE = re.compile(r"^(#{1,3}) (.*)$")
_LIST_ITEM_RE = re.compile(r"^( *)- (.*)$")
_STRUCTURED_PREFIXES = ("#", "-", "[")
_REFERENCE_SEPARATOR = ": "


def tokenize(text: str) -> list[Token]:
    """Convert changelog text into tokens.

    Blank-line separated groups starting with ``#``, ``-`` or ``[`` are read
    line by line into headings, list items and reference definitions. Any
    other group, or a structured-looking group containing a line that fits
    none of those shapes, becomes a single opaque paragraph.

    Raises:
        ParseError: If a reference definition line cannot be split on ``": "``.
    """
    tokens: list[Token] = []
    for first_line, group in _iter_groups(text.replace("\r\n", "\n")):
        if group.lstrip(" ").startswith(_STRUCTURED_PREFIXES):
            tokens.extend(_tokenize_structured_group(group, first_line))
        else:
            tokens.append(Paragraph(text=group))
    return tokens


def _iter_groups(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, group)`` for every non-empty blank-line separated group."""
    position = 0
    line_number = 1
    for separator in _GROUP_SEPARATOR_RE.finditer(text):
        yield from _emit_group(text[position : separator.start()], line_number)
        line_number += text.count("\n", position, separator.end())
        position = separator.end()
    yield from _emit_group(text[position:], line_number)


def _emit_group(raw: str, line_number: int) -> Iterator[tuple[int, str]]:
    group = raw.strip("\n")
    if not group.strip():
        return
    leading_newlines = len(raw) - len(raw.lstrip("\n"))
    yield line_number + leading_newlines, group


def _tokenize_structured_group(group: str, first_line: int) -> list[Token]:
    tokens: list[Token] = []
    for offset, line in enumerate(group.split("\n")):
        token = _classify_line(line, first_line + offset)
        if token is None:
            return [Paragraph(text=group)]
        tokens.append(token)
    return tokens


def _classify_line(line: str, line_number: int) -> Token | None:
    heading = _HEADING_RE.match(line)
    if heading:
        return Heading(level=len(heading.group(1)), text=heading.group(2))

    item = _LIST_ITEM_RE.match(line)
    if item:
        return ListItem(text=item.group(2), indent=len(item.group(1)))

    if line.startswith("[") and "]:" in line:
        return _parse_reference(line, line_number)

    return None


def _parse_reference(line: str, line_number: int) -> ReferenceDefinition:
    label_part, separator, url = line.partition(_REFERENCE_SEPARATOR)
    if not separator or not label_part.endswith("]") or len(label_part) < 2:
        raise ParseError(
            f"Malformed reference definition {line!r}, expected '[label]: url'",
            line=line_number,
        )
    return ReferenceDefinition(label=label_part[1:-1], url=url)
