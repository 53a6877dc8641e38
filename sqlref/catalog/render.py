"""
Plain-text formatting of catalog entries.

A rendered entry looks like this::

    INNER JOIN
    Category: Join Types

    Returns rows that have matching values in both tables.

    Example:
        SELECT * FROM a INNER JOIN b ON a.id = b.a_id;

Example lines are indented by four spaces so that the block can be read
back with ``parse_rendered()``.
"""

from __future__ import annotations

from typing import Iterable, List

from .errors import RenderParseError
from .schemas import Entry

CATEGORY_PREFIX = "Category: "
EXAMPLE_HEADER = "Example:"
INDENT = "    "


def _indent(line: str) -> str:
    return INDENT + line if line else ""


def render(entry: Entry) -> str:
    """Format one entry as a text block (no trailing newline)."""
    lines: List[str] = [
        entry.name,
        CATEGORY_PREFIX + entry.category,
        "",
        entry.description,
        "",
        EXAMPLE_HEADER,
    ]
    if entry.example:
        lines.extend(_indent(line) for line in entry.example.split("\n"))
    return "\n".join(lines)


def render_all(entries: Iterable[Entry]) -> str:
    """Render each entry in order, separated by a blank line."""
    return "\n\n".join(render(entry) for entry in entries)


def parse_rendered(text: str) -> Entry:
    """Read back a block produced by ``render()``.

    Raises
    ------
    RenderParseError
        If ``text`` does not have the layout ``render()`` produces.
    """
    head, sep, tail = text.rpartition("\n\n" + EXAMPLE_HEADER)
    if not sep:
        raise RenderParseError("missing 'Example:' section")
    if tail and not tail.startswith("\n"):
        raise RenderParseError("unexpected text after 'Example:' header")

    example_lines: List[str] = []
    if tail:
        for line in tail[1:].split("\n"):
            if line and not line.startswith(INDENT):
                raise RenderParseError(f"example line is not indented: {line!r}")
            example_lines.append(line[len(INDENT):])

    head_lines = head.split("\n")
    if len(head_lines) < 4:
        raise RenderParseError("expected name, category and description")
    name, category_line, blank = head_lines[:3]
    if not category_line.startswith(CATEGORY_PREFIX):
        raise RenderParseError(f"expected {CATEGORY_PREFIX!r} on the second line")
    if blank:
        raise RenderParseError("expected a blank line after the category")

    try:
        return Entry(
            name=name,
            category=category_line[len(CATEGORY_PREFIX):],
            description="\n".join(head_lines[3:]),
            example="\n".join(example_lines),
        )
    except ValueError as exc:
        raise RenderParseError(str(exc)) from exc
