"""Tests for text rendering of catalog entries."""

import pytest

from sqlref.catalog import RenderParseError, load, parse_rendered, render, render_all
from sqlref.catalog.schemas import Entry
from sqlref.config import DEFAULT_CATALOG_PATH


def test_render_layout():
    entry = Entry(
        name="JOIN",
        category="Join Types",
        description="Combines rows from two tables.",
        example="SELECT *\nFROM a\nJOIN b ON a.id = b.id;",
    )
    assert render(entry) == (
        "JOIN\n"
        "Category: Join Types\n"
        "\n"
        "Combines rows from two tables.\n"
        "\n"
        "Example:\n"
        "    SELECT *\n"
        "    FROM a\n"
        "    JOIN b ON a.id = b.id;"
    )


def test_render_empty_example():
    entry = Entry(name="ORDER BY", category="Basic", description="Sorts.", example="")
    assert render(entry).endswith("Sorts.\n\nExample:")


def test_render_all_preserves_order(catalog):
    text = render_all(catalog.list())
    positions = [text.index(render(e)) for e in catalog]
    assert positions == sorted(positions)
    assert text == "\n\n".join(render(e) for e in catalog)


def test_render_all_empty():
    assert render_all([]) == ""


def test_parse_recovers_every_entry(catalog):
    for entry in catalog:
        assert parse_rendered(render(entry)) == entry


def test_parse_multiline_description_and_blank_example_lines():
    entry = Entry(
        name="Division",
        category="Relational Algebra",
        description="First paragraph.\n\nSecond paragraph.",
        example="R ÷ S\n\n-- for all",
    )
    assert parse_rendered(render(entry)) == entry


def test_parse_bundled_guide():
    for entry in load(DEFAULT_CATALOG_PATH):
        parsed = parse_rendered(render(entry))
        assert (parsed.name, parsed.category, parsed.description) == (
            entry.name,
            entry.category,
            entry.description,
        )


@pytest.mark.parametrize(
    "text",
    [
        "",
        "JOIN\nCategory: Join Types\n\nCombines rows.",
        "JOIN\nKind: Join Types\n\nCombines rows.\n\nExample:",
        "JOIN\nCategory: Join Types\nCombines rows.\n\nExample:",
        "JOIN\nCategory: Join Types\n\nCombines rows.\n\nExample:\nSELECT 1;",
        "JOIN\n\nExample:",
        "JOIN\nCategory: Join Types\n\n   \n\nExample:",
    ],
)
def test_parse_rejects_malformed_text(text):
    with pytest.raises(RenderParseError):
        parse_rendered(text)


def test_parse_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse_rendered("not an entry")


@pytest.mark.parametrize(
    "fields",
    [
        {"name": "LEFT\nJOIN", "category": "Join Types"},
        {"name": "LEFT JOIN", "category": "Join\nTypes"},
    ],
)
def test_multiline_name_or_category_never_reaches_render(fields):
    with pytest.raises(ValueError, match="line breaks"):
        Entry(description="d", example="", **fields)
