import json
from pathlib import Path
from typing import Any, Dict, List

import pytest

from sqlref.catalog.store import Catalog


def _entry(name: str, category: str, description: str = "", example: str = "") -> Dict[str, Any]:
    return {
        "name": name,
        "category": category,
        "description": description or f"About {name}.",
        "example": example,
    }


@pytest.fixture()
def records() -> List[Dict[str, Any]]:
    return [
        _entry("WHERE", "Basic", "Filters rows.", "SELECT * FROM t WHERE x = 1;"),
        _entry("JOIN", "Join Types", "Combines rows from two tables.", "SELECT *\nFROM a\nJOIN b ON a.id = b.id;"),
        _entry("ORDER BY", "Basic", "Sorts the result.", ""),
        _entry("UNIQUE", "Constraints", "No duplicate values.", "UNIQUE (email)"),
    ]


@pytest.fixture()
def catalog(records) -> Catalog:
    return Catalog.from_records(records)


@pytest.fixture()
def write_source(tmp_path: Path):
    """Write a JSON payload (or raw text) to a temp file and return its path."""

    def _write(payload: Any, name: str = "catalog.json") -> Path:
        path = tmp_path / name
        text = payload if isinstance(payload, str) else json.dumps(payload)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
