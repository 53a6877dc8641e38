"""
Read-only data store for the SQL reference catalog.

The catalog is built once from a static JSON source: either a list of
records or an object whose ``entries`` key holds that list. Every record
must supply ``name``, ``category``, ``description`` and ``example``.
Anything else (a missing file, bad JSON, a missing field, a repeated
name) raises ``LoadError`` and no catalog is produced at all.

Once built, a ``Catalog`` keeps its entries in document order and never
changes them. ``get_catalog()`` returns the process-wide instance loaded
from the configured source.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from pydantic import ValidationError

from ..config import get_settings
from .errors import LoadError
from .schemas import Entry


logger = logging.getLogger(__name__)

Source = Union[str, Path]


def _norm(s: Optional[str]) -> str:
    """Normalize a string for case-insensitive comparison."""
    return (s or "").strip().lower()


def _describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        field = ".".join(str(loc) for loc in err["loc"]) or "record"
        if err["type"] == "missing":
            parts.append(f"missing field '{field}'")
        else:
            parts.append(f"field '{field}': {err['msg']}")
    return "; ".join(parts)


class Catalog:
    """An immutable, ordered collection of ``Entry`` values.

    Entries keep the order in which they were supplied. Names are
    unique, which is checked on construction.
    """

    __slots__ = ("_entries", "_by_name")

    def __init__(self, entries: Iterable[Entry]) -> None:
        ordered: Tuple[Entry, ...] = tuple(entries)
        by_name: Dict[str, Entry] = {}
        for index, entry in enumerate(ordered):
            if entry.name in by_name:
                raise LoadError(f"duplicate entry name {entry.name!r}", index)
            by_name[entry.name] = entry
        self._entries = ordered
        self._by_name = by_name

    @classmethod
    def from_records(cls, records: Any) -> "Catalog":
        """Validate decoded records and build a catalog from them.

        Parameters
        ----------
        records : Any
            Either a list of mappings or a mapping with an ``entries``
            list, as decoded from the JSON source.

        Returns
        -------
        Catalog
            The catalog, in the same order as ``records``.

        Raises
        ------
        LoadError
            If the shape is wrong, a record is invalid or two records
            share a name.
        """
        if isinstance(records, dict):
            if "entries" not in records:
                raise LoadError("top-level object has no 'entries' list")
            records = records["entries"]
        if not isinstance(records, list):
            raise LoadError(
                f"expected a list of records, got {type(records).__name__}"
            )

        entries: List[Entry] = []
        for index, record in enumerate(records):
            if not isinstance(record, dict):
                raise LoadError(
                    f"expected an object, got {type(record).__name__}", index
                )
            try:
                entries.append(Entry.model_validate(record))
            except ValidationError as exc:
                raise LoadError(_describe_validation_error(exc), index) from exc
        return cls(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __repr__(self) -> str:
        return f"Catalog({len(self._entries)} entries)"

    def get(self, name: str) -> Optional[Entry]:
        """Return the entry named exactly ``name``, or ``None``."""
        return self._by_name.get(name)

    def list(self, category: Optional[str] = None) -> List[Entry]:
        """Return all entries, or those in ``category``, in document order."""
        if category is None:
            return list(self._entries)
        return [e for e in self._entries if e.category == category]

    def categories(self) -> List[str]:
        """Return distinct categories in order of first appearance."""
        seen: Dict[str, None] = {}
        for entry in self._entries:
            seen.setdefault(entry.category, None)
        return list(seen)

    def search(self, q: Optional[str]) -> List[Entry]:
        """Case-insensitive substring search over name, category and description.

        An empty or blank query matches every entry.
        """
        nq = _norm(q)
        if not nq:
            return self.list()

        def _matches(entry: Entry) -> bool:
            blob = " ".join(
                [_norm(entry.name), _norm(entry.category), _norm(entry.description)]
            )
            return nq in blob

        return [e for e in self._entries if _matches(e)]

    def lookup(self, term: str) -> List[Entry]:
        """Resolve a single free argument to entries.

        The entry with that exact name wins; otherwise every entry of
        the category with that exact label is returned. An unknown term
        gives an empty list.
        """
        entry = self.get(term)
        if entry is not None:
            return [entry]
        return self.list(term)


def load(source: Optional[Source] = None) -> Catalog:
    """Load the catalog from a JSON file.

    Parameters
    ----------
    source : Optional[Union[str, Path]]
        Path of the JSON source. Defaults to ``Settings.catalog_path``.

    Returns
    -------
    Catalog
        The fully validated catalog.

    Raises
    ------
    LoadError
        If the file cannot be read or parsed, or its content is invalid.
    """
    path = Path(source) if source is not None else get_settings().catalog_path
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as exc:
        logger.error("Cannot read catalog source %s: %s", path, exc)
        raise LoadError(f"cannot read {path}: {exc.strerror or exc}") from exc
    except json.JSONDecodeError as exc:
        logger.error("Catalog source %s is not valid JSON: %s", path, exc)
        raise LoadError(f"invalid JSON in {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        logger.error("Catalog source %s is not valid UTF-8: %s", path, exc)
        raise LoadError(f"cannot decode {path}: {exc}") from exc

    try:
        catalog = Catalog.from_records(raw)
    except LoadError as exc:
        logger.error("Rejected catalog source %s: %s", path, exc)
        raise
    logger.info("Loaded %d catalog entries from %s", len(catalog), path)
    return catalog


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    """Return the catalog loaded from the configured source, loading it once."""
    return load()
