"""
Route definitions for the catalog API.

Endpoints under the configured prefix (``/api/catalog`` by default):
- GET /entries              : list entries, optionally by category and/or text query
- GET /entries/{name}       : get one entry by exact name
- GET /entries/{name}/text  : the same entry rendered as plain text
- GET /categories           : distinct categories in document order
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse

from ..config import get_settings
from .render import render
from .schemas import Entry, EntryList
from .store import Catalog, get_catalog

router = APIRouter(prefix=get_settings().api_prefix, tags=["catalog"])


def _get_entry_or_404(catalog: Catalog, name: str) -> Entry:
    entry = catalog.get(name)
    if entry is None:
        raise HTTPException(status_code=404, detail="Entry not found")
    return entry


@router.get("/entries", response_model=EntryList)
def list_entries(
    category: Optional[str] = Query(default=None, description="Exact category label"),
    q: Optional[str] = Query(default=None, description="Text search (name/category/description)"),
    catalog: Catalog = Depends(get_catalog),
) -> EntryList:
    """
    Returns entries in document order.

    The category filter is an exact match; the text query is a
    case-insensitive substring match. Both may be combined.
    """
    items = catalog.search(q)
    if category is not None:
        items = [e for e in items if e.category == category]
    return EntryList(total=len(items), items=items)


@router.get("/entries/{name}", response_model=Entry)
def get_entry(name: str, catalog: Catalog = Depends(get_catalog)) -> Entry:
    return _get_entry_or_404(catalog, name)


@router.get("/entries/{name}/text", response_class=PlainTextResponse)
def get_entry_text(name: str, catalog: Catalog = Depends(get_catalog)) -> str:
    return render(_get_entry_or_404(catalog, name))


@router.get("/categories", response_model=List[str])
def list_categories(catalog: Catalog = Depends(get_catalog)) -> List[str]:
    return catalog.categories()
