"""
Pydantic schema definitions for the catalog module.

The ``Entry`` model captures one documented SQL term exactly as it
appears in the reference guide. Entries are frozen: once the catalog
has been loaded nothing may change them. The ``EntryList`` model
bundles a list of entries with a count for the HTTP listing endpoint.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, field_validator


class Entry(BaseModel):
    """A single documented term.

    ``name``, ``category`` and ``description`` must be non-blank
    strings; ``name`` and ``category`` must fit on one line. ``example``
    is a literal snippet that is never parsed or executed; it may span
    several lines and may be empty.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    name: str
    category: str
    description: str
    example: str

    @field_validator("name", "category", "description")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("name", "category")
    @classmethod
    def _single_line(cls, value: str) -> str:
        # Rendered as one line each; see render.parse_rendered.
        if "\n" in value or "\r" in value:
            raise ValueError("must not contain line breaks")
        return value


class EntryList(BaseModel):
    """A wrapper for results returned from the ``/entries`` endpoint."""

    total: int
    items: List[Entry]
