"""Exceptions raised by the catalog package."""

from typing import Optional


class CatalogError(Exception):
    """Base class for catalog errors."""


class LoadError(CatalogError):
    """The static source could not be turned into a catalog.

    ``index`` is the position of the offending record when the problem
    is tied to one record, otherwise ``None``.
    """

    def __init__(self, message: str, index: Optional[int] = None) -> None:
        self.index = index
        if index is not None:
            message = f"record {index}: {message}"
        super().__init__(message)


class RenderParseError(CatalogError, ValueError):
    """Text handed to ``parse_rendered`` is not a rendered entry."""
