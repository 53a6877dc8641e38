"""
Catalog package for the SQL reference guide.

This package holds the read-only store of documented SQL terms, the
text renderer used by the command line tool and the route definitions
that expose the same lookups over HTTP. The catalog is loaded once from
a static JSON file and never mutated afterwards, so it can be shared
freely between request handlers.
"""

from .errors import CatalogError, LoadError, RenderParseError  # noqa: F401
from .render import parse_rendered, render, render_all  # noqa: F401
from .schemas import Entry  # noqa: F401
from .store import Catalog, get_catalog, load  # noqa: F401
