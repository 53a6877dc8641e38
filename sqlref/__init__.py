"""SQL reference catalog: lookup and rendering over a fixed guide of SQL terms."""

__version__ = "1.0.0"
