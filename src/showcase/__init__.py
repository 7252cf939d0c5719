"""Showcase: paginated portfolio catalogs with search, filters and infinite scroll."""

__version__ = "0.1.0"
