"""
Catalog package for the book catalog.

This package holds the ``Book`` schema, the in-memory ``CatalogStore``
that owns every record, the plain-text renderers used by the report
screens and the FastAPI router that exposes the store over HTTP. The
store has no knowledge of HTTP; the router receives it from
``app.state`` so tests and the text menu can build their own instance.
"""

from .router import router as catalog_router  # noqa: F401
from .schemas import Book  # noqa: F401
from .store import CatalogStore, SEED_BOOKS  # noqa: F401
