"""
Catalog package for the bookstore service.

This package contains the ``Book`` schema, the in-memory
``CatalogStore`` seeded from ``bookstore/data/books.json``, the public
read endpoints and a small HTTP client that calls those endpoints.
"""

from .router import router as catalog_router  # noqa: F401
from .store import CatalogStore  # noqa: F401
