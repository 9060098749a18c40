"""
In-memory data store for the catalogue API.

The catalogue is a mapping from ISBN to ``Book``, seeded from the
JSON file shipped in ``bookstore/data/books.json`` (or a file chosen
through ``BOOKSTORE_SEED_FILE``). The seed file uses the same shape
the shop has always used: an object keyed by ISBN whose values carry
``author``, ``title`` and ``reviews``.

Lookups are plain synchronous calls. A lookup that finds nothing
raises ``NotFound`` with the message the HTTP layer sends back.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from ..errors import NotFound
from .schemas import Book


logger = logging.getLogger(__name__)

DATA_FILE = Path(__file__).resolve().parents[1] / "data" / "books.json"


def load_seed_books(path: Optional[Union[str, Path]] = None) -> List[Book]:
    """Load the seed catalogue from disk.

    Parameters
    ----------
    path : Optional[Union[str, Path]]
        Seed file to read. Defaults to the packaged ``books.json``.

    Returns
    -------
    List[Book]
        Books in file order. A missing or malformed file is logged and
        yields an empty list so the service can still start.
    """
    seed = Path(path) if path else DATA_FILE
    try:
        with seed.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, ValueError) as exc:
        logger.error("Could not load catalogue seed %s: %s", seed, exc)
        return []

    books: List[Book] = []
    for isbn, entry in raw.items():
        books.append(
            Book(
                isbn=str(isbn),
                title=str(entry.get("title") or ""),
                author=str(entry.get("author") or ""),
                reviews=entry.get("reviews") or {},
            )
        )
    logger.debug("Loaded %d books from %s", len(books), seed)
    return books


def _norm(s: Optional[str]) -> str:
    # Simple lower-casing, not locale aware.
    return (s or "").lower()


class CatalogStore:
    """ISBN-keyed collection of books.

    Parameters
    ----------
    books : Optional[Iterable[Book]]
        Initial catalogue. Insertion order is kept and is the order
        used by ``get_all`` and by the first-match title lookup.

    Raises
    ------
    ValueError
        If two books share an ISBN.
    """

    def __init__(self, books: Optional[Iterable[Book]] = None) -> None:
        self._books: Dict[str, Book] = {}
        for book in books or []:
            if book.isbn in self._books:
                raise ValueError(f"Duplicate ISBN in catalogue: {book.isbn}")
            self._books[book.isbn] = book

    @classmethod
    def from_seed(cls, path: Optional[Union[str, Path]] = None) -> "CatalogStore":
        return cls(load_seed_books(path))

    def __len__(self) -> int:
        return len(self._books)

    def get_all(self) -> Dict[str, Book]:
        return dict(self._books)

    def get_by_isbn(self, isbn: str) -> Book:
        book = self._books.get(isbn)
        if book is None:
            raise NotFound("ISBN not found")
        return book

    def get_by_author(self, author: str) -> List[Book]:
        """Return every book whose author matches, ignoring case."""
        wanted = _norm(author)
        matches = [b for b in self._books.values() if _norm(b.author) == wanted]
        if not matches:
            raise NotFound("No books by that author")
        return matches

    def get_by_title(self, title: str) -> Book:
        """Return the first book whose title matches, ignoring case.

        Titles are not unique; when several books share one, only the
        earliest in catalogue order is returned.
        """
        wanted = _norm(title)
        book = next((b for b in self._books.values() if _norm(b.title) == wanted), None)
        if book is None:
            raise NotFound("Title not found")
        return book

    def get_reviews(self, isbn: str) -> Dict[str, str]:
        book = self._books.get(isbn)
        if book is None:
            raise NotFound("ISBN not found.")
        return book.reviews
