"""
Example client for the catalogue endpoints.

These helpers call a running bookstore service over HTTP and log what
comes back. They are a convenience for trying the API from a shell
or a notebook and are not used by the service itself:

* ``fetch_all_books()`` : ``GET /``
* ``fetch_book_by_isbn()`` : ``GET /isbn/{isbn}``
* ``fetch_books_by_author()`` : ``GET /author/{author}``
* ``fetch_book_by_title()`` : ``GET /title/{title}``

Each returns the decoded JSON, or ``None`` after logging the error
when the request fails. ``fetch_book_by_title(raise_errors=True)``
re-raises instead. The target defaults to ``BOOKSTORE_BASE_URL``.

Try it with: python -m bookstore.catalog.client
"""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, Optional

from ..settings import settings


logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def _http_get_json(url: str) -> Any:
    """Perform an HTTP GET and return the parsed JSON body.

    Raises ``urllib.error.URLError`` (``HTTPError`` for non-2xx
    answers) or ``ValueError`` when the body is not JSON.
    """
    request = urllib.request.Request(url, headers={"Accept": "application/json"})
    with urllib.request.urlopen(request, timeout=settings.CLIENT_TIMEOUT) as response:
        data = response.read().decode("utf-8", errors="ignore")
        return json.loads(data)


def _url(base_url: Optional[str], *segments: str) -> str:
    base = (base_url or settings.BASE_URL).rstrip("/")
    path = "/".join(urllib.parse.quote(s, safe="") for s in segments)
    return f"{base}/{path}"


def _fetch(url: str, label: str, raise_errors: bool = False) -> Any:
    try:
        data = _http_get_json(url)
    except (urllib.error.URLError, ValueError) as exc:
        logger.error("Error fetching %s: %s", label, exc)
        if raise_errors:
            raise
        return None
    logger.info("%s: %s", label, data)
    return data


def fetch_all_books(base_url: Optional[str] = None) -> Any:
    return _fetch(_url(base_url), "All books")


def fetch_book_by_isbn(isbn: str, base_url: Optional[str] = None) -> Any:
    return _fetch(_url(base_url, "isbn", str(isbn)), f"Book with ISBN {isbn}")


def fetch_books_by_author(author: str, base_url: Optional[str] = None) -> Any:
    return _fetch(_url(base_url, "author", author), f"Books by {author}")


def fetch_book_by_title(title: str, base_url: Optional[str] = None, raise_errors: bool = False) -> Any:
    return _fetch(_url(base_url, "title", title), f'Book with title "{title}"', raise_errors=raise_errors)


def main() -> None:
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")
    fetch_all_books()
    fetch_book_by_isbn("1")
    fetch_books_by_author("Chinua Achebe")
    fetch_book_by_title("Things Fall Apart")


if __name__ == "__main__":
    main()
