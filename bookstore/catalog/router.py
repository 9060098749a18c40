"""
Route definitions for the catalogue API.

Public endpoints:
- GET  /                 : every book, keyed by ISBN
- GET  /isbn/{isbn}      : one book
- GET  /author/{author}  : all books by an author (case-insensitive)
- GET  /title/{title}    : first book with a title (case-insensitive)
- GET  /review/{isbn}    : reviews of one book
"""

from __future__ import annotations

import json
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ..errors import UnexpectedFailure
from .schemas import Book
from .store import CatalogStore


class PrettyJSONResponse(JSONResponse):
    """JSON indented by four spaces, the way listings have always been sent."""

    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, indent=4).encode("utf-8")


def get_catalog(request: Request) -> CatalogStore:
    return request.app.state.catalog


router = APIRouter(tags=["catalog"])


@router.get("/", response_model=Dict[str, Book], response_class=PrettyJSONResponse)
def list_books(catalog: CatalogStore = Depends(get_catalog)) -> Dict[str, Book]:
    try:
        return catalog.get_all()
    except Exception as exc:
        raise UnexpectedFailure(str(exc)) from exc


@router.get("/isbn/{isbn}", response_model=Book)
def get_book_by_isbn(isbn: str, catalog: CatalogStore = Depends(get_catalog)) -> Book:
    return catalog.get_by_isbn(isbn)


@router.get("/author/{author}", response_model=List[Book], response_class=PrettyJSONResponse)
def get_books_by_author(author: str, catalog: CatalogStore = Depends(get_catalog)) -> List[Book]:
    return catalog.get_by_author(author)


@router.get("/title/{title}", response_model=Book)
def get_book_by_title(title: str, catalog: CatalogStore = Depends(get_catalog)) -> Book:
    return catalog.get_by_title(title)


@router.get("/review/{isbn}", response_model=Dict[str, str], response_class=PrettyJSONResponse)
def get_book_reviews(isbn: str, catalog: CatalogStore = Depends(get_catalog)) -> Dict[str, str]:
    return catalog.get_reviews(isbn)
