"""
Pydantic schema definitions for the catalog module.

A ``Book`` is keyed by its ISBN in the catalogue. ``reviews`` maps a
reviewer identifier to that reviewer's text and is empty for a book
nobody has reviewed yet.
"""

from typing import Dict

from pydantic import BaseModel, Field


class Book(BaseModel):
    """A single catalogue entry."""

    isbn: str
    title: str
    author: str
    reviews: Dict[str, str] = Field(default_factory=dict)
