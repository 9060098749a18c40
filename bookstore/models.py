# bookstore/models.py
from typing import Any, Optional
from pydantic import BaseModel


class RegisterRequest(BaseModel):
    # Both optional and untyped so that a missing field reaches the
    # store's own check instead of a 422 from request validation.
    username: Optional[Any] = None
    password: Optional[Any] = None


class User(BaseModel):
    username: str
    password: str


class Message(BaseModel):
    message: str
