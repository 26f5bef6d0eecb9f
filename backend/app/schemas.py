"""Pydantic request schemas used by the API.

Request bodies never carry identity: an `id` sent by a client is ignored
and the identifier always comes from the store (on create) or the URL
path (on replace).
"""

from pydantic import BaseModel, Field
from typing import Optional


class CustomerIn(BaseModel):
    """Payload for creating or replacing a customer."""
    first_name: str
    last_name: str
    email: str
    age: int = Field(ge=0)


class ProductIn(BaseModel):
    """Payload for creating or replacing a product."""
    name: str
    description: str = ""
    price: float = Field(ge=0)
    quantity: int = Field(default=0, ge=0)


class BookIn(BaseModel):
    """Payload for creating or replacing a book."""
    title: str
    author: str
    year: int
    isbn: Optional[str] = None
