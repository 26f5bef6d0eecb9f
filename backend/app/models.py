"""Record models held by the in-memory stores.

Each class is a frozen pydantic model: a stored record is never mutated
in place, updates build a new instance. `id` is empty until the store
assigns one at creation time.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class Customer(BaseModel):
    """A customer of the shop.

    Fields:
    - `email`: used as the label in statistics
    - `age`: whole years, never negative
    """
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    first_name: str
    last_name: str
    email: str
    age: int = Field(ge=0)


class Product(BaseModel):
    """A product offered for sale."""
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    name: str
    description: str = ""
    price: float = Field(ge=0)
    quantity: int = Field(default=0, ge=0)


class Book(BaseModel):
    """A book in the catalogue, labelled by title."""
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    title: str
    author: str
    year: int
    isbn: Optional[str] = None


class Statistics(BaseModel):
    """Aggregate view over a store, recomputed on every request."""
    field: str
    count: int
    min_record_label: Optional[str] = None
    max_record_label: Optional[str] = None
