"""Business logic services used by HTTP controllers.

`RESOURCE_KINDS` describes every resource the API serves: its record
model, request schema, label field and default statistics field.
`ResourceService` turns request payloads into records, delegates to the
kind's `ResourceStore` and logs every mutation. Store errors propagate
unchanged; translating them to responses is the controllers' job.
"""

import json
import logging
from dataclasses import dataclass
from typing import Dict, List, Type

from pydantic import BaseModel

from . import models, schemas
from .repositories import ResourceStore

logger = logging.getLogger("app.services")


@dataclass(frozen=True)
class ResourceKind:
    """Static description of one resource collection."""
    name: str
    model: Type[BaseModel]
    schema: Type[BaseModel]
    label_field: str
    stat_field: str


RESOURCE_KINDS: Dict[str, ResourceKind] = {
    kind.name: kind
    for kind in (
        ResourceKind("customers", models.Customer, schemas.CustomerIn, label_field="email", stat_field="age"),
        ResourceKind("products", models.Product, schemas.ProductIn, label_field="name", stat_field="price"),
        ResourceKind("books", models.Book, schemas.BookIn, label_field="title", stat_field="year"),
    )
}


def _log_event(event: str, kind: ResourceKind, record_id: str) -> None:
    logger.info("%s %s", event, json.dumps({"resource": kind.name, "id": record_id}, ensure_ascii=True))


class ResourceService:
    """CRUD and statistics for a single resource kind."""
    def __init__(self, kind: ResourceKind, store: ResourceStore):
        self.kind = kind
        self.store = store

    def create(self, payload: BaseModel) -> BaseModel:
        """Build a record from `payload` and store it under a fresh id."""
        record = self.kind.model(**payload.model_dump())
        stored = self.store.create(record)
        _log_event("record_created", self.kind, stored.id)
        return stored

    def list(self) -> List[BaseModel]:
        return self.store.list()

    def get(self, record_id: str) -> BaseModel:
        return self.store.get(record_id)

    def replace(self, record_id: str, payload: BaseModel) -> BaseModel:
        """Replace every field of `record_id` with the payload's values.

        Raises `NotFound` when the id is not live; a replace never
        creates a record.
        """
        record = self.kind.model(id=record_id, **payload.model_dump())
        stored = self.store.replace(record_id, record)
        _log_event("record_replaced", self.kind, record_id)
        return stored

    def delete(self, record_id: str) -> BaseModel:
        removed = self.store.delete(record_id)
        _log_event("record_deleted", self.kind, record_id)
        return removed

    def statistics(self, field: str = None) -> models.Statistics:
        """Return statistics over `field`, defaulting to the kind's own."""
        return self.store.statistics(field or self.kind.stat_field)
