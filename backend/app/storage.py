"""In-memory storage and helpers.

This module owns the process-wide `StoreRegistry` (one `ResourceStore`
per resource kind), seeds it at start-up and exposes `get_registry` for
FastAPI dependency injection. Nothing here survives a restart.
"""

import logging
from pathlib import Path
from typing import Dict

from pydantic import ValidationError

from .repositories import ResourceStore
from .services import RESOURCE_KINDS, ResourceService
from .utils.seed_loader import load_seed_file

logger = logging.getLogger("app.storage")


class StoreRegistry:
    """Holds one empty store per entry of `RESOURCE_KINDS`."""
    def __init__(self):
        self._stores: Dict[str, ResourceStore] = {
            name: ResourceStore(label_field=kind.label_field, name=name)
            for name, kind in RESOURCE_KINDS.items()
        }

    def store(self, name: str) -> ResourceStore:
        return self._stores[name]

    def service(self, name: str) -> ResourceService:
        """Return a `ResourceService` bound to the store for `name`."""
        return ResourceService(RESOURCE_KINDS[name], self._stores[name])

    def counts(self) -> Dict[str, int]:
        return {name: len(store) for name, store in self._stores.items()}


registry = StoreRegistry()


def seed_registry(target: StoreRegistry, seed_file: Path) -> Dict[str, int]:
    """Load `seed_file` into `target` and return the per-kind record counts.

    Records are validated against the kind's model before insertion; the
    first invalid record aborts seeding with a ValueError.
    """
    data = load_seed_file(seed_file, known_kinds=RESOURCE_KINDS)
    created = {}
    for name, items in data.items():
        kind = RESOURCE_KINDS[name]
        store = target.store(name)
        for idx, item in enumerate(items):
            try:
                record = kind.model(**item)
            except ValidationError as e:
                raise ValueError(f"invalid seed record {name}[{idx}]: {e}") from e
            store.create(record)
        created[name] = len(items)
    logger.info("seeded stores from %s: %s", seed_file, created)
    return created


def get_registry() -> StoreRegistry:
    """Return the process-wide registry for FastAPI dependency injection."""
    return registry
