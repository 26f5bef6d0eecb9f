"""Store error taxonomy.

The store raises these for expected, client-triggerable conditions. They
carry the HTTP status the API layer should answer with so controllers
never have to guess.
"""


class StoreError(Exception):
    """Base class for errors raised by a `ResourceStore`."""
    status_code = 500


class NotFound(StoreError):
    """No live record matches the requested identifier."""
    status_code = 404

    def __init__(self, record_id: str):
        self.record_id = record_id
        super().__init__(f"record not found: {record_id}")


class EmptyStore(StoreError):
    """Statistics were requested over a store holding zero records."""
    status_code = 404

    def __init__(self, resource: str = "store"):
        self.resource = resource
        super().__init__(f"no records in {resource}")
