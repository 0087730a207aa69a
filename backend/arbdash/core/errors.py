"""Error taxonomy for the dashboard backend.

- ValidationError: bad numeric input or filter parameters (HTTP 400)
- NotFoundError: a directly requested record does not exist (HTTP 404)
- StoreError: the persistence collaborator failed (HTTP 500)
"""


class ArbDashError(Exception):
    """Base class for all application errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ArbDashError):
    """Input rejected before any calculation or filtering ran."""

    def __init__(self, message: str, fields: dict[str, str] | None = None):
        super().__init__(message)
        self.fields = fields or {}

    def to_errors(self) -> list[dict[str, str]]:
        return [{"field": name, "message": msg} for name, msg in self.fields.items()]


class NotFoundError(ArbDashError):
    """Lookup of a record id that does not exist."""

    def __init__(self, entity: str, record_id: int):
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.record_id = record_id


class StoreError(ArbDashError):
    """The store could not complete an operation."""

    def __init__(self, operation: str):
        super().__init__(f"Failed to {operation}")
        self.operation = operation
