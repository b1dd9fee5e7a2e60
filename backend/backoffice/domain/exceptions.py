"""Domain-specific exceptions — framework-independent."""


class GatewayError(Exception):
    """Raised when the relational data gateway rejects a query or mutation.

    Uniform error shape for every gateway adapter: a human-readable message
    plus an HTTP-like status code.
    """

    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class EntityNotFoundError(GatewayError):
    """Raised when a requested relation or record does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found", status_code=404)


class InvalidReferenceError(Exception):
    """Raised when a foreign-key value points outside the allowed references."""

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"'{value}' is not a valid reference for {field}")


class InvalidStateError(Exception):
    """Raised when a manager action is not allowed in its current state."""

    def __init__(self, action: str, state: str):
        self.action = action
        self.state = state
        super().__init__(f"Cannot {action} while manager is {state}")


class DraftValidationError(Exception):
    """Raised when a form draft cannot be turned into a persistable payload."""

    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        detail = "; ".join(f"{field}: {msg}" for field, msg in errors.items())
        super().__init__(f"Invalid form data: {detail}")
