"""Domain-specific exceptions — framework-independent."""


class InventoryError(Exception):
    """Base class for every failure the inventory services report to callers.

    ``error_code`` is a stable machine-readable tag used by the action
    wrapper and the HTTP layer; ``message`` is safe to show to a user.
    """

    error_code = "failed"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(InventoryError):
    """Raised when caller-supplied input violates a constraint."""

    error_code = "validation_error"


class NotFoundError(InventoryError):
    """Raised when a referenced room or asset does not exist."""

    error_code = "not_found"

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class InvalidTargetError(InventoryError):
    """Raised when an asset is moved to a room that does not exist."""

    error_code = "invalid_target"

    def __init__(self, room_id: str):
        self.room_id = room_id
        super().__init__(f"Target room '{room_id}' does not exist")


class TransactionConflictError(InventoryError):
    """Raised when the store aborts a transaction because of a write conflict."""

    error_code = "conflict"

    def __init__(self, message: str = "Operation failed, please try again"):
        super().__init__(message)


class ServiceUnavailableError(InventoryError):
    """Raised when the text-generation provider is unreachable or unconfigured."""

    error_code = "service_unavailable"

    def __init__(self, message: str = "AI suggestion unavailable"):
        super().__init__(message)


class ChatProviderError(Exception):
    """Raised when a chat provider returns an error.

    Provider-agnostic — works for OpenRouter, Groq, OpenAI, etc.
    """

    def __init__(self, provider: str, status_code: int, message: str):
        self.provider = provider
        self.status_code = status_code
        self.message = message
        super().__init__(f"[{provider}] {status_code}: {message}")
