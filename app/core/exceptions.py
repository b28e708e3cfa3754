"""Domain errors raised by the service layer."""


class AppError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(AppError):
    """A referenced entity does not exist."""

    status_code = 404

    def __init__(self, entity: str, entity_id: int) -> None:
        super().__init__(f"{entity} with id {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class ConflictError(AppError):
    """A write was rejected by a uniqueness or foreign-key constraint."""

    status_code = 409
