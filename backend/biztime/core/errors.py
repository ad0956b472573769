"""Typed failures raised by the stores and rendered by the API boundary.

Every error carries the HTTP status it maps to, so the exception handlers in
``biztime.main`` can build the uniform error body without inspecting types.
"""


class LedgerError(Exception):
    status_code: int = 500
    default_message: str = "Internal Server Error"

    def __init__(self, message: str | None = None, status_code: int | None = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(LedgerError):
    """Malformed or insufficient input, e.g. an update with no fields."""

    status_code = 400
    default_message = "Bad Request"


class NotFoundError(LedgerError):
    """No row matched a keyed lookup, update or delete."""

    status_code = 404
    default_message = "Not Found"


class ConstraintError(LedgerError):
    """A foreign-key or uniqueness violation reported by the database."""

    status_code = 400
    default_message = "Constraint violation"


def error_body(message: str, status_code: int) -> dict[str, object]:
    return {"error": {"message": message, "status": status_code}, "message": message}
