# inventory_api/errors.py
"""
Domain exceptions raised by the service layer.

Each exception carries the HTTP status it maps to; the application-level
exception handler in ``main.py`` turns them into ``{"detail": ...}`` responses.
"""


class InventoryError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(InventoryError):
    """Missing or malformed input. Nothing was changed."""

    status_code = 400


class AuthError(InventoryError):
    """Missing, invalid or expired credentials."""

    status_code = 401


class NotFoundError(InventoryError):
    status_code = 404


class ConflictError(InventoryError):
    """A uniqueness rule would be broken (duplicate SKU, duplicate email)."""

    status_code = 409
