"""Application error hierarchy.

Every error carries the HTTP status the API layer answers with, a
human-readable message, and optionally a list of field-level problems
({"field": ..., "message": ...}).
"""
from typing import List, Optional, Dict

from weekmenu.utilities.constants import ERROR_MESSAGES


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str, errors: Optional[List[Dict[str, str]]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors[:] if errors else []

    @property
    def status(self) -> str:
        return "fail" if 400 <= self.status_code < 500 else "error"

    def to_dict(self) -> dict:
        body = {"status": self.status, "message": self.message}
        if self.errors:
            body["errors"] = self.errors
        return body


class ValidationError(AppError):
    status_code = 400

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationError":
        return cls(message, errors=[{"field": field, "message": message}])


def from_pydantic(exc) -> ValidationError:
    """Convert a pydantic or FastAPI request validation failure into a field-level ValidationError.

    exc is anything exposing pydantic's errors() list.
    """
    errors: List[Dict[str, str]] = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        message = err.get("msg", "Invalid value")
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        errors.append({"field": ".".join(loc) or "body", "message": message})
    return ValidationError(ERROR_MESSAGES["VALIDATION_ERROR"], errors=errors)


class RecipeNotFoundError(AppError):
    """A menu references recipe ids that do not resolve to active recipes."""
    status_code = 400

    def __init__(self, missing_ids: List[str]):
        super().__init__(ERROR_MESSAGES["RECIPE_NOT_FOUND"],
                         errors=[{"field": "days", "message": f"Recipe not found: {rid}"} for rid in missing_ids])
        self.missing_ids = list(missing_ids)


class NotFoundError(AppError):
    status_code = 404

    def __init__(self, message: str = ERROR_MESSAGES["NOT_FOUND"]):
        super().__init__(message)


class CompatibilityError(AppError):
    status_code = 409

    def __init__(self, message: str = ERROR_MESSAGES["VEGETARIAN_CONFLICT"]):
        super().__init__(message)


class ConflictError(AppError):
    status_code = 409

    def __init__(self, message: str = ERROR_MESSAGES["DUPLICATE_ENTRY"]):
        super().__init__(message)


class AuthenticationError(AppError):
    status_code = 401

    def __init__(self, message: str = ERROR_MESSAGES["UNAUTHENTICATED"]):
        super().__init__(message)


class AuthorizationError(AppError):
    status_code = 403

    def __init__(self, message: str = ERROR_MESSAGES["UNAUTHORIZED"]):
        super().__init__(message)


__all__ = [
    'AppError', 'ValidationError', 'from_pydantic', 'RecipeNotFoundError', 'NotFoundError',
    'CompatibilityError', 'ConflictError', 'AuthenticationError', 'AuthorizationError',
]
