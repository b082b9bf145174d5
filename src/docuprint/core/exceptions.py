"""
Service Error Taxonomy

Every business-rule failure raised by a service is a ServiceError carrying
a message, a machine-readable error code and the HTTP status the API layer
should answer with. Routers translate them with `to_http_exception`.
"""

from typing import TypeVar

from fastapi import HTTPException, status
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


class ServiceError(Exception):
    """Base exception for service errors."""

    def __init__(self, message: str, error_code: str, status_code: int = 400):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        super().__init__(message)


class ValidationError(ServiceError):
    """Malformed or out-of-range input."""

    def __init__(self, message: str, error_code: str = "VALIDATION_ERROR"):
        super().__init__(
            message=message,
            error_code=error_code,
            status_code=status.HTTP_400_BAD_REQUEST,
        )


class AuthenticationError(ServiceError):
    """Credentials or one-time codes that do not check out."""

    def __init__(self, message: str = "Unauthorized", error_code: str = "UNAUTHORIZED"):
        super().__init__(
            message=message,
            error_code=error_code,
            status_code=status.HTTP_401_UNAUTHORIZED,
        )


class AuthorizationError(ServiceError):
    """The actor lacks rights over the target community or resource."""

    def __init__(self, message: str, error_code: str = "FORBIDDEN"):
        super().__init__(
            message=message,
            error_code=error_code,
            status_code=status.HTTP_403_FORBIDDEN,
        )


class NotFoundError(ServiceError):
    """Unknown id."""

    def __init__(self, message: str, error_code: str = "NOT_FOUND"):
        super().__init__(
            message=message,
            error_code=error_code,
            status_code=status.HTTP_404_NOT_FOUND,
        )


class ConflictError(ServiceError):
    """A state-machine precondition was violated."""

    def __init__(self, message: str, error_code: str = "CONFLICT"):
        super().__init__(
            message=message,
            error_code=error_code,
            status_code=status.HTTP_409_CONFLICT,
        )


def to_http_exception(e: ServiceError) -> HTTPException:
    """Convert a service error to an HTTPException."""
    return HTTPException(
        status_code=e.status_code,
        detail={
            "error": e.error_code,
            "message": e.message,
        },
    )


def format_validation_errors(errors: list[dict]) -> str:
    """Collapse pydantic error dicts into one readable message."""
    messages = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        msg = error.get("msg", "Invalid value").removeprefix("Value error, ")
        messages.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return "; ".join(messages)


def parse_payload(model: type[ModelT], data: dict | ModelT) -> ModelT:
    """
    Validate raw input against a schema.

    Raises:
        ValidationError: If the payload does not satisfy the schema
    """
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(format_validation_errors(e.errors())) from e
