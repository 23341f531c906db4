"""Typed exceptions and error handling decorator."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from rich.console import Console

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class MGCError(Exception):
    """Base exception for mgc-sdk."""

    exit_code: int = 1


class TransportError(MGCError):
    """The request never produced an HTTP response (network, timeout, deadline)."""

    exit_code = 2


class ConfigurationError(MGCError):
    """Missing or invalid configuration."""

    exit_code = 6


class ValidationError(MGCError):
    """Invalid input, detected locally or rejected by the API."""

    exit_code = 7

    def __init__(self, message: str = "", *, field: str | None = None) -> None:
        self.field = field
        super().__init__(message or "Validation error")


class InvalidHTTPMethodError(ValidationError):
    """Presigned URLs only support GET, HEAD and PUT."""

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"invalid HTTP method: {method}", field="method")


class InvalidBucketNameError(ValidationError):
    """Bucket name is empty or not a valid S3 bucket name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"invalid bucket name: {name!r}", field="bucket")


class InvalidObjectKeyError(ValidationError):
    """Object key is empty."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"invalid object key: {key!r}", field="key")


class InvalidObjectDataError(ValidationError):
    def __init__(self, message: str) -> None:
        super().__init__(f"invalid object data: {message}", field="data")


class InvalidPolicyError(ValidationError):
    def __init__(self, message: str) -> None:
        super().__init__(f"invalid policy: {message}", field="policy")


class DecodingError(MGCError):
    """A response body was absent, empty or did not match the expected shape."""

    exit_code = 8

    def __init__(
        self,
        message: str,
        *,
        body: str = "",
        status_code: int | None = None,
    ) -> None:
        self.body = body
        self.status_code = status_code
        super().__init__(message)


class HTTPError(MGCError):
    """Non-2xx response from the API.

    The raw response body is kept in ``body`` for diagnostics.
    """

    exit_code = 9

    def __init__(
        self,
        status_code: int,
        detail: str = "",
        *,
        method: str | None = None,
        url: str | None = None,
        body: str = "",
    ) -> None:
        self.status_code = status_code
        self.detail = detail
        self.method = method
        self.url = url
        self.body = body
        target = f" ({method} {url})" if method and url else ""
        super().__init__(f"API returned {status_code}{target}: {detail}")


class BadRequestError(HTTPError, ValidationError):
    """The API rejected the request payload (400/422)."""

    exit_code = 7


class AuthenticationError(HTTPError):
    """Authentication failed (401/403)."""

    exit_code = 3


class NotFoundError(HTTPError):
    """Resource not found (404)."""

    exit_code = 4


class ConflictError(HTTPError):
    """Resource conflict (409), e.g. a duplicated name."""

    exit_code = 5


class ServerError(HTTPError):
    """Server-side failure (5xx)."""

    exit_code = 10


class BucketError(MGCError):
    """A bucket operation failed after the storage call was issued."""

    def __init__(self, operation: str, bucket: str, message: str) -> None:
        self.operation = operation
        self.bucket = bucket
        super().__init__(f"bucket operation {operation} on {bucket} failed: {message}")


class ObjectError(MGCError):
    """An object operation failed after the storage call was issued."""

    def __init__(self, operation: str, bucket: str, key: str, message: str) -> None:
        self.operation = operation
        self.bucket = bucket
        self.key = key
        super().__init__(
            f"object operation {operation} on {bucket}/{key} failed: {message}"
        )


def error_handler(func: F) -> F:
    """Decorator that catches MGCError and prints user-friendly messages."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except MGCError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(exc.exit_code)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
