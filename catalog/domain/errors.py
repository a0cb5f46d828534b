"""Typed domain errors raised by the lifecycle core.

Every guard failure surfaces as one of these.  Each error carries a stable
translation key plus its parameters so the transport layer can localise the
message, an HTTP-equivalent status code, and an error_id for correlating a
response with log lines.

    DomainError
      ├── BadRequestError        (400)  no-op update, invalid name, illegal transition
      │     └── InvalidValueError       malformed value object input (also a ValueError)
      ├── ForbiddenError         (403)  permission guard
      ├── NotFoundError          (404)  missing entity for a by-id operation
      └── ConflictError          (409)  uniqueness clash, locked entity
            └── OptimisticLockError     stale lock_version
"""

from __future__ import annotations

from typing import Any
from uuid import uuid4


class DomainError(Exception):
    """Base class for all lifecycle-core errors."""

    error_code: str = "DOMAIN_ERROR"
    status_code: int = 500
    default_key: str = "error.domain"

    def __init__(
        self,
        key: str | None = None,
        *,
        params: dict[str, Any] | None = None,
        message: str | None = None,
        error_id: str | None = None,
    ) -> None:
        self.key = key or self.default_key
        self.params = dict(params or {})
        self.message = message or self._render()
        self.error_id = error_id or str(uuid4())
        super().__init__(self.message)

    def _render(self) -> str:
        if not self.params:
            return self.key
        details = ", ".join(f"{k}={v}" for k, v in self.params.items())
        return f"{self.key} ({details})"

    def to_dict(self) -> dict[str, Any]:
        return {
            "error_code": self.error_code,
            "key": self.key,
            "params": self.params,
            "message": self.message,
            "error_id": self.error_id,
        }


class BadRequestError(DomainError):
    error_code = "BAD_REQUEST"
    status_code = 400
    default_key = "http.bad_request"


class InvalidValueError(BadRequestError, ValueError):
    """A value object was constructed from an out-of-range input."""

    error_code = "INVALID_VALUE"
    default_key = "validation.invalid_value"


class ForbiddenError(DomainError):
    error_code = "FORBIDDEN"
    status_code = 403
    default_key = "http.forbidden"


class NotFoundError(DomainError):
    error_code = "NOT_FOUND"
    status_code = 404
    default_key = "resource.not_found"


class ConflictError(DomainError):
    error_code = "CONFLICT"
    status_code = 409
    default_key = "resource.conflict"


class OptimisticLockError(ConflictError):
    """The stored version moved on since the caller read the entity.

    Never retried by the core; the caller may reload and resubmit.
    """

    error_code = "OPTIMISTIC_LOCK"
    default_key = "optimistic.lock.failed"
