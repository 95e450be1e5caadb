"""Domain errors – message-contract and lifecycle rule violations."""

from __future__ import annotations

from typing import Any

from pwa_lifecycle.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a message contract or lifecycle rule is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class InvalidControlMessageError(ValidationError):
    """A structured message is not a known foreground → worker control message."""

    default_code = "invalid_control_message"


class InvalidTransitionError(DomainError):
    """A worker lifecycle transition is not allowed from the current state."""

    default_code = "invalid_transition"

    def __init__(self, current: str, target: str, **kwargs: Any) -> None:
        kwargs.setdefault("detail", {"current": current, "target": target})
        super().__init__(f"Cannot transition worker from '{current}' to '{target}'", **kwargs)
        self.current = current
        self.target = target


__all__ = [
    "DomainError",
    "InvalidControlMessageError",
    "InvalidTransitionError",
    "ValidationError",
]
