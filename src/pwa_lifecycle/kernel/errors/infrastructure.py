"""Infrastructure errors – platform and network failures."""

from __future__ import annotations

from typing import Any

from pwa_lifecycle.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Platform / I/O failure that is not a contract violation."""

    default_code = "infrastructure_error"


class SerializationError(InfrastructureError):
    """Failed to serialize or deserialize a payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class ExternalServiceError(InfrastructureError):
    """An external service returned an unexpected response."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service
        self.status_code = status_code


class RegistrationError(InfrastructureError):
    """The host refused to register the background worker script."""

    default_code = "registration_error"

    def __init__(self, script_url: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Could not register worker '{script_url}'", **kwargs)
        self.script_url = script_url


__all__ = [
    "ExternalServiceError",
    "InfrastructureError",
    "RegistrationError",
    "SerializationError",
]
