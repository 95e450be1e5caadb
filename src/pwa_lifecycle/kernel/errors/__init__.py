"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   │   └── InvalidControlMessageError
    │   └── InvalidTransitionError
    ├── ApplicationError     (application.py)
    └── InfrastructureError  (infrastructure.py)
        ├── SerializationError
        ├── ExternalServiceError
        └── RegistrationError
"""

from pwa_lifecycle.kernel.errors.application import ApplicationError
from pwa_lifecycle.kernel.errors.base import BaseError
from pwa_lifecycle.kernel.errors.domain import (
    DomainError,
    InvalidControlMessageError,
    InvalidTransitionError,
    ValidationError,
)
from pwa_lifecycle.kernel.errors.infrastructure import (
    ExternalServiceError,
    InfrastructureError,
    RegistrationError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ExternalServiceError",
    "InfrastructureError",
    "InvalidControlMessageError",
    "InvalidTransitionError",
    "RegistrationError",
    "SerializationError",
    "ValidationError",
]
