"""Root of the pwa-lifecycle error hierarchy.

Errors here are mostly logged, not shown: handlers pass ``error.to_dict()``
to structlog as a single keyword so log processors see one flat mapping.
"""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Error with a stable ``code`` slug and structured ``detail``.

    Subclasses set ``default_code``; ``code=`` overrides it per instance.
    When ``cause`` is given it also becomes ``__cause__``.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        fields: dict[str, Any] = {
            "error": type(self).__name__,
            "code": self.code,
            "message": self.message,
        }
        if self.detail:
            fields["detail"] = self.detail
        if self.cause is not None:
            fields["cause"] = repr(self.cause)
        return fields


__all__ = ["BaseError"]
