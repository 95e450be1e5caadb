"""Protocol – push subscription helpers.

``PushSubscription.toJSON()`` wire shape::

    {"endpoint": "https://push.example/abc", "keys": {"p256dh": "...", "auth": "..."}}
"""
from __future__ import annotations

import base64
import binascii
import dataclasses
from collections.abc import Mapping
from typing import Any

from pwa_lifecycle.kernel.errors import ValidationError


def application_server_key(vapid_public_key: str) -> bytes:
    """Decode an unpadded base64url VAPID public key for ``pushManager.subscribe``."""
    if not vapid_public_key:
        raise ValidationError("VAPID public key is empty", errors=[{"field": "vapid_public_key"}])
    padding = "=" * (-len(vapid_public_key) % 4)
    try:
        return base64.urlsafe_b64decode(vapid_public_key + padding)
    except (binascii.Error, ValueError) as exc:
        raise ValidationError(
            "VAPID public key is not valid base64url",
            errors=[{"field": "vapid_public_key"}],
            cause=exc,
        ) from exc


@dataclasses.dataclass(frozen=True)
class PushSubscriptionRecord:
    """What the push sender needs to reach one browser: one row per (user, endpoint)."""

    endpoint: str
    p256dh: str
    auth: str

    @classmethod
    def from_wire(cls, data: Any) -> PushSubscriptionRecord:
        """
        Raises
        ------
        ValidationError
            When the endpoint or either key is missing or not a string.
        """
        keys = data.get("keys") if isinstance(data, Mapping) else None
        fields = {
            "endpoint": data.get("endpoint") if isinstance(data, Mapping) else None,
            "p256dh": keys.get("p256dh") if isinstance(keys, Mapping) else None,
            "auth": keys.get("auth") if isinstance(keys, Mapping) else None,
        }
        missing = [name for name, value in fields.items() if not isinstance(value, str) or not value]
        if missing:
            raise ValidationError(
                "Push subscription is incomplete",
                errors=[{"field": name} for name in missing],
            )
        return cls(**fields)

    def to_wire(self) -> dict[str, Any]:
        return {"endpoint": self.endpoint, "keys": {"p256dh": self.p256dh, "auth": self.auth}}


__all__ = ["PushSubscriptionRecord", "application_server_key"]
