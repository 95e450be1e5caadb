"""Protocol – the wire contracts shared by push sender, worker and page."""
from pwa_lifecycle.protocol.messages import (
    ClearNotifications,
    ControlMessage,
    MessageType,
    SkipWaiting,
    parse_control_message,
)
from pwa_lifecycle.protocol.payload import NotificationAction, PushPayload, parse_push_payload
from pwa_lifecycle.protocol.subscription import PushSubscriptionRecord, application_server_key

__all__ = [
    "ClearNotifications",
    "ControlMessage",
    "MessageType",
    "NotificationAction",
    "PushPayload",
    "PushSubscriptionRecord",
    "SkipWaiting",
    "application_server_key",
    "parse_control_message",
    "parse_push_payload",
]
