"""Notifications – display options and tag matching."""
from pwa_lifecycle.notifications.models import NotificationOptions
from pwa_lifecycle.notifications.tags import TAG_SEPARATOR, select_matching, tag_matches

__all__ = ["NotificationOptions", "TAG_SEPARATOR", "select_matching", "tag_matches"]
