"""
pwa_lifecycle – push-notification and PWA-update lifecycle.

Import path convention::

    from pwa_lifecycle.worker import ServiceWorkerRuntime, handle_push
    from pwa_lifecycle.foreground import UpdateController
    from pwa_lifecycle.protocol import ClearNotifications, SkipWaiting
    from pwa_lifecycle.testing.fakes import InMemoryNotificationCenter
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
