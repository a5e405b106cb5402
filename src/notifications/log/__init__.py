"""Notification log registry."""

_log_instance = None


def get_notification_log():
    """Return the notification log (singleton)."""
    global _log_instance
    if _log_instance is None:
        from notifications.log.memory import InMemoryNotificationLog

        _log_instance = InMemoryNotificationLog()
    return _log_instance


def reset_notification_log():
    """Reset the log singleton (useful for testing)."""
    global _log_instance
    _log_instance = None
