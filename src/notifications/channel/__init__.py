"""Transport registry: one adapter instance per notification channel.

Fake transports are wired by default; real SMS and email providers plug in
behind ``SMSPort`` and ``EmailPort``.
"""

from notifications.notification.notification import NotificationChannel

_transports: dict[NotificationChannel, object] = {}


def get_channel(channel: NotificationChannel):
    """Return the transport for ``channel`` (singleton per channel)."""
    if channel not in _transports:
        from notifications.channel.fake import FakeEmailAdapter, FakeSMSAdapter

        factories = {
            NotificationChannel.SMS: FakeSMSAdapter,
            NotificationChannel.EMAIL: FakeEmailAdapter,
        }
        if channel not in factories:
            raise ValueError(f"Unknown channel type: {channel}")
        _transports[channel] = factories[channel]()
    return _transports[channel]


def reset_channels():
    """Drop all transport singletons (useful for testing)."""
    _transports.clear()
