"""Signal source registry: pluggable weather and traffic providers."""

from shared.config import get_settings

_source_instance = None


def get_signal_source():
    """Return the configured signal source (singleton).

    Uses FakeSignalSource by default. Configure via the SIGNAL_SOURCE
    environment variable ("fake" or "http").
    """
    global _source_instance
    if _source_instance is None:
        settings = get_settings()
        if settings.SIGNAL_SOURCE == "fake":
            from impact.signals.fake_source import FakeSignalSource

            _source_instance = FakeSignalSource()
        elif settings.SIGNAL_SOURCE == "http":
            from impact.signals.http_source import HttpSignalSource

            _source_instance = HttpSignalSource(settings.SIGNAL_API_URL)
        else:
            raise ValueError(f"Unknown signal source: {settings.SIGNAL_SOURCE}")
    return _source_instance


def reset_signal_source():
    """Reset the signal source singleton (useful for testing)."""
    global _source_instance
    _source_instance = None
