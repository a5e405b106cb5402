"""Storage backend registry: pluggable key-value persistence."""

from shared.config import get_settings

_backend_instance = None


def get_backend():
    """Return the configured key-value backend (singleton).

    Uses MemoryBackend by default. Configure via the STORAGE_BACKEND
    environment variable.
    """
    global _backend_instance
    if _backend_instance is None:
        adapter = get_settings().STORAGE_BACKEND
        if adapter == "memory":
            from shipping.storage.memory import MemoryBackend

            _backend_instance = MemoryBackend()
        else:
            raise ValueError(f"Unknown storage backend: {adapter}")
    return _backend_instance


def reset_backend():
    """Reset the backend singleton (useful for testing)."""
    global _backend_instance
    _backend_instance = None
