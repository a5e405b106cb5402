"""Customer directory registry."""

_directory_instance = None


def get_directory():
    """Return the customer directory (singleton)."""
    global _directory_instance
    if _directory_instance is None:
        from notifications.directory.memory import InMemoryCustomerDirectory

        _directory_instance = InMemoryCustomerDirectory()
    return _directory_instance


def reset_directory():
    """Reset the directory singleton (useful for testing)."""
    global _directory_instance
    _directory_instance = None
