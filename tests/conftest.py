from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


@pytest.fixture(autouse=True)
def _test_env(request, monkeypatch):
    """Pin settings to the test environment for every test."""
    from shared.config import reset_settings

    monkeypatch.setenv("APP_ENV", request.config.getoption("--env"))
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    monkeypatch.setenv("SIGNAL_SOURCE", "fake")
    reset_settings()
    yield
    reset_settings()


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(autouse=True)
def run_around_tests():
    """Fixture to automatically reset every adapter singleton after each test"""
    yield

    from impact.signals import reset_signal_source
    from notifications.channel import reset_channels
    from notifications.directory import reset_directory
    from notifications.domain import reset_notification_dispatcher
    from notifications.log import reset_notification_log
    from shipping.domain import reset_order_store
    from shipping.storage import reset_backend

    reset_order_store()
    reset_backend()
    reset_notification_dispatcher()
    reset_directory()
    reset_notification_log()
    reset_channels()
    reset_signal_source()
