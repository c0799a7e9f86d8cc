import pytest

import range_split.utils.logging as range_split_logging
from range_split.core import MutableBytes, SharedBytes


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast unit tests")
    config.addinivalue_line("markers", "slow: slow-running tests")


@pytest.fixture(params=[SharedBytes, MutableBytes], ids=["shared", "mutable"])
def buffer_type(request):
    """Run a test once per buffer ownership model."""
    return request.param


@pytest.fixture
def hello_buffer(buffer_type):
    return buffer_type(b"Hello, world")


@pytest.fixture
def restore_service_name(monkeypatch: pytest.MonkeyPatch):
    """Undo service names set through configure_logging."""
    monkeypatch.setattr(
        range_split_logging, "_service_name", range_split_logging._service_name
    )
    monkeypatch.delenv("SERVICE_NAME", raising=False)
