"""Pytest configuration."""

import pytest

import cellwidth.condition as condition_module


def pytest_addoption(parser):
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run integration tests (downloads Unicode data)",
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: mark test as integration test")


def pytest_collection_modifyitems(config, items):
    if not config.getoption("--run-integration"):
        skip_integration = pytest.mark.skip(reason="Need --run-integration to run")
        for item in items:
            if "test_integration" in item.nodeid:
                item.add_marker(skip_integration)


@pytest.fixture(autouse=True)
def narrow_default(monkeypatch):
    """Pin the process-wide default to non East Asian mode."""
    monkeypatch.setenv(condition_module.EASTASIAN_ENV, "0")
    monkeypatch.setattr(condition_module, "_default", None)
