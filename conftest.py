import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests marked as integration (calls the live Anthropic API).",
    )


def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "integration: tests that reach the live model API (need ANTHROPIC_API_KEY)"
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--run-integration"):
        return

    skip_live = pytest.mark.skip(reason="live model call (use --run-integration to run)")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_live)
