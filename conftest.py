"""Configures pytest further: opt-out of full-size key generation, opt-in to huge primality tests."""
import pytest

SKIPS = {
    "slow": ("--skip-slow", True, "Slow test: full-size key material, drop --skip-slow to run"),
    "extreme": ("--run-extreme", False, "Extreme test: multi-thousand digit candidates, needs --run-extreme"),
}


def pytest_addoption(parser):
    parser.addoption("--skip-slow", action="store_true", default=False, help="skip full-size key generation tests")
    parser.addoption("--run-extreme", action="store_true", default=False, help="run extremely slow primality tests")


def pytest_collection_modifyitems(config, items):
    markers = {}
    for keyword, (option, skip_when, reason) in SKIPS.items():
        if config.getoption(option) == skip_when:
            markers[keyword] = pytest.mark.skip(reason=reason)
    if not markers:
        return
    for item in items:
        for keyword, marker in markers.items():
            if keyword in item.keywords:
                item.add_marker(marker)
