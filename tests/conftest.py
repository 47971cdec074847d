# tests/conftest.py
import logging

import pytest
import structlog

from unitalg.units.registry import build_registry



@pytest.fixture(scope="session")
def ureg():
    return build_registry()

@pytest.fixture(autouse=True)
def reset_structlog():
    # each test starts unconfigured, so handlers never point at a stale stderr
    yield
    structlog.reset_defaults()
    logging.getLogger("unitalg").handlers.clear()
