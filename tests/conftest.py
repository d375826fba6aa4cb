"""Root test configuration — keep config and env lookups isolated per test"""

import logging
import os

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop MDINDEX_* variables inherited from the developer shell."""
    for name in [k for k in os.environ if k.startswith("MDINDEX_")]:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach handlers installed by CLI runs; they hold the runner's captured streams."""
    yield
    logger = logging.getLogger("mdindex")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
