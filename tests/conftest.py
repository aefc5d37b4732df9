"""Root test configuration: environment isolation and logger cleanup"""

import logging

import pytest

from mdhtml.config import Settings


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    """Drop any MDHTML_<FIELD> variables inherited from the shell."""
    for name in Settings.model_fields:
        monkeypatch.delenv(f"MDHTML_{name.upper()}", raising=False)


@pytest.fixture(autouse=True)
def reset_logging():
    """Remove handlers installed by CLI runs; their streams close with the runner."""
    yield
    logger = logging.getLogger("mdhtml")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
