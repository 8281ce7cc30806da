import os

import pytest

from safebytes.core.config import SafeBytesConfig


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Every test starts from the default configuration."""
    for key in list(os.environ):
        if key.startswith("SAFEBYTES_"):
            monkeypatch.delenv(key, raising=False)
    SafeBytesConfig.reset_instance()
    yield
    SafeBytesConfig.reset_instance()
