"""Pytest configuration — ensures the project root is importable."""

import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

_ENV_VARS = ("TREBUCHET_INPUT", "TREBUCHET_LOG_LEVEL")


@pytest.fixture(autouse=True)
def _isolated_env(request, monkeypatch):
    """Keep a developer's .env / shell settings out of the CLI tests.

    Tests marked ``real_dotenv`` load .env files for real.
    """
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    if request.node.get_closest_marker("real_dotenv") is None:
        monkeypatch.setattr("main.load_dotenv", lambda *a, **kw: False)
    yield
    # load_dotenv writes os.environ directly, outside monkeypatch's bookkeeping
    for name in _ENV_VARS:
        os.environ.pop(name, None)
