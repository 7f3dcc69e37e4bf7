import os
import sys

import pytest

repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Drop JSONSCRUB_* from the environment and reset the settings singleton."""
    for name in list(os.environ):
        if name.upper().startswith("JSONSCRUB_"):
            monkeypatch.delenv(name, raising=False)

    from jsonscrub.config import settings as settings_module

    settings_module._settings = None
    yield
    settings_module._settings = None
