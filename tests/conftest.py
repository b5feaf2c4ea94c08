"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest

from commitly.config import API_KEY_ENV_VARS, PROVIDER_ENV_VAR, TIMEOUT_ENV_VAR


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_file(temp_dir, mocker):
    """Point the global config file at a temp location (not created)."""
    path = temp_dir / ".commitly.json"
    mocker.patch("commitly.global_config._CONFIG_FILE", path)
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove provider selection and API key variables from the environment."""
    for env_var in [PROVIDER_ENV_VAR, TIMEOUT_ENV_VAR, *API_KEY_ENV_VARS.values()]:
        monkeypatch.delenv(env_var, raising=False)


class FakeDiffSource:
    """In-memory DiffSource used instead of running git."""

    def __init__(self, diff_text="", history_text=""):
        self.diff_text = diff_text
        self.history_text = history_text
        self.history_calls = []

    def diff(self):
        return self.diff_text

    def history(self, n=10):
        self.history_calls.append(n)
        return self.history_text


@pytest.fixture
def fake_diff_source():
    """A FakeDiffSource with a small diff and history."""
    return FakeDiffSource(diff_text="+added line", history_text="fix: previous")


@pytest.fixture
def sample_diff():
    """Sample git diff for testing."""
    return """diff --git a/app.py b/app.py
index 1234567..abcdefg 100644
--- a/app.py
+++ b/app.py
@@ -1,3 +1,6 @@
 def main():
-    print("old")
+    print("new")
+
+def helper():
+    return True
"""
