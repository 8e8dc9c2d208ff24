from __future__ import annotations

import pytest

from release_bumper.settings import Settings

ENV_VARS = (
    "INPUT_OWNER",
    "GITHUB_OWNER",
    "INPUT_REPO",
    "GITHUB_REPO",
    "GITHUB_REPOSITORY",
    "INPUT_BUMP_TYPE",
    "BUMP_TYPE",
    "INPUT_VERSION",
    "VERSION",
    "INPUT_TOKEN",
    "GITHUB_TOKEN",
    "INPUT_PREFIX",
    "TAG_PREFIX",
    "INPUT_SUFFIX",
    "TAG_SUFFIX",
    "GITHUB_API_URL",
    "GITHUB_OUTPUT",
    "LOG_LEVEL",
)

API = "https://api.github.com"
RELEASES_URL = f"{API}/repos/octocat/hello-world/releases"


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the CI runner's own GitHub variables out of the tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def output_file(tmp_path):
    return tmp_path / "github_output"


@pytest.fixture
def make_settings(output_file):
    def _make(**overrides) -> Settings:
        values = {"GITHUB_OWNER": "octocat", "GITHUB_REPO": "hello-world", "GITHUB_OUTPUT": str(output_file)}
        values.update(overrides)
        return Settings(**values)

    return _make
