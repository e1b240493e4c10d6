"""Shared fixtures for the test suite."""

from pathlib import Path
from typing import Iterator

import pytest

from convious.conf import Settings
from convious.web.utils import get_api_settings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    config_dir = tmp_path / "config"
    monkeypatch.setenv("CONVIOUS_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("CONVIOUS_CLIENT_ID", raising=False)
    monkeypatch.delenv("CONVIOUS_CLIENT_SECRET", raising=False)
    Settings.load.cache_clear()
    get_api_settings.cache_clear()
    yield config_dir
    Settings.load.cache_clear()
    get_api_settings.cache_clear()
