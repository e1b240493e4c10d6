"""Tests for loading settings."""

from pathlib import Path

import pytest

from convious.conf import SETTINGS_FILE_NAME, Settings


def test_defaults_are_written_when_missing(isolated_settings: Path) -> None:
    with pytest.warns(UserWarning, match="does not exist"):
        settings = Settings.load()

    assert settings.api.pricing_endpoint == "https://pricer.convious.com"
    assert (isolated_settings / SETTINGS_FILE_NAME).exists()


def test_file_overrides_defaults(isolated_settings: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    isolated_settings.mkdir(parents=True)
    (isolated_settings / SETTINGS_FILE_NAME).write_text("api:\n  pricing_endpoint: http://pricer.local\n  timeout: 5.0\n")
    monkeypatch.setenv("CONVIOUS_CLIENT_ID", "from-env")

    settings = Settings.load()

    assert settings.api.pricing_endpoint == "http://pricer.local"
    assert settings.api.timeout == 5.0
    assert settings.api.auth_endpoint == "https://identity.convious.com"
    assert settings.api.client_id == "from-env"
    assert settings.api.client_secret == ""


def test_unreadable_file_warns_and_falls_back(isolated_settings: Path) -> None:
    isolated_settings.mkdir(parents=True)
    (isolated_settings / SETTINGS_FILE_NAME).write_text("api: [not, a, mapping]\n")

    with pytest.warns(UserWarning, match="Failed to load settings"):
        settings = Settings.load()

    assert settings.api.inventory_endpoint == "https://inventory.convious.com"
