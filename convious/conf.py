"""Defines the SDK settings."""

import functools
import os
import warnings
from dataclasses import dataclass, field
from pathlib import Path

from omegaconf import II, OmegaConf

# These are the public endpoints for the Convious services.
DEFAULT_AUTH_ENDPOINT = "https://identity.convious.com"
DEFAULT_INVENTORY_ENDPOINT = "https://inventory.convious.com"
DEFAULT_PRICING_ENDPOINT = "https://pricer.convious.com"

SETTINGS_FILE_NAME = "settings.yaml"


def get_path() -> Path:
    if "CONVIOUS_CONFIG_DIR" in os.environ:
        return Path(os.environ["CONVIOUS_CONFIG_DIR"]).expanduser().resolve()
    return Path("~/.convious/").expanduser().resolve()


@dataclass
class ApiSettings:
    auth_endpoint: str = field(default=DEFAULT_AUTH_ENDPOINT)
    inventory_endpoint: str = field(default=DEFAULT_INVENTORY_ENDPOINT)
    pricing_endpoint: str = field(default=DEFAULT_PRICING_ENDPOINT)
    timeout: float = field(default=30.0)
    client_id: str = field(default=II("oc.env:CONVIOUS_CLIENT_ID,''"))
    client_secret: str = field(default=II("oc.env:CONVIOUS_CLIENT_SECRET,''"))


@dataclass
class Settings:
    api: ApiSettings = field(default_factory=ApiSettings)

    @functools.lru_cache
    @staticmethod
    def load() -> "Settings":
        config = OmegaConf.structured(Settings)
        if not (dir_path := get_path()).exists():
            warnings.warn(f"Settings directory does not exist: {dir_path}. Creating it now.")
            dir_path.mkdir(parents=True)
            OmegaConf.save(config, dir_path / SETTINGS_FILE_NAME)
        else:
            try:
                with open(dir_path / SETTINGS_FILE_NAME, "r") as f:
                    raw_settings = OmegaConf.load(f)
                    config = OmegaConf.merge(config, raw_settings)
            except Exception as e:
                warnings.warn(f"Failed to load settings: {e}")
        return config
