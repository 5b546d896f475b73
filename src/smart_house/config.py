"""Configuration loading for Smart House."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, model_validator

from smart_house.errors import ConfigError
from smart_house.models.base import DeviceStatus

CONFIG_FILENAME = "house.yaml"


class DeviceConfig(BaseModel):
    """Device configuration from config file."""

    name: str
    type: str
    status: DeviceStatus = DeviceStatus.ONLINE


class RoomConfig(BaseModel):
    """Room configuration from config file.

    A room either lists its own devices or names a shared device group.
    """

    name: str
    devices: list[DeviceConfig] = Field(default_factory=list)
    device_group: str | None = None

    @model_validator(mode="after")
    def check_device_source(self) -> "RoomConfig":
        if self.devices and self.device_group is not None:
            raise ValueError(
                f"Room '{self.name}' sets both 'devices' and 'device_group'"
            )
        return self


class HouseConfig(BaseModel):
    """Main configuration model."""

    name: str = "Home"
    device_groups: dict[str, list[DeviceConfig]] = Field(default_factory=dict)
    rooms: list[RoomConfig] = Field(default_factory=list)


def find_config_dir() -> Path:
    """Find the config directory.

    Looks for config directory in the following order:
    1. ./config (relative to cwd)
    2. ../config (parent of cwd)
    3. ~/.config/smart-house
    """
    cwd = Path.cwd()

    if (cwd / "config").is_dir():
        return cwd / "config"

    if (cwd.parent / "config").is_dir():
        return cwd.parent / "config"

    home_config = Path.home() / ".config" / "smart-house"
    if home_config.is_dir():
        return home_config

    return cwd / "config"


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file, returning empty dict if not found.

    Raises:
        ConfigError: if the file is not valid YAML.
    """
    if not path.exists():
        return {}
    with open(path, encoding="utf-8") as f:
        try:
            return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse {path}: {e}") from e


def load_config(config_dir: Path | None = None) -> HouseConfig:
    """Load the house configuration."""
    if config_dir is None:
        config_dir = find_config_dir()

    data = load_yaml(config_dir / CONFIG_FILENAME)
    return HouseConfig.model_validate(data)
