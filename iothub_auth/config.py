"""Configuration for locating the hub connection string.

Example ``config.yaml``::

    hub:
      connection_string_env: MY_HUB_CONNECTION_STRING
      connection_string: "HostName=myhub.azure-devices.net;..."

The environment variable named by ``connection_string_env`` wins over the
inline value so secrets can be kept out of the file.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel

CONFIG_PATH_ENV = "IOTHUB_AUTH_CONFIG"
DEFAULT_CONFIG_PATH = Path("config.yaml")
DEFAULT_CONNECTION_STRING_ENV = "IOTHUB_CONNECTION_STRING"


class HubConfig(BaseModel):
    """Where the connection string for the hub comes from."""

    connection_string: Optional[str] = None
    connection_string_env: str = DEFAULT_CONNECTION_STRING_ENV

    def resolve_connection_string(self) -> Optional[str]:
        """Return the connection string from the environment or the inline value."""
        return os.getenv(self.connection_string_env) or self.connection_string


class IotHubAuthConfig(BaseModel):
    """Top-level configuration model."""

    hub: HubConfig = HubConfig()

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "IotHubAuthConfig":
        data = yaml.safe_load(Path(path).read_text()) or {}
        return cls.model_validate(data)


def load_config(path: Optional[Union[str, Path]] = None) -> IotHubAuthConfig:
    """Load configuration, returning defaults when no file exists.

    Args:
        path: Config file path. Defaults to the IOTHUB_AUTH_CONFIG env variable,
            then ``config.yaml`` in the current directory.
    """
    config_path = Path(path or os.getenv(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH)
    if not config_path.is_file():
        return IotHubAuthConfig()
    return IotHubAuthConfig.from_yaml(config_path)
