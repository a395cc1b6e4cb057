"""iothub_auth: credential derivation for IoT Hub connection strings."""

from __future__ import annotations

from typing import Optional

from .config import HubConfig, IotHubAuthConfig, load_config
from .connection_string import MAX_EXPIRY, IotHubConnectionString
from .constants import DEFAULT_TOKEN_TIME_TO_LIVE, IOTHUB_SAS_TOKEN_TYPE
from .exceptions import IotHubAuthError, InvalidArgumentError, SigningError
from .models import (
    CbsToken,
    ConnectionStringFields,
    KeyPairCredential,
    SignatureCredential,
)
from .providers import AuthorizationHeaderProvider, CbsTokenProvider
from .resolver import resolve_target
from .security import Signer


def get_connection_string(
    config: Optional[IotHubAuthConfig] = None, signer: Optional[Signer] = None
) -> IotHubConnectionString:
    """Factory returning the credential context for the configured connection string."""

    config = config or load_config()
    connection_string = config.hub.resolve_connection_string()
    if not connection_string:
        raise ValueError(
            f"No connection string configured; set {config.hub.connection_string_env} "
            "or 'hub.connection_string' in the config file"
        )
    return IotHubConnectionString.parse(connection_string, signer=signer)


__version__ = "0.1.0"
__all__ = [
    "AuthorizationHeaderProvider",
    "CbsToken",
    "CbsTokenProvider",
    "ConnectionStringFields",
    "DEFAULT_TOKEN_TIME_TO_LIVE",
    "HubConfig",
    "IOTHUB_SAS_TOKEN_TYPE",
    "InvalidArgumentError",
    "IotHubAuthConfig",
    "IotHubAuthError",
    "IotHubConnectionString",
    "KeyPairCredential",
    "MAX_EXPIRY",
    "SignatureCredential",
    "SigningError",
    "get_connection_string",
    "load_config",
    "resolve_target",
]
