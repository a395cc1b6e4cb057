"""Minimal connection-string splitter.

Turns ``HostName=...;SharedAccessKeyName=...;SharedAccessKey=...`` text into a
:class:`~iothub_auth.models.ConnectionStringFields`. No syntax validation is
performed: unknown keys and segments without ``=`` are skipped.
"""

from __future__ import annotations

import logging
from typing import Dict

from ..models import ConnectionStringFields

logger = logging.getLogger(__name__)

_FIELD_NAMES: Dict[str, str] = {
    "hostname": "host_name",
    "gatewayhostname": "gateway_host_name",
    "sharedaccesskeyname": "shared_access_key_name",
    "sharedaccesskey": "shared_access_key",
    "sharedaccesssignature": "shared_access_signature",
    "deviceid": "device_id",
    "moduleid": "module_id",
}


def parse_connection_string(connection_string: str) -> ConnectionStringFields:
    """Split ``connection_string`` into its known fields."""
    values: Dict[str, str] = {}
    for segment in connection_string.split(";"):
        if "=" not in segment:
            continue
        name, value = segment.split("=", 1)
        field = _FIELD_NAMES.get(name.strip().lower())
        if field is None:
            logger.debug(f"Ignoring unknown connection string key {name.strip()!r}")
            continue
        values[field] = value.strip()

    host_name = values.get("host_name", "")
    values["iot_hub_name"] = host_name.split(".", 1)[0]
    return ConnectionStringFields(**values)
