"""Shared constants for IoT Hub credential derivation."""

from __future__ import annotations

from datetime import timedelta

DEFAULT_TOKEN_TIME_TO_LIVE = timedelta(hours=1)

HTTPS_SCHEME = "https"
AMQPS_SCHEME = "amqps"
AMQPS_DEFAULT_PORT = 5671

# Token type announced in CBS put-token requests
IOTHUB_SAS_TOKEN_TYPE = "servicebus.windows.net:sastoken"

USER_SEPARATOR = "@"
SAS_ROOT_SUFFIX = "sas.root."

SHARED_ACCESS_SIGNATURE_PREFIX = "SharedAccessSignature"
