"""Resolution of the resource a shared access signature is computed for."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Optional, Tuple
from urllib.parse import quote

from .constants import DEFAULT_TOKEN_TIME_TO_LIVE
from .models import KeyPairCredential
from .security.signature import Signer

logger = logging.getLogger(__name__)


def _encode(segment: str) -> str:
    return quote(segment, safe="")


def resolve_target(
    audience: str, device_id: Optional[str] = None, module_id: Optional[str] = None
) -> str:
    """Return the signing target for the given device/module scope.

    Without a device the target is the bare ``audience``; a module id is only
    honoured when a device id is also present.
    """
    if not device_id:
        return audience
    if not module_id:
        return f"{audience}/devices/{_encode(device_id)}"
    return f"{audience}/devices/{_encode(device_id)}/modules/{_encode(module_id)}"


def build_token(
    credential: KeyPairCredential,
    audience: str,
    signer: Signer,
    device_id: Optional[str] = None,
    module_id: Optional[str] = None,
) -> Tuple[str, timedelta]:
    """Sign the resolved target and return ``(signature, time_to_live)``.

    Failures raised by ``signer`` propagate unchanged.
    """
    target = resolve_target(audience, device_id, module_id)
    logger.debug(f"Signing shared access token for target {target}")
    return signer(credential.key_name, credential.key, DEFAULT_TOKEN_TIME_TO_LIVE, target)
