"""Shared access signature construction.

The builder computes an HMAC-SHA256 over the URL-encoded resource and the
expiry instant, using the base64-decoded shared access key, and assembles the
``SharedAccessSignature sr=...&sig=...&se=...&skn=...`` string accepted by the
hub for both HTTP authorization headers and CBS put-token requests.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import time
from datetime import timedelta
from typing import Callable, Optional, Tuple
from urllib.parse import quote

from ..constants import DEFAULT_TOKEN_TIME_TO_LIVE, SHARED_ACCESS_SIGNATURE_PREFIX
from ..exceptions import SigningError

Signer = Callable[[Optional[str], Optional[str], timedelta, str], Tuple[str, timedelta]]


class SharedAccessSignatureBuilder:
    """Builds a signature for ``target`` valid for ``time_to_live``."""

    def __init__(
        self,
        key_name: Optional[str] = None,
        key: Optional[str] = None,
        time_to_live: timedelta = DEFAULT_TOKEN_TIME_TO_LIVE,
        target: str = "",
    ) -> None:
        self.key_name = key_name
        self.key = key
        self.time_to_live = time_to_live
        self.target = target

    def _decode_key(self) -> bytes:
        if not self.key or not self.key.strip():
            raise SigningError("Shared access key is required to build a signature")
        try:
            return base64.b64decode(self.key, validate=True)
        except (binascii.Error, ValueError) as e:
            raise SigningError(f"Shared access key is not valid base64: {e}") from e

    def to_signature(self, now: Optional[float] = None) -> str:
        """Return the assembled shared access signature string."""
        key_bytes = self._decode_key()
        issued_at = time.time() if now is None else now
        expiry = int(issued_at + self.time_to_live.total_seconds())
        resource = quote(self.target, safe="")
        string_to_sign = f"{resource}\n{expiry}"
        digest = hmac.new(key_bytes, string_to_sign.encode("utf-8"), hashlib.sha256).digest()
        signature = quote(base64.b64encode(digest).decode("ascii"), safe="")

        parts = [f"sr={resource}", f"sig={signature}", f"se={expiry}"]
        if self.key_name:
            parts.append(f"skn={quote(self.key_name, safe='')}")
        return f"{SHARED_ACCESS_SIGNATURE_PREFIX} {'&'.join(parts)}"


def sign_shared_access(
    key_name: Optional[str],
    key: Optional[str],
    time_to_live: timedelta,
    target: str,
) -> Tuple[str, timedelta]:
    """Default signer: return the signature and the time-to-live it was built with."""
    builder = SharedAccessSignatureBuilder(
        key_name=key_name, key=key, time_to_live=time_to_live, target=target
    )
    return builder.to_signature(), builder.time_to_live
