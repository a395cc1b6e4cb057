"""Credential context derived from a parsed IoT Hub connection string."""

from __future__ import annotations

import logging
from concurrent.futures import Future
from datetime import datetime, timedelta, timezone
from typing import Optional, Sequence, Tuple
from urllib.parse import quote, urlsplit, urlunsplit

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, computed_field

from .constants import (
    AMQPS_DEFAULT_PORT,
    AMQPS_SCHEME,
    HTTPS_SCHEME,
    IOTHUB_SAS_TOKEN_TYPE,
    SAS_ROOT_SUFFIX,
    USER_SEPARATOR,
)
from .exceptions import InvalidArgumentError
from .models import (
    CbsToken,
    ConnectionStringFields,
    Credential,
    KeyPairCredential,
    SignatureCredential,
)
from .providers import AuthorizationHeaderProvider, CbsTokenProvider
from .resolver import build_token
from .security.parser import parse_connection_string
from .security.signature import Signer, sign_shared_access

logger = logging.getLogger(__name__)

# Pre-issued signatures carry their own expiry; treat them as never expiring here.
MAX_EXPIRY = datetime.max.replace(tzinfo=timezone.utc)


class IotHubConnectionString(BaseModel, AuthorizationHeaderProvider, CbsTokenProvider):
    """Immutable credential context for a single hub connection.

    ``host_name`` is the host a client dials (the gateway when one is
    configured) while ``audience`` always names the hub itself, so signatures
    are computed for the hub even when traffic goes through an edge gateway.
    The AMQP endpoint is likewise bound to the hub host for link addressing.

    Host, audience and endpoints are derived from ``hub_host_name`` and
    ``gateway_host_name`` and cannot be supplied directly.

    Build instances with :meth:`from_fields` or :meth:`parse`; every password
    or token request recomputes from these fields, nothing is cached.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    iot_hub_name: str
    hub_host_name: str
    gateway_host_name: Optional[str] = None
    shared_access_key_name: Optional[str] = None
    shared_access_key: Optional[str] = Field(default=None, repr=False)
    shared_access_signature: Optional[str] = Field(default=None, repr=False)
    device_id: Optional[str] = None
    module_id: Optional[str] = None

    _signer: Optional[Signer] = PrivateAttr(default=None)

    @computed_field
    @property
    def host_name(self) -> str:
        return self.gateway_host_name or self.hub_host_name

    @computed_field
    @property
    def audience(self) -> str:
        return self.hub_host_name

    @computed_field
    @property
    def https_endpoint(self) -> str:
        return urlunsplit((HTTPS_SCHEME, self.host_name, "", "", ""))

    @computed_field
    @property
    def amqp_endpoint(self) -> str:
        netloc = f"{self.hub_host_name}:{AMQPS_DEFAULT_PORT}"
        return urlunsplit((AMQPS_SCHEME, netloc, "", "", ""))

    @classmethod
    def from_fields(
        cls,
        fields: Optional[ConnectionStringFields],
        signer: Optional[Signer] = None,
    ) -> "IotHubConnectionString":
        """Create the context from parser output.

        Raises:
            InvalidArgumentError: If ``fields`` is ``None``.
        """
        if fields is None:
            raise InvalidArgumentError("fields must not be None")

        instance = cls(
            iot_hub_name=fields.iot_hub_name,
            hub_host_name=fields.host_name,
            gateway_host_name=fields.gateway_host_name,
            shared_access_key_name=fields.shared_access_key_name,
            shared_access_key=fields.shared_access_key,
            shared_access_signature=fields.shared_access_signature,
            device_id=fields.device_id,
            module_id=fields.module_id,
        )
        instance._signer = signer
        logger.debug(
            f"Created credential context for host={instance.host_name} "
            f"audience={instance.audience}"
        )
        return instance

    @classmethod
    def parse(
        cls, connection_string: Optional[str], signer: Optional[Signer] = None
    ) -> "IotHubConnectionString":
        """Parse ``connection_string`` and build the context from its fields."""
        if connection_string is None:
            raise InvalidArgumentError("connection_string must not be None")
        return cls.from_fields(parse_connection_string(connection_string), signer=signer)

    @property
    def credential(self) -> Credential:
        """Signing mode in effect: a pre-issued signature or a key pair."""
        signature = self.shared_access_signature
        if signature and signature.strip():
            return SignatureCredential(signature=signature)
        return KeyPairCredential(
            key_name=self.shared_access_key_name, key=self.shared_access_key
        )

    def _sign(self) -> Tuple[str, Optional[timedelta]]:
        """Return the signature and its time-to-live (``None`` when pre-issued)."""
        credential = self.credential
        if isinstance(credential, SignatureCredential):
            return credential.signature, None
        if isinstance(credential, KeyPairCredential):
            return build_token(
                credential,
                self.audience,
                self._signer or sign_shared_access,
                device_id=self.device_id,
                module_id=self.module_id,
            )
        raise TypeError(f"Unsupported credential type: {type(credential).__name__}")

    def get_user(self) -> str:
        return (
            f"{self.shared_access_key_name or ''}{USER_SEPARATOR}"
            f"{SAS_ROOT_SUFFIX}{self.iot_hub_name}"
        )

    def get_password(self) -> str:
        signature, _ = self._sign()
        return signature

    def get_token(
        self,
        namespace_address: Optional[str],
        applies_to: Optional[str],
        required_claims: Optional[Sequence[str]] = None,
    ) -> "Future[CbsToken]":
        """Return an already-completed future holding the CBS token.

        ``namespace_address``, ``applies_to`` and ``required_claims`` are
        accepted for protocol compatibility; the token is always scoped to this
        context's own target. Signing errors are raised directly, not stored
        on the future.
        """
        value, time_to_live = self._sign()
        if time_to_live is None:
            expires_at = MAX_EXPIRY
        else:
            expires_at = datetime.now(timezone.utc) + time_to_live

        future: "Future[CbsToken]" = Future()
        future.set_result(
            CbsToken(value=value, token_type=IOTHUB_SAS_TOKEN_TYPE, expires_at=expires_at)
        )
        return future

    def build_link_address(self, path: str) -> str:
        """Return the AMQP endpoint with its path replaced by ``path``."""
        if path and not path.startswith("/"):
            path = f"/{path}"
        escaped = quote(path, safe="/")
        return urlsplit(self.amqp_endpoint)._replace(path=escaped).geturl()
