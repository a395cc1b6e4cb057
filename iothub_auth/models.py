"""Data models shared by the credential providers."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ConnectionStringFields(BaseModel):
    """Field set produced by the connection-string parser."""

    host_name: str = ""
    iot_hub_name: str = ""
    gateway_host_name: Optional[str] = None
    shared_access_key_name: Optional[str] = None
    shared_access_key: Optional[str] = None
    shared_access_signature: Optional[str] = None
    device_id: Optional[str] = None
    module_id: Optional[str] = None


class SignatureCredential(BaseModel):
    """A pre-issued shared access signature used verbatim."""

    model_config = ConfigDict(frozen=True)

    signature: str


class KeyPairCredential(BaseModel):
    """Key material from which fresh signatures are computed."""

    model_config = ConfigDict(frozen=True)

    key_name: Optional[str] = None
    key: Optional[str] = Field(default=None, repr=False)


Credential = Union[SignatureCredential, KeyPairCredential]


class CbsToken(BaseModel):
    """Token handed to a claims-based-security put-token exchange."""

    model_config = ConfigDict(frozen=True)

    value: str = Field(..., repr=False)
    token_type: str
    expires_at: datetime
