"""Credential provider interfaces consumed by transports."""

from __future__ import annotations

import abc
from concurrent.futures import Future
from typing import Optional, Sequence

from ..models import CbsToken


class AuthorizationHeaderProvider(metaclass=abc.ABCMeta):
    """Supplies basic-auth style credentials for HTTP and AMQP SASL PLAIN."""

    @abc.abstractmethod
    def get_user(self) -> str:
        """Return the user identity string."""
        raise NotImplementedError

    @abc.abstractmethod
    def get_password(self) -> str:
        """Return the password, i.e. a shared access signature."""
        raise NotImplementedError

    def get_authorization_header(self) -> str:
        """Return the ``Authorization`` header value (the password by default)."""
        return self.get_password()


class CbsTokenProvider(metaclass=abc.ABCMeta):
    """Supplies tokens for claims-based-security negotiation."""

    @abc.abstractmethod
    def get_token(
        self,
        namespace_address: Optional[str],
        applies_to: Optional[str],
        required_claims: Optional[Sequence[str]] = None,
    ) -> "Future[CbsToken]":
        """Return a future resolving to the token for ``applies_to``."""
        raise NotImplementedError
