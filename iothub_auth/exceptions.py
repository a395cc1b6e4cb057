"""Exceptions raised while deriving IoT Hub credentials."""

from __future__ import annotations


class IotHubAuthError(Exception):
    """Base class for credential derivation failures."""


class InvalidArgumentError(IotHubAuthError, ValueError):
    """Raised when a required input is missing."""


class SigningError(IotHubAuthError, RuntimeError):
    """Raised when a signature cannot be computed from the key material."""
