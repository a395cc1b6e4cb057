"""Abstract credential capabilities."""

from .base import AuthorizationHeaderProvider, CbsTokenProvider

__all__ = ["AuthorizationHeaderProvider", "CbsTokenProvider"]
