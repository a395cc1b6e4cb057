"""Collaborators used to obtain fields and signatures."""

from .parser import parse_connection_string
from .signature import SharedAccessSignatureBuilder, Signer, sign_shared_access

__all__ = [
    "parse_connection_string",
    "SharedAccessSignatureBuilder",
    "Signer",
    "sign_shared_access",
]
