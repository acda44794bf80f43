"""Primitivas criptográficas usadas na autenticação de webhooks."""

from .signature import (
    SIGNATURE_ALGORITHM,
    compute_signature,
    strip_algorithm_prefix,
    verify_signature,
)

__all__ = [
    "SIGNATURE_ALGORITHM",
    "compute_signature",
    "strip_algorithm_prefix",
    "verify_signature",
]
