"""Assinatura HMAC-SHA256 de payloads de webhook."""

from __future__ import annotations

import hashlib
import hmac

SIGNATURE_ALGORITHM = "sha256"


def compute_signature(payload: bytes, secret: str) -> str:
    """Calcula o HMAC-SHA256 do corpo em hex minúsculo.

    Args:
        payload: Corpo exato assinado pelo remetente
        secret: Chave compartilhada do endpoint

    Returns:
        Digest hex (64 caracteres)
    """
    return hmac.new(secret.encode("utf-8"), payload, hashlib.sha256).hexdigest()


def strip_algorithm_prefix(signature: str) -> str:
    """Remove prefixo `algoritmo=` (ex: `sha256=abc` -> `abc`).

    Apenas o primeiro `=` separa; o restante é mantido.
    """
    if "=" in signature:
        return signature.split("=", 1)[1]
    return signature


def verify_signature(payload: bytes, signature: str, secret: str) -> bool:
    """Valida assinatura recebida em tempo constante.

    Args:
        payload: Corpo bruto da requisição
        signature: Valor do header, com ou sem prefixo de algoritmo
        secret: Chave compartilhada do endpoint

    Returns:
        True se assinatura válida
    """
    expected = compute_signature(payload, secret)
    presented = strip_algorithm_prefix(signature)
    return hmac.compare_digest(expected.encode("ascii"), presented.encode("utf-8"))
